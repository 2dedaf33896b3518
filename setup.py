#!/usr/bin/env python

from setuptools import setup, find_packages

classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Topic :: Communications :: File Sharing",
]

# http://bit.ly/2alyerp
with open("bdecoder/_version.py") as f:
    exec(f.read())

with open("README.md") as f:
    long_desc = f.read()

install_requires = [
    "distro>=1.6.0",
]

tests_require = [
    "pytest",
    "mock",
]

setup(
    name="bdecoder",
    version=__version__,
    description="Streaming, validating Bencode decoder",
    long_description=long_desc,
    long_description_content_type="text/markdown",
    platforms=["any"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=classifiers,
    entry_points={"console_scripts": ["bdecoder = bdecoder.app:main"]},
    install_requires=install_requires,
    extras_require={"test": tests_require},
    python_requires=">=3.8",
    zip_safe=True,
)
