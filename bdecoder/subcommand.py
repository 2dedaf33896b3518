registry = {}


class SubCommandMeta(type):
    """Keeps a registry of sub-commands"""

    def __new__(cls, name, base, attrs):
        new_class = type.__new__(cls, name, base, attrs)
        if name != "SubCommand":
            registry[name.lower()] = new_class
        return new_class


class SubCommand(metaclass=SubCommandMeta):
    """Base class for sub-commands"""

    help = ""

    def __init__(self, app):
        self.app = app
        self.args = None

    def add_arguments(self, parser):
        pass

    def run(self):
        raise NotImplementedError
