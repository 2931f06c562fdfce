""" Exceptions raised by the shell. """


class ShellError(Exception):
    """ Base class for shell errors. """


class HomeDirectoryError(ShellError):
    """ The home directory could not be determined from the environment. """
    def __init__(self, variable="HOME"):
        super().__init__(f"${variable} is not set")
        self.variable = variable
