""" Current state of the shell. """
import enum
import os

from gsh_aliases import AliasTable
from gsh_constants import DEFAULT_ALIASES
from gsh_exceptions import HomeDirectoryError


class ShellStatus(enum.Enum):
    RUNNING = "running"
    EXIT = "exit"


class ShellState:
    """
    Access to the process environment the shell runs in.

    Builtins and the history log go through this object instead of
    touching os.environ and the working directory directly, so tests
    can hand in a fake environment. The alias table is fixed for the
    life of the state; the builtin table is set by the shell that owns it.
    """
    def __init__(self, environ=None, getcwd=os.getcwd, chdir=os.chdir, aliases=None):
        self.environ = os.environ if environ is None else environ
        self._getcwd = getcwd
        self._chdir = chdir
        self.aliases = AliasTable(DEFAULT_ALIASES if aliases is None else aliases)
        self.builtins = None

    def get_var(self, name, default=None):
        return self.environ.get(name, default)

    def home_dir(self) -> str:
        home = self.get_var("HOME")
        if not home:
            raise HomeDirectoryError("HOME")
        return home

    def getcwd(self) -> str:
        return self._getcwd()

    def chdir(self, path: str):
        self._chdir(path)
