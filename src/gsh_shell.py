""" Implement the core of the shell. """
import logging
import types

from gsh_constants import SHELL_NAME
from gsh_history import save_history
from gsh_lexer import tokenize
from gsh_prompt import green, render_prompt
from gsh_runner import launch
from gsh_shell_builtins import BUILTINS, lookup
from gsh_shell_state import ShellState, ShellStatus

logger = logging.getLogger(__name__)


def read_line(prompt="> "):
    """ Read one command line. Raises EOFError at end of input. """
    return input(prompt)


class Shell:
    def __init__(self, state=None, builtins=None):
        self.state = state or ShellState()
        # Registered once; nothing changes the table after this.
        self.builtins = types.MappingProxyType(dict(BUILTINS if builtins is None else builtins))
        self.state.builtins = self.builtins

    @property
    def aliases(self):
        return self.state.aliases

    def execute(self, tokens: list[str]) -> ShellStatus:
        """
        Dispatch one tokenized command line.

        Builtins are checked first, then aliases, then the command is
        launched as an external program. Only the first token takes
        part in the lookups.
        """
        if not tokens:
            return ShellStatus.RUNNING

        save_history(tokens, self.state)

        handler = lookup(tokens[0], self.builtins)
        if handler is not None:
            logger.debug("builtin: %s", tokens[0])
            return handler(tokens, self.state)

        expansion = self.aliases.resolve(tokens[0])
        if expansion is not None:
            logger.debug("alias: %s -> %s", tokens[0], expansion)
            tokens = expansion

        command, *args = tokens
        return launch(command, args)

    def prompt(self):
        header, marker = render_prompt(self.state)
        if header is not None:
            print(header)
        return marker

    def run(self):
        print(f"Welcome to {green(SHELL_NAME)}!")

        status = ShellStatus.RUNNING
        while status is ShellStatus.RUNNING:
            try:
                line = read_line(self.prompt())
                status = self.execute(tokenize(line))
                print()
            except EOFError:
                print()
                status = ShellStatus.EXIT
            except KeyboardInterrupt:
                print()

        print(f"Exiting {green(SHELL_NAME)}...")
        return 0
