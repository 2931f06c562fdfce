""" Registry of builtin commands. """
import logging
import sys

from gsh_constants import HELP_TEXT, SHELL_NAME
from gsh_exceptions import HomeDirectoryError
from gsh_shell_state import ShellStatus

logger = logging.getLogger(__name__)

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def lookup(name, registry=BUILTINS):
    return registry.get(name)


@builtin("cd")
def builtin_cd(argv, state):
    """
    cd          change to $HOME
    cd PATH     change to PATH, taken literally
    """
    if len(argv) < 2:
        try:
            target = state.home_dir()
        except HomeDirectoryError as e:
            # Nowhere sensible to go: end the session.
            print(f"cd: {e}", file=sys.stderr)
            return ShellStatus.EXIT
    else:
        target = argv[1]

    try:
        state.chdir(target)
        logger.debug("cd: now in %s", target)
    except FileNotFoundError:
        print(f"cd: no such file or directory: {target}", file=sys.stderr)
    except NotADirectoryError:
        print(f"cd: not a directory: {target}", file=sys.stderr)
    except PermissionError:
        print(f"cd: permission denied: {target}", file=sys.stderr)
    except OSError as e:
        print(f"cd: {e.strerror or e}: {target}", file=sys.stderr)
    except ValueError as e:
        # embedded null byte
        print(f"cd: {e}: {target!r}", file=sys.stderr)

    return ShellStatus.RUNNING


@builtin("exit")
def builtin_exit(argv, state):
    print("Goodbye! :)")
    return ShellStatus.EXIT


@builtin("help")
def builtin_help(argv, state):
    print(HELP_TEXT.format(name=SHELL_NAME))
    print()
    registry = BUILTINS if state.builtins is None else state.builtins
    print("Builtins: " + ", ".join(sorted(registry)))
    if len(state.aliases):
        print("Aliases:")
        for name, expansion in sorted(state.aliases.items()):
            print(f"  {name} = {' '.join(expansion)}")
    return ShellStatus.RUNNING
