""" Render the prompt. """
import sys

from colorama import Fore, Style

from gsh_exceptions import HomeDirectoryError


def green(text: str) -> str:
    return f"{Fore.GREEN}{text}{Style.RESET_ALL}"


def shorten_path(cwd: str, home: str | None) -> str:
    """ Replace a leading home directory with ``~``. """
    if not home:
        return cwd
    home = home.rstrip("/") or "/"
    if cwd == home:
        return "~"
    if home != "/" and cwd.startswith(home + "/"):
        return "~" + cwd[len(home):]
    return cwd


def render_prompt(state) -> tuple[str | None, str]:
    """
    Return the working directory line and the input marker.

    The directory line is None when the working directory can't be
    determined (it was removed from under us, say).
    """
    marker = green(">") + " "
    try:
        cwd = state.getcwd()
    except OSError as e:
        print(f"Error getting current directory: {e.strerror or e}", file=sys.stderr)
        return None, marker

    try:
        home = state.home_dir()
    except HomeDirectoryError:
        home = None
    return green(shorten_path(cwd, home)), marker
