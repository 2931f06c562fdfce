""" Append executed command lines to the history file. """
import logging
import os
import sys

from gsh_constants import HISTORY_FILENAME
from gsh_exceptions import HomeDirectoryError

logger = logging.getLogger(__name__)


def history_path(state) -> str:
    return os.path.join(state.home_dir(), HISTORY_FILENAME)


def save_history(tokens: list[str], state) -> bool:
    """ Write one line to the history file. Returns False if that failed. """
    try:
        path = history_path(state)
        with open(path, "a", encoding="utf-8", errors="surrogateescape") as f:
            f.write(" ".join(tokens) + "\n")
    except HomeDirectoryError as e:
        print(f"history: cannot locate history file: {e}", file=sys.stderr)
        return False
    except OSError as e:
        print(f"history: couldn't save command to {e.filename}: {e.strerror or e}", file=sys.stderr)
        return False
    except UnicodeError as e:
        print(f"history: couldn't encode command: {e}", file=sys.stderr)
        return False
    logger.debug("history: appended to %s", path)
    return True
