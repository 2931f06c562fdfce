""" Entry point for green-shell. """
import logging
import os

from colorama import just_fix_windows_console

from gsh_shell import Shell


def main():
    if os.environ.get("GSH_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)
    just_fix_windows_console()
    rc = Shell().run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
