""" Launch external commands. """
import logging
import subprocess
import sys

from gsh_shell_state import ShellStatus

logger = logging.getLogger(__name__)


def wait_for(proc) -> int:
    """
    Wait for a child to exit and return its exit code.

    Ctrl-C reaches the child through the terminal on its own; the child
    decides whether to exit, so an interrupt here only resumes the wait.
    """
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            logger.debug("interrupt while waiting on pid %s", proc.pid)


def launch(command: str, args: list[str]) -> ShellStatus:
    """
    Run an external program and wait for it to finish.

    The child shares our stdin, stdout and stderr, so editors and pagers
    work as they would from any other shell. Neither a failed spawn nor a
    nonzero exit ends the shell.
    """
    logger.debug("launching %s %s", command, args)
    try:
        proc = subprocess.Popen([command] + list(args))
    except OSError as e:
        # not found, not executable, permission denied, ...
        print(f"failed to execute process - {command}: {e.strerror or e}", file=sys.stderr)
        return ShellStatus.RUNNING
    except ValueError as e:
        # embedded null byte
        print(f"failed to execute process - {command!r}: {e}", file=sys.stderr)
        return ShellStatus.RUNNING

    rc = wait_for(proc)
    if rc < 0:
        print(f"failed to execute process - {command}: terminated by signal {-rc}", file=sys.stderr)
    elif rc != 0:
        print(f"failed to execute process - {command}: exit status {rc}", file=sys.stderr)
    return ShellStatus.RUNNING
