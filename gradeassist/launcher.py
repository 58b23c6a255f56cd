"""
Subprocess launcher for reviewer tools.

Starts viewers detached from the console and runs build and version-control
steps to completion. Commands are always passed as argument lists.
"""

import shlex
import subprocess
from pathlib import Path

from .exceptions import ToolchainError


def command_argv(command: str, *args: str | Path) -> list[str]:
    """
    Build an argument list from a configured command and extra arguments.

    Args:
        command: Command string, possibly with flags (e.g. "code --wait").
        *args: Arguments appended as discrete entries.

    Returns:
        Argument list suitable for subprocess.
    """
    argv = shlex.split(command)
    if not argv:
        raise ToolchainError("Empty reviewer command")
    return argv + [str(arg) for arg in args]


class ToolLauncher:
    """
    Starts external programs on behalf of the reviewer.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def spawn(self, argv: list[str], cwd: Path | None = None) -> subprocess.Popen:
        """
        Start a program without waiting for it.

        The child gets no access to the console so it cannot steal the
        grader's input.
        """
        if self.verbose:
            print(f"  Launching: {' '.join(argv)}")
        try:
            return subprocess.Popen(
                argv,
                cwd=str(cwd) if cwd else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise ToolchainError(f"Could not start '{argv[0]}': {e}") from e

    def run(
        self,
        argv: list[str],
        cwd: Path | None = None,
        timeout: float | None = None,
    ) -> subprocess.CompletedProcess:
        """
        Run a program to completion, sharing the console with it.

        Raises:
            ToolchainError: If the program cannot be started.
            subprocess.TimeoutExpired: If the program outlives the timeout.
        """
        if self.verbose:
            print(f"  Executing: {' '.join(argv)}")
        try:
            return subprocess.run(
                argv,
                cwd=str(cwd) if cwd else None,
                timeout=timeout,
                check=False,
            )
        except OSError as e:
            raise ToolchainError(f"Could not run '{argv[0]}': {e}") from e
