"""
Pytest configuration and shared fixtures for testing.
"""
import io
import os
import subprocess
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gradeassist.console import Console


class RecordingLauncher:
    """Stands in for ToolLauncher and records every command instead of running it."""

    def __init__(self, returncodes=None, run_errors=None):
        self.spawned = []
        self.runs = []
        self.returncodes = list(returncodes or [])
        self.run_errors = dict(run_errors or {})

    def spawn(self, argv, cwd=None):
        self.spawned.append(list(argv))

    def run(self, argv, cwd=None, timeout=None):
        self.runs.append((list(argv), cwd))
        error = self.run_errors.get(len(self.runs))
        if error is not None:
            raise error
        code = self.returncodes.pop(0) if self.returncodes else 0
        return subprocess.CompletedProcess(argv, code)


@pytest.fixture
def launcher():
    return RecordingLauncher()


@pytest.fixture
def make_console():
    """Build a Console that answers prompts with the given lines, in order."""

    def _make(*lines):
        text = "".join(f"{line}\n" for line in lines)
        return Console(stdin=io.StringIO(text), stdout=io.StringIO())

    return _make
