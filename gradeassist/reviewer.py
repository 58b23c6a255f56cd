"""
Review dispatch for resolved deliverables.

Opens each deliverable the way its kind requires, then waits for the human
grader to type a score.
"""

import shutil
import subprocess
from pathlib import Path

from .config import BUILD_OUTPUT_NAME, EXECUTION_TIMEOUT_SECONDS
from .console import Console
from .launcher import ToolLauncher, command_argv
from .models import (
    Document,
    Patch,
    Picture,
    Program,
    ProgramKind,
    ResolvedDeliverable,
    ToolTable,
)


class ReviewDispatcher:
    """
    Performs the kind-specific review of a deliverable and collects its score.
    """

    def __init__(
        self,
        console: Console,
        launcher: ToolLauncher,
        tools: ToolTable | None = None,
        timeout_seconds: int | None = EXECUTION_TIMEOUT_SECONDS,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            console: Channel used to ask for the score.
            launcher: Starts viewers, compilers and git.
            tools: Configured reviewer tools.
            timeout_seconds: Maximum run time of a built student program.
        """
        self.console = console
        self.launcher = launcher
        self.tools = tools or ToolTable()
        self.timeout_seconds = timeout_seconds

    def review(self, kind, deliverable: ResolvedDeliverable, submission_dir: Path) -> int:
        """
        Review a deliverable and return the score typed by the grader.

        Args:
            kind: Deliverable kind of the problem.
            deliverable: Resolved file and its paired command.
            submission_dir: Student's submission directory.

        Returns:
            Score in [0, 100].
        """
        if isinstance(kind, (Document, Picture)):
            self.launcher.spawn(command_argv(deliverable.command, deliverable.path))
        elif isinstance(kind, Program):
            if kind.raw:
                self.open_editor(deliverable.path)
            else:
                self.build_and_run(kind.language, deliverable, submission_dir)
        elif isinstance(kind, Patch):
            if kind.project_path is not None:
                self.apply_patch(deliverable.path, kind.project_path)
            else:
                self.open_editor(deliverable.path)
        else:
            raise TypeError(f"Unknown deliverable kind: {kind!r}")

        return self.console.ask_score()

    def open_editor(self, path: Path) -> None:
        self.launcher.spawn(command_argv(self.tools.editor, path))

    def build_and_run(
        self,
        language: ProgramKind,
        deliverable: ResolvedDeliverable,
        submission_dir: Path,
    ) -> None:
        """
        Build a program into the submission directory and run it.

        A failed build or a timed out run is reported and left for the grader
        to score.
        """
        # Absolute paths, the build runs with cwd=submission_dir
        source_file = deliverable.path.resolve()
        output_file = (submission_dir / BUILD_OUTPUT_NAME).resolve()
        print(f"  Building {deliverable.path.name} ({language.value})")
        build = self.launcher.run(
            command_argv(deliverable.command, source_file, "-o", output_file),
            cwd=submission_dir,
        )
        if build.returncode != 0:
            print(f"  Build FAILED (exit code {build.returncode})")
            return

        print(f"  Running {output_file}")
        try:
            run = self.launcher.run(
                [str(output_file)],
                cwd=submission_dir,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired:
            print(f"  Warning: program did not finish within {self.timeout_seconds}s")
            return
        print(f"  Program exited with code {run.returncode}")

    def apply_patch(self, patch_file: Path, project_dir: Path) -> None:
        """
        Apply a patch to a clean checkout of the project.

        The patch is copied into the project, local changes are discarded and
        the patch is applied with git. The project stays patched so the grader
        can inspect it.
        """
        shutil.copy2(patch_file, project_dir / patch_file.name)

        self.launcher.run(["git", "checkout", "."], cwd=project_dir)
        result = self.launcher.run(["git", "apply", patch_file.name], cwd=project_dir)
        if result.returncode != 0:
            print(f"  Warning: {patch_file.name} did not apply cleanly to {project_dir}")
        else:
            print(f"  Applied {patch_file.name} to {project_dir}")
