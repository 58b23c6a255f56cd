"""
Grading of a single deliverable.
"""

from pathlib import Path

from .config import NEEDS_REVIEW
from .models import Problem, ToolTable
from .resolver import resolve_deliverable
from .reviewer import ReviewDispatcher


class ProblemGrader:
    """
    Locates one deliverable and hands it to the reviewer.

    A deliverable that cannot be found is scored NEEDS_REVIEW so that the
    remaining problems can still be graded.
    """

    def __init__(self, reviewer: ReviewDispatcher, tools: ToolTable | None = None) -> None:
        self.reviewer = reviewer
        self.tools = tools or reviewer.tools

    def grade(self, problem: Problem, student_dir: Path) -> int:
        """
        Grade one problem.

        Args:
            problem: Problem to grade.
            student_dir: Directory holding the student's deliverables.

        Returns:
            Score in [0, 100], or NEEDS_REVIEW if the deliverable is missing.
        """
        deliverable = resolve_deliverable(
            problem.name,
            student_dir,
            problem.kind,
            self.tools,
        )
        if deliverable is None:
            print(f"  Warning: no file found for problem {problem.name} in {student_dir}")
            return NEEDS_REVIEW

        print(f"  Found {deliverable.path.name}")
        return self.reviewer.review(problem.kind, deliverable, student_dir)
