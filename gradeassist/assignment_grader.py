"""
Weighted grading of a whole assignment for one student.
"""

from pathlib import Path

from .config import MANUAL_REVIEW_NOTE, NEEDS_REVIEW
from .console import Console
from .exceptions import ConfigurationError
from .models import Assignment, GradeResult, ProblemScore
from .problem_grader import ProblemGrader


def student_directory(submission_dir: Path, student_id: str) -> Path:
    """
    Find the student's own folder inside an unpacked submission.

    Tries the upper-case then the lower-case student id, falling back to the
    submission directory itself.
    """
    for name in (student_id.upper(), student_id.lower()):
        candidate = submission_dir / name
        if candidate.is_dir():
            return candidate
    return submission_dir


class AssignmentGrader:
    """
    Grades every problem of an assignment in order and combines the scores.

    Missing deliverables score zero but keep their weight, so they pull the
    average down while flagging the student for manual review.
    """

    def __init__(self, problem_grader: ProblemGrader, console: Console) -> None:
        self.problem_grader = problem_grader
        self.console = console

    def grade(self, assignment: Assignment, submission_dir: Path, student_id: str) -> GradeResult:
        """
        Grade one student's submission.

        Args:
            assignment: Problems to grade.
            submission_dir: Directory the submission was unpacked into.
            student_id: Roster student number.

        Returns:
            GradeResult with the weighted score and joined comments.

        Raises:
            ConfigurationError: If the assignment weights sum to zero.
        """
        total_weight = assignment.total_weight
        if total_weight == 0:
            raise ConfigurationError("Assignment weights sum to zero")

        student_dir = student_directory(submission_dir, student_id)
        weighted_sum = 0.0
        comment = ""
        problem_scores: list[ProblemScore] = []

        for problem in assignment.problems:
            print(f"Grading problem {problem.name} on student: {student_id}")

            score = self.problem_grader.grade(problem, student_dir)
            if score != NEEDS_REVIEW:
                weighted_sum += score * problem.weight

            text = self.console.ask_comment()
            if text:
                comment += f"{problem.name}: {text}."

            problem_scores.append(
                ProblemScore(problem_name=problem.name, score=score, weight=problem.weight, comment=text)
            )

        needs_review = any(p.needs_review for p in problem_scores)
        if needs_review:
            comment += MANUAL_REVIEW_NOTE

        return GradeResult(
            student_number=student_id,
            score=weighted_sum / total_weight,
            comment=comment,
            needs_review=needs_review,
            problem_scores=problem_scores,
        )
