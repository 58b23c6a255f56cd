"""
Append-only output log of final grades.

One line is written per roster row, in roster order. The number of lines
already in the log is the number of roster rows to skip when a session is
resumed.
"""

from pathlib import Path

from .config import OUTPUT_DELIMITER
from .models import GradeResult


def format_score(score: float) -> str:
    """Format a score, dropping the fractional part of whole numbers."""
    if float(score).is_integer():
        return str(int(score))
    return repr(float(score))


class OutputLog:
    """
    Grades log that survives interrupted sessions.
    """

    def __init__(self, path: Path, delimiter: str = OUTPUT_DELIMITER) -> None:
        """
        Initialize the log.

        Args:
            path: Log file. Created on the first append.
            delimiter: Separator between the score and the comment.
        """
        self.path = path
        self.delimiter = delimiter

    def count_lines(self) -> int:
        """
        Count the results already recorded.

        A trailing line without a newline counts as a line.
        """
        if not self.path.exists():
            return 0
        with open(self.path, "r", encoding="utf-8") as f:
            return sum(1 for _ in f)

    def format_line(self, result: GradeResult) -> str:
        return f"{format_score(result.score)}{self.delimiter}{result.comment}\n"

    def append(self, result: GradeResult) -> None:
        """
        Append a result and flush it to disk immediately.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        needs_newline = self._ends_without_newline()
        with open(self.path, "a", encoding="utf-8") as f:
            if needs_newline:
                f.write("\n")
            f.write(self.format_line(result))
            f.flush()

    def _ends_without_newline(self) -> bool:
        if not self.path.exists() or self.path.stat().st_size == 0:
            return False
        with open(self.path, "rb") as f:
            f.seek(-1, 2)
            return f.read(1) != b"\n"
