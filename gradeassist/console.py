"""
Operator console for the grading session.

All human input goes through a single line-based channel so that viewers can
run in the background while the session waits for a score or a comment.
"""

import sys
from typing import TextIO

from .config import COMMENT_PROMPT, MAX_SCORE, MIN_SCORE, SCORE_PROMPT


def parse_score(text: str, default: int | None = 0) -> int | None:
    """
    Parse a human-typed score.

    Args:
        text: Raw input line.
        default: Value used when the input is not a score.

    Returns:
        The score in [0, 100], or the default.
    """
    try:
        score = int(text.strip())
    except ValueError:
        return default

    if not MIN_SCORE <= score <= MAX_SCORE:
        return default
    return score


class Console:
    """
    Line-based prompt and answer channel with the human grader.

    Streams default to the process stdin/stdout, looked up at call time.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    def say(self, message: str) -> None:
        print(message, file=self.stdout, flush=True)

    def ask(self, prompt: str) -> str:
        """
        Print a prompt and block until the grader types a line.

        End of input is read as an empty line.
        """
        self.say(prompt)
        return self.stdin.readline().strip()

    def ask_score(self, prompt: str = SCORE_PROMPT) -> int:
        answer = self.ask(prompt)
        score = parse_score(answer, default=None)
        if score is None:
            score = 0
            if answer:
                self.say(f"  Warning: '{answer}' is not a score between {MIN_SCORE} and {MAX_SCORE}, recording {score}")
        return score

    def ask_comment(self, prompt: str = COMMENT_PROMPT) -> str:
        return self.ask(prompt)
