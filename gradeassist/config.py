"""
Configuration constants for the Grade Assist system.
"""

from pathlib import Path


# Score sentinels
NEEDS_REVIEW: int = 101
MISSING_SUBMISSION_SCORE: float = -1.0
MIN_SCORE: int = 0
MAX_SCORE: int = 100
MANUAL_REVIEW_NOTE: str = "Need manual review"

# Default paths (can be overridden via CLI)
DEFAULT_WORKING_DIR: Path = Path("./")
DEFAULT_ROSTER_PATH: Path = Path("test.xlsx")
DEFAULT_OUTPUT_FILE: Path = Path("output.txt")
DEFAULT_CONFIG_FILENAME: str = "grader_config.yml"

# Roster spreadsheet layout
ROSTER_SHEET: str = "成績"
ROSTER_ID_COLUMN: str = "序號(No.)"
ROSTER_STUDENT_NUMBER_COLUMN: str = "學號(Stu No.)"

# Output log
OUTPUT_DELIMITER: str = ", "

# Submission archives
ARCHIVE_SUFFIX: str = "zip"

# Reviewer tools: (file extension, command) pairs tried in order
EDITOR_COMMAND: str = "kate"
DOCUMENT_VIEWERS: list[tuple[str, str]] = [("txt", "kate"), ("pdf", "evince")]
PICTURE_VIEWERS: list[tuple[str, str]] = [("jpg", "feh"), ("png", "feh")]
C_TOOLCHAINS: list[tuple[str, str]] = [("c", "cc")]
PATCH_SUFFIX: str = "patch"

# Program execution
BUILD_OUTPUT_NAME: str = "output"
EXECUTION_TIMEOUT_SECONDS: int = 120

# Console prompts
SCORE_PROMPT: str = "Type the score(0-100):"
COMMENT_PROMPT: str = "Write down your comment:"
