"""
Configuration loader for the Grade Assist system.

Handles parsing and validation of YAML configuration files describing the
assignment, the reviewer tools and the session paths.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from .config import (
    DEFAULT_OUTPUT_FILE,
    DEFAULT_ROSTER_PATH,
    DEFAULT_WORKING_DIR,
    EXECUTION_TIMEOUT_SECONDS,
    OUTPUT_DELIMITER,
    ROSTER_ID_COLUMN,
    ROSTER_SHEET,
    ROSTER_STUDENT_NUMBER_COLUMN,
)
from .exceptions import ConfigurationError
from .models import Assignment, Document, Patch, Picture, Problem, Program, ProgramKind, ToolTable


def default_problems() -> list[Problem]:
    """Problems graded when no configuration file describes the assignment."""
    return [
        Problem(name="1", kind=Picture(), weight=20),
        Problem(name="1", kind=Document(), weight=20),
        Problem(name="2", kind=Document(), weight=30),
        Problem(name="3", kind=Program(language=ProgramKind.C, raw=True), weight=15),
        Problem(name="3", kind=Picture(), weight=15),
    ]


class GraderConfig(BaseModel):
    """
    Configuration model for a grading session.
    """
    working_dir: Path = Field(DEFAULT_WORKING_DIR, description="Directory holding the submissions")
    roster_path: Path = Field(DEFAULT_ROSTER_PATH, description="Roster spreadsheet")
    output_file: Path = Field(DEFAULT_OUTPUT_FILE, description="Append-only grades log")

    roster_sheet: str = Field(ROSTER_SHEET, description="Sheet holding the roster")
    id_column: str = Field(ROSTER_ID_COLUMN, description="Header of the sequence number column")
    student_number_column: str = Field(ROSTER_STUDENT_NUMBER_COLUMN, description="Header of the student number column")

    output_delimiter: str = Field(OUTPUT_DELIMITER, description="Separator between score and comment")
    execution_timeout_seconds: Optional[int] = Field(
        EXECUTION_TIMEOUT_SECONDS, ge=1, description="Run time limit of built programs"
    )
    verbose: bool = Field(False, description="Enable verbose output")

    tools: ToolTable = Field(default_factory=ToolTable, description="Reviewer commands")
    problems: list[Problem] = Field(default_factory=default_problems, description="Assignment problems")

    def build_assignment(self) -> Assignment:
        """
        Build the assignment graded for every student.

        Raises:
            ConfigurationError: If there are no problems or all weights are zero.
        """
        if not self.problems:
            raise ConfigurationError("The assignment has no problems")
        if sum(p.weight for p in self.problems) == 0:
            raise ConfigurationError("Assignment weights sum to zero")
        return Assignment(problems=tuple(self.problems))


def load_config(config_path: Path) -> GraderConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        GraderConfig object with loaded values.

    Raises:
        ConfigurationError: If the config file doesn't exist or isn't a mapping.
        yaml.YAMLError: If config file is invalid YAML.
        ValidationError: If config data is invalid.
    """
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if not config_data:
        return GraderConfig()
    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")

    # Resolve relative paths relative to the config file location
    config_dir = config_path.parent

    for path_field in ["working_dir", "roster_path", "output_file"]:
        if config_data.get(path_field):
            path = Path(config_data[path_field]).expanduser()
            if not path.is_absolute():
                config_data[path_field] = config_dir / path

    for problem in config_data.get("problems") or []:
        kind = problem.get("kind") if isinstance(problem, dict) else None
        if isinstance(kind, dict) and kind.get("project_path"):
            path = Path(kind["project_path"]).expanduser()
            if not path.is_absolute():
                kind["project_path"] = config_dir / path

    return GraderConfig(**config_data)
