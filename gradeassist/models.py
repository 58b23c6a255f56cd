"""
Pydantic models for the Grade Assist system.

Defines the deliverable kinds, the assignment structure, the reviewer tool
tables and the grading results written to the output log.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import (
    C_TOOLCHAINS,
    DOCUMENT_VIEWERS,
    EDITOR_COMMAND,
    MANUAL_REVIEW_NOTE,
    MISSING_SUBMISSION_SCORE,
    NEEDS_REVIEW,
    PICTURE_VIEWERS,
)


class ProgramKind(str, Enum):
    """Languages a program deliverable can be written in."""

    C = "c"


class Document(BaseModel):
    """A written answer opened in a document viewer."""

    model_config = ConfigDict(frozen=True)

    type: Literal["document"] = "document"


class Picture(BaseModel):
    """A figure or screenshot opened in an image viewer."""

    model_config = ConfigDict(frozen=True)

    type: Literal["picture"] = "picture"


class Program(BaseModel):
    """
    Source code that is built and run, or only read.

    Attributes:
        language: Toolchain family used to build the source.
        raw: Open the source in the editor instead of building it.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["program"] = "program"
    language: ProgramKind = Field(default=ProgramKind.C, description="Program language")
    raw: bool = Field(default=False, description="Review the source without running it")


class Patch(BaseModel):
    """
    A patch file applied to an external project checkout.

    Attributes:
        project_path: git checkout the patch is applied to. Without one the
            patch is opened in the editor.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["patch"] = "patch"
    project_path: Path | None = Field(default=None, description="Project the patch applies to")


DeliverableKind = Annotated[
    Union[Document, Picture, Program, Patch],
    Field(discriminator="type"),
]


class Problem(BaseModel):
    """
    One expected deliverable of an assignment.

    Attributes:
        name: File stem of the deliverable (e.g. "1" for "1.pdf").
        kind: How the deliverable is located and reviewed.
        weight: Percentage weight of this problem in the final score.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Deliverable file stem")
    kind: DeliverableKind = Field(..., description="Deliverable kind")
    weight: int = Field(..., ge=0, description="Percentage weight")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value or value in (".", "..") or any(c in value for c in "/\\\0"):
            raise ValueError(f"Problem name must be a plain file stem, got {value!r}")
        return value


class Assignment(BaseModel):
    """
    Ordered problems graded for every student.

    The order is the grading order and the order comments are joined in.
    """

    model_config = ConfigDict(frozen=True)

    problems: tuple[Problem, ...] = Field(..., min_length=1, description="Problems in grading order")

    @model_validator(mode="after")
    def _check_weights(self) -> "Assignment":
        if self.total_weight == 0:
            raise ValueError("Assignment weights sum to zero")
        return self

    @property
    def total_weight(self) -> int:
        return sum(problem.weight for problem in self.problems)


class SuffixCommand(BaseModel):
    """A file extension and the command used to review files with it."""

    suffix: str = Field(..., min_length=1, description="File extension without the dot")
    command: str = Field(default="", description="Reviewer or toolchain command")


def _pairs(table: list[tuple[str, str]]) -> list[SuffixCommand]:
    return [SuffixCommand(suffix=suffix, command=command) for suffix, command in table]


class ToolTable(BaseModel):
    """
    External programs used to review each deliverable kind.

    Each list is tried in order when resolving a deliverable.
    """

    editor: str = Field(default=EDITOR_COMMAND, description="Plain editor for raw review")
    document: list[SuffixCommand] = Field(default_factory=lambda: _pairs(DOCUMENT_VIEWERS))
    picture: list[SuffixCommand] = Field(default_factory=lambda: _pairs(PICTURE_VIEWERS))
    toolchains: dict[ProgramKind, list[SuffixCommand]] = Field(
        default_factory=lambda: {ProgramKind.C: _pairs(C_TOOLCHAINS)}
    )


class ResolvedDeliverable(BaseModel):
    """A deliverable file found on disk with the command paired to its extension."""

    path: Path
    command: str = ""


class RosterEntry(BaseModel):
    """One row of the roster spreadsheet."""

    sequence_id: int = Field(..., description="Class sequence number")
    student_number: str = Field(..., min_length=1, description="Student number")


class ProblemScore(BaseModel):
    """Score and comment recorded for a single problem."""

    problem_name: str
    score: int
    weight: int
    comment: str = ""

    @property
    def needs_review(self) -> bool:
        return self.score == NEEDS_REVIEW


class GradeResult(BaseModel):
    """
    Final grade of one student.

    Attributes:
        student_number: Roster student number.
        score: Weighted score, or -1 when the submission is missing.
        comment: Joined problem comments and the manual review marker.
        needs_review: Whether a human has to follow up on this student.
        problem_scores: Per-problem breakdown, in grading order.
    """

    student_number: str = Field(default="", description="Roster student number")
    score: float = Field(..., description="Final weighted score")
    comment: str = Field(default="", description="Accumulated comment")
    needs_review: bool = Field(default=False, description="Manual review required")
    problem_scores: list[ProblemScore] = Field(default_factory=list)

    @property
    def missing(self) -> bool:
        return self.score == MISSING_SUBMISSION_SCORE

    @classmethod
    def missing_submission(cls, student_number: str = "") -> "GradeResult":
        return cls(
            student_number=student_number,
            score=MISSING_SUBMISSION_SCORE,
            comment=MANUAL_REVIEW_NOTE,
            needs_review=True,
        )
