"""
Deliverable file resolution.

Students capitalise extensions inconsistently and may hand in any of several
accepted formats, so each deliverable is searched for under every
(extension, command) pair of its kind, upper-case extension first.
"""

from collections.abc import Iterator
from pathlib import Path

from .config import PATCH_SUFFIX
from .models import (
    Document,
    Patch,
    Picture,
    Program,
    ResolvedDeliverable,
    SuffixCommand,
    ToolTable,
)


def suffix_commands(kind, tools: ToolTable) -> list[SuffixCommand]:
    """
    Get the ordered (extension, command) pairs for a deliverable kind.

    Args:
        kind: Deliverable kind of the problem.
        tools: Configured reviewer tools.

    Returns:
        Pairs in the order they should be tried.
    """
    if isinstance(kind, Document):
        return tools.document
    if isinstance(kind, Picture):
        return tools.picture
    if isinstance(kind, Program):
        return tools.toolchains.get(kind.language, [])
    if isinstance(kind, Patch):
        return [SuffixCommand(suffix=PATCH_SUFFIX)]
    raise TypeError(f"Unknown deliverable kind: {kind!r}")


def candidate_files(
    problem_name: str,
    submission_dir: Path,
    kind,
    tools: ToolTable,
) -> Iterator[tuple[Path, str]]:
    """
    Yield every (path, command) candidate in priority order.
    """
    for entry in suffix_commands(kind, tools):
        upper, lower = entry.suffix.upper(), entry.suffix.lower()
        yield submission_dir / f"{problem_name}.{upper}", entry.command
        if lower != upper:
            yield submission_dir / f"{problem_name}.{lower}", entry.command


def resolve_deliverable(
    problem_name: str,
    submission_dir: Path,
    kind,
    tools: ToolTable,
) -> ResolvedDeliverable | None:
    """
    Find the first existing file for a deliverable.

    Args:
        problem_name: File stem of the deliverable.
        submission_dir: Student's submission directory.
        kind: Deliverable kind of the problem.
        tools: Configured reviewer tools.

    Returns:
        The resolved file and its paired command, or None if no candidate exists.
    """
    for path, command in candidate_files(problem_name, submission_dir, kind, tools):
        print(f"  Searching {path.name}")
        if path.is_file():
            return ResolvedDeliverable(path=path, command=command)
    return None
