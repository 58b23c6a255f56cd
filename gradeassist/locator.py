"""
Submission lookup and extraction.

Maps a roster student number to the archive or folder handed in for it, and
unpacks archives next to where they were found.
"""

import shutil
from pathlib import Path

from .config import ARCHIVE_SUFFIX
from .console import Console
from .name_matcher import NameMatcher


def archive_format(path: Path) -> str | None:
    """
    Find the shutil unpack format of a file from its extension, ignoring case.
    """
    name = path.name.lower()
    for format_name, extensions, _ in shutil.get_unpack_formats():
        if any(name.endswith(ext) for ext in extensions):
            return format_name
    return None


def is_archive(path: Path) -> bool:
    return path.is_file() and archive_format(path) is not None


def list_directory(path: Path) -> list[Path]:
    """
    List the entries of the working directory, skipping hidden files.
    """
    return [item for item in sorted(path.iterdir()) if not item.name.startswith(".")]


class SubmissionLocator:
    """
    Resolves student numbers to submissions in the working directory.

    The directory listing is taken once, when the locator is created.
    """

    def __init__(
        self,
        working_dir: Path,
        console: Console,
        matcher: NameMatcher | None = None,
        entries: list[Path] | None = None,
    ) -> None:
        """
        Initialize the locator.

        Args:
            working_dir: Directory holding submission folders and archives.
            console: Channel used to ask for a path when nothing matches.
            matcher: Fuzzy matcher for entry names.
            entries: Pre-computed directory listing.
        """
        self.working_dir = working_dir
        self.console = console
        self.matcher = matcher or NameMatcher()
        self.entries = entries if entries is not None else list_directory(working_dir)

    def locate(self, student_id: str) -> Path | None:
        """
        Find the submission of a student.

        Args:
            student_id: Roster student number.

        Returns:
            Path to an archive or an unpacked submission folder, or None if
            the submission is missing.
        """
        by_name = {entry.name: entry for entry in self.entries}
        matched = self.matcher.best_match(student_id, by_name)

        if matched is None:
            answer = self.console.ask(
                f"Zip file for {student_id} not found. Please type a file name for your zip file:"
            )
            if not answer:
                return None
            path = Path(answer).expanduser()
            return path if path.exists() else None

        entry = by_name[matched]
        if entry.is_dir():
            for name in (student_id.upper(), student_id.lower()):
                archive = entry / f"{name}.{ARCHIVE_SUFFIX}"
                if archive.is_file():
                    return archive
            return entry
        if is_archive(entry):
            return entry
        return None

    def unpack(self, submission: Path) -> Path:
        """
        Unpack an archive into the folder that holds it.

        Folders are returned unchanged.

        Returns:
            Directory containing the unpacked submission.
        """
        if submission.is_dir():
            return submission

        workdir = submission.parent
        print(f"  Unzipping {submission.name} in workdir: {workdir}")
        shutil.unpack_archive(str(submission), str(workdir), format=archive_format(submission))
        return workdir
