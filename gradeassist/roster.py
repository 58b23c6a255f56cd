"""
Roster spreadsheet loader.

Reads the class roster with pandas, mapping columns by their header names.
"""

from pathlib import Path

import pandas as pd

from .config import ROSTER_ID_COLUMN, ROSTER_SHEET, ROSTER_STUDENT_NUMBER_COLUMN
from .exceptions import RosterError
from .models import RosterEntry


def _cell_text(value) -> str:
    # Numeric student numbers come back as floats
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def load_roster(
    roster_path: Path,
    sheet_name: str = ROSTER_SHEET,
    id_column: str = ROSTER_ID_COLUMN,
    student_number_column: str = ROSTER_STUDENT_NUMBER_COLUMN,
) -> list[RosterEntry]:
    """
    Load the roster rows from a spreadsheet.

    Args:
        roster_path: Path to the spreadsheet (.xlsx, .xls, .ods).
        sheet_name: Sheet holding the roster.
        id_column: Header of the sequence number column.
        student_number_column: Header of the student number column.

    Returns:
        Roster entries in sheet order.

    Raises:
        RosterError: If the sheet or its columns cannot be read.
    """
    if not roster_path.exists():
        raise RosterError(f"Roster not found: {roster_path}")

    try:
        df = pd.read_excel(roster_path, sheet_name=sheet_name, dtype={student_number_column: object})
    except Exception as e:
        raise RosterError(f"Could not read sheet '{sheet_name}' from {roster_path}: {e}") from e

    missing = [c for c in (id_column, student_number_column) if c not in df.columns]
    if missing:
        raise RosterError(f"Roster {roster_path} is missing column(s): {', '.join(missing)}")

    entries: list[RosterEntry] = []
    # Row 1 is the header
    for row_number, (sequence_id, student_number) in enumerate(
        zip(df[id_column], df[student_number_column]), start=2
    ):
        if pd.isna(sequence_id) or pd.isna(student_number) or not _cell_text(student_number):
            raise RosterError(f"Roster row {row_number} is incomplete")
        try:
            sequence_id = int(sequence_id)
        except (TypeError, ValueError) as e:
            raise RosterError(f"Roster row {row_number}: invalid sequence number {sequence_id!r}") from e
        entries.append(RosterEntry(sequence_id=sequence_id, student_number=_cell_text(student_number)))

    return entries
