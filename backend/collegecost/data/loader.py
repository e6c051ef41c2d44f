"""Load the college cost CSV into a CollegeDirectory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from collegecost.data.directory import CollegeDirectory
from collegecost.exceptions import DatasetLoadError
from collegecost.models.college import CostRecord

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

COLLEGE_COLUMN = "College"
TUITION_IN_COLUMN = "Tuition (in-state)"
TUITION_OUT_COLUMN = "Tuition (out-of-state)"
ROOM_AND_BOARD_COLUMN = "Room & Board"

REQUIRED_COLUMNS: tuple[str, ...] = (
    COLLEGE_COLUMN,
    TUITION_IN_COLUMN,
    TUITION_OUT_COLUMN,
    ROOM_AND_BOARD_COLUMN,
)


def read_rows(file_path: str | Path) -> Iterator[dict[str, str]]:
    """Yield each data row of the CSV as a column -> text mapping, in file order.

    Every cell is read as text; nothing is coerced to numbers or NaN.

    Raises:
        DatasetLoadError: If the file is missing, unreadable, or lacks one
            of the required columns.
    """
    path = Path(file_path)
    try:
        frame = pd.read_csv(
            path, dtype=str, keep_default_na=False, index_col=False,
        )
    except (
        OSError,
        UnicodeDecodeError,
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
    ) as exc:
        msg = f"Could not read college cost dataset {path}: {exc}"
        raise DatasetLoadError(msg) from exc

    missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
    if missing:
        msg = f"College cost dataset {path} is missing columns: {', '.join(missing)}"
        raise DatasetLoadError(msg)

    yield from frame.to_dict(orient="records")


def load_directory(file_path: str | Path) -> CollegeDirectory:
    """Read the dataset at *file_path* and build a CollegeDirectory.

    Cost fields are copied verbatim; a later row for the same college
    replaces an earlier one.
    """
    seen: set[str] = set()
    entries: list[tuple[str, CostRecord]] = []
    for row in read_rows(file_path):
        name = row[COLLEGE_COLUMN]
        if name in seen:
            logger.debug("Duplicate row for %r, keeping the later one", name)
        seen.add(name)
        entries.append(
            (
                name,
                CostRecord(
                    tuition_in=row[TUITION_IN_COLUMN],
                    tuition_out=row[TUITION_OUT_COLUMN],
                    room_and_board=row[ROOM_AND_BOARD_COLUMN],
                ),
            )
        )

    directory = CollegeDirectory(entries)
    logger.info("Loaded %d colleges from %s", len(directory), file_path)
    return directory
