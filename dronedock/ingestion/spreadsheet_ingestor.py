"""Mini README: Spreadsheet ingestion of field and building coordinates.

Structure:
    * IngestedPoints - dataclass holding the field and building lists.
    * parse_row - turn one spreadsheet row into a ``Point`` (or ``None``).
    * SpreadsheetIngestor - read ``.xlsx``/``.csv`` files with pandas.

Two row layouts are accepted, neither with a header row:

    49.15868902252248, 9.111073073485683 | Field
    49.15868902252248 | 9.111073073485683 | Building

The first packs both coordinates into one cell; the second spreads them over
two cells, which is how a plain CSV export reads back. Labels are matched
case-insensitively. Rows that cannot be parsed are logged and skipped, and a
missing or unreadable file yields empty lists instead of raising.
"""

from __future__ import annotations

import math
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

import pandas as pd

from ..geometry import LocationRole, Point, partition_by_role
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
CSV_SUFFIXES = {".csv"}
# latitude, longitude, label and one spare column so over-long rows reach parse_row
CSV_COLUMNS = 4


@dataclass(slots=True)
class IngestedPoints:
    """Points read from an input file, split by role."""

    fields: List[Point] = field(default_factory=list)
    buildings: List[Point] = field(default_factory=list)
    skipped_rows: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.fields and not self.buildings


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _parse_coordinate(value: object, name: str, limit: float) -> float:
    if isinstance(value, str):
        value = value.strip()
    result = float(value)
    if not math.isfinite(result) or abs(result) > limit:
        raise ValueError(f"{name} {value!r} is outside [-{limit:g}, {limit:g}]")
    return result


def parse_row(cells: Sequence[object]) -> Optional[Point]:
    """Convert row cells into a point, returning ``None`` for unusable rows.

    Raises ``ValueError`` for malformed or out-of-range coordinates and for rows
    with extra cells, so the caller can log the offending row.
    """

    values = list(cells)
    while values and _is_blank(values[-1]):
        values.pop()
    if not values or _is_blank(values[0]):
        return None

    first = values[0]
    if isinstance(first, str) and "," in first:
        parts = first.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'latitude, longitude' but got {first!r}")
        if len(values) > 2:
            raise ValueError(f"Row {values!r} has unexpected extra cells")
        latitude_cell, longitude_cell = parts
        label = values[1] if len(values) > 1 else None
    else:
        if len(values) < 2:
            raise ValueError(f"Row {values!r} has no longitude")
        if len(values) > 3:
            raise ValueError(f"Row {values!r} has unexpected extra cells")
        latitude_cell, longitude_cell = values[0], values[1]
        label = values[2] if len(values) > 2 else None

    latitude = _parse_coordinate(latitude_cell, "latitude", 90.0)
    longitude = _parse_coordinate(longitude_cell, "longitude", 180.0)
    role = LocationRole.from_label(None if _is_blank(label) else label)
    return Point(latitude, longitude, role)


class SpreadsheetIngestor:
    """Load field and building coordinates from tabular files."""

    def ingest(self, path: Path) -> IngestedPoints:
        """Read ``path`` and return its fields and buildings in row order."""

        path = Path(path)
        try:
            frames = self._read_frames(path)
        except FileNotFoundError:
            LOGGER.error("Input file %s does not exist", path)
            return IngestedPoints()
        except (OSError, ValueError, zipfile.BadZipFile) as error:
            LOGGER.error("Unable to read input file %s: %s", path, error)
            return IngestedPoints()

        points: List[Point] = []
        skipped = 0
        for row_number, cells in self._iter_rows(frames):
            try:
                point = parse_row(cells)
            except ValueError as error:
                LOGGER.warning("Skipping row %s: %s", row_number, error)
                skipped += 1
                continue
            if point is None:
                continue
            if not point.is_identified:
                LOGGER.warning("Skipping row %s: unrecognised location label", row_number)
                skipped += 1
                continue
            points.append(point)

        fields, buildings = partition_by_role(points)
        LOGGER.info(
            "Ingested %s fields and %s buildings from %s (%s rows skipped)",
            len(fields),
            len(buildings),
            path,
            skipped,
        )
        return IngestedPoints(fields=fields, buildings=buildings, skipped_rows=skipped)

    def _read_frames(self, path: Path) -> List[pd.DataFrame]:
        """Load every sheet of the file as header-less frames of raw objects."""

        suffix = path.suffix.lower()
        if suffix in EXCEL_SUFFIXES:
            sheets = pd.read_excel(path, sheet_name=None, header=None, dtype=object)
            return list(sheets.values())
        if suffix in CSV_SUFFIXES:
            try:
                frame = pd.read_csv(
                    path,
                    header=None,
                    names=list(range(CSV_COLUMNS)),
                    index_col=False,
                    dtype=str,
                    skipinitialspace=True,
                    engine="python",
                )
            except pd.errors.EmptyDataError:
                return []
            return [frame]
        raise ValueError(f"Unsupported input format '{suffix or path.name}'")

    @staticmethod
    def _iter_rows(frames: Iterable[pd.DataFrame]) -> Iterator[tuple]:
        row_number = 0
        for frame in frames:
            for cells in frame.itertuples(index=False, name=None):
                row_number += 1
                yield row_number, cells
