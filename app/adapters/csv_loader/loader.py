"""CSV loader — reads roster and postal-mapping files into canonical records."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from app.adapters.csv_loader.normalizer import to_postal_region, to_technician
from app.domain.entities.technician import Technician

logger = logging.getLogger(__name__)


def _sniff_dialect(sample: str) -> type[csv.Dialect]:
    """Detect the delimiter (comma/semicolon/tab) of spreadsheet exports."""
    if not sample:
        return csv.excel

    first_line = sample.splitlines()[0]
    delims = [";", ",", "\t"]
    counts = {d: first_line.count(d) for d in delims}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect

    return csv.excel


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str]]:
    """Read a CSV file with BOM handling.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        List of raw row dicts keyed by the original header.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")
        rows = [row for row in reader]

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, reader.fieldnames)
    return rows


def load_technicians(file_path: Path) -> list[Technician]:
    """Load the roster CSV, skipping blank rows, in file order."""
    technicians = [t for t in (to_technician(row) for row in _read_csv(file_path)) if t]
    logger.info("Parsed %d technicians", len(technicians))
    return technicians


def load_postal_regions(file_path: Path) -> dict[str, str]:
    """Load a postal → region mapping CSV (postal, province/state columns)."""
    mapping: dict[str, str] = {}
    for row in _read_csv(file_path):
        pair = to_postal_region(row)
        if pair:
            postal, region = pair
            mapping[postal] = region
    logger.info("Parsed %d postal → region entries", len(mapping))
    return mapping
