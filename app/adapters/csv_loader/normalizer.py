"""Source-column normalization — maps heterogeneous roster rows to canonical records."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from app.domain.entities.technician import Technician

# Accepted source spellings per canonical field, in priority order
TECH_ID_KEYS = ("tech_id", "Tech ID", "TechID", "technician_id", "id")
TECH_NAME_KEYS = ("name", "full_name", "Full Name", "tech_name", "technician")
FIRST_NAME_KEYS = ("first_name", "First Name", "firstname")
LAST_NAME_KEYS = ("last_name", "Last Name", "lastname")
CITY_KEYS = ("city", "City", "town")
REGION_KEYS = ("province", "prov", "state", "region")
POSTAL_KEYS = ("postal", "postal_code", "Postal Code", "zip", "zip_code", "Zip Code")

MAPPING_POSTAL_KEYS = ("postal", "postal_code", "zip", "col_1")
MAPPING_REGION_KEYS = ("province", "prov", "state", "region", "col_2")


def normalize_column_name(name: str) -> str:
    """Normalize a source column name to a comparison key.

    - Removes BOM characters (\\ufeff)
    - Lowercases
    - Drops whitespace, underscores, hyphens and other punctuation

    So "Tech ID", "tech_id" and "TECHID" all become "techid".
    """
    name = name.replace("\ufeff", "")
    name = name.strip().lower()
    name = re.sub(r"[\s _\-]+", "", name)
    name = re.sub(r"[^\w]", "", name, flags=re.UNICODE)
    return name


def normalize_row(row: Mapping[str, object]) -> dict[str, object]:
    """Re-key a raw row by normalized column name (first spelling wins)."""
    normalized: dict[str, object] = {}
    for key, value in row.items():
        if key is None:
            continue
        normalized.setdefault(normalize_column_name(str(key)), value)
    return normalized


def clean_string(value: object) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = str(value).strip()
    return value if value else None


def pick(row: Mapping[str, object], keys: Iterable[str]) -> str | None:
    """First non-blank value among *keys* of a normalized row."""
    for key in keys:
        value = clean_string(row.get(normalize_column_name(key)))
        if value is not None:
            return value
    return None


def clean_numeric_text(value: str | None) -> str | None:
    """Undo spreadsheet float coercion: "1234.0" → "1234"."""
    if not value:
        return value
    try:
        number = float(value.replace(",", "."))
    except ValueError:
        return value
    if number.is_integer() and re.fullmatch(r"\d+[.,]0+", value):
        return str(int(number))
    return value


def clean_postal_text(value: str | None) -> str:
    """Canonical postal cell: "2134.0" → "02134", "h7n 1a1" → "H7N1A1".

    Numeric values of 3-4 digits are ZIPs that lost their leading zeros.
    """
    postal = re.sub(r"\s+", "", clean_numeric_text(value) or "").upper()
    if postal.isdigit() and 3 <= len(postal) <= 4:
        return postal.zfill(5)
    return postal


def to_technician(raw: Mapping[str, object]) -> Technician | None:
    """Canonical Technician from a raw source row, or None for blank rows."""
    row = normalize_row(raw)

    tech_id = clean_numeric_text(pick(row, TECH_ID_KEYS))
    name = pick(row, TECH_NAME_KEYS)
    if not name:
        parts = [pick(row, FIRST_NAME_KEYS), pick(row, LAST_NAME_KEYS)]
        name = " ".join(p for p in parts if p) or None

    if not tech_id and not name:
        return None

    postal = clean_postal_text(pick(row, POSTAL_KEYS))
    return Technician(
        id=tech_id or name or "",
        name=name or tech_id or "",
        city=pick(row, CITY_KEYS) or "",
        region=(pick(row, REGION_KEYS) or "").upper(),
        postal=postal,
    )


def to_postal_region(raw: Mapping[str, object]) -> tuple[str, str] | None:
    """(postal, region) pair from a raw mapping row, or None if incomplete."""
    row = normalize_row(raw)
    postal = clean_postal_text(pick(row, MAPPING_POSTAL_KEYS))
    region = pick(row, MAPPING_REGION_KEYS)
    if not postal or not region:
        return None
    return postal, region.upper()
