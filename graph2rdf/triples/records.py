"""
Record Normalizer - Flattens raw page records into attribute maps.
"""

from typing import Any, Iterable

# Canonical name attribute of a normalized record
ORIGINAL_NAME = "original-name"

# Reserved property that renames a page
TITLE = "title"

PROPERTIES = "properties"


def normalize_record(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Turn a raw page record into a flat attribute map.

    The property bag becomes the record itself, minus its `title`
    property. The canonical name is the title when the page has one,
    otherwise the record's own original name (possibly None).

    Args:
        raw: Record as returned by the graph database

    Returns:
        Normalized record with exactly one `original-name` attribute
    """
    properties = raw.get(PROPERTIES) or {}
    record = {key: value for key, value in properties.items() if key != TITLE}
    record[ORIGINAL_NAME] = properties.get(TITLE) or raw.get(ORIGINAL_NAME)
    return record


def normalize_records(raws: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Normalize every raw record in `raws`."""
    return [normalize_record(raw) for raw in raws]
