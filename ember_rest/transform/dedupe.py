"""Deduplication of sideloaded collections."""

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def dedupe_by_id(entries: list[Any], id_field: str = "id") -> list[Any]:
    """Drop entries whose identifier was already seen, keeping the first.

    Records are compared by ``id_field``; bare identifiers by value.

    Args:
        entries: Records or scalar identifiers
        id_field: Name of the identifier field on records

    Returns:
        Deduplicated list in original order

    Example:
        >>> dedupe_by_id([{"id": 1, "v": "a"}, {"id": 1, "v": "b"}, 2, 2])
        [{'id': 1, 'v': 'a'}, 2]
    """
    if not entries:
        return []

    seen = set()
    deduped = []

    for entry in entries:
        key = entry.get(id_field) if isinstance(entry, Mapping) else entry
        # Unhashable ids fall back to their repr
        try:
            hash(key)
        except TypeError:
            key = repr(key)

        if key not in seen:
            seen.add(key)
            deduped.append(entry)

    duplicate_count = len(entries) - len(deduped)
    if duplicate_count > 0:
        logger.debug(
            f"Removed {duplicate_count} duplicate entries",
            extra={
                "original_count": len(entries),
                "deduped_count": len(deduped),
                "duplicate_count": duplicate_count,
            }
        )

    return deduped
