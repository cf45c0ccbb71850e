"""Relationship hyperlinks for collection associations."""

import logging
from collections.abc import Sequence
from typing import Any, Optional, Union

from ember_rest.models import ModelDescriptor
from ember_rest.naming import DEFAULT_NAMING, NamingStrategy

logger = logging.getLogger(__name__)


def build_link(prefix: str, document_key: str, record_id: Any, alias: str) -> str:
    """Format a relationship URL.

    Example:
        >>> build_link("/api", "posts", 1, "comments")
        '/api/posts/1/comments'
    """
    return f"{prefix}/{document_key}/{record_id}/{alias}"


def attach_hyperlinks(
    model: ModelDescriptor,
    records: Union[dict, Sequence[dict]],
    prefix: str = "",
    naming: Optional[NamingStrategy] = None,
) -> list[dict]:
    """Add a ``links`` entry for every collection association of a model.

    Records are modified in place. ``links`` is only set on a record when
    the model has at least one collection association.

    Args:
        model: Descriptor of the records' model
        records: A record or a sequence of records
        prefix: Blueprint URL prefix (e.g. ``/api``)
        naming: Strategy producing the model's document key

    Returns:
        The records, always as a list
    """
    if not isinstance(records, Sequence):
        records = [records]
    records = list(records)

    collections = model.collection_associations()
    if not collections:
        return records

    document_key = (naming or DEFAULT_NAMING).to_document_key(model.identity)

    for record in records:
        record_id = record.get(model.primary_key)
        record["links"] = {
            assoc.alias: build_link(prefix, document_key, record_id, assoc.alias)
            for assoc in collections
        }

    logger.debug(
        f"Attached links to {len(records)} {document_key} records",
        extra={"model": model.identity, "record_count": len(records)}
    )
    return records
