"""Response document transformation.

Handles:
- Relationship hyperlinks
- Sideloading of embedded records
- Association replacement (ids, join index, links)
- Deduplication of sideloaded collections
"""

from .dedupe import dedupe_by_id
from .links import attach_hyperlinks, build_link
from .response import ResponseBuilder, build_response

__all__ = [
    # Links
    "attach_hyperlinks",
    "build_link",
    # Deduplication
    "dedupe_by_id",
    # Full document
    "ResponseBuilder",
    "build_response",
]
