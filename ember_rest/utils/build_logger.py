"""Structured logging for response builds.

Every build log line carries:
- root_key
- record_count
- sideload
- sideloaded (record count per sideload key)
- duration_ms
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from typing import Iterator, Optional


@dataclass
class BuildLogContext:
    """Context for one response build."""

    root_key: str
    record_count: int = 0
    sideload: bool = False
    sideloaded: dict = field(default_factory=dict)
    links_attached: int = 0
    duration_ms: Optional[float] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for logging, without unset fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def summarize(self, document: dict) -> None:
        """Fill the counts from a finished document."""
        primary = document.get(self.root_key, [])
        self.record_count = len(primary)
        self.sideloaded = {
            key: len(entries) for key, entries in document.items() if key != self.root_key
        }
        self.links_attached = sum(1 for record in primary if "links" in record)


@contextmanager
def logged_build(
    root_key: str,
    sideload: bool,
    logger: logging.Logger,
) -> Iterator[BuildLogContext]:
    """Time a build and log its context when it ends.

    Successful builds log at DEBUG; failures log at ERROR and re-raise.

    Usage:
        with logged_build("posts", sideload=True, logger=logger) as context:
            document = ...
            context.summarize(document)
    """
    context = BuildLogContext(root_key=root_key, sideload=sideload)
    start = time.perf_counter()

    try:
        yield context
    except Exception as e:
        context.duration_ms = round((time.perf_counter() - start) * 1000, 3)
        context.error = str(e)
        logger.error(f"Failed to build response for {root_key}", extra=context.to_dict())
        raise

    context.duration_ms = round((time.perf_counter() - start) * 1000, 3)
    logger.debug(f"Built response for {root_key}", extra=context.to_dict())
