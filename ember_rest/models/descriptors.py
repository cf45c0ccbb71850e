"""Model and association descriptors."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


class AssociationKind(Enum):
    """Shape of an association, named after the Waterline ``type`` values."""

    SINGLE = "model"
    COLLECTION = "collection"
    UNKNOWN = "unknown"


class InclusionPolicy(Enum):
    """How an association is represented in a response document."""

    RECORD = "record"
    LINK = "link"
    INDEX = "index"
    NONE = "none"


@dataclass(frozen=True)
class AssociationDescriptor:
    """A single association declared on a model."""

    alias: str
    kind: AssociationKind
    target: str
    via: Optional[str] = None
    through: Optional[str] = None
    include: InclusionPolicy = InclusionPolicy.NONE

    @property
    def is_collection(self) -> bool:
        return self.kind is AssociationKind.COLLECTION

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> "AssociationDescriptor":
        """Parse a Waterline-style association definition.

        Args:
            definition: Mapping with ``alias``, ``type`` (``model`` or
                ``collection``), ``model`` or ``collection`` naming the
                target, and optional ``via``, ``through`` and ``include``

        Returns:
            Parsed descriptor. Unrecognised ``type`` values become
            ``AssociationKind.UNKNOWN`` and unrecognised ``include`` values
            become ``InclusionPolicy.NONE``.

        Example:
            >>> AssociationDescriptor.from_definition(
            ...     {"alias": "comments", "type": "collection",
            ...      "collection": "comment", "via": "post", "include": "record"}
            ... ).include
            <InclusionPolicy.RECORD: 'record'>
        """
        try:
            kind = AssociationKind(definition.get("type"))
        except ValueError:
            kind = AssociationKind.UNKNOWN

        try:
            include = InclusionPolicy(definition.get("include") or "none")
        except ValueError:
            logger.warning(
                f"Unknown include policy for association {definition.get('alias')}",
                extra={"include": definition.get("include")}
            )
            include = InclusionPolicy.NONE

        return cls(
            alias=definition["alias"],
            kind=kind,
            target=definition.get("collection") or definition.get("model") or "",
            via=definition.get("via"),
            through=definition.get("through"),
            include=include,
        )


@dataclass
class ModelDescriptor:
    """Identity, display name and associations of an ORM model."""

    identity: str
    global_id: str = ""
    associations: list[AssociationDescriptor] = field(default_factory=list)
    primary_key: str = "id"

    def __post_init__(self) -> None:
        if not self.global_id:
            self.global_id = self.identity

    def collection_associations(self) -> list[AssociationDescriptor]:
        """Associations that reference many records."""
        return [a for a in self.associations if a.is_collection]

    @classmethod
    def from_definition(
        cls,
        identity: str,
        definition: Mapping[str, Any],
        primary_key: str = "id",
    ) -> "ModelDescriptor":
        """Build a descriptor from a plain mapping.

        Args:
            identity: Model identity (registry key)
            definition: Mapping with optional ``globalId``, ``primaryKey``
                and ``associations`` (list of association definitions)
            primary_key: Primary key used when the definition has none

        Returns:
            ModelDescriptor
        """
        return cls(
            identity=identity,
            global_id=definition.get("globalId", ""),
            associations=[
                AssociationDescriptor.from_definition(a)
                for a in definition.get("associations", [])
            ],
            primary_key=definition.get("primaryKey", primary_key),
        )
