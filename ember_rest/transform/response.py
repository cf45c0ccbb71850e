"""Response documents for REST adapters that expect sideloaded payloads.

A document maps pluralized, kebab-cased model keys to lists of records:

    {
        "posts": [{"id": 1, "title": "Hello", "comments": [7, 8], "author": 3}],
        "comments": [{"id": 7, ...}, {"id": 8, ...}],
        "authors": [{"id": 3, ..., "links": {"posts": "/api/authors/3/posts"}}],
    }

Associations on each primary record are replaced according to their
inclusion policy:
- record: nested records are moved to a sideload collection and replaced
  by their ids (only when sideloading)
- index: replaced by ids collected from a join index
- link: removed and replaced by an entry under ``links``
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

import inflection

from ember_rest.config import EmberSettings
from ember_rest.models import (
    AssociationDescriptor,
    AssociationKind,
    InclusionPolicy,
    ModelDescriptor,
    ModelRegistry,
)
from ember_rest.naming import NamingStrategy, kebab_case
from ember_rest.transform.dedupe import dedupe_by_id
from ember_rest.transform.links import attach_hyperlinks, build_link
from ember_rest.utils.build_logger import logged_build
from ember_rest.utils.serialization import RecordSerializer, is_record, to_plain_record

logger = logging.getLogger(__name__)


@dataclass
class _BuildContext:
    """Per-call state of a build."""

    root_key: str
    sideload: bool
    join_index: Mapping[str, Sequence[Mapping]]
    buckets: dict[str, list] = field(default_factory=dict)


def _as_list(records: Any) -> list:
    """Treat anything but a list/tuple-like sequence as a single record."""
    if isinstance(records, Sequence) and not isinstance(records, (str, bytes)):
        return list(records)
    return [records]


class ResponseBuilder:
    """Build sideloading response documents from ORM records.

    Usage:
        builder = ResponseBuilder(registry, settings=EmberSettings.from_env())
        document = builder.build(post_model, posts, sideload=True)
    """

    def __init__(
        self,
        registry: ModelRegistry,
        naming: Optional[NamingStrategy] = None,
        prefix: Optional[str] = None,
        serializer: Optional[RecordSerializer] = None,
        settings: Optional[EmberSettings] = None,
    ):
        """Initialize the builder.

        Args:
            registry: Resolves association targets and sideload keys to models
            naming: Naming strategy (defaults to the one from settings)
            prefix: Blueprint URL prefix for links (defaults to settings)
            serializer: Converts ORM records to plain dicts
            settings: Host settings (defaults to EmberSettings())
        """
        settings = settings or EmberSettings()
        self.registry = registry
        self.naming = naming or settings.naming()
        self.prefix = settings.blueprint_prefix if prefix is None else prefix.rstrip("/")
        self.serializer = serializer or to_plain_record

    def build(
        self,
        model: ModelDescriptor,
        records: Any,
        associations: Optional[Sequence[AssociationDescriptor]] = None,
        sideload: bool = False,
        join_index: Optional[Mapping[str, Sequence[Mapping]]] = None,
    ) -> dict:
        """Build a response document.

        Args:
            model: Descriptor of the primary records' model
            records: A record or a sequence of records from an ORM query
            associations: Associations to process (defaults to the model's)
            sideload: Move embedded records to top-level collections
            join_index: Join rows per association alias, used by
                associations with the ``index`` inclusion policy

        Returns:
            Document mapping keys to lists of records

        Raises:
            UnknownModelError: If an association target or a sideloaded
                collection cannot be resolved in the registry
        """
        if associations is None:
            associations = model.associations

        ctx = _BuildContext(
            root_key=self.naming.to_document_key(model.global_id),
            sideload=sideload,
            join_index=join_index or {},
        )
        with logged_build(ctx.root_key, sideload, logger) as log_ctx:
            targets = self._resolve_targets(ctx, associations)

            primary = [
                self._prepare_record(ctx, model, record, targets)
                for record in _as_list(records)
            ]

            document = {ctx.root_key: primary}
            if sideload:
                self._finish_sideloads(ctx, model, document)

            log_ctx.summarize(document)

        return document

    # ============================================
    # Associations
    # ============================================

    def _resolve_targets(
        self,
        ctx: _BuildContext,
        associations: Sequence[AssociationDescriptor],
    ) -> list[tuple[AssociationDescriptor, ModelDescriptor]]:
        """Resolve target models and open sideload buckets."""
        targets = []

        for assoc in associations:
            if assoc.kind is AssociationKind.UNKNOWN:
                continue

            target = self.registry.resolve(assoc.target)
            targets.append((assoc, target))

            if ctx.sideload and assoc.include is InclusionPolicy.RECORD:
                ctx.buckets.setdefault(self.naming.to_document_key(target.global_id), [])

        return targets

    def _prepare_record(
        self,
        ctx: _BuildContext,
        model: ModelDescriptor,
        record: Any,
        targets: list[tuple[AssociationDescriptor, ModelDescriptor]],
    ) -> dict:
        """Copy one primary record and rewrite its association fields."""
        record = self.serializer(record)
        links = {}

        for assoc, target in targets:
            if assoc.kind is AssociationKind.COLLECTION:
                self._prepare_collection(ctx, model, record, assoc, target, links)
            elif assoc.kind is AssociationKind.SINGLE:
                self._prepare_single(ctx, record, assoc, target)

        if links:
            record["links"] = links
        return record

    def _prepare_collection(
        self,
        ctx: _BuildContext,
        model: ModelDescriptor,
        record: dict,
        assoc: AssociationDescriptor,
        target: ModelDescriptor,
        links: dict,
    ) -> None:
        alias = assoc.alias

        if assoc.include is InclusionPolicy.RECORD:
            nested = record.get(alias)
            if ctx.sideload and nested:
                record[alias] = self._sideload(ctx, target, _as_list(nested))

        elif assoc.include is InclusionPolicy.INDEX:
            rows = ctx.join_index.get(alias)
            if rows is not None:
                record[alias] = self._ids_from_index(model, record, assoc, target, rows)

        elif assoc.include is InclusionPolicy.LINK:
            links[alias] = build_link(
                self.prefix, ctx.root_key, record.get(model.primary_key), alias
            )
            record.pop(alias, None)

    def _prepare_single(
        self,
        ctx: _BuildContext,
        record: dict,
        assoc: AssociationDescriptor,
        target: ModelDescriptor,
    ) -> None:
        if not (ctx.sideload and assoc.include is InclusionPolicy.RECORD):
            return

        nested = record.get(assoc.alias)
        # An unpopulated reference already holds the id
        if is_record(nested):
            record[assoc.alias] = self._sideload(ctx, target, [nested])[0]

    def _sideload(
        self,
        ctx: _BuildContext,
        target: ModelDescriptor,
        nested: list,
    ) -> list:
        """Move nested records to the target's bucket and return their ids."""
        ids = []
        copies = []

        for entry in nested:
            if is_record(entry):
                copy = self.serializer(entry)
                copies.append(copy)
                ids.append(copy.get(target.primary_key))
            else:
                ids.append(entry)

        attach_hyperlinks(target, copies, self.prefix, self.naming)
        key = self.naming.to_document_key(target.global_id)
        ctx.buckets.setdefault(key, []).extend(copies)
        return ids

    def _ids_from_index(
        self,
        model: ModelDescriptor,
        record: dict,
        assoc: AssociationDescriptor,
        target: ModelDescriptor,
        rows: Sequence[Mapping],
    ) -> list:
        """Collect associated ids for a record by scanning join rows.

        Through-associations read the target's foreign key column from the
        join row; direct has-many rows are the target records themselves.
        """
        via = self._inverse_name(model, assoc)
        column = assoc.target if assoc.through else target.primary_key
        record_id = record.get(model.primary_key)

        return [row.get(column) for row in rows if row.get(via) == record_id]

    @staticmethod
    def _inverse_name(model: ModelDescriptor, assoc: AssociationDescriptor) -> str:
        """Field on the associated rows that points back at the primary record."""
        if assoc.via:
            return inflection.singularize(assoc.via)
        return kebab_case(model.global_id)

    # ============================================
    # Sideload collections
    # ============================================

    def _finish_sideloads(
        self,
        ctx: _BuildContext,
        model: ModelDescriptor,
        document: dict,
    ) -> None:
        """Dedupe non-empty buckets, link their records and add them to the document."""
        for key, entries in ctx.buckets.items():
            if not entries:
                continue

            if is_record(entries[0]):
                bucket_model = self.registry.resolve(self.naming.to_model_identity(key))
                entries = dedupe_by_id(entries, bucket_model.primary_key)
                attach_hyperlinks(bucket_model, entries, self.prefix, self.naming)
            else:
                entries = dedupe_by_id(entries)

            if key == ctx.root_key:
                # Self-referencing association: primary records take precedence
                primary = document[key]
                primary_ids = {r.get(model.primary_key) for r in primary}
                document[key] = primary + [
                    e for e in entries
                    if not (is_record(e) and e.get(model.primary_key) in primary_ids)
                ]
            else:
                document[key] = entries


def build_response(
    model: ModelDescriptor,
    records: Any,
    registry: ModelRegistry,
    associations: Optional[Sequence[AssociationDescriptor]] = None,
    sideload: bool = False,
    join_index: Optional[Mapping[str, Sequence[Mapping]]] = None,
    **builder_kwargs: Any,
) -> dict:
    """Convenience function to build a document with a one-off builder.

    Args:
        model: Descriptor of the primary records' model
        records: A record or a sequence of records
        registry: Model registry
        associations: Associations to process (defaults to the model's)
        sideload: Move embedded records to top-level collections
        join_index: Join rows per association alias
        **builder_kwargs: Passed to ResponseBuilder (naming, prefix, ...)

    Returns:
        Response document
    """
    builder = ResponseBuilder(registry, **builder_kwargs)
    return builder.build(model, records, associations, sideload, join_index)
