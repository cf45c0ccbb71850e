"""Conversion of ORM records to plain mappings."""

import dataclasses
import json
from collections.abc import Mapping
from types import ModuleType
from typing import Any, Callable

RecordSerializer = Callable[[Any], dict]


def to_plain_record(record: Any) -> dict:
    """Copy a record into a new plain dict.

    The copy is shallow: nested values are shared with the source, but
    replacing a field on the copy never touches the source record.

    Supported inputs, in order:
    - mappings
    - objects with a ``to_dict()`` or ``to_json()`` method returning a mapping
    - dataclass instances
    - plain objects (public instance attributes)

    Args:
        record: Record returned by the ORM

    Returns:
        New dict with the record's fields

    Raises:
        TypeError: If the record cannot be converted
    """
    if isinstance(record, Mapping):
        return dict(record)

    for method_name in ("to_dict", "to_json"):
        method = getattr(record, method_name, None)
        if callable(method):
            data = method()
            if isinstance(data, Mapping):
                return dict(data)

    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}

    if hasattr(record, "__dict__"):
        return {k: v for k, v in vars(record).items() if not k.startswith("_")}

    raise TypeError(f"Cannot convert {type(record).__name__} to a record")


def is_record(value: Any) -> bool:
    """Whether ``to_plain_record`` can convert a value.

    Anything else (ints, strings, UUIDs, decimals, ...) is a bare identifier.
    """
    if isinstance(value, Mapping):
        return True
    if any(callable(getattr(value, name, None)) for name in ("to_dict", "to_json")):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    # Instances only; classes and modules carry a __dict__ too
    return hasattr(value, "__dict__") and not isinstance(value, (type, ModuleType))


def dumps_document(document: dict, **kwargs: Any) -> str:
    """Serialize a response document to JSON.

    Values JSON cannot encode natively (datetimes, UUIDs, decimals) are
    written with ``str``.
    """
    kwargs.setdefault("default", str)
    return json.dumps(document, **kwargs)
