"""ORM model metadata consumed by the response builder.

Handles:
- Model and association descriptors
- Waterline-style definition parsing
- Model registry lookups
"""

from .descriptors import (
    AssociationDescriptor,
    AssociationKind,
    InclusionPolicy,
    ModelDescriptor,
)
from .registry import InMemoryModelRegistry, ModelRegistry

__all__ = [
    # Descriptors
    "AssociationDescriptor",
    "AssociationKind",
    "InclusionPolicy",
    "ModelDescriptor",
    # Registry
    "ModelRegistry",
    "InMemoryModelRegistry",
]
