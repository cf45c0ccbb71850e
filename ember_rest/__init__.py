"""Sideloading response documents for Ember Data's REST adapter."""

from .config import EmberSettings
from .errors import ConfigurationError, EmberRestError, UnknownModelError
from .models import (
    AssociationDescriptor,
    AssociationKind,
    InclusionPolicy,
    InMemoryModelRegistry,
    ModelDescriptor,
    ModelRegistry,
)
from .naming import (
    HookNaming,
    InflectorNaming,
    NamingStrategy,
    convert_model_name,
    reverse_model_name,
)
from .transform import ResponseBuilder, attach_hyperlinks, build_response

__version__ = "0.1.0"

__all__ = [
    "EmberSettings",
    "EmberRestError",
    "UnknownModelError",
    "ConfigurationError",
    "AssociationDescriptor",
    "AssociationKind",
    "InclusionPolicy",
    "ModelDescriptor",
    "ModelRegistry",
    "InMemoryModelRegistry",
    "NamingStrategy",
    "InflectorNaming",
    "HookNaming",
    "convert_model_name",
    "reverse_model_name",
    "ResponseBuilder",
    "attach_hyperlinks",
    "build_response",
]
