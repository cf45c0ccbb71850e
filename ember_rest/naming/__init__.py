"""Model naming conventions.

Handles:
- Identity to document key conversion (kebab-case, plural)
- Document key to identity conversion (lowercase, singular)
- Host application override hooks
"""

from .inflector import (
    DEFAULT_NAMING,
    HookNaming,
    InflectorNaming,
    NamingStrategy,
    camel_case,
    convert_model_name,
    kebab_case,
    reverse_model_name,
)

__all__ = [
    # Strategies
    "NamingStrategy",
    "InflectorNaming",
    "HookNaming",
    "DEFAULT_NAMING",
    # Conversions
    "convert_model_name",
    "reverse_model_name",
    # Case helpers
    "kebab_case",
    "camel_case",
]
