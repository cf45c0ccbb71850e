"""Settings for the response builder, read from the environment.

Environment variables (a ``.env`` file is loaded first when present):
- EMBER_BLUEPRINT_PREFIX: URL prefix of the REST routes (e.g. ``/api``)
- EMBER_CONVERT_MODEL_NAME: ``module:function`` hook replacing identity -> key
- EMBER_REVERSE_MODEL_NAME: ``module:function`` hook replacing key -> identity
- EMBER_PRIMARY_KEY: default primary key field (``id``)
"""

import importlib
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from ember_rest.errors import ConfigurationError
from ember_rest.models import InMemoryModelRegistry
from ember_rest.naming import DEFAULT_NAMING, HookNaming, NamingStrategy

logger = logging.getLogger(__name__)


def import_hook(path: str) -> Callable:
    """Import a callable from a ``module:function`` (or dotted) path.

    Raises:
        ConfigurationError: If the module or attribute is missing or the
            attribute is not callable
    """
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ConfigurationError(f"Invalid hook path: {path!r}")

    try:
        module = importlib.import_module(module_name)
        hook = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        logger.error(
            f"Failed to import hook {path}",
            extra={"hook_path": path, "error": str(e)}
        )
        raise ConfigurationError(f"Cannot import hook {path!r}: {e}") from e

    if not callable(hook):
        raise ConfigurationError(f"Hook {path!r} is not callable")
    return hook


@dataclass
class EmberSettings:
    """Host application settings."""

    blueprint_prefix: str = ""
    convert_model_name: Optional[Callable[[str, bool], str]] = None
    reverse_model_name: Optional[Callable[[str, bool], str]] = None
    primary_key: str = "id"

    def __post_init__(self) -> None:
        self.blueprint_prefix = (self.blueprint_prefix or "").rstrip("/")

    @classmethod
    def from_env(
        cls,
        load_env_file: bool = True,
        env_file: Optional[str] = None,
    ) -> "EmberSettings":
        """Load settings from environment variables.

        Args:
            load_env_file: Read a ``.env`` file into the environment first
            env_file: Path of the file (defaults to the nearest ``.env``
                from the working directory)

        Returns:
            EmberSettings
        """
        if load_env_file:
            load_dotenv(env_file or find_dotenv(usecwd=True))

        convert_path = os.getenv("EMBER_CONVERT_MODEL_NAME")
        reverse_path = os.getenv("EMBER_REVERSE_MODEL_NAME")

        settings = cls(
            blueprint_prefix=os.getenv("EMBER_BLUEPRINT_PREFIX", ""),
            convert_model_name=import_hook(convert_path) if convert_path else None,
            reverse_model_name=import_hook(reverse_path) if reverse_path else None,
            primary_key=os.getenv("EMBER_PRIMARY_KEY", "id"),
        )

        logger.debug(
            "Loaded settings from environment",
            extra={
                "blueprint_prefix": settings.blueprint_prefix,
                "convert_hook": convert_path,
                "reverse_hook": reverse_path,
                "primary_key": settings.primary_key,
            }
        )
        return settings

    def naming(self) -> NamingStrategy:
        """Naming strategy for these settings."""
        if self.convert_model_name is None and self.reverse_model_name is None:
            return DEFAULT_NAMING
        return HookNaming(
            convert_model_name=self.convert_model_name,
            reverse_model_name=self.reverse_model_name,
        )

    def registry(self, definitions: Mapping[str, Mapping[str, Any]]) -> InMemoryModelRegistry:
        """Model registry for definitions keyed by identity.

        Models without their own ``primaryKey`` use ``primary_key``.
        """
        return InMemoryModelRegistry.from_definitions(definitions, primary_key=self.primary_key)
