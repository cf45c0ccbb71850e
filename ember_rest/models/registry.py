"""Model registry lookups."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from ember_rest.errors import UnknownModelError
from ember_rest.models.descriptors import ModelDescriptor

logger = logging.getLogger(__name__)


class ModelRegistry(ABC):
    """Resolves model identities to descriptors."""

    @abstractmethod
    def resolve(self, identity: str) -> ModelDescriptor:
        """Get the descriptor for a model identity.

        Raises:
            UnknownModelError: If no model is registered under ``identity``
        """


class InMemoryModelRegistry(ModelRegistry):
    """Registry backed by a dict keyed by model identity."""

    def __init__(self, models: Optional[Iterable[ModelDescriptor]] = None):
        self._models: dict[str, ModelDescriptor] = {}
        for model in models or []:
            self.register(model)

    def register(self, model: ModelDescriptor) -> None:
        """Add or replace a model."""
        self._models[model.identity] = model

    def resolve(self, identity: str) -> ModelDescriptor:
        try:
            return self._models[identity]
        except KeyError:
            logger.error(
                f"Model not found in registry: {identity}",
                extra={"identity": identity, "known_models": sorted(self._models)}
            )
            raise UnknownModelError(identity) from None

    def __contains__(self, identity: object) -> bool:
        return identity in self._models

    def __len__(self) -> int:
        return len(self._models)

    @classmethod
    def from_definitions(
        cls,
        definitions: Mapping[str, Mapping[str, Any]],
        primary_key: str = "id",
    ) -> "InMemoryModelRegistry":
        """Build a registry from model definitions keyed by identity.

        Args:
            definitions: ``{identity: {"globalId": ..., "associations": [...]}}``
            primary_key: Default primary key field for every model

        Returns:
            Populated registry
        """
        registry = cls(
            ModelDescriptor.from_definition(identity, definition, primary_key)
            for identity, definition in definitions.items()
        )
        logger.debug(
            f"Loaded {len(registry)} model definitions",
            extra={"model_count": len(registry)}
        )
        return registry
