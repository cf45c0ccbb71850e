"""Conversion between model identities and document keys."""

import logging
import re
from abc import ABC, abstractmethod
from typing import Callable, Optional

import inflection

logger = logging.getLogger(__name__)

ConvertHook = Callable[[str, bool], str]
ReverseHook = Callable[[str, bool], str]


def _split_words(name: str) -> str:
    """Reduce a name to lowercase words joined by single underscores."""
    # Any run of separators or special characters becomes a word boundary
    name = re.sub(r"[^a-zA-Z0-9]+", "_", name)
    # camelCase / PascalCase boundaries
    name = inflection.underscore(name)
    return re.sub(r"_+", "_", name).strip("_")


def kebab_case(name: str) -> str:
    """Convert a name to kebab-case.

    Example:
        >>> kebab_case("BlogPost")
        'blog-post'
    """
    return inflection.dasherize(_split_words(name))


def camel_case(name: str) -> str:
    """Convert a name to camelCase.

    Example:
        >>> camel_case("blog-posts")
        'blogPosts'
    """
    return inflection.camelize(_split_words(name), uppercase_first_letter=False)


class NamingStrategy(ABC):
    """Maps model identities to document keys and back."""

    @abstractmethod
    def to_document_key(self, identity: str, pluralize: bool = True) -> str:
        """Convert a model identity to a top-level document key."""

    @abstractmethod
    def to_model_identity(self, document_key: str, singularize: bool = True) -> str:
        """Convert a document key back to a model identity."""


class InflectorNaming(NamingStrategy):
    """Default naming: kebab-case plural keys, lowercase singular identities."""

    def to_document_key(self, identity: str, pluralize: bool = True) -> str:
        key = kebab_case(identity)
        if pluralize:
            return inflection.pluralize(key)
        return key

    def to_model_identity(self, document_key: str, singularize: bool = True) -> str:
        identity = camel_case(document_key).lower()
        if singularize:
            return inflection.singularize(identity)
        return identity


class HookNaming(NamingStrategy):
    """Naming driven by host application hooks.

    A configured hook fully replaces the default conversion for its
    direction: it receives the same arguments and its result is returned
    unchanged. Directions without a hook fall back to ``fallback``.
    """

    def __init__(
        self,
        convert_model_name: Optional[ConvertHook] = None,
        reverse_model_name: Optional[ReverseHook] = None,
        fallback: Optional[NamingStrategy] = None,
    ):
        self.convert_model_name = convert_model_name
        self.reverse_model_name = reverse_model_name
        self.fallback = fallback or InflectorNaming()

        logger.debug(
            "HookNaming initialized",
            extra={
                "convert_hook": convert_model_name is not None,
                "reverse_hook": reverse_model_name is not None,
            }
        )

    def to_document_key(self, identity: str, pluralize: bool = True) -> str:
        if self.convert_model_name is not None:
            return self.convert_model_name(identity, pluralize)
        return self.fallback.to_document_key(identity, pluralize)

    def to_model_identity(self, document_key: str, singularize: bool = True) -> str:
        if self.reverse_model_name is not None:
            return self.reverse_model_name(document_key, singularize)
        return self.fallback.to_model_identity(document_key, singularize)


DEFAULT_NAMING: NamingStrategy = InflectorNaming()


def convert_model_name(
    identity: str,
    pluralize: bool = True,
    naming: Optional[NamingStrategy] = None,
) -> str:
    """Convert a model identity to a document key.

    Args:
        identity: Model identity or global id (e.g. ``blogPost``)
        pluralize: Whether to apply the plural inflection
        naming: Strategy to use (defaults to the inflector)

    Returns:
        Document key (e.g. ``blog-posts``)
    """
    return (naming or DEFAULT_NAMING).to_document_key(identity, pluralize)


def reverse_model_name(
    document_key: str,
    singularize: bool = True,
    naming: Optional[NamingStrategy] = None,
) -> str:
    """Convert a document key back to a model identity.

    Args:
        document_key: Top-level key of a response document (e.g. ``blog-posts``)
        singularize: Whether to apply the singular inflection
        naming: Strategy to use (defaults to the inflector)

    Returns:
        Model identity (e.g. ``blogpost``)
    """
    return (naming or DEFAULT_NAMING).to_model_identity(document_key, singularize)
