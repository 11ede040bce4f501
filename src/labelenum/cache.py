"""
Enum Metadata Caching

Caches the lookup index of each enum type so it is derived once per type,
not once per call. Entries live for the lifetime of the process.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from .config import EnumOptions, resolve_policy
from .errors import MalformedEnum
from .extractor import extract_declaration
from .index import EnumIndex, build_index

logger = logging.getLogger(__name__)

# Class attribute holding per-type EnumOptions
OPTIONS_ATTR = "__enum_options__"


def build_enum_index(enum_type: type) -> EnumIndex:
    """
    Build the index of an enum type from its class declaration.

    Args:
        enum_type: Enum class to index

    Returns:
        Freshly built EnumIndex
    """
    options = getattr(enum_type, OPTIONS_ATTR, None)
    if options is not None and not isinstance(options, EnumOptions):
        options = EnumOptions.model_validate(options)
    declaration = extract_declaration(enum_type)
    return build_index(declaration, resolve_policy(options))


class MetadataCache:
    """Build-once cache of enum indexes keyed by enum type.

    Thread-safe. Published indexes are immutable, so reads of an existing
    entry take no lock. A miss takes the cache lock and re-checks before
    building, so concurrent first accesses build exactly once.
    """

    def __init__(self, builder: Callable[[type], EnumIndex] = build_enum_index) -> None:
        """
        Initialize the cache.

        Args:
            builder: Function deriving the index of an enum type
        """
        self._builder = builder
        self._entries: dict[type, EnumIndex] = {}
        self._builds: dict[type, int] = {}
        self._lock = threading.Lock()

    def get(self, enum_type: type) -> EnumIndex:
        """
        Get the index of an enum type, building it on first access.

        Args:
            enum_type: Enum class

        Returns:
            The cached EnumIndex; the same instance on every call

        Raises:
            MalformedEnum: If the enum declaration cannot be indexed. Failed
                builds are not cached.
        """
        index = self._entries.get(enum_type)
        if index is not None:
            return index

        with self._lock:
            index = self._entries.get(enum_type)
            if index is not None:
                return index

            self._builds[enum_type] = self._builds.get(enum_type, 0) + 1
            try:
                index = self._builder(enum_type)
            except MalformedEnum as e:
                logger.debug("Index build failed for %s: %s", enum_type.__name__, e)
                raise

            self._entries[enum_type] = index
            return index

    def build_count(self, enum_type: type) -> int:
        """Number of index builds attempted for an enum type."""
        return self._builds.get(enum_type, 0)

    def __contains__(self, enum_type: object) -> bool:
        return enum_type in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_default_cache = MetadataCache()


def get_metadata_cache() -> MetadataCache:
    """
    Get the process-wide metadata cache.

    Returns:
        Default MetadataCache instance
    """
    return _default_cache


__all__ = ["MetadataCache", "OPTIONS_ATTR", "build_enum_index", "get_metadata_cache"]
