"""Read-only, case-insensitive lookup over the entity preset catalog."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from src.errors import EntityTypeNotFound
from src.presets.catalog import ENTITY_PRESETS
from src.presets.models import EntityPreset


def normalize_key(entity_type: str) -> str:
    """Normalise a user-supplied entity type to its registry key."""
    return entity_type.strip().upper()


class PresetRegistry(Mapping[str, EntityPreset]):
    """Static catalog of entity presets keyed by uppercase entity type.

    The registry copies its input once at construction and exposes no
    mutation operations.  Lookups are case-insensitive.

    Usage::

        registry = PresetRegistry(ENTITY_PRESETS)
        preset = registry.lookup("contact")
    """

    def __init__(self, presets: Mapping[str, EntityPreset]) -> None:
        self._presets: dict[str, EntityPreset] = {
            normalize_key(key): preset for key, preset in presets.items()
        }

    # -- Lookup ------------------------------------------------------------

    def lookup(self, entity_type: str) -> EntityPreset:
        """Return the preset for *entity_type*.

        Raises:
            EntityTypeNotFound: If the key is not in the catalog.  The error
                carries the full list of valid keys.
        """
        key = normalize_key(entity_type)
        try:
            return self._presets[key]
        except KeyError:
            raise EntityTypeNotFound(entity_type, self.sorted_keys()) from None

    def sorted_keys(self) -> list[str]:
        """All registry keys in alphabetical order."""
        return sorted(self._presets)

    # -- Mapping protocol --------------------------------------------------

    def __getitem__(self, entity_type: str) -> EntityPreset:
        return self._presets[normalize_key(entity_type)]

    def __contains__(self, entity_type: object) -> bool:
        if not isinstance(entity_type, str):
            return False
        return normalize_key(entity_type) in self._presets

    def __iter__(self) -> Iterator[str]:
        return iter(self._presets)

    def __len__(self) -> int:
        return len(self._presets)


default_registry = PresetRegistry(ENTITY_PRESETS)


def lookup(entity_type: str) -> EntityPreset:
    """Look up *entity_type* in the default registry."""
    return default_registry.lookup(entity_type)
