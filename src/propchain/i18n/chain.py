"""Loading of locale fallback chains of property stores."""

import logging
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence, Union

from ..config import BundlePaths, Settings
from ..resources import Resource, as_resource
from .locale import is_valid_locale_code
from .store import PropertyStore

logger = logging.getLogger(__name__)

Location = Union[str, Path, Resource, None]
StoreFactory = Callable[..., PropertyStore]


class PropertyChain:
    """Levels of a fallback chain, index 0 being the most specific.

    Each level's parent is the next level; the last level has no parent.
    The structure is fixed once built, the levels themselves stay mutable.
    """

    def __init__(self, levels: Sequence[PropertyStore]):
        self._levels = tuple(levels)
        for store, parent in zip(self._levels, self._levels[1:] + (None,)):
            store.parent = parent

    @classmethod
    def load(
        cls,
        locations: Sequence[Location],
        factory: StoreFactory = PropertyStore,
        settings: Optional[Settings] = None
    ) -> "PropertyChain":
        """Create and load one store per location.

        Locations are processed from the least specific (last) to the most
        specific (first). A level that fails to load stays empty.

        Args:
            locations: Locations from most specific to least specific.
            factory: Store type, called with location, parent and settings.
            settings: Settings shared by all levels.

        Returns:
            The loaded chain.
        """
        settings = settings or Settings.from_env()
        levels: list[PropertyStore] = []
        parent: Optional[PropertyStore] = None

        for location in reversed(locations):
            store = factory(
                location=as_resource(location) if location is not None else None,
                parent=parent,
                settings=settings
            )
            if not store.load():
                logger.debug("Level %s not loaded, it stays empty", location)
            levels.append(store)
            parent = store

        levels.reverse()
        return cls(levels)

    @property
    def levels(self) -> tuple[PropertyStore, ...]:
        return self._levels

    @property
    def head(self) -> Optional[PropertyStore]:
        """The most specific level."""
        return self._levels[0] if self._levels else None

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[PropertyStore]:
        return iter(self._levels)

    def __getitem__(self, index: int) -> PropertyStore:
        return self._levels[index]

    def resolve(self, key: str) -> Optional[tuple[int, str]]:
        """Find the most specific level defining a key.

        Returns:
            Tuple of (level index, value), or None if no level has the key.
        """
        for index, store in enumerate(self._levels):
            if store.contains_key(key, recursive=False):
                return index, store.get(key)
        return None

    def get(self, key: str) -> Optional[str]:
        resolved = self.resolve(key)
        return resolved[1] if resolved else None


def chain_load(
    locations: Sequence[Location],
    factory: StoreFactory = PropertyStore,
    settings: Optional[Settings] = None
) -> Optional[PropertyStore]:
    """Load several stores and chain them as parents.

    The returned store corresponds to the first location, the oldest parent
    to the last location.

    Returns:
        The most specific store, or None if no locations were given.
    """
    if not locations:
        return None
    return PropertyChain.load(locations, factory, settings).head


def candidate_paths(
    parts: Sequence[str],
    directory: str,
    base_name: str,
    extension: str = ".properties"
) -> list[str]:
    """Derive bundle file paths from most specific to least specific.

    Example:
        ["de", "DE"], "i18n", "messages" gives i18n/messages_de_DE.properties,
        i18n/messages_de.properties and i18n/messages.properties.
    """
    return BundlePaths(directory, base_name, extension).get_paths(parts)


def load_property_chain(
    parts: Sequence[str],
    directory: str,
    base_name: str,
    factory: StoreFactory = PropertyStore,
    settings: Optional[Settings] = None
) -> Optional[PropertyChain]:
    """Load all levels of a property bundle.

    Returns:
        The chain, or None if the locale parts are invalid.
    """
    if not is_valid_locale_code(parts):
        logger.warning("Invalid locale code %r", "_".join(parts))
        return None
    settings = settings or Settings.from_env()
    paths = candidate_paths(parts, directory, base_name, settings.extension)
    return PropertyChain.load(paths, factory, settings)


def load_property_bundle(
    parts: Sequence[str],
    directory: str,
    base_name: str,
    factory: StoreFactory = PropertyStore,
    settings: Optional[Settings] = None
) -> Optional[PropertyStore]:
    """Load a property bundle and return its most specific level.

    Args:
        parts: Locale parts, e.g. ["de", "DE"].
        directory: Directory of the bundle files.
        base_name: Base name of the bundle files.

    Returns:
        The most specific store with all parents attached, or None if the
        locale parts are invalid.
    """
    chain = load_property_chain(parts, directory, base_name, factory, settings)
    return chain.head if chain is not None else None
