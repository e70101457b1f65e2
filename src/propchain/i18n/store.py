"""Property store with fallback to a parent store."""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional, Union

from ..config import Settings
from ..errors import DecodeError, NotAnInteger, ResourceUnavailable
from ..properties import PropertiesParser, PropertiesWriter
from ..resources import Resource, as_resource

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class PropertyStore:
    """A key to value map backed by one .properties file.

    A store can have a parent that is used as fallback: lookups that miss
    locally are answered by the parent, its parent, and so on. Mutations and
    saving only ever touch the local map.

    Attributes:
        parent: Less specific store used as fallback, or None.
        location: Resource used by load() and save(), or None.
        settings: Encoding and escaping settings for load() and save().
    """

    def __init__(
        self,
        location: Optional[Union[str, Path, Resource]] = None,
        parent: Optional["PropertyStore"] = None,
        settings: Optional[Settings] = None
    ):
        self.location = as_resource(location) if location is not None else None
        self.parent = parent
        self.settings = settings or Settings.from_env()
        self._properties: dict[str, str] = {}

    def __repr__(self) -> str:
        location = self.location.path if self.location else None
        return f"PropertyStore(location={location!r}, keys={len(self._properties)})"

    def __len__(self) -> int:
        return len(self._properties)

    def lineage(self) -> Iterator["PropertyStore"]:
        """Iterate over this store and all its ancestors, nearest first."""
        store: Optional[PropertyStore] = self
        while store is not None:
            yield store
            store = store.parent

    def contains_key(self, key: str, recursive: bool = True) -> bool:
        """Check if the key exists locally or, if recursive, in any ancestor."""
        if not recursive:
            return key in self._properties
        return any(key in store._properties for store in self.lineage())

    def get(self, key: str) -> Optional[str]:
        """Get the value of a key, falling back to the ancestors.

        Returns:
            The value, or None if no store in the chain has the key.
        """
        for store in self.lineage():
            if key in store._properties:
                return store._properties[key]
        return None

    def get_int(self, key: str) -> int:
        """Get the value of a key converted to int.

        Raises:
            NotAnInteger: If the key is absent or its value is not an integer.
        """
        value = self.get(key)
        if value is None:
            raise NotAnInteger(f"No value for key {key!r}")
        if not INTEGER_PATTERN.fullmatch(value):
            raise NotAnInteger(f"Value of key {key!r} is not an integer: {value!r}")
        return int(value)

    def put(self, key: Optional[str], value: Optional[str]) -> None:
        """Store a value locally. Nothing is done if key or value is None."""
        if key is not None and value is not None:
            self._properties[key] = value

    def put_int(self, key: str, value: int) -> None:
        self.put(key, str(value))

    def remove_key(self, key: str) -> bool:
        """Remove a key locally.

        Returns:
            True if the key was existing.
        """
        return self._properties.pop(key, None) is not None

    def remove_keys(self) -> None:
        """Remove all local keys."""
        self._properties.clear()

    def rename_key(self, old_key: str, new_key: str) -> None:
        """Rename a local key.

        Nothing is done if the old key does not exist locally or the new key
        already exists locally.
        """
        if old_key in self._properties and new_key not in self._properties:
            self._properties[new_key] = self._properties.pop(old_key)

    def keys(self, recursive: bool = True) -> set[str]:
        """Get the local keys and, if recursive, the keys of all ancestors."""
        if not recursive:
            return set(self._properties)
        keys: set[str] = set()
        for store in self.lineage():
            keys.update(store._properties)
        return keys

    def items(self) -> list[tuple[str, str]]:
        """Get the local entries sorted by key."""
        return sorted(self._properties.items())

    def load(self) -> bool:
        """Replace the local map with the content of the location.

        Does not load any parent; chains are built by chain_load().

        Returns:
            True if the location was set, existing and could be parsed.
        """
        if self.location is None or not self.location.exists():
            return False

        try:
            parser = PropertiesParser(encoding=self.settings.encoding)
            properties = parser.load(self.location)
        except (ResourceUnavailable, DecodeError, LookupError) as ex:
            logger.error("Failed to load %s: %s", self.location.path, ex)
            return False

        self._properties = properties
        return True

    def save(self) -> bool:
        """Write the local map to the location, keys sorted.

        Does not save any parent.

        Returns:
            True if the location was set and writing succeeded.
        """
        if self.location is None:
            return False

        try:
            writer = PropertiesWriter.from_settings(self.settings)
            writer.write(self._properties, self.location)
        except (ResourceUnavailable, UnicodeError, LookupError) as ex:
            logger.error("Failed to save %s: %s", self.location.path, ex)
            return False
        return True
