"""Usage statistics for property stores."""

import logging
from collections import Counter
from typing import Optional, Sequence

from ..errors import DecodeError, NotAnInteger, ResourceUnavailable
from ..properties import PropertiesParser, PropertiesWriter
from ..resources import Resource
from .chain import Location, chain_load
from .store import INTEGER_PATTERN, PropertyStore

logger = logging.getLogger(__name__)


def _parse_count(value: str) -> int:
    if not INTEGER_PATTERN.fullmatch(value):
        raise NotAnInteger(f"Count is not an integer: {value!r}")
    return int(value)


class UsageStats:
    """Wraps a PropertyStore and counts how often each of its keys is read.

    Only keys defined in the wrapped level itself are counted, even when the
    lookup could have been answered by a parent. Counts are kept in a sibling
    file whose extension is the statistics extension (".statistics").

    Every attribute not defined here is forwarded to the wrapped store.
    """

    def __init__(self, store: PropertyStore, location: Optional[Resource] = None):
        """Initialize the wrapper.

        Args:
            store: The store to observe.
            location: Statistics location. Derived from the store's location
                if not given.
        """
        self.store = store
        if location is None and store.location is not None:
            location = store.location.with_extension(store.settings.stats_extension)
        self.location = location
        self._counts: Counter = Counter()

    def __getattr__(self, name):
        if name == "store":
            raise AttributeError(name)
        return getattr(self.store, name)

    def __repr__(self) -> str:
        return f"UsageStats({self.store!r}, counted={len(self._counts)})"

    def get(self, key: str) -> Optional[str]:
        """Get a value like PropertyStore.get and count the access."""
        result = self.store.get(key)
        if result is not None and self.store.contains_key(key, recursive=False):
            self._counts[key] += 1
        return result

    def count(self, key: str) -> int:
        return self._counts[key]

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def clear(self) -> None:
        """Reset all counts."""
        self._counts.clear()

    def prune(self) -> None:
        """Drop counts of keys the wrapped store no longer defines."""
        for key in list(self._counts):
            if not self.store.contains_key(key, recursive=False):
                del self._counts[key]

    def load(self, load_stats: bool = True) -> bool:
        """Load the store and, if requested, the statistics.

        Returns:
            The result of loading the store, or False if the statistics
            file exists but cannot be read.
        """
        loaded = self.store.load()
        if loaded and load_stats:
            return self.load_stats_only()
        return loaded

    def load_stats_only(self) -> bool:
        """Load the statistics if their location exists.

        Returns:
            False if the statistics file exists but cannot be read.
        """
        if self.location is None or not self.location.exists():
            return True

        try:
            parser = PropertiesParser(encoding=self.store.settings.encoding)
            counts = {key: _parse_count(value) for key, value in parser.load(self.location).items()}
        except (ResourceUnavailable, DecodeError, NotAnInteger, LookupError) as ex:
            logger.error("Failed to load statistics %s: %s", self.location.path, ex)
            return False

        self._counts = Counter(counts)
        return True

    def save(self) -> bool:
        """Save the store and then the statistics."""
        return self.store.save() and self.save_stats_only()

    def save_stats_only(self) -> bool:
        """Save the statistics only, e.g. when the store is read only.

        Returns:
            True if the location was set and writing succeeded.
        """
        if self.location is None:
            return False

        counts = {key: str(value) for key, value in self._counts.items()}
        try:
            writer = PropertiesWriter.from_settings(self.store.settings)
            writer.write(counts, self.location, comment="statistics")
        except (ResourceUnavailable, UnicodeError, LookupError) as ex:
            logger.error("Failed to save statistics %s: %s", self.location.path, ex)
            return False
        return True

    @classmethod
    def chain_load(cls, locations: Sequence[Location], **kwargs) -> Optional["UsageStats"]:
        """Chain load plain stores and wrap the most specific one.

        The statistics of the most specific level are loaded as well.
        """
        store = chain_load(locations, **kwargs)
        if store is None:
            return None
        stats = cls(store)
        stats.load_stats_only()
        return stats
