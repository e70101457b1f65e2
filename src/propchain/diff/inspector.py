"""Comparison of property stores and their fallback levels."""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..i18n.store import PropertyStore


class ChangeType(Enum):
    """Type of change detected between two property maps."""
    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"


@dataclass
class KeyChange:
    """Represents a change to a property entry.

    Attributes:
        key: The key that changed.
        change_type: Type of change (added, modified, removed).
        old_value: Previous value (None for added entries).
        new_value: New value (None for removed entries).
    """
    key: str
    change_type: ChangeType
    old_value: Optional[str] = None
    new_value: Optional[str] = None


class ChainInspector:
    """Finds differences between stores and gaps in locale levels."""

    def compare(self, base: Mapping[str, str], head: Mapping[str, str]) -> list[KeyChange]:
        """Compare two property maps.

        Args:
            base: Key to value mapping before the change.
            head: Key to value mapping after the change.

        Returns:
            List of KeyChange objects, sorted by key.
        """
        changes = []

        for key in sorted(set(base) | set(head)):
            if key not in base:
                changes.append(KeyChange(
                    key=key,
                    change_type=ChangeType.ADDED,
                    new_value=head[key]
                ))
            elif key not in head:
                changes.append(KeyChange(
                    key=key,
                    change_type=ChangeType.REMOVED,
                    old_value=base[key]
                ))
            elif base[key] != head[key]:
                changes.append(KeyChange(
                    key=key,
                    change_type=ChangeType.MODIFIED,
                    old_value=base[key],
                    new_value=head[key]
                ))

        return changes

    def compare_stores(self, base: PropertyStore, head: PropertyStore) -> list[KeyChange]:
        """Compare the local entries of two stores."""
        return self.compare(dict(base.items()), dict(head.items()))

    def untranslated(self, store: PropertyStore) -> set[str]:
        """Get keys the store inherits from its ancestors but does not define."""
        if store.parent is None:
            return set()
        return store.parent.keys() - store.keys(recursive=False)

    def obsolete(self, store: PropertyStore) -> set[str]:
        """Get keys the store defines but none of its ancestors does.

        A store without parent has no obsolete keys.
        """
        if store.parent is None:
            return set()
        return store.keys(recursive=False) - store.parent.keys()
