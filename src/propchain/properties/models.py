"""Data models for .properties file entries."""

from dataclasses import dataclass
from typing import Optional

from .escaping import escape_key, escape_value


@dataclass
class PropertyEntry:
    """Represents a single entry in a .properties file.

    Attributes:
        key: The property key.
        value: The property value.
        comment: Optional comment block preceding the entry.
    """
    key: str
    value: str
    comment: Optional[str] = None

    def to_properties_format(
        self,
        delimiter: str = "=",
        unicode_escape: bool = False,
        with_comment: bool = True
    ) -> str:
        """Convert entry to .properties file format.

        Returns:
            Formatted entry, preceded by its comment lines if any.
        """
        lines = []
        if self.comment and with_comment:
            lines.extend(f"# {line}" if line else "#" for line in self.comment.split("\n"))

        lines.append(
            escape_key(self.key, unicode_escape) + delimiter + escape_value(self.value, unicode_escape)
        )
        return "\n".join(lines)
