"""Configuration for property stores and writers."""

import codecs
import os
from dataclasses import dataclass
from typing import Sequence

# Fixed delimiter of resource locations
DELIMITER = "/"

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Process-wide settings for reading and writing property files.

    Attributes:
        encoding: Character encoding of property files.
        escape_unicode: If True, non-ASCII characters are written as \\uXXXX.
        delimiter: Separator written between key and value ('=' or ':').
        extension: File extension of property bundle files.
        stats_extension: File extension of usage statistics files.
    """
    encoding: str = "UTF-8"
    escape_unicode: bool = False
    delimiter: str = "="
    extension: str = ".properties"
    stats_extension: str = ".statistics"

    def __post_init__(self):
        if self.delimiter not in ("=", ":"):
            raise ValueError(f"Delimiter must be '=' or ':', got {self.delimiter!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding {self.encoding!r}") from None

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the PROPCHAIN_* environment variables."""
        return cls(
            encoding=os.environ.get("PROPCHAIN_ENCODING", "UTF-8"),
            escape_unicode=os.environ.get("PROPCHAIN_ESCAPE", "false").strip().lower() in TRUE_VALUES,
            delimiter=os.environ.get("PROPCHAIN_DELIMITER", "="),
        )


@dataclass
class BundlePaths:
    """Paths configuration for a property bundle.

    Attributes:
        directory: Directory containing the bundle files.
        base_name: Base name shared by all levels (e.g. "messages").
        extension: File extension of every level.
    """
    directory: str
    base_name: str
    extension: str = ".properties"

    def get_level_path(self, parts: Sequence[str] = ()) -> str:
        """Get path to the level for exactly these locale parts."""
        name = "_".join([self.base_name, *parts])
        return f"{self.directory}{DELIMITER}{name}{self.extension}"

    def get_paths(self, parts: Sequence[str]) -> list[str]:
        """Get the candidate paths from most specific to least specific.

        Args:
            parts: Locale parts, e.g. ["de", "DE"].

        Returns:
            One path per level, e.g. messages_de_DE, messages_de, messages.
        """
        return [self.get_level_path(parts[:n]) for n in range(len(parts), -1, -1)]
