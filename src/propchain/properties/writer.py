"""Writer for .properties files with sorted keys."""

import codecs
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional, Union

from ..config import Settings
from ..resources import Resource, as_resource
from .escaping import escape_key, escape_value

# Encodings that cannot carry non-ASCII text literally
ESCAPING_ENCODINGS = {"ascii", "iso8859-1"}

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a time like java.util.Date.toString, independent of the system locale.

    Example:
        Fri Oct 16 12:00:00 UTC 2026
    """
    moment = moment or datetime.now().astimezone()
    zone = moment.tzname() or ""
    if not zone or not zone.isascii() or " " in zone:
        zone = moment.strftime("%z")
    return "%s %s %02d %02d:%02d:%02d %s %d" % (
        DAY_NAMES[moment.weekday()],
        MONTH_NAMES[moment.month - 1],
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        zone,
        moment.year,
    )


class PropertiesWriter:
    """Serializes key/value mappings in the .properties grammar.

    Entries are written in ascending key order after a timestamp header.
    The unicode escaping mode is fixed when the writer is constructed.
    """

    def __init__(self, delimiter: str = "=", unicode_escape: bool = False, encoding: str = "UTF-8"):
        """Initialize the writer.

        Args:
            delimiter: Separator between key and value ('=' or ':').
            unicode_escape: If True, non-ASCII characters are written as \\uXXXX.
            encoding: Output encoding. Latin-1 and ASCII force unicode escaping.
        """
        if delimiter not in ("=", ":"):
            raise ValueError(f"Delimiter must be '=' or ':', got {delimiter!r}")
        self.delimiter = delimiter
        self.encoding = encoding
        self.unicode_escape = unicode_escape or codecs.lookup(encoding).name in ESCAPING_ENCODINGS

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PropertiesWriter":
        """Create a writer from the given (or the environment's) settings."""
        settings = settings or Settings.from_env()
        return cls(
            delimiter=settings.delimiter,
            unicode_escape=settings.escape_unicode,
            encoding=settings.encoding,
        )

    def serialize(self, key: str, value: str) -> str:
        """Serialize one entry as a single line, without line terminator."""
        return (
            escape_key(key, self.unicode_escape)
            + self.delimiter
            + escape_value(value, self.unicode_escape)
        )

    def format(self, properties: Mapping[str, str], comment: Optional[str] = None) -> str:
        """Format a mapping as .properties content.

        Args:
            properties: Mapping of key to value.
            comment: Optional comment written below the timestamp header.

        Returns:
            Formatted .properties content.
        """
        lines = ["#" + format_timestamp()]
        if comment:
            lines.extend("#" + line for line in comment.splitlines())
        for key in sorted(properties):
            lines.append(self.serialize(key, properties[key]))
        return "\n".join(lines) + "\n"

    def encode(self, content: str) -> bytes:
        return content.encode(self.encoding)

    def write(
        self,
        properties: Mapping[str, str],
        path: Union[str, Path, Resource],
        comment: Optional[str] = None
    ) -> None:
        """Write a mapping to a .properties file in one call.

        Raises:
            ResourceUnavailable: If the location cannot be written.
        """
        as_resource(path).write_bytes(self.encode(self.format(properties, comment)))
