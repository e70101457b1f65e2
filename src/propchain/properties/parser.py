"""Parser for .properties files."""

import codecs
import logging
import re
from pathlib import Path
from typing import Iterator, Optional, Union

from ..resources import Resource, as_resource
from .escaping import WHITESPACE, unescape
from .models import PropertyEntry

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")

COMMENT_CHARS = "#!"
SEPARATORS = "=:"

FALLBACK_ENCODING = "ISO-8859-1"

BLANK, COMMENT, ENTRY = range(3)


def _continues(line: str) -> bool:
    """An odd number of trailing backslashes joins the next natural line."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


class PropertiesParser:
    """Parser for .properties files.

    Reads the java.util.Properties line grammar: comments, continuation
    lines, '=' / ':' / whitespace separators and backslash escapes.
    """

    def __init__(self, encoding: str = "UTF-8"):
        """Initialize the parser.

        Args:
            encoding: Encoding tried first when decoding raw file content.
        """
        self.encoding = encoding

    def parse(self, content: str) -> dict[str, str]:
        """Parse .properties content into a key to value mapping.

        Duplicate keys collapse, the last occurrence wins.

        Raises:
            DecodeError: If an escape sequence is malformed.
        """
        return {entry.key: entry.value for entry in self.parse_entries(content)}

    def parse_entries(self, content: str) -> list[PropertyEntry]:
        """Parse .properties content into PropertyEntry objects, in file order.

        Args:
            content: The content of a .properties file.

        Returns:
            List of PropertyEntry objects, duplicates included.
        """
        entries = []
        comment_lines: list[str] = []

        for kind, line in self._logical_lines(content):
            if kind == BLANK:
                comment_lines = []
            elif kind == COMMENT:
                comment_lines.append(line[1:].strip())
            else:
                key, value = self._split(line)
                entries.append(PropertyEntry(
                    key=unescape(key),
                    value=unescape(value),
                    comment="\n".join(comment_lines) or None
                ))
                comment_lines = []

        return entries

    def parse_file(self, path: Union[str, Path, Resource]) -> list[PropertyEntry]:
        """Parse a .properties file into entries.

        Raises:
            ResourceUnavailable: If the file cannot be read.
            DecodeError: If an escape sequence is malformed.
        """
        return self.parse_entries(self.read(path))

    def load(self, path: Union[str, Path, Resource]) -> dict[str, str]:
        """Parse a .properties file into a key to value mapping."""
        return self.parse(self.read(path))

    def read(self, path: Union[str, Path, Resource]) -> str:
        """Read a resource and decode its content."""
        return self.decode(as_resource(path).read_bytes())

    def decode(self, raw: bytes, encoding: Optional[str] = None) -> str:
        """Decode raw file content.

        Tries the configured encoding first (skipping a UTF-8 BOM) and falls
        back to ISO-8859-1, the historical encoding of .properties files.
        """
        encoding = encoding or self.encoding
        if codecs.lookup(encoding).name == "utf-8":
            encoding = "utf-8-sig"

        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            logger.debug("Content is not %s, falling back to %s", encoding, FALLBACK_ENCODING)
            return raw.decode(FALLBACK_ENCODING)

    def _logical_lines(self, content: str) -> Iterator[tuple[int, str]]:
        natural = LINE_BREAK.split(content)
        i = 0
        while i < len(natural):
            line = natural[i].lstrip(WHITESPACE)
            i += 1

            if not line:
                yield BLANK, line
                continue
            if line[0] in COMMENT_CHARS:
                yield COMMENT, line
                continue

            while _continues(line) and i < len(natural):
                line = line[:-1] + natural[i].lstrip(WHITESPACE)
                i += 1
            yield ENTRY, line

    @staticmethod
    def _split(line: str) -> tuple[str, str]:
        """Split a logical line into raw (still escaped) key and value."""
        i = 0
        while i < len(line):
            ch = line[i]
            if ch == "\\":
                i += 2
                continue
            if ch in SEPARATORS or ch in WHITESPACE:
                break
            i += 1

        key = line[:i]
        rest = line[i:].lstrip(WHITESPACE)
        if rest and rest[0] in SEPARATORS:
            rest = rest[1:].lstrip(WHITESPACE)
        return key, rest
