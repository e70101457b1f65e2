""".properties file parsing, escaping and writing."""

from .escaping import escape_key, escape_value, unescape
from .models import PropertyEntry
from .parser import PropertiesParser
from .writer import PropertiesWriter

__all__ = [
    "PropertyEntry",
    "PropertiesParser",
    "PropertiesWriter",
    "escape_key",
    "escape_value",
    "unescape",
]
