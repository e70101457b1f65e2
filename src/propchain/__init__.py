"""Locale fallback chains of .properties files."""

from .config import BundlePaths, Settings
from .errors import (
    DecodeError,
    InvalidLocale,
    NotAnInteger,
    PropChainError,
    ResourceUnavailable,
)
from .i18n import (
    LocaleCode,
    PropertyChain,
    PropertyStore,
    UsageStats,
    chain_load,
    load_property_bundle,
    parse_locale,
)
from .properties import PropertiesParser, PropertiesWriter

__version__ = "0.1.0"

__all__ = [
    "BundlePaths",
    "DecodeError",
    "InvalidLocale",
    "LocaleCode",
    "NotAnInteger",
    "PropChainError",
    "PropertiesParser",
    "PropertiesWriter",
    "PropertyChain",
    "PropertyStore",
    "ResourceUnavailable",
    "Settings",
    "UsageStats",
    "chain_load",
    "load_property_bundle",
    "parse_locale",
]
