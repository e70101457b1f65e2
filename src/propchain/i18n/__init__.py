"""Locale fallback chains of property stores."""

from .chain import (
    PropertyChain,
    candidate_paths,
    chain_load,
    load_property_bundle,
    load_property_chain,
)
from .locale import (
    LocaleCode,
    is_valid_locale_code,
    locale_from_filename,
    parse_locale,
    split_locale,
)
from .stats import UsageStats
from .store import PropertyStore

__all__ = [
    "LocaleCode",
    "PropertyChain",
    "PropertyStore",
    "UsageStats",
    "candidate_paths",
    "chain_load",
    "is_valid_locale_code",
    "load_property_bundle",
    "load_property_chain",
    "locale_from_filename",
    "parse_locale",
    "split_locale",
]
