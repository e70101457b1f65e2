"""Locale codes of the form language[_COUNTRY[_variant]]."""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..errors import InvalidLocale

ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
ASCII_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@dataclass(frozen=True)
class LocaleCode:
    """A language, country, variant triple.

    Attributes:
        language: Two lowercase letters, e.g. "de".
        country: Two uppercase letters, e.g. "DE".
        variant: Application specific, no format constraint.
    """
    language: str
    country: Optional[str] = None
    variant: Optional[str] = None

    @property
    def parts(self) -> tuple[str, ...]:
        return tuple(p for p in (self.language, self.country, self.variant) if p is not None)

    def __str__(self) -> str:
        return "_".join(self.parts)


def _is_code(part: str, letters: frozenset) -> bool:
    return len(part) == 2 and all(c in letters for c in part)


def is_valid_locale_code(parts: Sequence[str]) -> bool:
    """Check that locale parts fulfil the requirements of a locale code.

    At most three parts; the language must be two lowercase letters and the
    country two uppercase letters. Variants conform to no standard.
    """
    if len(parts) > 3:
        return False
    if len(parts) > 0 and not _is_code(parts[0], ASCII_LOWER):
        return False
    if len(parts) > 1 and not _is_code(parts[1], ASCII_UPPER):
        return False
    return True


def parse_locale(parts: Sequence[str]) -> LocaleCode:
    """Build a LocaleCode from 1 to 3 parts.

    Raises:
        InvalidLocale: If the parts are empty or not a valid locale code.
    """
    if not parts:
        raise InvalidLocale("Empty locale code")
    if not is_valid_locale_code(parts):
        raise InvalidLocale(f"Invalid locale code: {'_'.join(parts)!r}")
    return LocaleCode(*parts)


def split_locale(text: str) -> list[str]:
    """Split a "de_DE" style token into parts; empty text means no parts."""
    return text.split("_") if text else []


def locale_from_filename(name: str) -> Optional[LocaleCode]:
    """Extract the locale from the locale part of a file name.

    Args:
        name: Locale fragment of a file name, e.g. "de_DE_science".

    Returns:
        The LocaleCode, or None if the fragment is not a valid locale.
    """
    try:
        return parse_locale(split_locale(name))
    except InvalidLocale:
        return None
