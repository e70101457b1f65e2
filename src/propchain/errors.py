"""Exceptions raised by propchain."""


class PropChainError(Exception):
    """Base class for all propchain errors."""


class InvalidLocale(PropChainError, ValueError):
    """A locale part sequence is not a valid language[_COUNTRY[_variant]]."""


class ResourceUnavailable(PropChainError, OSError):
    """A location is missing, unreadable or unwritable."""


class DecodeError(PropChainError, ValueError):
    """Malformed escape sequence in a properties file."""


class NotAnInteger(PropChainError, ValueError):
    """A value requested as integer is absent or not numeric."""
