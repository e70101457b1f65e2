"""Escaping grammar of .properties files."""

from ..errors import DecodeError

# Characters that would otherwise end a key or start a comment
SPECIAL_CHARS = "=:#!"

# Whitespace recognized by the properties grammar
WHITESPACE = " \t\f"

ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
}

UNESCAPES = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}


def _unicode_escape(ch: str) -> str:
    """Escape a character as one or two (surrogate pair) \\uXXXX sequences."""
    code = ord(ch)
    if code > 0xFFFF:
        code -= 0x10000
        return "\\u%04X\\u%04X" % (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF))
    return "\\u%04X" % code


def _escape(s: str, escape_space: bool, unicode_escape: bool) -> str:
    result = []
    last = len(s) - 1
    for i, ch in enumerate(s):
        if ch in ESCAPES:
            result.append(ESCAPES[ch])
        elif ch == " ":
            if escape_space or i == 0 or i == last:
                result.append("\\ ")
            else:
                result.append(" ")
        elif ch in SPECIAL_CHARS:
            result.append("\\" + ch)
        elif ch < "\x20" or ch > "\x7e":
            result.append(_unicode_escape(ch) if unicode_escape else ch)
        else:
            result.append(ch)
    return "".join(result)


def escape_key(key: str, unicode_escape: bool = False) -> str:
    """Escape a key; every space is escaped so the key token stays intact."""
    return _escape(key, True, unicode_escape)


def escape_value(value: str, unicode_escape: bool = False) -> str:
    """Escape a value; spaces are escaped only at the first and last position."""
    return _escape(value, False, unicode_escape)


def unescape(s: str) -> str:
    """Resolve the escape sequences of a key or value token.

    Raises:
        DecodeError: If a \\uXXXX sequence is malformed.
    """
    if "\\" not in s:
        return s

    result = []
    surrogates = False
    i = 0
    while i < len(s):
        ch = s[i]
        if ch != "\\":
            result.append(ch)
            i += 1
            continue

        if i + 1 >= len(s):
            # A lone trailing backslash is dropped
            break
        next_char = s[i + 1]
        if next_char == "u":
            digits = s[i + 2:i + 6]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise DecodeError(f"Malformed \\uxxxx encoding: {s[i:i + 6]!r}")
            decoded = chr(int(digits, 16))
            if "\ud800" <= decoded <= "\udfff":
                surrogates = True
            result.append(decoded)
            i += 6
        else:
            result.append(UNESCAPES.get(next_char, next_char))
            i += 2

    text = "".join(result)
    if surrogates:
        # Recombine UTF-16 surrogate pairs; unpaired halves are kept as is
        text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return text
