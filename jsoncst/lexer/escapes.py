"""Decode the raw text of a string literal.

The lexer keeps escape sequences verbatim; consumers that want the literal
meaning call `unescape` on the token text.
"""

from typing import Final

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")


def unescape(raw: str) -> str:
    """Decode JSON escape sequences in `raw`.

    Surrogate pairs written as two `\\uXXXX` escapes are combined; a lone
    surrogate is kept as is. Raises ValueError on a malformed escape.
    """
    if "\\" not in raw:
        return raw

    parts: list[str] = []
    i = 0
    n = len(raw)
    while i < n:
        ch = raw[i]
        if ch != "\\":
            parts.append(ch)
            i += 1
            continue

        if i + 1 >= n:
            raise ValueError(f"Trailing backslash at index {i}")
        esc = raw[i + 1]
        if esc in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[esc])
            i += 2
            continue
        if esc != "u":
            raise ValueError(f"Invalid escape sequence \\{esc} at index {i}")

        code = _read_hex4(raw, i)
        i += 6
        if 0xD800 <= code <= 0xDBFF and raw.startswith("\\u", i):
            low = _read_hex4(raw, i)
            if 0xDC00 <= low <= 0xDFFF:
                code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                i += 6
        parts.append(chr(code))

    return "".join(parts)


def _read_hex4(raw: str, index: int) -> int:
    hexpart = raw[index + 2 : index + 6]
    if len(hexpart) < 4 or not all(c in _HEX_DIGITS for c in hexpart):
        raise ValueError(f"Invalid unicode escape {raw[index : index + 6]!r} at index {index}")
    return int(hexpart, 16)
