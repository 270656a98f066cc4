"""Small text helpers shared by the card games."""

from __future__ import annotations

_MAX_COUNT = 2**64 - 1


def parse_count(text: str) -> int:
    """Parse the leading unsigned decimal number of ``text``.

    Leading whitespace and a ``+`` sign are accepted, and parsing stops at
    the first character that is not a digit.  A ``ValueError`` is raised
    when no digits are found, when the number is negative, or when it does
    not fit in an unsigned 64-bit integer.
    """
    stripped = text.lstrip()
    if stripped.startswith("-"):
        raise ValueError(f"negative count: {text!r}")
    if stripped.startswith("+"):
        stripped = stripped[1:]

    digits = []
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)

    if not digits:
        raise ValueError(f"invalid count: {text!r}")

    value = int("".join(digits))
    if value > _MAX_COUNT:
        raise ValueError(f"count out of range: {text!r}")
    return value


def utf8_prefix(data: str | bytes, length: int) -> str | bytes:
    """Return the first ``length`` characters of ``data``.

    For ``bytes`` the input is treated as UTF-8: continuation bytes stay with
    the character they belong to, so a multi-byte character is never split.
    """
    if isinstance(data, str):
        return data[: max(length, 0)]

    count = 0
    for index, byte in enumerate(data):
        if byte & 0xC0 != 0x80:
            count += 1
        if count > length:
            return data[:index]
    return data