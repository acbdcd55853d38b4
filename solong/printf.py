"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_CONVERSIONS = frozenset("cspdiuxX%")


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _convert(spec: str, args: Any) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return value if isinstance(value, str) else chr(value & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_int32(value))
    if spec == "u":
        return str(value & 0xFFFFFFFF)
    if spec == "x":
        return format(value & 0xFFFFFFFF, "x")
    if spec == "X":
        return format(value & 0xFFFFFFFF, "X")
    # spec == "p"
    address = (value or 0) & 0xFFFFFFFFFFFFFFFF
    return "(nil)" if address == 0 else "0x" + format(address, "x")


def format_string(template: str, *args: Any) -> str:
    """Format ``template`` with ``args``.

    A ``%`` not followed by a known conversion is written as it is.
    """
    values = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(template):
        char = template[pos]
        spec = template[pos + 1] if pos + 1 < len(template) else ""
        if char == "%" and spec and spec in _CONVERSIONS:
            parts.append(_convert(spec, values))
            pos += 2
        else:
            parts.append(char)
            pos += 1
    return "".join(parts)


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)