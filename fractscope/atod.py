"""Conversion of decimal command-line text into floats."""

from __future__ import annotations

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def count_after_dot(text: str) -> int:
    """Return the index of the last '.' in ``text``, or 0 if there is none."""
    position = text.rfind(".")
    return position if position >= 0 else 0


def _convert_digits(text: str) -> float:
    """Read sign and digits of ``text`` as an integer, skipping the dot."""
    index = 0
    size = len(text)
    while index < size and text[index] in _WHITESPACE:
        index += 1
    negative = False
    if index < size and text[index] in "+-":
        negative = text[index] == "-"
        index += 1
    value = 0.0
    while index < size and (text[index] in _DIGITS or text[index] == "."):
        if text[index] == ".":
            index += 1
            if index >= size:
                break
        value = value * 10 + (ord(text[index]) - ord("0"))
        index += 1
    return -value if negative else value


def atod(text: str) -> float:
    """Convert decimal text such as ``"-0.7"`` to a float.

    The digits are read as one integer and then scaled down by one power
    of ten for every character that follows the last dot. Text without a
    dot is scaled by every character after the first.
    """
    value = _convert_digits(text)
    for _ in range(count_after_dot(text), len(text) - 1):
        value *= 0.1
    return value