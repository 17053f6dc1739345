from __future__ import annotations

from typing import Dict


# Digits first, then uppercase (10-35), then lowercase (36-61).
DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

MIN_BASE = 2
MAX_BASE = len(DIGITS)

_VALUES: Dict[str, int] = {char: index for index, char in enumerate(DIGITS)}


def digit_value(char: str) -> int | None:
    return _VALUES.get(char)


def digit_char(value: int) -> str:
    if value < 0 or value >= MAX_BASE:
        raise ValueError(f"Digit value must be between 0 and {MAX_BASE - 1}.")
    return DIGITS[value]


def valid_digits(base: int) -> str:
    return DIGITS[:base]


def to_base(value: int, base: int) -> str:
    """Render ``value`` in ``base`` by repeated division."""
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(digit_char(remainder))
    return sign + "".join(reversed(digits))
