from __future__ import annotations

import sys
from typing import List, Tuple, Union

from modules.radix_decode.core.alphabet import MAX_BASE, MIN_BASE, digit_value
from modules.radix_decode.core.errors import (
    ConversionError,
    ConversionResult,
    ErrorKind,
)


OPERATORS = frozenset("+-*/^()")
MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)

EMPTY_INPUT_MESSAGE = "Please enter an input to convert"

# Default int -> str digit limit of CPython 3.11+.
MAX_DECIMAL_DIGITS = 4300

Token = Union[int, str]


def _invalid_base() -> ConversionError:
    return ConversionError(
        ErrorKind.INVALID_BASE,
        f"Base must be between {MIN_BASE} and {MAX_BASE}",
    )


def max_decimal_digits() -> int:
    limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
    if limit:
        return min(limit, MAX_DECIMAL_DIGITS)
    return MAX_DECIMAL_DIGITS


def _is_valid_base(base: object) -> bool:
    if isinstance(base, bool) or not isinstance(base, int):
        return False
    return MIN_BASE <= base <= MAX_BASE


def convert_number(
    number_text: str, base: int
) -> Tuple[int | None, ConversionError | None]:
    if not _is_valid_base(base):
        return None, _invalid_base()

    negative = number_text.startswith("-")
    digits = number_text[1:] if negative else number_text
    if not digits:
        return None, ConversionError(
            ErrorKind.INVALID_DIGIT,
            f"Missing digits for base {base}",
            numeral=number_text,
        )

    values = []
    for char in digits:
        value = digit_value(char)
        if value is None or value >= base:
            return None, ConversionError(
                ErrorKind.INVALID_DIGIT,
                f"Invalid digit '{char}' for base {base}",
                numeral=number_text,
            )
        values.append(value)

    # Results must stay printable under the int -> str digit limit.
    max_digits = max_decimal_digits()
    ceiling = 10**max_digits
    total = 0
    for value in values:
        total = total * base + value
        if total >= ceiling:
            return None, ConversionError(
                ErrorKind.NUMBER_TOO_LARGE,
                f"Number is too large (more than {max_digits} decimal digits)",
                numeral=number_text,
            )

    return (-total if negative else total), None


def tokenize_equation(
    text: str, base: int
) -> Tuple[List[Token] | None, ConversionError | None]:
    """Split ``text`` into converted numbers and operator characters.

    Whitespace is dropped. ``-`` is always emitted as an operator, so there is
    no unary minus; ``"-5"`` lexes as ``["-", 5]``. Nothing is evaluated.
    """
    if not _is_valid_base(base):
        return None, _invalid_base()

    tokens: List[Token] = []
    pending = ""

    def flush() -> ConversionError | None:
        nonlocal pending
        if not pending:
            return None
        number, error = convert_number(pending, base)
        if error:
            return error
        tokens.append(number)
        pending = ""
        return None

    for char in text:
        if char.isspace():
            continue
        if char in OPERATORS:
            error = flush()
            if error:
                return None, error
            tokens.append(char)
        else:
            pending += char

    error = flush()
    if error:
        return None, error

    return tokens, None


def convert_equation(
    text: str, base: int
) -> Tuple[str | None, ConversionError | None]:
    tokens, error = tokenize_equation(text, base)
    if error or tokens is None:
        return None, error
    return " ".join(str(token) for token in tokens), None


def decode_code_point(value: int) -> str:
    if value < 0 or value > MAX_CODE_POINT or value in SURROGATES:
        return f"[Invalid character code: {value}]"
    return chr(value)


def convert_encoded_string(
    text: str, base: int
) -> Tuple[str | None, ConversionError | None]:
    codes = text.split()
    if not codes:
        return None, ConversionError(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

    decoded: List[str] = []
    for code in codes:
        value, error = convert_number(code, base)
        if error or value is None:
            return None, error
        decoded.append(decode_code_point(value))
    return "".join(decoded), None


def convert(raw_input: str | None, input_mode: str, base: int) -> ConversionResult:
    text = (raw_input or "").strip()
    if not text:
        return ConversionResult.failure(
            ConversionError(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)
        )

    if input_mode == "number":
        number, error = convert_number(text, base)
        label, value = "Decimal (Base 10)", number
    elif input_mode == "equation":
        equation, error = convert_equation(text, base)
        label, value = "Equation in Decimal (Base 10)", equation
    elif input_mode == "string":
        decoded, error = convert_encoded_string(text, base)
        label, value = "Decoded String", decoded
    else:
        return ConversionResult.failure(
            ConversionError(
                ErrorKind.UNKNOWN_INPUT_TYPE, f"Unknown input type: {input_mode}"
            )
        )

    if error:
        return ConversionResult.failure(error)
    return ConversionResult.success(f"{label}: {value}")
