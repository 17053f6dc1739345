from __future__ import annotations

from typing import Dict, List, Tuple

from modules.radix_decode.core.alphabet import MAX_BASE, MIN_BASE
from modules.radix_decode.core.errors import ConversionError, ErrorKind


BASE_NAMES = {2: "Binary", 8: "Octal", 10: "Decimal", 16: "Hexadecimal"}

INPUT_MODES: List[Dict[str, str]] = [
    {
        "value": "number",
        "label": "Number",
        "prompt": "Enter Number",
        "placeholder": "Example: 1010 (for binary)",
        "help": "Convert a single number from the selected base to decimal.",
    },
    {
        "value": "equation",
        "label": "Equation",
        "prompt": "Enter Equation",
        "placeholder": "Example: 1010 + 101 (for binary)",
        "help": (
            "Convert a simple equation with operators (+, -, *, /, ^) "
            "where all numbers are in the selected base."
        ),
    },
    {
        "value": "string",
        "label": "Encoded String",
        "prompt": "Enter Encoded String",
        "placeholder": 'Example: 110 145 154 154 157 (ASCII codes in octal for "Hello")',
        "help": (
            "Convert a sequence of space-separated numbers "
            "(representing character codes) to a text string."
        ),
    },
]

DIGIT_HELP = (
    "For bases above 10, use letters: A=10, B=11, ..., Z=35, "
    "a=36, b=37, ... for higher digits."
)


def base_label(base: int) -> str:
    name = BASE_NAMES.get(base)
    if name:
        return f"Base {base} ({name})"
    return f"Base {base}"


def base_options() -> List[Dict[str, object]]:
    return [
        {"value": base, "label": base_label(base)}
        for base in range(MIN_BASE, MAX_BASE + 1)
    ]


def input_mode_values() -> List[str]:
    return [mode["value"] for mode in INPUT_MODES]


def parse_base(value: object) -> Tuple[int | None, ConversionError | None]:
    """Parse a base submitted as form text."""
    invalid = ConversionError(
        ErrorKind.INVALID_BASE,
        f"Base must be between {MIN_BASE} and {MAX_BASE}",
    )
    if value is None:
        return None, invalid
    raw = str(value).strip()
    if not (raw.isascii() and raw.isdigit()):
        return None, invalid
    base = int(raw)
    if base < MIN_BASE or base > MAX_BASE:
        return None, invalid
    return base, None
