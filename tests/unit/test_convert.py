from modules.radix_decode.core.convert import convert
from modules.radix_decode.core.errors import (
    ConversionError,
    ConversionResult,
    ErrorKind,
)
from modules.radix_decode.core.options import (
    INPUT_MODES,
    base_label,
    base_options,
    input_mode_values,
    parse_base,
)


def test_number_mode():
    result = convert("  FF ", "number", 16)
    assert result.ok
    assert result.text == "Decimal (Base 10): 255"
    assert result.message is None


def test_equation_mode():
    result = convert("1A + 2B", "equation", 16)
    assert result.text == "Equation in Decimal (Base 10): 26 + 43"


def test_string_mode():
    result = convert("110 145 154 154 157", "string", 8)
    assert result.text == "Decoded String: Hello"


def test_empty_input():
    for raw in ["", "   ", "\n\t", None]:
        result = convert(raw, "number", 10)
        assert not result.ok
        assert result.kind is ErrorKind.EMPTY_INPUT
        assert result.message == "Please enter an input to convert"
        assert result.text is None


def test_empty_input_is_checked_before_mode():
    assert convert("", "bogus", 10).kind is ErrorKind.EMPTY_INPUT


def test_unknown_input_type():
    result = convert("5", "bogus", 10)
    assert not result.ok
    assert result.kind is ErrorKind.UNKNOWN_INPUT_TYPE
    assert result.message == "Unknown input type: bogus"


def test_failure_message_is_verbatim():
    result = convert("ff", "number", 16)
    assert result.message == "Invalid digit 'f' for base 16"
    assert result.kind is ErrorKind.INVALID_DIGIT

    result = convert("1 + 1", "equation", 1)
    assert result.message == "Base must be between 2 and 62"


def test_result_to_dict():
    assert ConversionResult.success("Decimal (Base 10): 1").to_dict() == {
        "ok": True,
        "text": "Decimal (Base 10): 1",
    }
    failure = ConversionResult.failure(
        ConversionError(ErrorKind.INVALID_BASE, "Base must be between 2 and 62")
    )
    assert failure.to_dict() == {
        "ok": False,
        "message": "Base must be between 2 and 62",
        "kind": "invalid_base",
    }


def test_base_labels():
    assert base_label(2) == "Base 2 (Binary)"
    assert base_label(8) == "Base 8 (Octal)"
    assert base_label(10) == "Base 10 (Decimal)"
    assert base_label(16) == "Base 16 (Hexadecimal)"
    assert base_label(36) == "Base 36"


def test_base_options_cover_every_base():
    options = base_options()
    assert len(options) == 61
    assert options[0] == {"value": 2, "label": "Base 2 (Binary)"}
    assert options[-1] == {"value": 62, "label": "Base 62"}


def test_input_modes_match_dispatch():
    assert input_mode_values() == ["number", "equation", "string"]
    for mode in INPUT_MODES:
        assert convert("1", mode["value"], 10).ok


def test_parse_base():
    assert parse_base("16") == (16, None)
    assert parse_base(" 62 ") == (62, None)
    for raw in [None, "", "abc", "1", "63", "2.5"]:
        base, error = parse_base(raw)
        assert base is None
        assert error.kind is ErrorKind.INVALID_BASE


def test_oversized_results_fail_cleanly():
    result = convert("z" * 2500, "number", 62)
    assert not result.ok
    assert result.kind is ErrorKind.NUMBER_TOO_LARGE

    result = convert("9" * 4301 + "+1", "equation", 10)
    assert result.kind is ErrorKind.NUMBER_TOO_LARGE

    result = convert("9" * 4300 + "+1", "equation", 10)
    assert result.ok
    assert result.text.endswith("9 + 1")


def test_parse_base_accepts_ascii_digits_only():
    for raw in ["1_6", "+16", "-16", "١٦", "16.0"]:
        base, error = parse_base(raw)
        assert base is None
        assert error.kind is ErrorKind.INVALID_BASE
