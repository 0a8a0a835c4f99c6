import pytest

from solong.printf import FormatError, printf, render_format


def test_plain_text_passes_through():
    assert render_format("Exited Early.\n") == "Exited Early.\n"


def test_decimal_conversions():
    assert render_format("Steps: %d\n", 12) == "Steps: 12\n"
    assert render_format("%i", -7) == "-7"


def test_decimal_wraps_to_32_bits():
    assert render_format("%d", 2**31) == str(-(2**31))


def test_unsigned_of_negative():
    assert render_format("%u", -1) == "4294967295"


def test_hex_round_trip_lower_and_upper():
    for number in (0, 1, 15, 16, 255, 4096, 123456789):
        lower = render_format("%x", number)
        upper = render_format("%X", number)
        assert int(lower, 16) == number
        assert lower == lower.lower()
        assert upper == lower.upper()


def test_char_from_int_and_str():
    assert render_format("%c%c", ord("a"), "b") == "ab"


def test_string_and_null():
    assert render_format("%s!", "hi") == "hi!"
    assert render_format("%s", None) == "(null)"


def test_pointer_forms():
    assert render_format("%p", None) == "(nil)"
    assert render_format("%p", 0) == "(nil)"
    text = render_format("%p", 48879)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 48879


def test_percent_literal():
    assert render_format("100%%") == "100%"


def test_unknown_conversion_raises_with_partial():
    with pytest.raises(FormatError) as info:
        render_format("ab%q", 1)
    assert info.value.partial == "ab%q"


def test_trailing_percent_raises():
    with pytest.raises(FormatError) as info:
        render_format("end%")
    assert info.value.partial == "end%"


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        render_format("%d %d", 1)


def test_missing_format_raises():
    with pytest.raises(FormatError):
        render_format(None)


def test_printf_writes_and_counts(capsys):
    count = printf("You Win! %s %d\n", "steps", 3)
    out = capsys.readouterr().out
    assert out == "You Win! steps 3\n"
    assert count == len(out)


def test_printf_writes_partial_before_error(capsys):
    with pytest.raises(FormatError):
        printf("go%z")
    assert capsys.readouterr().out == "go%z"