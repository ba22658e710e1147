import pytest

from minitalk.printf import FormatError, itoa_base, printf, sprintf


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_percent_escape():
    assert sprintf("100%%") == "100%"


@pytest.mark.parametrize("value", [0, 7, -42, 2**31 - 1, -(2**31)])
def test_decimal_conversions(value):
    assert sprintf("%d", value) == str(value)
    assert sprintf("%i", value) == str(value)


def test_decimal_wraps_to_32_bits():
    assert sprintf("%d", 2**31) == str(-(2**31))


def test_unsigned_wraps_negative():
    assert sprintf("%u", -1) == str(2**32 - 1)


@pytest.mark.parametrize("value", [0, 255, 48879, 2**32 - 1])
def test_hex_conversions(value):
    assert sprintf("%x", value) == format(value, "x")
    assert sprintf("%X", value) == format(value, "X")


def test_char_from_str_and_int():
    assert sprintf("%c", "A") == "A"
    assert sprintf("%c", ord("z")) == "z"


def test_string_and_null_string():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


def test_pointer_formats():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"
    assert sprintf("%p", 4096) == "0x" + format(4096, "x")


def test_unknown_conversion_is_kept():
    assert sprintf("%q") == "%q"


def test_mixed_format():
    result = sprintf("Server PID: %d\n", 1234)
    assert result == "Server PID: 1234\n"


def test_lone_percent_is_error():
    with pytest.raises(FormatError):
        sprintf("abc%")


def test_missing_argument_is_error():
    with pytest.raises(FormatError):
        sprintf("%d and %d", 1)


def test_wrong_argument_type():
    with pytest.raises(TypeError):
        sprintf("%d", "not a number")


def test_format_none_raises():
    with pytest.raises(TypeError):
        sprintf(None)


def test_printf_writes_and_returns_length(capsys):
    count = printf("%s=%d\n", "x", 5)
    out = capsys.readouterr().out
    assert out == "x=5\n"
    assert count == len(out)


def test_printf_error_writes_nothing(capsys):
    with pytest.raises(FormatError):
        printf("oops %")
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("value", [0, 1, 5, 1023, 2**40])
def test_itoa_base_matches_builtin_bases(value):
    assert itoa_base(value, "01") == format(value, "b")
    assert itoa_base(value, "0123456789") == str(value)
    assert itoa_base(value, "0123456789abcdef") == format(value, "x")


def test_itoa_base_rejects_short_base():
    with pytest.raises(ValueError):
        itoa_base(3, "0")


def test_itoa_base_rejects_negative():
    with pytest.raises(ValueError):
        itoa_base(-1, "0123456789")