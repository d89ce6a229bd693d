import pytest

from lightmvc import strutil


def test_case_conversion():
    assert strutil.to_upper("abc") == "ABC"
    assert strutil.to_lower(strutil.to_upper("Hello World")) == strutil.to_lower("Hello World")


def test_to_char_skips_whitespace():
    assert strutil.to_char("  xy") == "x"
    assert strutil.to_char("   ") == ""


def test_integer_parsing():
    assert strutil.to_int("42") == 42
    assert strutil.to_int("  -7xyz") == -7
    assert strutil.to_int("abc") == 0
    assert strutil.to_long("123456789012") == 123456789012


def test_integer_parsing_clamps():
    assert strutil.to_short("70000") == strutil.to_short("80000")
    assert strutil.to_int("-99999999999") == strutil.to_int("-88888888888")
    assert strutil.to_int("99999999999") > strutil.to_short("99999999999")


def test_float_parsing():
    assert strutil.to_double("3.5abc") == 3.5
    assert strutil.to_double("nothing") == 0.0
    assert strutil.to_float("0.1") == pytest.approx(0.1, rel=1e-6)


def test_trimming():
    assert strutil.trim("  a b \r\n") == "a b"
    assert strutil.trim_start("xxaxx", "x") == "axx"
    assert strutil.trim_end("xxaxx", "x") == "xxa"
    assert strutil.trim("   ") == ""


def test_split_on_character():
    assert strutil.split("a,b,", ",") == ["a", "b"]
    assert strutil.split("a,,b", ",") == ["a", "", "b"]
    assert strutil.split("", ",") == []


def test_split_on_whitespace():
    assert strutil.split("  a  b ") == ["a", "b"]


def test_split_any():
    assert strutil.split_any("a,b;c", ",;") == ["a", "b", "c"]
    assert strutil.split_any("a,", ",") == ["a", ""]
    assert strutil.split_any("abc", "") == ["abc"]


def test_join_appends_separator_after_each():
    assert strutil.join(["a", "b"], ",") == "a,b,"
    assert strutil.join([]) == ""


def test_capitalize():
    assert strutil.capitalize("index") == "Index"
    assert strutil.capitalize("Index") == "ndex"
    assert strutil.capitalize("") == ""


def test_compare():
    assert strutil.compare("abc", "ABC", True) == 0
    assert strutil.compare("a", "b") < 0
    assert strutil.compare("b", "a") > 0


def test_format():
    assert strutil.format("%s-%d", "a", 1) == "a-1"
    assert len(strutil.format("%s", "x" * 2000)) == 1023


@pytest.mark.parametrize(
    "text, expected",
    [("123.45", True), ("1.2.3", False), ("12a", False), ("", True)],
)
def test_is_numeric(text, expected):
    assert strutil.is_numeric(text) is expected