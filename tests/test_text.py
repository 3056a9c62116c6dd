import pytest

from cfkit.text import (
    SizedString,
    capitalize,
    center,
    count_for,
    stricmp,
    strchr,
    strcmp,
    strip,
    strrchr,
    switch_case,
    to_lower,
    to_upper,
)


def test_strip():
    assert strip("  12345\t ") == "12345"
    assert strip(" \t ") == ""
    assert strip("") == ""


def test_case_helpers_chain():
    s1 = capitalize("a1234bcdefg")
    assert s1 == "A1234bcdefg"
    s1 = switch_case(s1)
    assert s1 == "a1234BCDEFG"
    s1 = to_upper(s1)
    assert s1 == "A1234BCDEFG"
    s1 = to_lower(s1)
    assert s1 == "a1234bcdefg"


def test_capitalize_empty():
    assert capitalize("") == ""


def test_count_for():
    assert count_for("11223311", "1") == 4
    assert count_for("abc", "\0") == 1


def test_center():
    assert center("abcde", "*", 10, 100) == "**abcde***"


def test_center_errors():
    with pytest.raises(ValueError):
        center("abcde", "*", 10, 10)
    with pytest.raises(ValueError):
        center("abcdef", "*", 3)


def test_strcmp():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") == -1
    assert strcmp("abd", "abc") == 1
    assert strcmp("ab", "abc") == -1
    assert strcmp("abc", "ab") == 1


def test_stricmp():
    assert stricmp("Hello", "hELLO") == 0
    assert stricmp("abc", "abd") == -1
    assert stricmp("a", "B") == 1


def test_strchr_strrchr():
    assert strchr("hello", "l") == 2
    assert strrchr("hello", "l") == 3
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None


def test_sized_string_lifecycle():
    s = SizedString()
    assert len(s) == 0
    s = SizedString("1234", 4)
    assert len(s) == 4
    s.clear()
    assert len(s) == 0
    s.reset("abcdefg", len("abcdefg"))
    assert str(s) == "abcdefg"


def test_sized_string_compare_raw():
    s = SizedString("abcdefg", 5)
    assert str(s) == "abcde"
    assert s.compare_raw("abcde", 5) == 0
    assert s.compare_raw("abc", 3) == 1
    assert s.compare_raw("abcdefgh", 6) == -1
    assert s.compare_raw("", 0) == 1


def test_sized_string_compare():
    assert SizedString("abc").compare(SizedString("abd")) == -1
    assert SizedString("abc").compare(SizedString("abc")) == 0


def test_sized_string_zero_length_rejected():
    with pytest.raises(ValueError):
        SizedString("1234", 0)
    with pytest.raises(ValueError):
        SizedString("12", 5)