import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.strings import (
    itoa,
    strjoin,
    strlcat,
    strlcpy,
    striteri,
    strmapi,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "n, expected",
    [
        (-2147483648, "-2147483648"),
        (-42, "-42"),
        (0, "0"),
        (42, "42"),
        (2147483647, "2147483647"),
    ],
)
def test_itoa_values_from_source(n, expected):
    assert itoa(n) == expected


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_round_trip(n):
    text = itoa(n)
    assert int(text) == n
    assert text.startswith("-") == (n < 0)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


@given(st.text(), st.text())
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "abc")
    with pytest.raises(TypeError):
        strjoin("abc", None)


@given(st.text(), st.integers(min_value=1, max_value=50))
def test_strlcpy_bounds(src, dstsize):
    copied, total = strlcpy(src, dstsize)
    assert total == len(src)
    assert len(copied) <= dstsize - 1
    assert src.startswith(copied)
    assert len(copied) == min(len(src), dstsize - 1)


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("hello", -1)


def test_strlcat_full_destination_unchanged():
    assert strlcat("hello", "abc", 3) == ("hello", 6)


@given(st.text(max_size=20), st.text(max_size=20), st.integers(min_value=0, max_value=60))
def test_strlcat_invariants(dst, src, dstsize):
    result, total = strlcat(dst, src, dstsize)
    if dstsize <= len(dst):
        assert result == dst
        assert total == dstsize + len(src)
    else:
        assert result.startswith(dst)
        assert src.startswith(result[len(dst):])
        assert len(result) <= dstsize - 1
        assert total == len(dst) + len(src)


def test_strmapi_upper():
    assert strmapi("abc", lambda i, c: c.upper()) == "abc".upper()


def test_strmapi_passes_indices():
    seen = []
    strmapi("xyz", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_striteri_modifies_in_place():
    chars = list("abcd")

    def upper_even(index, buf):
        if index % 2 == 0:
            buf[index] = buf[index].upper()

    result = striteri(chars, upper_even)
    assert result is chars
    assert chars == ["A", "b", "C", "d"]


def test_striteri_rejects_non_callable():
    with pytest.raises(TypeError):
        striteri(list("ab"), None)


def test_strtrim_example_from_source():
    s1 = "\t \n\n \t\t \n\n\nHello \t  Please\n \t\n"
    assert strtrim(s1, " \n\t\v\f ") == "Hello \t  Please"


@given(st.text(alphabet="ab -", max_size=30))
def test_strtrim_invariants(s):
    trimmed = strtrim(s, " -")
    assert trimmed in s
    assert not trimmed.startswith((" ", "-"))
    assert not trimmed.endswith((" ", "-"))


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  x  ", "") == "  x  "


def test_substr_example_from_source():
    assert substr("lorem ipsum dolor sit amet", 7, 10) == "psum dolor"


def test_substr_length_past_end():
    assert substr("hello", 2, 10) == "llo"


def test_substr_start_past_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 100, 3) == ""


@given(st.text(max_size=30), st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_substr_invariants(s, start, length):
    part = substr(s, start, length)
    assert len(part) <= length
    if start < len(s):
        assert s[start:].startswith(part)
    else:
        assert part == ""


def test_substr_negative_arguments():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 1, -2)