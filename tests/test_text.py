import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.strings import atoi
from pushswap.libft.text import (
    itoa,
    split,
    strjoin,
    striteri,
    strmapi,
    strtrim,
    substr,
)

plain_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=40
)


@given(plain_text, st.integers(min_value=0, max_value=50))
def test_substr_pieces_join_back(s, k):
    head = substr(s, 0, k)
    tail = substr(s, k, len(s))
    assert strjoin(head, tail) == s


@given(plain_text)
def test_substr_full_length_is_identity(s):
    assert substr(s, 0, len(s)) == s


@given(plain_text, st.integers(min_value=0, max_value=10))
def test_substr_past_end_is_empty(s, extra):
    assert substr(s, len(s) + extra, 5) == ""


@given(plain_text, st.integers(min_value=0, max_value=50), st.integers(0, 50))
def test_substr_length_never_exceeds_request(s, start, length):
    assert len(substr(s, start, length)) <= length


def test_substr_stops_at_nul():
    assert substr("ab\0cd", 1, 10) == substr("ab", 1, 10)


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


@given(plain_text, plain_text)
def test_strjoin_parts(a, b):
    joined = strjoin(a, b)
    assert len(joined) == len(a) + len(b)
    assert joined.startswith(a)
    assert joined.endswith(b)


def test_strjoin_ignores_text_after_nul():
    assert strjoin("ab\0zz", "cd") == strjoin("ab", "cd")


@given(plain_text, st.text(alphabet="ab ", min_size=1, max_size=3))
def test_strtrim_removes_set_from_both_ends(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


@given(plain_text)
def test_strtrim_empty_set_is_identity(s):
    assert strtrim(s, "") == s


def test_strtrim_all_characters_in_set():
    assert strtrim("xyyx", "xy") == ""


def test_strtrim_keeps_inner_characters():
    assert strtrim("--a-b--", "-") == "a-b"


@given(plain_text)
def test_strmapi_identity(s):
    assert strmapi(s, lambda i, c: c) == s


def test_strmapi_passes_indices():
    seen = []
    strmapi("abcd", lambda i, c: seen.append(i) or c)
    assert seen == list(range(4))


def test_strmapi_uppercase():
    assert strmapi("MiXed", lambda i, c: c.upper()) == "MiXed".upper()


def test_striteri_mutates_in_place():
    chars = list("hello")

    def shout(index, seq):
        seq[index] = seq[index].upper()

    striteri(chars, shout)
    assert "".join(chars) == "hello".upper()


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    visited = []
    striteri(chars, lambda i, seq: visited.append(i))
    assert visited == [0, 1]


def test_split_skips_empty_runs():
    assert split("  a  bb c ", " ") == ["a", "bb", "c"]


def test_split_empty_string():
    assert split("", " ") == []


def test_split_on_nul_gives_whole_string():
    assert split("a b", "\0") == ["a b"]


@given(plain_text, st.sampled_from([" ", ",", "a"]))
def test_split_tokens_are_clean(s, sep):
    tokens = split(s, sep)
    assert all(tokens)
    assert all(sep not in token for token in tokens)
    assert "".join(tokens) == s.replace(sep, "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_round_trip(n):
    text = itoa(n)
    assert int(text) == n
    assert atoi(text) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)