import pytest

from libft.text import split, strdup, striteri, strjoin, strmapi, strtrim, substr


def test_strdup_copies():
    assert strdup("jdkaskaskdakdabcd123") == "jdkaskaskdakdabcd123"


def test_strdup_stops_at_nul():
    assert strdup("ab\0cd") == "ab"


def test_substr_worked_example():
    assert substr("0123456789", 1, 3) == "123"


def test_substr_length_capped_at_end():
    s = "0123456789"
    result = substr(s, 8, 100)
    assert s.endswith(result)
    assert len(result) == len(s) - 8


def test_substr_start_past_end():
    assert substr("abc", 3, 5) == ""
    assert substr("abc", 10, 1) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_worked_example():
    assert strjoin("123456", "7890") == "123456" + "7890"


def test_strjoin_with_empty():
    assert strjoin("", "abc") == "abc"
    assert strjoin("abc", "") == "abc"


def test_strtrim_worked_example():
    assert strtrim(" 123456789 \t", "\t ") == "123456789"


def test_strtrim_everything_removed():
    assert strtrim("xxyxx", "xy") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  abc  ", "") == "  abc  "


def test_strtrim_keeps_inner_characters():
    result = strtrim("--a-b--", "-")
    assert result == "a-b"


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_without_separator():
    assert split("hello", " ") == ["hello"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(",".join(words), ",") == words


def test_split_nul_separator_keeps_whole_string():
    assert split("abc def", "\0") == ["abc def"]


def test_split_invalid_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_uses_index():
    result = strmapi("aaaa", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AaAa"


def test_strmapi_preserves_length():
    s = "some text"
    assert len(strmapi(s, lambda i, ch: "x")) == len(s)


def test_strmapi_empty():
    assert strmapi("", lambda i, ch: "z") == ""


def test_striteri_modifies_in_place():
    chars = list("abcd")
    assert striteri(chars, lambda i, ch: ch.upper()) is None
    assert "".join(chars) == "ABCD"


def test_striteri_passes_indexes():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, ch: seen.append(i) or ch)
    assert seen == [0, 1, 2]
    assert chars == ["x", "y", "z"]