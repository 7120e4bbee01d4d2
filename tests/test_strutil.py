import pytest

from solong import strutil


@pytest.mark.parametrize(
    "text, sep, words",
    [
        ("hello world", " ", ["hello", "world"]),
        ("  lead and  trail  ", " ", ["lead", "and", "trail"]),
        ("a,b,,c,", ",", ["a", "b", "c"]),
        ("", ",", []),
        (",,,", ",", []),
    ],
)
def test_split_cases(text, sep, words):
    assert strutil.split(text, sep) == words


def test_split_words_never_contain_separator():
    words = strutil.split("11101001\n100", "0")
    assert all(words) and all("0" not in w for w in words)
    assert "".join(words) == "11101001\n100".replace("0", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        strutil.split("abc", "ab")


def test_strchr_and_strrchr_find_ends():
    text = "map.ber.ber"
    assert strutil.strchr(text, ".") == text.index(".")
    assert strutil.strrchr(text, ".") == text.rindex(".")
    assert strutil.strchr(text, "z") is None
    assert strutil.strrchr(text, "z") is None


def test_nul_search_finds_terminator():
    assert strutil.strchr("abc", "\0") == len("abc")
    assert strutil.strrchr("abc", 0) == len("abc")


def test_strchr_accepts_code():
    assert strutil.strchr("xyz", ord("y")) == 1


def test_striteri_replaces_in_place():
    chars = list("abc")
    strutil.striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert chars == ["A", "b", "C"]


def test_strmapi_builds_new_string():
    text = "abcd"
    result = strutil.strmapi(text, lambda i, ch: ch.upper() if i < 2 else ch)
    assert result == "ABcd"
    assert text == "abcd"


def test_strjoin():
    assert strutil.strjoin("so_", "long") == "so_long"
    assert strutil.strjoin("", "x") == "x"


def test_strlcpy_truncates_and_reports_length():
    copied, total = strutil.strlcpy("hello", 3)
    assert copied == "he"
    assert total == len("hello")


def test_strlcpy_zero_and_large_size():
    assert strutil.strlcpy("hello", 0) == ("", len("hello"))
    assert strutil.strlcpy("hello", 100) == ("hello", len("hello"))


def test_strlcat_appends_within_size():
    result, total = strutil.strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")
    assert len(result) == 5 - 1


def test_strlcat_size_not_larger_than_dst():
    result, total = strutil.strlcat("abcd", "xyz", 2)
    assert result == "abcd"
    assert total == len("xyz") + 2


def test_strncmp_sign_and_limits():
    assert strutil.strncmp("abc", "abd", 3) < 0
    assert strutil.strncmp("abd", "abc", 3) > 0
    assert strutil.strncmp("abc", "abd", 2) == 0
    assert strutil.strncmp("abc", "xyz", 0) == 0
    assert strutil.strncmp("same", "same", 10) == 0


def test_strncmp_shorter_string_is_smaller():
    assert strutil.strncmp("ab", "abc", 5) == -ord("c")
    assert strutil.strncmp(b"abc", b"ab", 5) == ord("c")


def test_strncmp_antisymmetric():
    pairs = [("map", "mop"), ("long", "lo"), ("", "a")]
    for a, b in pairs:
        assert strutil.strncmp(a, b, 4) == -strutil.strncmp(b, a, 4)


def test_strnstr_respects_length():
    haystack = "foo bar baz"
    assert strutil.strnstr(haystack, "bar", len(haystack)) == haystack.index("bar")
    assert strutil.strnstr(haystack, "bar", 6) is None
    assert strutil.strnstr(haystack, "bar", 7) == haystack.index("bar")
    assert strutil.strnstr(haystack, "", 0) == 0
    assert strutil.strnstr(haystack, "qux", 100) is None


def test_strtrim():
    assert strutil.strtrim("xxhixyx", "xy") == "hi"
    assert strutil.strtrim("  keep  ", "") == "  keep  "
    assert strutil.strtrim("", "abc") == ""
    assert strutil.strtrim("aaaa", "a") == ""


def test_substr():
    assert strutil.substr("hello", 1, 3) == "ell"
    assert strutil.substr("hello", 2, 100) == "llo"
    assert strutil.substr("hello", 5, 2) == ""
    assert strutil.substr("hello", 9, 2) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        strutil.substr("hello", -1, 2)
    with pytest.raises(ValueError):
        strutil.substr("hello", 0, -2)