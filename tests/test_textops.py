import pytest

from pipexpy.textops import (
    split,
    strchr,
    strcmp,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


# split

def test_split_command_line():
    assert split("ls -la", " ") == ["ls", "-la"]


def test_split_skips_repeated_and_edge_separators():
    assert split("  wc   -l  ", " ") == ["wc", "-l"]


def test_split_path_variable():
    assert split("/usr/bin:/bin::/sbin", ":") == ["/usr/bin", "/bin", "/sbin"]


def test_split_empty_text():
    assert split("", " ") == []


def test_split_only_separators():
    assert split(":::", ":") == []


def test_split_without_separator_keeps_whole_text():
    assert split("cat", " ") == ["cat"]


@pytest.mark.parametrize("text", ["a b c", "  x  y ", "one", "", "   "])
def test_split_pieces_are_nonempty_and_separator_free(text):
    pieces = split(text, " ")
    assert all(piece and " " not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(" ", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a::b", "::")


# strchr / strrchr

def test_strchr_finds_first():
    assert strchr("a/b/c", "/") == 1


def test_strrchr_finds_last():
    assert strrchr("a/b/c", "/") == 3


def test_strchr_missing_is_none():
    assert strchr("abc", "z") is None
    assert strrchr("abc", "z") is None


def test_nul_finds_end_of_text():
    text = "hello"
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, "\0") == len(text)


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


# strcmp / strncmp

def test_strcmp_equal_is_zero():
    assert strcmp("PATH=", "PATH=") == 0


def test_strcmp_order_sign():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0


def test_strcmp_prefix_is_smaller():
    assert strcmp("ab", "abc") < 0
    assert strcmp("abc", "ab") > 0


@pytest.mark.parametrize("a,b", [("x", "y"), ("hello", "help"), ("", "a"), ("q", "q")])
def test_strcmp_antisymmetric(a, b):
    assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp_prefix_match():
    assert strncmp("PATH=/usr/bin", "PATH=", 5) == 0


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_detects_difference_within_n():
    assert strncmp("PATX=", "PATH=", 5) > 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


# strnstr

def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found():
    assert strnstr("foo bar baz", "bar", 11) == 4


def test_strnstr_match_must_end_within_n():
    assert strnstr("foo bar baz", "bar", 6) is None
    assert strnstr("foo bar baz", "bar", 7) == 4


def test_strnstr_needle_longer_than_n():
    assert strnstr("abcdef", "abc", 2) is None


def test_strnstr_empty_haystack():
    assert strnstr("", "a", 5) is None


def test_strnstr_not_present():
    assert strnstr("abcdef", "xyz", 6) is None


# strjoin

def test_strjoin_directory_and_command():
    assert strjoin("/usr/bin/", "ls") == "/usr/bin/ls"


def test_strjoin_empty_both():
    assert strjoin("", "") == ""


# strlcpy / strlcat

def test_strlcpy_fits():
    assert strlcpy("hello", 10) == ("hello", 5)


def test_strlcpy_truncates_but_reports_full_length():
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_size_zero():
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcat_appends_within_room():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")


def test_strlcat_no_room_leaves_dst():
    result, total = strlcat("abcdef", "xyz", 4)
    assert result == "abcdef"
    assert total == 4 + len("xyz")


def test_strlcat_plenty_of_room():
    result, total = strlcat("foo", "bar", 100)
    assert result == "foobar"
    assert total == len(result)


# strmapi / striteri

def test_strmapi_upper():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"


def test_strmapi_receives_indices():
    seen = []
    strmapi("xyz", lambda i, ch: seen.append(i) or ch)
    assert seen == [0, 1, 2]


def test_striteri_modifies_in_place():
    chars = list("abcd")
    result = striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result is None
    assert chars == ["A", "b", "C", "d"]


def test_striteri_empty():
    chars = []
    striteri(chars, lambda i, ch: ch)
    assert chars == []


# strtrim

def test_strtrim_path_entry():
    assert strtrim("PATH=/usr/bin:/bin", "PATH=") == "/usr/bin:/bin"


def test_strtrim_everything_in_set():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_none_set_returns_copy():
    assert strtrim("  x  ", None) == "  x  "


def test_strtrim_empty_set():
    assert strtrim("  x  ", "") == "  x  "


# substr

def test_substr_middle():
    assert substr("pipex error", 0, 5) == "pipex"


def test_substr_clamped_to_end():
    assert substr("hello", 3, 100) == "lo"


def test_substr_start_past_end():
    assert substr("hello", 5, 2) == ""


def test_substr_zero_length():
    assert substr("hello", 1, 0) == ""


def test_substr_empty_text():
    assert substr("", 0, 3) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


@pytest.mark.parametrize("start,length", [(0, 1), (1, 3), (2, 10), (4, 1)])
def test_substr_is_prefix_of_tail(start, length):
    text = "abcde"
    piece = substr(text, start, length)
    assert text[start:].startswith(piece)
    assert len(piece) == min(length, len(text) - start)