import pytest

from pushswap.strings import (
    strchr,
    strdup,
    striteri,
    strjoin,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

SAMPLE = "Hola Mundo"


def test_strlen_matches_length():
    assert strlen("hi madrid") == len("hi madrid")
    assert strlen("") == 0


def test_strchr_finds_first_occurrence():
    idx = strchr(SAMPLE, "o")
    assert SAMPLE[idx] == "o"
    assert "o" not in SAMPLE[:idx]


def test_strchr_accepts_integer_code():
    assert strchr(SAMPLE, ord("M")) == SAMPLE.index("M")


def test_strchr_missing_is_none():
    assert strchr(SAMPLE, "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr(SAMPLE, "\0") == len(SAMPLE)
    assert strchr(SAMPLE, 0) == len(SAMPLE)


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr(SAMPLE, "ab")


def test_strrchr_finds_last_occurrence():
    idx = strrchr(SAMPLE, "o")
    assert SAMPLE[idx] == "o"
    assert "o" not in SAMPLE[idx + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr(SAMPLE, "z") is None
    assert strrchr(SAMPLE, "\0") == len(SAMPLE)


def test_strncmp_equal_strings():
    assert strncmp(SAMPLE, SAMPLE, 50) == 0


def test_strncmp_limited_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strncmp_zero_count():
    assert strncmp("x", "y", 0) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_length():
    assert strnstr(SAMPLE, "Mundo", len(SAMPLE)) == SAMPLE.index("Mundo")


def test_strnstr_length_too_short():
    assert strnstr(SAMPLE, "Mundo", len(SAMPLE) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr(SAMPLE, "", 0) == 0


def test_strnstr_missing():
    assert strnstr(SAMPLE, "xyz", len(SAMPLE)) is None


def test_strdup_copy_is_equal():
    assert strdup("Hello World") == "Hello World"


def test_substr_regular():
    assert substr(SAMPLE, 5, 3) == SAMPLE[5:8]


def test_substr_clamps_length():
    assert substr(SAMPLE, 5, 100) == SAMPLE[5:]


def test_substr_start_beyond_end():
    assert substr(SAMPLE, len(SAMPLE), 4) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr(SAMPLE, -1, 2)


def test_strjoin_concatenates():
    joined = strjoin("Hello, ", "world!")
    assert joined.startswith("Hello, ")
    assert joined.endswith("world!")
    assert len(joined) == len("Hello, ") + len("world!")


def test_strtrim_spaces():
    assert strtrim("   Hola Mundo   ", " ") == SAMPLE


def test_strtrim_untouched_when_nothing_to_trim():
    assert strtrim("Mundo", " ") == "Mundo"


def test_strtrim_everything_in_set():
    assert strtrim("xxyxx", "xy") == ""


def test_strtrim_empty_charset():
    assert strtrim("  a  ", "") == "  a  "


def test_strmapi_passes_indices():
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    assert strmapi(SAMPLE, record) == SAMPLE
    assert seen == list(range(len(SAMPLE)))


def test_strmapi_transforms():
    assert strmapi("hello world", lambda i, c: c.upper()) == "hello world".upper()


def test_striteri_modifies_in_place():
    text = list("javierboga")
    striteri(text, lambda i, c: c.upper() if i == 2 else None)
    assert "".join(text) == "ja" + "v".upper() + "ierboga"


def test_striteri_none_arguments_are_ignored():
    text = list("abc")
    striteri(text, None)
    assert text == list("abc")