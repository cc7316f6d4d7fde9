from __future__ import annotations

import itertools

import pytest

from alphasort import (
    CharComparator,
    InvalidCharacterError,
    make_char_comparator,
    make_string_comparator,
)

ORDER = "hateg"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _words(alphabet: str, max_length: int) -> list[str]:
    words = [""]
    for length in range(1, max_length + 1):
        words.extend("".join(p) for p in itertools.product(alphabet, repeat=length))
    return words


def test_char_comparator_follows_position_in_order() -> None:
    compare = make_char_comparator(ORDER)

    for (i, x), (j, y) in itertools.product(enumerate(ORDER), repeat=2):
        assert _sign(compare(x, y)) == _sign(i - j)
        assert (compare(x, y) < 0) == (i < j)


def test_char_comparator_is_zero_for_same_character() -> None:
    compare = make_char_comparator("cba")

    assert compare("b", "b") == 0
    assert compare("c", "a") < 0
    assert compare("a", "c") > 0


def test_char_comparator_accepts_character_sequences() -> None:
    compare = make_char_comparator(["z", "y", "x"])

    assert compare.order == "zyx"
    assert compare("z", "x") < 0


def test_char_comparator_rejects_multi_character_elements() -> None:
    with pytest.raises(ValueError, match="single characters"):
        make_char_comparator(["ab", "c"])


def test_duplicate_characters_rank_by_first_occurrence() -> None:
    compare = make_char_comparator("abca")

    assert compare.rank("a") == 0
    assert compare("a", "c") < 0
    assert compare("a", "a") == 0


def test_unranked_character_raises_on_every_call() -> None:
    compare = make_char_comparator("abc")

    for _ in range(2):
        with pytest.raises(InvalidCharacterError, match="'z'") as excinfo:
            compare("a", "z")
        assert excinfo.value.character == "z"
        assert excinfo.value.order == "abc"

    with pytest.raises(InvalidCharacterError):
        compare("z", "z")


def test_invalid_character_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        make_char_comparator("ab")("a", "q")


def test_char_comparator_membership_and_equality() -> None:
    compare = make_char_comparator("abc")

    assert "b" in compare
    assert "d" not in compare
    assert compare == CharComparator("abc")


def test_string_comparator_is_antisymmetric_and_reflexive() -> None:
    compare = make_string_comparator(make_char_comparator("cab"))
    words = _words("cab", 3)

    for s, t in itertools.product(words, repeat=2):
        assert (compare(s, t) > 0) == (compare(t, s) < 0)
    for s in words:
        assert compare(s, s) == 0


def test_string_comparator_sorts_prefix_first() -> None:
    compare = make_string_comparator(make_char_comparator(ORDER))

    assert compare("h", "hhhhhhhhh") < 0
    assert compare("gg", "gga") < 0
    assert compare("gga", "gg") > 0
    assert compare("", "h") < 0


def test_string_comparator_first_difference_decides() -> None:
    compare = make_string_comparator(make_char_comparator(ORDER))

    assert compare("hhhhhhhhh", "hehha") < 0
    assert compare("gh", "gg") < 0
    assert compare("eagt", "tgah") > 0


def test_string_comparator_propagates_invalid_character() -> None:
    compare = make_string_comparator(make_char_comparator("ab"))

    with pytest.raises(InvalidCharacterError) as excinfo:
        compare("ab", "ax")
    assert excinfo.value.character == "x"


def test_string_comparator_stops_at_first_difference() -> None:
    compare = make_string_comparator(make_char_comparator("ab"))

    # the unranked tail is never reached
    assert compare("ab?", "ba?") < 0


def test_key_matches_comparator_order() -> None:
    compare = make_string_comparator(make_char_comparator("cab"))
    words = _words("cab", 3)

    for s, t in itertools.product(words, repeat=2):
        assert _sign(compare(s, t)) == _sign(
            (compare.key(s) > compare.key(t)) - (compare.key(s) < compare.key(t))
        )
