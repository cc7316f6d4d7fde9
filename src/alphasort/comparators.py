"""Comparators that order characters and strings by a custom alphabet.

An ordering such as ``"cba"`` ranks each character by the position of its first
occurrence, so ``c`` (rank 0) sorts before ``b`` (rank 1) and ``a`` (rank 2).
Comparators follow the classic ``cmp`` protocol: a negative result means the
first argument sorts earlier, zero means equal rank, positive means later.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class InvalidCharacterError(ValueError):
    """Raised when a compared character does not appear in the ordering."""

    def __init__(self, character: str, order: str) -> None:
        self.character = character
        self.order = order
        super().__init__(
            f"Character {character!r} is not in the ordering {order!r}"
        )


def normalize_order(order: Iterable[str]) -> str:
    if isinstance(order, str):
        return order
    chars: list[str] = []
    for item in order:
        if not isinstance(item, str) or len(item) != 1:
            raise ValueError(
                f"Ordering elements must be single characters, got {item!r}"
            )
        chars.append(item)
    return "".join(chars)


def _build_ranks(order: str) -> dict[str, int]:
    ranks: dict[str, int] = {}
    for index, char in enumerate(order):
        # first occurrence wins for duplicated characters
        ranks.setdefault(char, index)
    return ranks


@dataclass(frozen=True)
class CharComparator:
    order: str
    _ranks: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_ranks", _build_ranks(self.order))

    def __contains__(self, char: object) -> bool:
        return char in self._ranks

    def __call__(self, a: str, b: str) -> int:
        return self.rank(a) - self.rank(b)

    def rank(self, char: str) -> int:
        try:
            return self._ranks[char]
        except KeyError:
            raise InvalidCharacterError(char, self.order) from None


@dataclass(frozen=True)
class StringComparator:
    char_comparator: CharComparator

    def __call__(self, s: str, t: str) -> int:
        compare = self.char_comparator
        for a, b in zip(s, t):
            diff = compare(a, b)
            if diff:
                return diff
        return len(s) - len(t)

    def key(self, s: str) -> tuple[int, ...]:
        """Return a tuple of ranks that sorts the same way this comparator does."""
        rank = self.char_comparator.rank
        return tuple(rank(char) for char in s)


def make_char_comparator(order: Iterable[str]) -> CharComparator:
    """Build a character comparator from an ordering string or character sequence.

    Lookups go through a rank table built once, so each comparison is O(1).
    Comparing a character missing from ``order`` raises ``InvalidCharacterError``
    on every call.
    """
    normalized = normalize_order(order)
    comparator = CharComparator(normalized)
    logger.debug(
        "built character comparator for %d characters (%d distinct)",
        len(normalized),
        len(set(normalized)),
    )
    return comparator


def make_string_comparator(char_comparator: CharComparator) -> StringComparator:
    """Compose ``char_comparator`` into a lexicographic string comparator.

    The first differing position decides; when one string is a prefix of the
    other the shorter one sorts first. Runs in O(min(len(s), len(t))).
    """
    return StringComparator(char_comparator)
