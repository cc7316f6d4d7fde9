from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from pathlib import Path

from .comparators import (
    CharComparator,
    InvalidCharacterError,
    StringComparator,
    make_char_comparator,
    make_string_comparator,
)
from .config import AlphasortConfig

logger = logging.getLogger(__name__)

Comparator = Callable[[str, str], int]


def _comparator_for(order: Iterable[str]) -> StringComparator:
    return make_string_comparator(make_char_comparator(order))


def _iter_unranked(
    strings: Iterable[str], char_comparator: CharComparator
) -> Iterator[str]:
    seen: set[str] = set()
    for value in strings:
        for char in value:
            if char not in char_comparator and char not in seen:
                seen.add(char)
                yield char


def _reject_unranked(strings: Iterable[str], char_comparator: CharComparator) -> None:
    missing = next(_iter_unranked(strings, char_comparator), None)
    if missing is not None:
        raise InvalidCharacterError(missing, char_comparator.order)


def sort_strings(strings: list[str], order: Iterable[str]) -> None:
    """Sort ``strings`` in place under the character ordering ``order``.

    Takes O(P * N log N) for N strings of typical length P. Every character is
    checked against ``order`` first, so a string holding an unranked character
    raises ``InvalidCharacterError`` even when the sort would never compare
    that position; ``strings`` is not modified in that case.
    """
    comparator = _comparator_for(order)
    _reject_unranked(strings, comparator.char_comparator)
    strings.sort(key=cmp_to_key(comparator))


def sorted_strings(strings: Iterable[str], order: Iterable[str]) -> list[str]:
    """Return a new list with ``strings`` ordered by ``order``."""
    result = list(strings)
    sort_strings(result, order)
    return result


def find_invalid_characters(
    strings: Iterable[str], order: Iterable[str]
) -> list[str]:
    """Return the characters of ``strings`` that ``order`` does not rank.

    Characters are reported once each, in the order they are first seen.
    """
    return list(_iter_unranked(strings, make_char_comparator(order)))


def first_violation(strings: Sequence[str], comparator: Comparator) -> int | None:
    """Return the first index i where strings[i] sorts after strings[i + 1]."""
    for index in range(len(strings) - 1):
        if comparator(strings[index], strings[index + 1]) > 0:
            return index
    return None


def is_ordered(strings: Sequence[str], comparator: Comparator) -> bool:
    return first_violation(strings, comparator) is None


@dataclass
class SortResult:
    count: int
    changed: bool
    skipped: bool = False
    reason: str | None = None
    first_violation: int | None = None
    invalid_characters: list[str] = field(default_factory=lambda: [])


class AlphaSorter:
    def __init__(self, config: AlphasortConfig | None = None) -> None:
        self.config = config or AlphasortConfig()
        self.comparator = _comparator_for(self.config.order)
        self._sort_key = cmp_to_key(self.comparator)
        self._signature = self.config.signature[:12]

    @classmethod
    def from_project(cls, root: Path) -> AlphaSorter:
        return cls(AlphasortConfig.load(root))

    def key(self, value: str) -> tuple[int, ...]:
        return self.comparator.key(value)

    def validate(self, strings: Iterable[str]) -> None:
        _reject_unranked(strings, self.comparator.char_comparator)

    def sort(self, strings: list[str]) -> SortResult:
        self.validate(strings)

        before = list(strings)
        strings.sort(key=self._sort_key)
        changed = strings != before
        logger.debug(
            "sorted %d strings (changed=%s, config=%s)",
            len(strings),
            changed,
            self._signature,
        )
        return SortResult(
            count=len(strings),
            changed=changed,
            reason="sorted" if changed else None,
        )

    def check(self, strings: Sequence[str]) -> SortResult:
        """Report whether ``strings`` is already ordered, without modifying it.

        Unranked characters raise when the config asks for validation; otherwise
        the result is skipped and lists them in ``invalid_characters``.
        """
        if self.config.validate:
            self.validate(strings)
        else:
            missing = list(_iter_unranked(strings, self.comparator.char_comparator))
            if missing:
                return SortResult(
                    count=len(strings),
                    changed=False,
                    skipped=True,
                    reason="invalid-characters",
                    invalid_characters=missing,
                )

        violation = first_violation(strings, self.comparator)
        if violation is None:
            return SortResult(count=len(strings), changed=False)
        return SortResult(
            count=len(strings),
            changed=True,
            reason="needs-sorting",
            first_violation=violation,
        )
