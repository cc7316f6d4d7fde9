"""alphasort orders strings by a caller-supplied character alphabet."""

from .comparators import (
    CharComparator,
    InvalidCharacterError,
    StringComparator,
    make_char_comparator,
    make_string_comparator,
)
from .config import AlphasortConfig
from .sorter import (
    AlphaSorter,
    SortResult,
    find_invalid_characters,
    sort_strings,
    sorted_strings,
)

__all__ = [
    "AlphaSorter",
    "AlphasortConfig",
    "CharComparator",
    "InvalidCharacterError",
    "SortResult",
    "StringComparator",
    "find_invalid_characters",
    "make_char_comparator",
    "make_string_comparator",
    "sort_strings",
    "sorted_strings",
]
