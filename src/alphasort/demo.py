from __future__ import annotations

from .logging_config import setup_logging
from .sorter import sort_strings

SCENARIOS: list[tuple[str, list[str]]] = [
    ("cba", ["acb", "abc", "bca"]),
    ("abc", ["acb", "abc", "bca"]),
    ("a", ["aaa", "a", "aaaaa", "aa"]),
    (
        "hateg",
        ["hehha", "tgah", "aa", "h", "gh", "gg", "gga", "eagt", "hhhhhhhhh"],
    ),
]


def run_scenario(order: str, strings: list[str]) -> list[str]:
    result = list(strings)
    sort_strings(result, order)
    return result


def main() -> int:
    setup_logging(quiet=True)
    for order, strings in SCENARIOS:
        print(run_scenario(order, strings))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
