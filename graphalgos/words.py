"""Arrange words in lexicographical order."""

from __future__ import annotations

import argparse
import sys
from itertools import islice
from typing import Iterable

WORD_COUNT = 10


def lexicographic_order(words: Iterable[str]) -> list[str]:
    """Return the words sorted in dictionary (code point) order."""
    return sorted(words)


def _read_words(stream, count: int) -> list[str]:
    lines = [line.rstrip("\r\n") for line in islice(stream, count)]
    lines.extend("" for _ in range(count - len(lines)))
    return lines


def main(argv: list[str] | None = None) -> int:
    """Read ten lines from standard input and print them sorted."""
    parser = argparse.ArgumentParser(
        prog="dictionary-order",
        description=f"Read {WORD_COUNT} words and print them in lexicographical order.",
    )
    parser.parse_args(argv)

    print(f"Enter {WORD_COUNT} words: ")
    words = _read_words(sys.stdin, WORD_COUNT)
    print("In lexicographical order: ")
    for word in lexicographic_order(words):
        print(word)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())