"""String puzzles: case conversion, word games, encodings and validation."""

from __future__ import annotations

import re
import string
from collections import Counter
from collections.abc import Iterable

_SEPARATORS = "_-"
_WHITESPACE = " \t\n\v\f\r"
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ALPHABET = frozenset(string.ascii_lowercase)
_NUMBER_RUN = re.compile(r"[0-9]+")
_NAME_RUN = re.compile(r"[^0-9]+")


def _split_words(sentence: str) -> list[str]:
    """Split on single spaces; a trailing space does not start a new word."""
    parts = sentence.split(" ")
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def to_camel_case(text: str) -> str:
    """Drop ``_`` and ``-`` separators, capitalising the letter after each one."""
    chars: list[str] = []
    after_separator = False
    for char in text:
        if after_separator:
            after_separator = False
            char = char.translate(_TO_UPPER)
        elif char in _SEPARATORS:
            after_separator = True
        if char not in _SEPARATORS:
            chars.append(char)
    return "".join(chars)


def count_chars(text: str) -> dict[str, int]:
    """Count each character, keyed in character order."""
    return dict(sorted(Counter(text).items()))


def duplicate_encode(text: str) -> str:
    """Encode each character as ``(`` if it occurs once, ``)`` otherwise.

    ASCII letters are compared without regard to case.
    """
    lowered = text.translate(_TO_LOWER)
    counts = Counter(lowered)
    return "".join(")" if counts[char] > 1 else "(" for char in lowered)


def is_valid_message(message: str) -> bool:
    """Check that each number in the message gives the length of the text after it."""
    if not message:
        return True
    numbers = [int(run) for run in _NUMBER_RUN.findall(message)]
    names = _NAME_RUN.findall(message)
    if len(numbers) > len(names) or message[-1] in string.digits:
        return False
    return all(len(name) == number for name, number in zip(names, numbers))


def reverse_letters(text: str) -> str:
    """Return the lowercase ASCII letters of the text in reverse order."""
    return "".join(char for char in reversed(text) if char in _ALPHABET)


def spin_words(sentence: str) -> str:
    """Reverse every space-separated word of five or more characters."""
    return " ".join(
        word[::-1] if len(word) >= 5 else word for word in sentence.split(" ")
    )


def split_pairs(text: str) -> list[str]:
    """Split into pairs of characters, padding an odd last one with ``_``."""
    if len(text) % 2:
        text += "_"
    return [text[i:i + 2] for i in range(0, len(text), 2)]


def strip_comments(text: str, markers: Iterable[str]) -> str:
    """Cut every line at its first marker character and trim trailing whitespace."""
    marker_set = frozenset(markers)
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    stripped = []
    for line in lines:
        for position, char in enumerate(line):
            if char in marker_set:
                line = line[:position]
                break
        stripped.append(line.rstrip(_WHITESPACE))
    return "\n".join(stripped)


def tower_builder(floors: int) -> list[str]:
    """Build a centred pyramid of ``*`` with the given number of floors."""
    if floors < 0:
        raise ValueError("floors must not be negative")
    return [
        " " * (floors - level - 1) + "*" * (2 * level + 1) + " " * (floors - level - 1)
        for level in range(floors)
    ]


def duplicate_count(text: str) -> int:
    """Count distinct characters occurring more than once, ignoring ASCII case."""
    counts = Counter(text.translate(_TO_LOWER))
    return sum(1 for count in counts.values() if count > 1)


def _score(word: str) -> int:
    return sum(ord(char) - 96 for char in word)


def highest_scoring_word(sentence: str) -> str:
    """Return the first word with the highest sum of letter positions (a=1 ... z=26)."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    return max(_split_words(sentence), key=_score)


def is_pangram(text: str) -> bool:
    """True if every ASCII letter appears in the text, in either case."""
    return _ALPHABET.issubset(text.translate(_TO_LOWER))


def sort_inner_content(words: str) -> str:
    """Sort the inner letters of every word in descending order, keeping the ends."""
    return " ".join(
        word[0] + "".join(sorted(word[1:-1], reverse=True)) + word[-1]
        if len(word) > 2
        else word
        for word in words.split(" ")
    )


def to_weird_case(text: str) -> str:
    """Upper-case even positions and lower-case odd positions within each word."""
    return " ".join(
        "".join(
            char.translate(_TO_LOWER if index % 2 else _TO_UPPER)
            for index, char in enumerate(word)
        )
        for word in text.split(" ")
    )


def reverse_words(text: str) -> str:
    """Reverse the order of the space-separated words."""
    return " ".join(reversed(_split_words(text)))