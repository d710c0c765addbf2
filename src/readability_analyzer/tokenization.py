from __future__ import annotations

import re
from typing import Iterator

# A sentence is a run of word characters and whitespace closed by terminal
# punctuation or by the end of the input.
SENTENCE_PATTERN = re.compile(r"\s*\w+[\w\s]*(?:[.?!]|$)", re.ASCII)
WORD_PATTERN = re.compile(r"\b\S+\b", re.ASCII)
CHARACTER_PATTERN = re.compile(r"\S", re.ASCII)
VOWEL_RUN_PATTERN = re.compile(r"[aeiouy]+", re.ASCII | re.IGNORECASE)

POLYSYLLABLE_THRESHOLD = 2


def iter_words(text: str) -> Iterator[str]:
    """Yield word tokens in document order."""
    for match in WORD_PATTERN.finditer(text):
        yield match.group()


def count_sentences(text: str) -> int:
    return sum(1 for _ in SENTENCE_PATTERN.finditer(text))


def count_words(text: str) -> int:
    return sum(1 for _ in WORD_PATTERN.finditer(text))


def count_characters(text: str) -> int:
    return len(CHARACTER_PATTERN.findall(text))


def count_syllables(word: str) -> int:
    """
    Count syllables in a single word.

    A trailing ``e`` is treated as silent and dropped before counting. Each
    run of adjacent vowels (``y`` included) is one syllable, and every word
    has at least one.
    """
    if word[-1:] in ("e", "E"):
        word = word[:-1]
    vowel_runs = len(VOWEL_RUN_PATTERN.findall(word))
    return vowel_runs or 1


def is_polysyllable(word: str) -> bool:
    return count_syllables(word) > POLYSYLLABLE_THRESHOLD
