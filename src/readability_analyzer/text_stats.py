from __future__ import annotations

import logging

from .models import TextStatistics
from .tokenization import (
    POLYSYLLABLE_THRESHOLD,
    count_characters,
    count_sentences,
    count_syllables,
    iter_words,
)

LOGGER = logging.getLogger(__name__)


def compute_text_statistics(text: str) -> TextStatistics:
    """Extract character, word, sentence, syllable and polysyllable counts."""
    n_words = 0
    n_syllables = 0
    n_polysyllables = 0
    for word in iter_words(text):
        syllables = count_syllables(word)
        n_words += 1
        n_syllables += syllables
        if syllables > POLYSYLLABLE_THRESHOLD:
            n_polysyllables += 1

    stats = TextStatistics(
        n_characters=count_characters(text),
        n_words=n_words,
        n_sentences=count_sentences(text),
        n_syllables=n_syllables,
        n_polysyllables=n_polysyllables,
    )
    LOGGER.debug("Computed text statistics: %s", stats)
    return stats
