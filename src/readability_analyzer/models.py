from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Metric(str, Enum):
    """Readability indices the analyzer knows how to score."""

    ARI = "ARI"
    FK = "FK"
    SMOG = "SMOG"
    CL = "CL"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Metric.ARI: "Automated Readability Index",
    Metric.FK: "Flesch–Kincaid readability tests",
    Metric.SMOG: "Simple Measure of Gobbledygook",
    Metric.CL: "Coleman–Liau index",
}


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Lexical counts extracted from a single document."""

    n_characters: int = 0
    n_words: int = 0
    n_sentences: int = 0
    n_syllables: int = 0
    n_polysyllables: int = 0


@dataclass(frozen=True, slots=True)
class MetricScore:
    """Raw score of one readability index and the matching reader age."""

    metric: Metric
    raw_score: float
    age_group: int


@dataclass(frozen=True, slots=True)
class ReadabilityReport:
    """Scored metrics for a document.

    ``average_age`` is only populated when every metric was scored.
    """

    statistics: TextStatistics
    scores: tuple[MetricScore, ...]
    average_age: float | None = None

    def get(self, metric: Metric) -> MetricScore | None:
        for score in self.scores:
            if score.metric is metric:
                return score
        return None
