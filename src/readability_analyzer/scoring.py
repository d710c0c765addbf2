from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, Sequence

from .models import Metric, MetricScore, ReadabilityReport, TextStatistics
from .text_stats import compute_text_statistics

LOGGER = logging.getLogger(__name__)

# Rounded score -> reader age. Grade 3 maps to 9, so 8 is never produced.
AGE_GROUPS: Dict[int, int] = {
    1: 6,
    2: 7,
    3: 9,
    4: 10,
    5: 11,
    6: 12,
    7: 13,
    8: 14,
    9: 15,
    10: 16,
    11: 17,
    12: 18,
}
DEFAULT_AGE_GROUP = 24


def _ratio(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising on a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def automated_readability_index(stats: TextStatistics) -> float:
    chars, words, sentences = (
        float(stats.n_characters),
        float(stats.n_words),
        float(stats.n_sentences),
    )
    return 4.71 * _ratio(chars, words) + 0.5 * _ratio(words, sentences) - 21.43


def flesch_kincaid(stats: TextStatistics) -> float:
    words, sentences, syllables = (
        float(stats.n_words),
        float(stats.n_sentences),
        float(stats.n_syllables),
    )
    return 0.39 * _ratio(words, sentences) + 11.8 * _ratio(syllables, words) - 15.59


def smog(stats: TextStatistics) -> float:
    radicand = _ratio(stats.n_polysyllables * 30.0, float(stats.n_sentences))
    return 1.043 * math.sqrt(radicand) + 3.1291


def coleman_liau(stats: TextStatistics) -> float:
    hundreds_of_words = stats.n_words / 100.0
    return (
        0.0588 * _ratio(float(stats.n_characters), hundreds_of_words)
        - 0.296 * _ratio(float(stats.n_sentences), hundreds_of_words)
        - 15.8
    )


FORMULAS: Dict[Metric, Callable[[TextStatistics], float]] = {
    Metric.ARI: automated_readability_index,
    Metric.FK: flesch_kincaid,
    Metric.SMOG: smog,
    Metric.CL: coleman_liau,
}


def compute_score(metric: Metric, stats: TextStatistics) -> float:
    """Evaluate the formula for ``metric`` against the document counts."""
    score = FORMULAS[metric](stats)
    if not math.isfinite(score):
        LOGGER.debug("%s score is undefined for %s", metric.value, stats)
    return score


def round_half_away_from_zero(value: float) -> int:
    magnitude = math.floor(abs(value))
    if abs(value) - magnitude >= 0.5:
        magnitude += 1
    return int(math.copysign(magnitude, value))


def age_group(score: float) -> int:
    """Map a raw readability score to the approximate age of its readers."""
    if not math.isfinite(score):
        return DEFAULT_AGE_GROUP
    return AGE_GROUPS.get(round_half_away_from_zero(score), DEFAULT_AGE_GROUP)


def score_metric(metric: Metric, stats: TextStatistics) -> MetricScore:
    raw_score = compute_score(metric, stats)
    return MetricScore(
        metric=metric, raw_score=raw_score, age_group=age_group(raw_score)
    )


def average_age(scores: Sequence[MetricScore]) -> float:
    """Mean of the age groups (not of the raw scores)."""
    if not scores:
        raise ValueError("Cannot average an empty set of scores.")
    return sum(score.age_group for score in scores) / len(scores)


def build_report(
    stats: TextStatistics, metrics: Iterable[Metric] | None = None
) -> ReadabilityReport:
    """
    Score the requested metrics (all of them by default).

    Metrics are reported in the canonical ARI, FK, SMOG, CL order regardless
    of the order they were requested in. The aggregate age is only attached
    when every metric is present.
    """
    requested = set(Metric) if metrics is None else {Metric(m) for m in metrics}
    scores = tuple(
        score_metric(metric, stats) for metric in Metric if metric in requested
    )
    average = average_age(scores) if len(scores) == len(Metric) else None
    return ReadabilityReport(statistics=stats, scores=scores, average_age=average)


def analyze_text(
    text: str, metrics: Iterable[Metric] | None = None
) -> ReadabilityReport:
    """Run the full pipeline: text -> counts -> scored report."""
    return build_report(compute_text_statistics(text), metrics)
