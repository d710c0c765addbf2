from __future__ import annotations

import math
from typing import Dict, List, TypedDict

from .models import Metric, MetricScore, ReadabilityReport, TextStatistics
from .scoring import build_report

ALL_SELECTOR = "all"
# The prompt helper appends the ": " suffix.
PROMPT_TEXT = "Enter the score you want to calculate (ARI, FK, SMOG, CL, all)"


class MetricPayload(TypedDict):
    metric: str
    name: str
    score: float
    age_group: int


class ReportPayload(TypedDict):
    statistics: Dict[str, int]
    scores: List[MetricPayload]
    average_age: float | None


def format_statistics(text: str | None, stats: TextStatistics) -> str:
    """Render the counts block, preceded by the echoed text when provided."""
    lines: List[str] = []
    if text is not None:
        lines.extend(["The text is:", text, ""])
    lines.extend(
        [
            f"Words: {stats.n_words}",
            f"Sentences: {stats.n_sentences}",
            f"Characters: {stats.n_characters}",
            f"Syllables: {stats.n_syllables}",
            f"Polysyllables: {stats.n_polysyllables}",
        ]
    )
    return "\n".join(lines) + "\n"


def format_score(value: float) -> str:
    """Two-decimal score text; undefined scores print as NaN or Infinity."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.2f}"


def format_score_line(score: MetricScore) -> str:
    return (
        f"{score.metric.display_name}: {format_score(score.raw_score)} "
        f"(about {score.age_group}-year-olds)."
    )


def format_average_line(average: float) -> str:
    return f"This text should be understood in average by {average:.2f}-year-olds."


def parse_selector(raw: str) -> str | None:
    """Return the first whitespace-delimited token of ``raw``, if any."""
    parts = raw.split()
    return parts[0] if parts else None


def render_selection(stats: TextStatistics, selector: str | None) -> List[str]:
    """
    Produce the output lines for a menu selector.

    A metric code yields its single score line; ``all`` yields every score
    line followed by the aggregate age. Unknown selectors produce nothing.
    """
    if selector == ALL_SELECTOR:
        report = build_report(stats)
        lines = [""]
        lines.extend(format_score_line(score) for score in report.scores)
        lines.append("")
        if report.average_age is not None:
            lines.append(format_average_line(report.average_age))
        return lines
    try:
        metric = Metric(selector)
    except ValueError:
        return []
    report = build_report(stats, [metric])
    return [format_score_line(score) for score in report.scores]


def report_to_dict(report: ReadabilityReport) -> ReportPayload:
    """Convert a report into a JSON-serializable dictionary."""
    stats = report.statistics
    return {
        "statistics": {
            "characters": stats.n_characters,
            "words": stats.n_words,
            "sentences": stats.n_sentences,
            "syllables": stats.n_syllables,
            "polysyllables": stats.n_polysyllables,
        },
        "scores": [_score_dict(score) for score in report.scores],
        "average_age": report.average_age,
    }


def _score_dict(score: MetricScore) -> MetricPayload:
    return {
        "metric": score.metric.value,
        "name": score.metric.display_name,
        "score": score.raw_score,
        "age_group": score.age_group,
    }
