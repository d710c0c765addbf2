"""
readability_analyzer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .models import Metric, MetricScore, ReadabilityReport, TextStatistics
from .scoring import age_group, analyze_text, build_report, compute_score
from .text_stats import compute_text_statistics

__all__ = [
    "Metric",
    "MetricScore",
    "ReadabilityReport",
    "TextStatistics",
    "age_group",
    "analyze_text",
    "build_report",
    "compute_score",
    "compute_text_statistics",
]

__version__ = "0.1.0"
