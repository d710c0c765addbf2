import math

import pytest

from readability_analyzer.models import Metric, TextStatistics
from readability_analyzer.scoring import (
    AGE_GROUPS,
    age_group,
    analyze_text,
    automated_readability_index,
    average_age,
    build_report,
    coleman_liau,
    compute_score,
    flesch_kincaid,
    round_half_away_from_zero,
    score_metric,
    smog,
)

# "The cat sat."
CAT_STATS = TextStatistics(
    n_characters=10, n_words=3, n_sentences=1, n_syllables=3, n_polysyllables=0
)


def test_formulas_for_short_sentence():
    assert automated_readability_index(CAT_STATS) == pytest.approx(-4.23, abs=1e-9)
    assert flesch_kincaid(CAT_STATS) == pytest.approx(-2.62, abs=1e-9)
    assert smog(CAT_STATS) == pytest.approx(3.1291, abs=1e-9)
    assert coleman_liau(CAT_STATS) == pytest.approx(
        0.0588 * (10 / 0.03) - 0.296 * (1 / 0.03) - 15.8, abs=1e-9
    )


def test_single_letter_ari():
    stats = TextStatistics(1, 1, 1, 1, 0)
    score = compute_score(Metric.ARI, stats)
    assert score == pytest.approx(-16.22, abs=1e-9)
    assert age_group(score) == 24


def test_smog_for_polysyllabic_sentence():
    stats = TextStatistics(
        n_characters=64, n_words=4, n_sentences=1, n_syllables=20, n_polysyllables=4
    )
    score = score_metric(Metric.SMOG, stats)
    assert score.raw_score == pytest.approx(1.043 * math.sqrt(120) + 3.1291, abs=1e-9)
    assert score.age_group == 24


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (1, 6),
        (2, 7),
        (3, 9),
        (4, 10),
        (8, 14),
        (12, 18),
        (0, 24),
        (13, 24),
        (40, 24),
        (-3, 24),
        (2.49, 7),
        (2.5, 9),
        (0.5, 6),
        (-0.5, 24),
        (12.4, 18),
        (12.5, 24),
        (0.49999999999999994, 24),
        (1.4999999999999998, 6),
        (math.nan, 24),
        (math.inf, 24),
        (-math.inf, 24),
    ],
)
def test_age_group(score: float, expected: int):
    assert age_group(score) == expected


def test_age_eight_is_never_produced():
    assert 8 not in AGE_GROUPS.values()
    assert all(age_group(value / 4) != 8 for value in range(-20, 80))


def test_round_half_away_from_zero():
    assert round_half_away_from_zero(2.5) == 3
    assert round_half_away_from_zero(-2.5) == -3
    assert round_half_away_from_zero(0.4) == 0
    assert round_half_away_from_zero(-16.22) == -16
    assert round_half_away_from_zero(0.49999999999999994) == 0
    assert round_half_away_from_zero(-0.49999999999999994) == 0


def test_undefined_scores_do_not_raise():
    report = build_report(TextStatistics())
    assert all(not math.isfinite(score.raw_score) for score in report.scores)
    assert all(score.age_group == 24 for score in report.scores)
    assert report.average_age == 24.0

    punctuation_only = build_report(TextStatistics(n_characters=1))
    assert all(score.age_group == 24 for score in punctuation_only.scores)


def test_build_report_orders_metrics_and_averages_ages():
    report = build_report(CAT_STATS)

    assert [score.metric for score in report.scores] == list(Metric)
    assert [score.age_group for score in report.scores] == [24, 24, 9, 24]
    assert report.average_age == pytest.approx(20.25)


def test_build_report_subset_has_no_average():
    report = build_report(CAT_STATS, ["SMOG", Metric.ARI])

    assert [score.metric for score in report.scores] == [Metric.ARI, Metric.SMOG]
    assert report.average_age is None
    assert report.get(Metric.FK) is None
    smog_score = report.get(Metric.SMOG)
    assert smog_score is not None
    assert smog_score.age_group == 9


def test_average_age_rejects_empty_input():
    with pytest.raises(ValueError):
        average_age([])


def test_analyze_text_runs_pipeline():
    report = analyze_text("The cat sat.")

    assert report.statistics == CAT_STATS
    assert report.average_age == pytest.approx(20.25)
