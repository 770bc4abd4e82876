"""
Tests for raw-score normalisation, ratings and the overall fitness score.
"""

import pytest

from sportfit.logic import calculate_fitness_score, assess_fitness, Rating, RawTestResult
from sportfit.logic.fitness_score import (
    resolve_test_key,
    normalize_raw_score,
    rate_raw_score,
)
from .conftest import make_result


def raw(metric_name, raw_score, unit=""):
    return RawTestResult(metric_name=metric_name, raw_score=raw_score, unit=unit)


@pytest.mark.parametrize("name, expected", [
    ("30m_sprint", "30m_sprint"),
    ("30m Sprint", "30m_sprint"),
    ("flexibility test", "sit_and_reach"),
    ("Sit-ups", "sit_ups"),
    ("Plank Hold", None),
])
def test_resolve_test_key(name, expected):
    assert resolve_test_key(name) == expected


@pytest.mark.parametrize("test_key, raw_score, expected", [
    ("vertical_jump", 30, 50.0),
    ("vertical_jump", 90, 100.0),
    ("30m_sprint", 2.5, 100.0),
    ("30m_sprint", 3.5, 50.0),
    ("30m_sprint", 5.0, 0.0),
    ("sit_and_reach", -5, 0.0),
    ("endurance_run", 4.0, 100.0),
    ("height", 180, 50.0),
    (None, 12, 50.0),
])
def test_normalize_raw_score(test_key, raw_score, expected):
    assert normalize_raw_score(test_key, raw_score) == pytest.approx(expected)


@pytest.mark.parametrize("test_key, raw_score, expected", [
    ("vertical_jump", 52, Rating.EXCELLENT),
    ("vertical_jump", 45, Rating.GOOD),
    ("vertical_jump", 30, Rating.AVERAGE),
    ("vertical_jump", 29, Rating.POOR),
    ("30m_sprint", 2.8, Rating.EXCELLENT),
    ("30m_sprint", 3.0, Rating.GOOD),
    ("30m_sprint", 3.7, Rating.POOR),
    ("shuttle_run", 11.5, Rating.AVERAGE),
    ("sit_ups", 45, Rating.EXCELLENT),
    ("height", 180, None),
])
def test_rate_raw_score(test_key, raw_score, expected):
    assert rate_raw_score(test_key, raw_score) == expected


def test_endurance_rating_depends_on_distance():
    assert rate_raw_score("endurance_run", 2.4, distance_m=800) == Rating.EXCELLENT
    assert rate_raw_score("endurance_run", 2.4, distance_m=1600) == Rating.EXCELLENT
    assert rate_raw_score("endurance_run", 7.0, distance_m=1600) == Rating.GOOD
    assert rate_raw_score("endurance_run", 7.0, distance_m=800) == Rating.POOR


def test_unsupported_endurance_distance():
    with pytest.raises(ValueError):
        rate_raw_score("endurance_run", 5.0, distance_m=1000)


def test_fitness_score_empty():
    assert calculate_fitness_score([]) == 0


def test_fitness_score_single_test():
    assert calculate_fitness_score([raw("Vertical Jump", 30)]) == 50


def test_fitness_score_is_weighted_mean():
    # 100 at weight 0.15 and 50 at weight 0.10
    results = [raw("Vertical Jump", 60), raw("Sit-ups", 30)]

    assert calculate_fitness_score(results) == 80


def test_fitness_score_unknown_test_scores_middle():
    assert calculate_fitness_score([raw("Plank Hold", 120)]) == 50


def test_assess_fitness_rates_each_test():
    output = assess_fitness([
        raw("30m Sprint", 2.7),
        raw("Height", 182),
    ])

    assert output.overall_score == 80
    sprint, height = output.tests
    assert sprint.test_key == "30m_sprint"
    assert sprint.unit == "seconds"
    assert sprint.rating == "Excellent"
    assert sprint.normalized_score == pytest.approx(90.0)
    assert height.rating is None
    assert height.normalized_score == 50.0


def test_percentile_results_are_accepted_too():
    results = [make_result("Vertical Jump", 90, raw_score=60), make_result("Sit-ups", 10, raw_score=30)]

    assert calculate_fitness_score(results) == 80


def test_assess_fitness_accepts_generator():
    output = assess_fitness(raw(name, value) for name, value in [("Vertical Jump", 60), ("Sit-ups", 30)])

    assert output.overall_score == 80
    assert len(output.tests) == 2
