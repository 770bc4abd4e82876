import pytest

from sportfit.logic import TestResult, SportProfile, SportCatalogue


def make_result(metric_name, percentile, raw_score=0.0, unit=""):
    return TestResult(
        metric_name=metric_name,
        raw_score=raw_score,
        percentile=percentile,
        unit=unit,
    )


@pytest.fixture
def sprinter_results():
    """Fast, springy athlete with good endurance."""
    return [
        make_result("30m Sprint", 95, raw_score=4.1, unit="seconds"),
        make_result("Vertical Jump", 90, raw_score=52, unit="cm"),
        make_result("Endurance Run", 85, raw_score=6.2, unit="minutes"),
    ]


@pytest.fixture
def all_round_results():
    """Every catalogue metric at the 100th percentile."""
    metrics = [
        "Height", "Flexibility Test", "Vertical Jump", "Broad Jump",
        "Medicine Ball Throw", "30m Sprint", "Shuttle Run", "Sit-ups",
        "Endurance Run",
    ]
    return [make_result(m, 100) for m in metrics]


@pytest.fixture
def tied_catalogue():
    """Two sports with identical weights, listed out of id order."""
    return SportCatalogue(profiles=(
        SportProfile(sport_id="basketball", weight_vector={"Agility": 0.8}, t_high=80),
        SportProfile(sport_id="athletics", weight_vector={"Agility": 0.8}, t_high=80),
    ))
