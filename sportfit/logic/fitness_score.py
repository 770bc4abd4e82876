"""
Fitness Test Scoring

Works on raw test scores (native units) rather than percentiles:
- normalises a raw score to 0-100 per test
- rates a raw score as Poor / Average / Good / Excellent
- combines a set of results into one overall fitness score

A TestResult works anywhere a RawTestResult is expected; its percentile is
ignored.
"""

from typing import Optional, Sequence

from .contracts import RawTestResult, FitnessTestRating, FitnessScoreOutput
from .constants import (
    FITNESS_TESTS,
    FITNESS_SCORE_WEIGHTS,
    DEFAULT_FITNESS_WEIGHT,
    DEFAULT_NORMALIZED_SCORE,
    RAW_SCORE_NORMALIZATION,
    RATING_BANDS,
    ENDURANCE_RATING_BANDS,
    DEFAULT_ENDURANCE_DISTANCE_M,
    Rating,
)

_KEY_BY_DISPLAY_NAME = {
    display.lower(): key for key, (display, _unit) in FITNESS_TESTS.items()
}


def resolve_test_key(name: str) -> Optional[str]:
    """
    Map a test key ("30m_sprint") or display name ("30m Sprint") to its key.
    Returns None for tests outside the registry.
    """
    if name in FITNESS_TESTS:
        return name
    return _KEY_BY_DISPLAY_NAME.get(name.strip().lower())


def normalize_raw_score(test_key: Optional[str], raw_score: float) -> float:
    """
    Normalise a raw score onto 0-100. Tests without a rule score 50.
    """
    rule = RAW_SCORE_NORMALIZATION.get(test_key)
    if rule is None:
        return DEFAULT_NORMALIZED_SCORE

    baseline, span, lower_is_better = rule
    scaled = (raw_score - baseline) / span * 100
    if lower_is_better:
        scaled = 100 - scaled
    return min(100.0, max(0.0, scaled))


def _band(raw_score: float, cutoffs, lower_is_better: bool) -> Rating:
    excellent, good, average = cutoffs
    if lower_is_better:
        if raw_score <= excellent:
            return Rating.EXCELLENT
        if raw_score <= good:
            return Rating.GOOD
        if raw_score <= average:
            return Rating.AVERAGE
    else:
        if raw_score >= excellent:
            return Rating.EXCELLENT
        if raw_score >= good:
            return Rating.GOOD
        if raw_score >= average:
            return Rating.AVERAGE
    return Rating.POOR


def rate_raw_score(
    test_key: Optional[str],
    raw_score: float,
    distance_m: int = DEFAULT_ENDURANCE_DISTANCE_M
) -> Optional[Rating]:
    """
    Qualitative rating for a raw score, or None for unrated tests
    (height, weight).

    Args:
        test_key: Registry key of the test
        raw_score: Score in the test's native unit
        distance_m: Endurance run distance, 800 or 1600 metres
    """
    if test_key == "endurance_run":
        cutoffs = ENDURANCE_RATING_BANDS.get(distance_m)
        if cutoffs is None:
            raise ValueError(f"Unsupported endurance distance: {distance_m}m")
        return _band(raw_score, cutoffs, lower_is_better=True)

    bands = RATING_BANDS.get(test_key)
    if bands is None:
        return None
    cutoffs, lower_is_better = bands
    return _band(raw_score, cutoffs, lower_is_better)


def rate_result(
    result: RawTestResult,
    distance_m: int = DEFAULT_ENDURANCE_DISTANCE_M
) -> FitnessTestRating:
    """Normalise and rate a single result."""
    test_key = resolve_test_key(result.metric_name)
    return FitnessTestRating(
        test_key=test_key,
        metric_name=result.metric_name,
        raw_score=result.raw_score,
        unit=result.unit or (FITNESS_TESTS[test_key][1] if test_key else ""),
        normalized_score=normalize_raw_score(test_key, result.raw_score),
        rating=rate_raw_score(test_key, result.raw_score, distance_m),
    )


def calculate_fitness_score(test_results: Sequence[RawTestResult]) -> int:
    """
    Weighted mean of normalised raw scores, rounded to an integer 0-100.
    Empty input scores 0.
    """
    if not test_results:
        return 0

    total_score = 0.0
    total_weight = 0.0

    for result in test_results:
        test_key = resolve_test_key(result.metric_name)
        weight = FITNESS_SCORE_WEIGHTS.get(test_key, DEFAULT_FITNESS_WEIGHT)
        total_score += normalize_raw_score(test_key, result.raw_score) * weight
        total_weight += weight

    return round(total_score / total_weight) if total_weight > 0 else 0


def assess_fitness(
    test_results: Sequence[RawTestResult],
    distance_m: int = DEFAULT_ENDURANCE_DISTANCE_M
) -> FitnessScoreOutput:
    """Overall score plus per-test ratings."""
    test_results = list(test_results)
    return FitnessScoreOutput(
        overall_score=calculate_fitness_score(test_results),
        tests=[rate_result(r, distance_m) for r in test_results],
    )
