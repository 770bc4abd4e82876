"""
Score Aggregator

Combines a sport's weight vector with the metric lookup into a composite
match score. Applies the match ceiling and display rounding.
"""

from typing import Dict, List
from .contracts import SportProfile, ScoredSport
from .catalogue import SportCatalogue
from .constants import (
    MAX_MATCH_PERCENTAGE,
    MISSING_METRIC_PERCENTILE,
    MATCH_DECIMALS,
)


def score_sport(
    lookup: Dict[str, float],
    profile: SportProfile
) -> ScoredSport:
    """
    Compute the composite score for one sport.

    Args:
        lookup: Metric name -> percentile
        profile: Catalogue entry to score

    Returns:
        ScoredSport with per-metric contributions, raw and capped scores
    """
    contributions: Dict[str, float] = {}

    for metric, weight in profile.weight_vector.items():
        percentile = lookup.get(metric, MISSING_METRIC_PERCENTILE)
        contributions[metric] = weight * percentile

    raw_score = sum(contributions.values())

    # Capped, then rounded once for display
    match_percentage = round(min(MAX_MATCH_PERCENTAGE, raw_score), MATCH_DECIMALS)

    return ScoredSport(
        profile=profile,
        contributions=contributions,
        raw_score=raw_score,
        match_percentage=match_percentage,
    )


def batch_score(
    lookup: Dict[str, float],
    catalogue: SportCatalogue
) -> List[ScoredSport]:
    """
    Score every sport in the catalogue.
    """
    return [score_sport(lookup, profile) for profile in catalogue.profiles]
