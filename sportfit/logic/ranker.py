"""
Ranker

Filters scored sports by the inclusion threshold and orders them
deterministically.
"""

from typing import List
from .contracts import ScoredSport
from .classifier import is_included


def filter_included(scored_sports: List[ScoredSport]) -> List[ScoredSport]:
    """
    Drop sports at or below the inclusion threshold.
    """
    return [s for s in scored_sports if is_included(s)]


def rank_key(scored: ScoredSport):
    return (-scored.match_percentage, scored.profile.sport_id)


def rank_sports(scored_sports: List[ScoredSport]) -> List[ScoredSport]:
    """
    Rank sports by match percentage (descending).
    Equal scores are ordered by sport_id ascending.

    Args:
        scored_sports: List of scored sports

    Returns:
        New sorted list
    """
    return sorted(scored_sports, key=rank_key)
