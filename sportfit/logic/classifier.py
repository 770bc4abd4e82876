"""
Classifier

Places a scored sport into a tier:
- Highly recommended (above the sport's own threshold)
- Recommended (above the inclusion threshold)

The `potential` tier is never produced while the inclusion threshold is 50.
"""

from .contracts import ScoredSport
from .constants import SportCategory, INCLUSION_THRESHOLD


def is_included(scored: ScoredSport) -> bool:
    """A sport is recommended only when it scores strictly above the threshold."""
    return scored.match_percentage > INCLUSION_THRESHOLD


def classify_sport(scored: ScoredSport) -> SportCategory:
    """
    Classify a single scored sport.

    Args:
        scored: Sport with computed scores

    Returns:
        SportCategory enum value
    """
    if scored.match_percentage > scored.profile.t_high:
        return SportCategory.HIGHLY_RECOMMENDED
    return SportCategory.RECOMMENDED
