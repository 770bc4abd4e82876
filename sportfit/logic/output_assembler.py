"""
Output Assembler

Transforms ranked ScoredSport objects into SportRecommendation and the
RecommendationOutput envelope. Rationale is copied from the catalogue entry,
never generated from the scores.
"""

import logging
import uuid
from typing import List, Optional

from .contracts import (
    ScoredSport,
    SportRecommendation,
    RecommendationOutput,
)
from .classifier import classify_sport
from .constants import ENGINE_VERSION

logger = logging.getLogger(__name__)


def assemble_recommendation(
    scored: ScoredSport,
    rank: int
) -> SportRecommendation:
    """
    Convert a ScoredSport into a SportRecommendation.

    Args:
        scored: The scored sport
        rank: 1-based position in the final list

    Returns:
        SportRecommendation object
    """
    profile = scored.profile

    return SportRecommendation(
        sport_id=profile.sport_id,
        name=profile.name,
        match_percentage=scored.match_percentage,
        category=classify_sport(scored),
        reasoning=list(profile.reasoning_templates),
        strength_tags=list(profile.strength_tags),
        improvement_tags=list(profile.improvement_tags),
        icon=profile.icon,
        rank=rank,
    )


def build_recommendations(ranked: List[ScoredSport]) -> List[SportRecommendation]:
    """Build the display list from an already ranked list."""
    return [
        assemble_recommendation(scored, rank)
        for rank, scored in enumerate(ranked, 1)
    ]


def assemble_output(
    recommendations: List[SportRecommendation],
    total_evaluated: int,
    missing: List[str],
    athlete_id: Optional[str] = None,
    processing_time_ms: Optional[float] = None
) -> RecommendationOutput:
    """
    Assemble the final RecommendationOutput.

    Args:
        recommendations: Ranked recommendations
        total_evaluated: Number of catalogue sports scored
        missing: Catalogue metrics absent from the input
        athlete_id: Optional caller-side identifier
        processing_time_ms: Processing time in milliseconds

    Returns:
        Complete RecommendationOutput
    """
    warnings = _generate_warnings(recommendations, missing, total_evaluated)

    return RecommendationOutput(
        request_id=str(uuid.uuid4()),
        athlete_id=athlete_id,
        recommendations=recommendations,
        total_sports_evaluated=total_evaluated,
        total_recommended=len(recommendations),
        missing_metrics=missing,
        processing_time_ms=processing_time_ms,
        engine_version=ENGINE_VERSION,
        warnings=warnings,
    )


def _generate_warnings(
    recommendations: List[SportRecommendation],
    missing: List[str],
    total_evaluated: int
) -> List[str]:
    """Generate any warnings for the output."""
    warnings = []

    if total_evaluated == 0:
        warnings.append("Sport catalogue is empty. No sports were evaluated.")
    elif not recommendations:
        warnings.append("No sport scored above the recommendation threshold.")

    if missing:
        warnings.append(
            f"Missing test results scored as 0: {', '.join(missing)}"
        )
        logger.debug(f"Missing metrics: {missing}")

    return warnings
