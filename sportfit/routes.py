"""
Sport Recommendation API Routes

Exposes the sport-fit engine via REST API.
"""

import logging
from typing import Optional, List, Dict, Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

import settings
from .logic.contracts import TestResult, RawTestResult, SportRecommendation
from .logic.catalogue import resolve_catalogue, catalogue_to_dict
from .logic.engine import SportRecommendationEngine
from .logic.errors import InvalidInputError, UnknownSportError
from .logic.fitness_score import assess_fitness
from .logic.constants import DEFAULT_ENDURANCE_DISTANCE_M, ENGINE_VERSION

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sport-recommendations", tags=["sport-recommendations"])

# Catalogue is loaded once at startup and never mutated afterwards
engine = SportRecommendationEngine(resolve_catalogue(settings.SPORT_CATALOGUE_PATH))


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class ScoreRequest(BaseModel):
    """Request body carrying percentile test results."""
    test_results: List[TestResult] = Field(
        default_factory=list,
        description="Completed test results with percentiles",
        examples=[[
            {"metric_name": "30m Sprint", "raw_score": 4.1, "percentile": 95, "unit": "seconds"},
            {"metric_name": "Vertical Jump", "raw_score": 52, "percentile": 90, "unit": "cm"},
            {"metric_name": "Endurance Run", "raw_score": 6.2, "percentile": 85, "unit": "minutes"},
        ]],
    )

    class Config:
        extra = "forbid"


class RecommendationRequest(ScoreRequest):
    """Request body for recommendations endpoint."""
    athlete_id: Optional[str] = None
    format: str = Field(
        default="full",
        pattern="^(full|simple)$",
        description="Response format: 'full' (complete output) or 'simple' (list only)"
    )


class FitnessScoreRequest(BaseModel):
    """Request body for the fitness score endpoint. Percentiles are not needed."""
    test_results: List[RawTestResult] = Field(default_factory=list)
    endurance_distance_m: int = Field(default=DEFAULT_ENDURANCE_DISTANCE_M)


def _invalid_input(e: InvalidInputError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail=f"Unable to compute recommendations: {e}"
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Get sport recommendations")
@router.post("/", summary="Get sport recommendations", include_in_schema=False)
def get_recommendations(request: RecommendationRequest):
    """
    Rank sports for a set of completed fitness test results.

    **Request Body:**
    - `test_results`: Test results with percentiles (0-100)
    - `athlete_id`: Optional identifier echoed back
    - `format`: Response format - 'full' or 'simple'

    **Response:**
    - Sports scoring above 50, highest match first
    - Category, rationale and tags for each sport
    """
    try:
        if request.format == "simple":
            results = engine.score(request.test_results)
            return {
                "recommendations": [_serialize_recommendation(r) for r in results],
                "count": len(results),
            }

        output = engine.recommend(request.test_results, athlete_id=request.athlete_id)
    except InvalidInputError as e:
        raise _invalid_input(e)

    return {
        "request_id": output.request_id,
        "athlete_id": output.athlete_id,
        "summary": {
            "total_evaluated": output.total_sports_evaluated,
            "total_recommended": output.total_recommended,
            "missing_metrics": output.missing_metrics,
            "processing_time_ms": output.processing_time_ms,
        },
        "recommendations": [_serialize_recommendation(r) for r in output.recommendations],
        "warnings": output.warnings,
        "engine_version": output.engine_version,
    }


@router.post("/sports/{sport_id}", summary="Detailed score for one sport")
def get_sport_breakdown(sport_id: str, request: ScoreRequest):
    """Per-metric breakdown for a single sport, recommended or not."""
    try:
        return engine.score_single_sport(request.test_results, sport_id)
    except UnknownSportError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise _invalid_input(e)


@router.post("/fitness-score", summary="Overall fitness score from raw results")
def get_fitness_score(request: FitnessScoreRequest):
    """
    Normalise raw test scores, rate each test and combine them into a single
    0-100 fitness score.
    """
    try:
        output = assess_fitness(request.test_results, request.endurance_distance_m)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return output.model_dump()


@router.get("/catalogue", summary="Sport catalogue")
def get_catalogue():
    """Sports, weights and thresholds the engine scores against."""
    return catalogue_to_dict(engine.catalogue)


def _serialize_recommendation(rec: SportRecommendation) -> Dict[str, Any]:
    """Convert SportRecommendation to JSON-serializable dict."""
    return {
        "rank": rec.rank,
        "sport_id": rec.sport_id,
        "name": rec.name,
        "match_percentage": rec.match_percentage,
        "category": rec.category,
        "reasoning": rec.reasoning,
        "strength_tags": rec.strength_tags,
        "improvement_tags": rec.improvement_tags,
        "icon": rec.icon,
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Sport recommendation engine health check")
def health_check():
    """Check if recommendation engine is operational."""
    return {
        "status": "ok",
        "engine": "sport-recommendation",
        "version": ENGINE_VERSION,
        "sports": len(engine.catalogue),
    }
