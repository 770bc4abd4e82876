"""
Data Contracts for the Sport-Fit Engine

Defines Pydantic models for TestResult (input), SportProfile (catalogue data)
and SportRecommendation / RecommendationOutput (output).
These contracts are the API boundary for the scoring engine.
"""

import math
from types import MappingProxyType
from typing import List, Optional, Dict, Mapping, Tuple
from pydantic import BaseModel, Field, field_serializer, field_validator

from .constants import (
    SportCategory,
    Rating,
    DEFAULT_HIGH_THRESHOLD,
    ENGINE_VERSION,
)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class TestResult(BaseModel):
    """
    One measured or derived performance observation.

    Range checks on `percentile` happen at scoring time, not here, so an
    out-of-range batch fails as a whole with InvalidInputError.
    """
    __test__ = False  # keep pytest from collecting this as a test class

    metric_name: str
    raw_score: float = 0.0  # native unit, informational only
    percentile: float
    unit: str = ""

    class Config:
        frozen = True


class RawTestResult(BaseModel):
    """A test result in its native unit, without a percentile."""
    metric_name: str
    raw_score: float
    unit: str = ""

    class Config:
        frozen = True


# =============================================================================
# CATALOGUE CONTRACTS
# =============================================================================

class SportProfile(BaseModel):
    """
    Static catalogue entry describing how one sport is scored.
    A metric absent from `weight_vector` contributes nothing. Weights are held
    in a read-only mapping so a shared catalogue cannot be edited in place.
    """
    sport_id: str = Field(min_length=1)
    name: str = ""
    weight_vector: Dict[str, float]
    t_high: float = DEFAULT_HIGH_THRESHOLD
    strength_tags: Tuple[str, ...] = ()
    improvement_tags: Tuple[str, ...] = ()
    reasoning_templates: Tuple[str, ...] = ()
    icon: str = ""

    class Config:
        frozen = True

    @field_validator("sport_id")
    @classmethod
    def _strip_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("sport_id must not be blank")
        return value

    @field_validator("weight_vector")
    @classmethod
    def _non_negative_weights(cls, value: Dict[str, float]) -> Mapping[str, float]:
        for metric, weight in value.items():
            if not metric.strip():
                raise ValueError("weight_vector metric names must not be blank")
            if not math.isfinite(weight) or weight < 0:
                raise ValueError(f"weight for {metric!r} must be a non-negative number")
        return MappingProxyType(dict(value))

    @field_serializer("weight_vector")
    def _weights_as_dict(self, value: Mapping[str, float]) -> Dict[str, float]:
        return dict(value)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class SportRecommendation(BaseModel):
    """
    Single sport recommendation, display-ready.
    """
    sport_id: str
    name: str = ""
    match_percentage: float = Field(ge=0.0, le=100.0)
    category: SportCategory
    reasoning: List[str] = Field(default_factory=list)
    strength_tags: List[str] = Field(default_factory=list)
    improvement_tags: List[str] = Field(default_factory=list)
    icon: str = ""
    rank: int = 0

    class Config:
        frozen = True
        use_enum_values = True


class RecommendationOutput(BaseModel):
    """
    Envelope around a ranked recommendation list with summary statistics.
    """
    # Request tracking
    request_id: Optional[str] = None
    athlete_id: Optional[str] = None

    # Ranked recommendations
    recommendations: List[SportRecommendation] = Field(default_factory=list)

    # Summary Statistics
    total_sports_evaluated: int = 0
    total_recommended: int = 0
    missing_metrics: List[str] = Field(default_factory=list)

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    # Warnings/Notes
    warnings: List[str] = Field(default_factory=list)


class FitnessTestRating(BaseModel):
    """Normalised score and qualitative rating for one raw test result."""
    test_key: Optional[str] = None
    metric_name: str
    raw_score: float
    unit: str = ""
    normalized_score: float = Field(ge=0.0, le=100.0)
    rating: Optional[Rating] = None

    class Config:
        use_enum_values = True


class FitnessScoreOutput(BaseModel):
    """Overall fitness score across a set of raw test results."""
    overall_score: int = Field(ge=0, le=100)
    tests: List[FitnessTestRating] = Field(default_factory=list)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredSport(BaseModel):
    """
    A catalogue entry with its computed composite score.
    Used between scoring and ranking stages.
    """
    profile: SportProfile
    contributions: Dict[str, float] = Field(default_factory=dict)
    raw_score: float = 0.0
    match_percentage: float = 0.0
