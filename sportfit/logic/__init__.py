"""
Sport-Fit Logic Module

Provides the deterministic scoring engine for sport recommendations.
"""

from .contracts import (
    TestResult,
    RawTestResult,
    SportProfile,
    SportRecommendation,
    RecommendationOutput,
    ScoredSport,
    FitnessTestRating,
    FitnessScoreOutput,
)
from .catalogue import (
    SportCatalogue,
    get_default_catalogue,
    load_catalogue,
    resolve_catalogue,
)
from .engine import SportRecommendationEngine, score
from .normalizer import build_metric_lookup
from .fitness_score import calculate_fitness_score, assess_fitness
from .errors import InvalidInputError, CatalogueError, UnknownSportError
from .constants import SportCategory, Rating

__all__ = [
    # Main engine
    "SportRecommendationEngine",
    "score",
    "build_metric_lookup",
    "calculate_fitness_score",
    "assess_fitness",

    # Catalogue
    "SportCatalogue",
    "get_default_catalogue",
    "load_catalogue",
    "resolve_catalogue",

    # Contracts
    "TestResult",
    "RawTestResult",
    "SportProfile",
    "SportRecommendation",
    "RecommendationOutput",
    "ScoredSport",
    "FitnessTestRating",
    "FitnessScoreOutput",

    # Errors
    "InvalidInputError",
    "CatalogueError",
    "UnknownSportError",

    # Enums
    "SportCategory",
    "Rating",
]
