"""
Sport-Fit Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for generating sport recommendations.
"""

import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .contracts import TestResult, SportRecommendation, RecommendationOutput
from .catalogue import SportCatalogue, get_default_catalogue
from .normalizer import check_result_shape, build_metric_lookup, missing_metrics
from .aggregator import batch_score, score_sport
from .classifier import classify_sport, is_included
from .ranker import filter_included, rank_sports
from .output_assembler import build_recommendations, assemble_output
from .errors import InvalidInputError
from .constants import MIN_PERCENTILE, MAX_PERCENTILE, ENGINE_VERSION

logger = logging.getLogger(__name__)


def validate_results(test_results: Sequence[TestResult]) -> None:
    """
    Check a whole batch before any scoring happens.

    Raises:
        InvalidInputError: blank metric name, non-finite percentile or a
            percentile outside [0, 100]
    """
    for result in test_results:
        check_result_shape(result)
        if not MIN_PERCENTILE <= result.percentile <= MAX_PERCENTILE:
            logger.warning(
                f"Rejecting batch: {result.metric_name} percentile {result.percentile} out of range"
            )
            raise InvalidInputError(
                f"Percentile for {result.metric_name!r} must be between "
                f"{MIN_PERCENTILE:g} and {MAX_PERCENTILE:g}, got {result.percentile:g}",
                metric_name=result.metric_name,
            )


def _recommend(
    test_results: Iterable[TestResult],
    catalogue: SportCatalogue
) -> List[SportRecommendation]:
    test_results = list(test_results)
    validate_results(test_results)
    lookup = build_metric_lookup(test_results)

    scored = batch_score(lookup, catalogue)
    ranked = rank_sports(filter_included(scored))
    logger.debug(f"Scored {len(scored)} sports, {len(ranked)} above threshold")

    return build_recommendations(ranked)


def score(
    test_results: Iterable[TestResult],
    catalogue: Optional[SportCatalogue] = None
) -> List[SportRecommendation]:
    """
    Score test results against the sport catalogue.

    Args:
        test_results: Completed test results for one athlete
        catalogue: Catalogue to score against; the embedded one when None

    Returns:
        Recommendations ordered by match percentage (descending), ties by
        sport_id (ascending)
    """
    if catalogue is None:
        catalogue = get_default_catalogue()
    return _recommend(test_results, catalogue)


class SportRecommendationEngine:
    """
    Recommendation engine bound to one catalogue.

    Pipeline flow:
    1. Validation - Reject the whole batch on any bad result
    2. Normalisation - Build the metric lookup
    3. Aggregation - Composite score per sport, capped at 95
    4. Filtering - Keep sports scoring above 50
    5. Ranking - Order by score, then sport_id
    6. Output Assembly - Build the RecommendationOutput
    """

    def __init__(self, catalogue: Optional[SportCatalogue] = None):
        """
        Initialize the engine.

        Args:
            catalogue: Sport catalogue. If None, uses the embedded catalogue.
        """
        self.catalogue = catalogue if catalogue is not None else get_default_catalogue()
        self.version = ENGINE_VERSION

    def score(self, test_results: Iterable[TestResult]) -> List[SportRecommendation]:
        """Ranked recommendation list for these results."""
        return _recommend(test_results, self.catalogue)

    def recommend(
        self,
        test_results: Iterable[TestResult],
        athlete_id: Optional[str] = None
    ) -> RecommendationOutput:
        """
        Generate recommendations with summary statistics.

        Args:
            test_results: Completed test results
            athlete_id: Optional identifier echoed in the output

        Returns:
            RecommendationOutput with ranked recommendations
        """
        start_time = time.perf_counter()
        test_results = list(test_results)

        logger.info(
            f"🏁 Scoring {len(test_results)} test results for athlete: {athlete_id or 'anonymous'}"
        )

        recommendations = _recommend(test_results, self.catalogue)
        missing = missing_metrics(build_metric_lookup(test_results), self.catalogue)
        if missing:
            logger.info(f"Metrics not supplied, scored as 0: {missing}")

        processing_time = (time.perf_counter() - start_time) * 1000

        output = assemble_output(
            recommendations=recommendations,
            total_evaluated=len(self.catalogue),
            missing=missing,
            athlete_id=athlete_id,
            processing_time_ms=round(processing_time, 2),
        )

        logger.info(
            f"✅ {output.total_recommended}/{output.total_sports_evaluated} sports recommended "
            f"({processing_time:.2f}ms)"
        )
        return output

    def recommend_from_dicts(
        self,
        results_data: Sequence[Dict[str, Any]],
        **kwargs
    ) -> RecommendationOutput:
        """
        Generate recommendations from plain dictionaries.

        Convenience method for API integration.
        """
        test_results = [TestResult(**data) for data in results_data]
        return self.recommend(test_results, **kwargs)

    def score_single_sport(
        self,
        test_results: Iterable[TestResult],
        sport_id: str
    ) -> Dict[str, Any]:
        """
        Detailed scoring for one sport, whether or not it is recommended.

        Args:
            test_results: Completed test results
            sport_id: Catalogue id of the sport

        Returns:
            Dict with per-metric contributions and classification
        """
        profile = self.catalogue.get(sport_id)
        test_results = list(test_results)
        validate_results(test_results)
        lookup = build_metric_lookup(test_results)

        scored = score_sport(lookup, profile)
        included = is_included(scored)

        return {
            "sport_id": profile.sport_id,
            "raw_score": scored.raw_score,
            "match_percentage": scored.match_percentage,
            "included": included,
            "category": classify_sport(scored).value if included else None,
            "t_high": profile.t_high,
            "contributions": {
                metric: {
                    "weight": profile.weight_vector[metric],
                    "percentile": lookup.get(metric),
                    "contribution": contribution,
                }
                for metric, contribution in scored.contributions.items()
            },
        }
