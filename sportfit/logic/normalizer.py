"""
Metric Input Normalizer

Turns an ordered sequence of TestResult into a metric name -> percentile
lookup. Percentiles are passed through untouched; range checks belong to the
engine at scoring time.
"""

import math
from typing import Dict, List, Sequence

from .contracts import TestResult
from .catalogue import SportCatalogue
from .errors import InvalidInputError


def check_result_shape(result: TestResult) -> None:
    """Reject a result with a blank metric name or a non-finite percentile."""
    if not result.metric_name or not result.metric_name.strip():
        raise InvalidInputError("Test result has an empty metric name")
    if not math.isfinite(result.percentile):
        raise InvalidInputError(
            f"Percentile for {result.metric_name!r} is not a finite number",
            metric_name=result.metric_name,
        )


def build_metric_lookup(test_results: Sequence[TestResult]) -> Dict[str, float]:
    """
    Build the MetricLookup for one scoring call.

    A metric that appears more than once takes its last value.

    Args:
        test_results: Results in the order they were collected

    Returns:
        Dict mapping metric name to percentile
    """
    lookup: Dict[str, float] = {}
    for result in test_results:
        check_result_shape(result)
        lookup[result.metric_name] = result.percentile
    return lookup


def missing_metrics(
    lookup: Dict[str, float],
    catalogue: SportCatalogue
) -> List[str]:
    """
    List metrics weighted by any catalogue sport but absent from the lookup.
    """
    referenced = set()
    for profile in catalogue.profiles:
        referenced.update(
            metric for metric, weight in profile.weight_vector.items() if weight > 0
        )
    return sorted(referenced - set(lookup))
