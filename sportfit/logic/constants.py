"""
Scoring Engine Constants

Defines caps, thresholds, tier enums and the fitness test registry used by the
sport-fit engine. All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, Tuple

ENGINE_VERSION = "1.0.0"

# =============================================================================
# SCORING LIMITS
# =============================================================================

# No sport is ever reported as a 100% match
MAX_MATCH_PERCENTAGE = 95.0

# A sport must score strictly above this to be recommended at all
INCLUSION_THRESHOLD = 50.0

# Percentile range accepted for every test result
MIN_PERCENTILE = 0.0
MAX_PERCENTILE = 100.0

# Percentile used for a metric the caller did not supply
MISSING_METRIC_PERCENTILE = 0.0

# Display rounding for match percentages
MATCH_DECIMALS = 2

# =============================================================================
# CLASSIFICATION
# =============================================================================

class SportCategory(str, Enum):
    """Tier attached to a recommended sport."""
    HIGHLY_RECOMMENDED = "highly_recommended"
    RECOMMENDED = "recommended"
    # Reserved for catalogue entries with an inclusion floor below 50;
    # unreachable with the current inclusion threshold.
    POTENTIAL = "potential"


DEFAULT_HIGH_THRESHOLD = 80.0

# =============================================================================
# METRIC NAMES
# =============================================================================

HEIGHT = "Height"
WEIGHT = "Weight"
FLEXIBILITY_TEST = "Flexibility Test"
VERTICAL_JUMP = "Vertical Jump"
BROAD_JUMP = "Broad Jump"
MEDICINE_BALL_THROW = "Medicine Ball Throw"
SPRINT_30M = "30m Sprint"
SHUTTLE_RUN = "Shuttle Run"
SIT_UPS = "Sit-ups"
ENDURANCE_RUN = "Endurance Run"

# =============================================================================
# FITNESS TEST REGISTRY
# =============================================================================

class Rating(str, Enum):
    """Qualitative band for a raw test score."""
    POOR = "Poor"
    AVERAGE = "Average"
    GOOD = "Good"
    EXCELLENT = "Excellent"


# test key -> (display name, unit)
FITNESS_TESTS: Dict[str, Tuple[str, str]] = {
    "height": (HEIGHT, "cm"),
    "weight": (WEIGHT, "kg"),
    "sit_and_reach": (FLEXIBILITY_TEST, "inches"),
    "vertical_jump": (VERTICAL_JUMP, "cm"),
    "broad_jump": (BROAD_JUMP, "meters"),
    "medicine_ball_throw": (MEDICINE_BALL_THROW, "meters"),
    "30m_sprint": (SPRINT_30M, "seconds"),
    "shuttle_run": (SHUTTLE_RUN, "seconds"),
    "sit_ups": (SIT_UPS, "reps"),
    "endurance_run": (ENDURANCE_RUN, "minutes"),
}

# Weights for the overall fitness score (sum to 1.0)
FITNESS_SCORE_WEIGHTS: Dict[str, float] = {
    "height": 0.05,
    "weight": 0.05,
    "sit_and_reach": 0.10,
    "vertical_jump": 0.15,
    "broad_jump": 0.15,
    "medicine_ball_throw": 0.10,
    "30m_sprint": 0.15,
    "shuttle_run": 0.10,
    "sit_ups": 0.10,
    "endurance_run": 0.15,
}

# Weight applied to a test missing from FITNESS_SCORE_WEIGHTS
DEFAULT_FITNESS_WEIGHT = 0.1

# Normalised score for a test without a normalisation rule
DEFAULT_NORMALIZED_SCORE = 50.0

# test key -> (baseline, span, lower_is_better)
# higher-is-better: (raw - baseline) / span * 100
# lower-is-better:  100 - (raw - baseline) / span * 100
RAW_SCORE_NORMALIZATION: Dict[str, Tuple[float, float, bool]] = {
    "vertical_jump": (0.0, 60.0, False),
    "broad_jump": (0.0, 3.0, False),
    "sit_and_reach": (-5.0, 15.0, False),
    "30m_sprint": (2.5, 2.0, True),
    "shuttle_run": (9.0, 4.0, True),
    "sit_ups": (0.0, 60.0, False),
    "endurance_run": (4.0, 8.0, True),
}

# test key -> (excellent, good, average) cut-offs, and whether lower is better
RATING_BANDS: Dict[str, Tuple[Tuple[float, float, float], bool]] = {
    "sit_and_reach": ((8.0, 6.0, 4.0), False),
    "vertical_jump": ((50.0, 40.0, 30.0), False),
    "broad_jump": ((2.4, 2.0, 1.6), False),
    "medicine_ball_throw": ((7.0, 5.5, 4.0), False),
    "30m_sprint": ((2.8, 3.2, 3.6), True),
    "shuttle_run": ((10.0, 11.0, 12.0), True),
    "sit_ups": ((45.0, 35.0, 25.0), False),
}

# Endurance run bands in minutes, keyed by run distance in metres
ENDURANCE_RATING_BANDS: Dict[int, Tuple[float, float, float]] = {
    800: (2.5, 3.0, 3.5),
    1600: (6.0, 7.5, 9.0),
}

DEFAULT_ENDURANCE_DISTANCE_M = 1600
