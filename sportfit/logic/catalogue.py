"""
Sport Catalogue

Static sport profiles the engine scores against. Changing recommendation
behaviour means editing this data (or a catalogue file), never engine code.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ValidationError, model_validator

from .contracts import SportProfile
from .errors import CatalogueError, UnknownSportError
from .constants import (
    HEIGHT,
    FLEXIBILITY_TEST,
    VERTICAL_JUMP,
    BROAD_JUMP,
    MEDICINE_BALL_THROW,
    SPRINT_30M,
    SHUTTLE_RUN,
    SIT_UPS,
    ENDURANCE_RUN,
)

logger = logging.getLogger(__name__)


class SportCatalogue(BaseModel):
    """
    Immutable set of sport profiles. Built once at startup and passed to
    every scoring call.
    """
    profiles: Tuple[SportProfile, ...] = ()

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _unique_ids(self) -> "SportCatalogue":
        seen = set()
        for profile in self.profiles:
            if profile.sport_id in seen:
                raise ValueError(f"duplicate sport_id {profile.sport_id!r}")
            seen.add(profile.sport_id)
        return self

    @property
    def sport_ids(self) -> List[str]:
        return [p.sport_id for p in self.profiles]

    def get(self, sport_id: str) -> SportProfile:
        for profile in self.profiles:
            if profile.sport_id == sport_id:
                return profile
        raise UnknownSportError(sport_id)

    def __len__(self) -> int:
        return len(self.profiles)


# =============================================================================
# DEFAULT CATALOGUE
# =============================================================================

DEFAULT_SPORT_PROFILES: Tuple[SportProfile, ...] = (
    SportProfile(
        sport_id="athletics",
        name="Athletics",
        weight_vector={
            SPRINT_30M: 0.3,
            VERTICAL_JUMP: 0.2,
            BROAD_JUMP: 0.2,
            ENDURANCE_RUN: 0.3,
        },
        t_high=80.0,
        reasoning_templates=(
            "Excellent speed and agility scores",
            "Strong jumping ability",
            "Good endurance capacity",
        ),
        strength_tags=("Speed", "Explosive power", "Endurance"),
        improvement_tags=("Strength training", "Technique refinement"),
        icon="🏃‍♂️",
    ),
    SportProfile(
        sport_id="weightlifting",
        name="Weightlifting",
        weight_vector={
            MEDICINE_BALL_THROW: 0.4,
            SIT_UPS: 0.3,
        },
        t_high=75.0,
        reasoning_templates=(
            "High upper body strength",
            "Good core stability",
            "Explosive power potential",
        ),
        strength_tags=("Upper body strength", "Power"),
        improvement_tags=("Technique", "Flexibility"),
        icon="🏋️‍♂️",
    ),
    SportProfile(
        sport_id="gymnastics",
        name="Gymnastics",
        weight_vector={
            FLEXIBILITY_TEST: 0.4,
            SIT_UPS: 0.2,
            VERTICAL_JUMP: 0.2,
        },
        t_high=80.0,
        reasoning_templates=(
            "Exceptional flexibility",
            "Good body control",
            "Optimal strength-to-weight ratio",
        ),
        strength_tags=("Flexibility", "Body control", "Balance"),
        improvement_tags=("Strength training", "Artistic expression"),
        icon="🤸‍♂️",
    ),
    SportProfile(
        sport_id="swimming",
        name="Swimming",
        weight_vector={
            ENDURANCE_RUN: 0.4,
            FLEXIBILITY_TEST: 0.2,
            MEDICINE_BALL_THROW: 0.2,
            HEIGHT: 0.2,
        },
        t_high=75.0,
        reasoning_templates=(
            "Strong cardiovascular endurance",
            "Good flexibility for stroke technique",
            "Balanced upper body strength",
        ),
        strength_tags=("Endurance", "Flexibility", "Coordination"),
        improvement_tags=("Swimming technique", "Stroke efficiency"),
        icon="🏊‍♂️",
    ),
    SportProfile(
        sport_id="basketball",
        name="Basketball",
        weight_vector={
            HEIGHT: 0.3,
            VERTICAL_JUMP: 0.3,
            SHUTTLE_RUN: 0.2,
            SPRINT_30M: 0.2,
        },
        t_high=80.0,
        reasoning_templates=(
            "Good height advantage",
            "Excellent vertical leap",
            "Quick lateral movement",
        ),
        strength_tags=("Height", "Jumping", "Agility"),
        improvement_tags=("Ball handling", "Shooting technique"),
        icon="🏀",
    ),
    SportProfile(
        sport_id="football",
        name="Football",
        weight_vector={
            ENDURANCE_RUN: 0.3,
            SHUTTLE_RUN: 0.3,
            SPRINT_30M: 0.2,
            BROAD_JUMP: 0.2,
        },
        t_high=75.0,
        reasoning_templates=(
            "Excellent endurance for 90-minute games",
            "Quick directional changes",
            "Good leg power for kicking",
        ),
        strength_tags=("Endurance", "Agility", "Leg strength"),
        improvement_tags=("Ball control", "Tactical awareness"),
        icon="⚽",
    ),
)

_DEFAULT_CATALOGUE = SportCatalogue(profiles=DEFAULT_SPORT_PROFILES)


def get_default_catalogue() -> SportCatalogue:
    """Return the embedded catalogue."""
    return _DEFAULT_CATALOGUE


# =============================================================================
# LOADING
# =============================================================================

def catalogue_from_data(data: Any) -> SportCatalogue:
    """
    Build a catalogue from parsed JSON.

    Accepts either `{"sports": [...]}` or a bare list of sport profiles.
    """
    if isinstance(data, dict):
        entries = data.get("sports")
    else:
        entries = data

    if not isinstance(entries, list):
        raise CatalogueError("Catalogue must be a list of sports or an object with a 'sports' list")

    try:
        return SportCatalogue(profiles=tuple(SportProfile(**entry) for entry in entries))
    except (TypeError, ValidationError) as e:
        raise CatalogueError(f"Invalid sport catalogue: {e}") from e


def load_catalogue(path: str) -> SportCatalogue:
    """
    Load a catalogue from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        Validated SportCatalogue
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogueError(f"Cannot read sport catalogue {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogueError(f"Sport catalogue {path} is not valid JSON: {e}") from e

    catalogue = catalogue_from_data(data)
    logger.info(f"Loaded {len(catalogue)} sports from {path}")
    return catalogue


def resolve_catalogue(path: Optional[str] = None) -> SportCatalogue:
    """Load the catalogue at `path`, or the embedded one when no path is given."""
    if path:
        return load_catalogue(path)
    return get_default_catalogue()


def catalogue_to_dict(catalogue: SportCatalogue) -> Dict[str, List[Dict[str, Any]]]:
    """Serialise a catalogue into the JSON shape load_catalogue accepts."""
    return {"sports": [p.model_dump(mode="json") for p in catalogue.profiles]}
