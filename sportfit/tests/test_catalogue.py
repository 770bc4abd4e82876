"""
Tests for the sport catalogue data and loader.
"""

import json

import pytest
from pydantic import ValidationError

from sportfit.logic import (
    SportCatalogue,
    SportProfile,
    CatalogueError,
    UnknownSportError,
    get_default_catalogue,
    load_catalogue,
    resolve_catalogue,
    score,
)
from sportfit.logic.catalogue import catalogue_to_dict, catalogue_from_data
from .conftest import make_result


def test_default_catalogue_contents():
    catalogue = get_default_catalogue()

    assert len(catalogue) == 6
    assert sorted(catalogue.sport_ids) == [
        "athletics", "basketball", "football", "gymnastics", "swimming", "weightlifting",
    ]
    assert catalogue.get("swimming").t_high == 75
    assert catalogue.get("basketball").weight_vector == {
        "Height": 0.3, "Vertical Jump": 0.3, "Shuttle Run": 0.2, "30m Sprint": 0.2,
    }


def test_default_weights_are_non_negative():
    for profile in get_default_catalogue().profiles:
        assert all(w >= 0 for w in profile.weight_vector.values())
        assert profile.reasoning_templates
        assert profile.icon


def test_catalogue_is_frozen():
    catalogue = get_default_catalogue()

    with pytest.raises(ValidationError):
        catalogue.profiles = ()
    with pytest.raises(ValidationError):
        catalogue.get("athletics").t_high = 10
    with pytest.raises(TypeError):
        catalogue.get("basketball").weight_vector["Height"] = 0.9
    with pytest.raises(TypeError):
        del catalogue.get("basketball").weight_vector["Height"]


def test_weights_stay_fixed_after_edit_attempt():
    before = score([make_result("Height", 100)])

    with pytest.raises(TypeError):
        get_default_catalogue().get("basketball").weight_vector["Height"] = 0.9

    assert score([make_result("Height", 100)]) == before == []
    assert get_default_catalogue().get("basketball").weight_vector["Height"] == 0.3


def test_profile_copies_caller_weights():
    weights = {"Endurance Run": 0.6}
    profile = SportProfile(sport_id="rowing", weight_vector=weights)

    weights["Endurance Run"] = 5.0

    assert profile.weight_vector["Endurance Run"] == 0.6
    assert profile.model_dump()["weight_vector"] == {"Endurance Run": 0.6}


def test_unknown_sport_lookup():
    with pytest.raises(UnknownSportError) as exc_info:
        get_default_catalogue().get("curling")

    assert exc_info.value.sport_id == "curling"
    assert isinstance(exc_info.value, KeyError)


def test_duplicate_sport_ids_rejected():
    with pytest.raises(ValidationError):
        SportCatalogue(profiles=(
            SportProfile(sport_id="rowing", weight_vector={"Endurance Run": 0.5}),
            SportProfile(sport_id="rowing", weight_vector={"Height": 0.5}),
        ))


@pytest.mark.parametrize("weights", [{"Height": -0.1}, {"": 0.5}, {"Height": float("nan")}])
def test_bad_weights_rejected(weights):
    with pytest.raises(ValidationError):
        SportProfile(sport_id="rowing", weight_vector=weights)


def test_blank_sport_id_rejected():
    with pytest.raises(ValidationError):
        SportProfile(sport_id="  ", weight_vector={"Height": 0.5})


def test_catalogue_file_round_trip(tmp_path):
    path = tmp_path / "sports.json"
    path.write_text(json.dumps(catalogue_to_dict(get_default_catalogue())), encoding="utf-8")

    loaded = load_catalogue(str(path))

    assert loaded == get_default_catalogue()


def test_custom_catalogue_file_drives_scoring(tmp_path):
    path = tmp_path / "sports.json"
    path.write_text(json.dumps({
        "sports": [{
            "sport_id": "rowing",
            "name": "Rowing",
            "weight_vector": {"Endurance Run": 0.5, "Medicine Ball Throw": 0.5},
            "t_high": 70,
            "reasoning_templates": ["Strong aerobic base"],
            "strength_tags": ["Endurance"],
            "icon": "🚣",
        }]
    }), encoding="utf-8")

    catalogue = resolve_catalogue(str(path))
    recommendations = score([
        make_result("Endurance Run", 80),
        make_result("Medicine Ball Throw", 70),
    ], catalogue)

    assert [(r.sport_id, r.match_percentage, r.category) for r in recommendations] == [
        ("rowing", 75.0, "highly_recommended"),
    ]


def test_resolve_without_path_uses_default():
    assert resolve_catalogue(None) is get_default_catalogue()


def test_bare_list_accepted():
    catalogue = catalogue_from_data([
        {"sport_id": "rowing", "weight_vector": {"Endurance Run": 1.0}},
    ])

    assert catalogue.sport_ids == ["rowing"]


@pytest.mark.parametrize("data", [
    {"sports": "rowing"},
    {"teams": []},
    [{"sport_id": "rowing", "weight_vector": {"Height": -1}}],
    ["rowing"],
])
def test_malformed_catalogue_data(data):
    with pytest.raises(CatalogueError):
        catalogue_from_data(data)


def test_missing_catalogue_file(tmp_path):
    with pytest.raises(CatalogueError):
        load_catalogue(str(tmp_path / "missing.json"))


def test_invalid_json_file(tmp_path):
    path = tmp_path / "sports.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogueError):
        load_catalogue(str(path))
