"""Integration tests for share codes and reforging through the API."""

import pytest
from fastapi.testclient import TestClient

from epochforge.api.app import create_app
from epochforge.api.runtime import ApiState
from epochforge.config import Settings


@pytest.fixture
def client(tmp_path):
    """Create a test client backed by a temporary match directory."""

    app = create_app(state_factory=lambda: ApiState(settings=Settings(data_dir=tmp_path)))
    with TestClient(app) as test_client:
        yield test_client


def _forge(client, payload):
    response = client.post("/matches", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_share_code_reproduces_match(client):
    """Forging a shared code rebuilds the exact same loadouts."""
    original = _forge(
        client,
        {
            "seed": "EF-1234",
            "players": [{"name": "Taco"}, {"name": "Piert", "archetype": "Naval"}],
            "map_type": {
                "mode": "random",
                "value": "Continental",
                "allowed": ["Small Islands", "Large Islands"],
            },
        },
    )
    assert original["resolved"]["map_type"] in {"Small Islands", "Large Islands"}

    code = original["share_code"]
    response = client.get(f"/share/{code}")
    assert response.status_code == 200
    shared = response.json()
    assert shared["seed"] == "EF-1234"
    assert shared["map_type"]["mode"] == "random"

    response = client.post(f"/share/{code}/forge")
    assert response.status_code == 201
    copy = response.json()
    assert copy["id"] != original["id"]
    assert copy["resolved"] == original["resolved"]
    assert copy["civs"] == original["civs"]


def test_generated_seed_and_reforge(client):
    """Omitting the seed generates one; reforging draws a fresh one."""
    created = _forge(client, {"players": [{"name": "Kuban"}]})
    assert created["seed"].startswith("EF-")

    response = client.post(f"/matches/{created['id']}/reforge")
    assert response.status_code == 201
    reforged = response.json()
    assert reforged["seed"].startswith("EF-")
    assert reforged["resolved"]["players"][0]["name"] == "Kuban"

    response = client.get("/matches")
    assert len(response.json()) == 2


def test_random_end_epoch_respects_range(client):
    """A randomized end epoch lands inside the requested bounds."""
    for n in range(5):
        created = _forge(
            client,
            {
                "seed": f"EF-{n}",
                "end_epoch_random": True,
                "end_epoch_min": 6,
                "end_epoch_max": 9,
                "point_usage": {
                    "mode": "random",
                    "value": "Efficient",
                    "allowed": ["Efficient", "Exact", "Loose"],
                },
            },
        )
        assert 6 <= created["resolved"]["end_epoch"] <= 9
        for civ in created["civs"]:
            assert civ["is_valid"]
            assert civ["points_spent"] <= 100


def test_reforge_unknown_match(client):
    response = client.post("/matches/404/reforge")
    assert response.status_code == 404


def test_api_docs_available(client):
    """Test that OpenAPI documentation is accessible."""
    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.json()["info"]["title"] == "Epoch Forge API"
