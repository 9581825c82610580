"""Tests for the FastAPI layer."""

from __future__ import annotations

import logging
from urllib.parse import quote

import pytest
from httpx import ASGITransport, AsyncClient

from epochforge.api.app import create_app
from epochforge.api.runtime import ApiState
from epochforge.config import Settings
from epochforge.domain import models as dm
from epochforge.repository import JsonMatchRepository

MATCH_PAYLOAD = {
    "seed": "EF-1234",
    "players": [{"name": "Taco"}, {"name": "Piert"}],
}


def _make_app(tmp_path):
    def factory() -> ApiState:
        return ApiState(settings=Settings(data_dir=tmp_path))

    app = create_app(state_factory=factory)
    transport = ASGITransport(app=app)
    return app, transport


async def _create_match(client: AsyncClient, payload=None) -> dict:
    response = await client.post("/matches", json=payload or MATCH_PAYLOAD)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_lifespan_manages_state(tmp_path, caplog):
    app, _ = _make_app(tmp_path)

    with caplog.at_level(logging.INFO, logger="epochforge"):
        async with app.router.lifespan_context(app):
            state = app.state.api_state
            assert isinstance(state, ApiState)
            assert state.settings.data_dir == tmp_path
        assert app.state.api_state is None

    messages = [record.getMessage() for record in caplog.records]
    assert any("ready" in message and str(tmp_path) in message for message in messages)
    assert any("shutting down API state" in message for message in messages)


@pytest.mark.asyncio
async def test_health_and_catalog(tmp_path):
    app, transport = _make_app(tmp_path)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.get("/health")
        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "ok"
        assert payload["max_players"] == 10

        response = await client.get("/catalog")
        assert response.status_code == 200
        catalog = response.json()
        assert len(catalog["epochs"]) == 15
        assert len(catalog["maps"]) == 12
        assert "Efficient" in catalog["point_usage_modes"]


@pytest.mark.asyncio
async def test_match_lifecycle_via_api(tmp_path):
    app, transport = _make_app(tmp_path)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        created = await _create_match(client)
        match_id = created["id"]
        assert created["seed"] == "EF-1234"
        assert created["header"] == "Continental World · Casual · Stone Age → Digital Age"
        assert [civ["player_name"] for civ in created["civs"]] == ["Taco", "Piert"]
        assert all(civ["is_valid"] for civ in created["civs"])
        assert all(civ["points_spent"] <= 100 for civ in created["civs"])

        response = await client.get("/matches")
        assert response.status_code == 200
        assert [m["id"] for m in response.json()] == [match_id]

        response = await client.get(f"/matches/{match_id}")
        assert response.status_code == 200
        assert response.json()["civs"] == created["civs"]

        response = await client.post(f"/matches/{match_id}/players/0/reroll")
        assert response.status_code == 200
        rerolled = response.json()
        assert rerolled["reroll_used"] is True
        assert rerolled["reasoning"].endswith(" (Rerolled)")

        response = await client.post(f"/matches/{match_id}/players/0/reroll")
        assert response.status_code == 200
        assert response.json() == rerolled

        response = await client.get(f"/matches/{match_id}")
        detail = response.json()
        assert detail["civs"][0] == rerolled
        assert detail["civs"][1] == created["civs"][1]

    repo = JsonMatchRepository(tmp_path)
    stored = repo.load(dm.MatchID(match_id))
    assert stored.civs[0].reroll_used is True


@pytest.mark.asyncio
async def test_export_and_report(tmp_path):
    app, transport = _make_app(tmp_path)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        created = await _create_match(client)
        match_id = created["id"]

        response = await client.get(f"/matches/{match_id}/export")
        assert response.status_code == 200
        assert 'filename="epoch-forge-EF-1234.json"' in response.headers["content-disposition"]
        document = response.json()
        assert document["config"]["seed"] == "EF-1234"
        assert len(document["civs"]) == 2

        response = await client.get(f"/matches/{match_id}/players/1/report")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("Tactical Data: Piert")


@pytest.mark.asyncio
@pytest.mark.parametrize("seed", ["EF-€1", 'EF-"x', "紀元-7"])
async def test_export_with_unusual_seed(tmp_path, seed):
    app, transport = _make_app(tmp_path)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        created = await _create_match(client, {**MATCH_PAYLOAD, "seed": seed})

        response = await client.get(f"/matches/{created['id']}/export")
        assert response.status_code == 200
        header = response.headers["content-disposition"]
        assert header.isascii()
        assert header.count('"') == 2
        encoded = quote(f"epoch-forge-{seed}.json", safe="")
        assert f"filename*=UTF-8''{encoded}" in header
        assert response.json()["config"]["seed"] == seed


@pytest.mark.asyncio
async def test_error_statuses(tmp_path):
    app, transport = _make_app(tmp_path)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.get("/matches/99")
        assert response.status_code == 404

        response = await client.post("/matches/99/players/0/reroll")
        assert response.status_code == 404

        response = await client.post(
            "/matches", json={**MATCH_PAYLOAD, "start_epoch": 10, "end_epoch": 5}
        )
        assert response.status_code == 422
        assert "cannot exceed" in response.json()["detail"]

        response = await client.post(
            "/matches",
            json={
                **MATCH_PAYLOAD,
                "end_epoch": 10,
                "map_type": {"mode": "fixed", "value": "Planets – Mars"},
            },
        )
        assert response.status_code == 422

        tournament = await _create_match(
            client,
            {**MATCH_PAYLOAD, "preset": {"mode": "fixed", "value": "Tournament"}},
        )
        response = await client.post(f"/matches/{tournament['id']}/players/0/reroll")
        assert response.status_code == 409

        response = await client.post(f"/matches/{tournament['id']}/players/7/reroll")
        assert response.status_code == 404

        response = await client.get(f"/matches/{tournament['id']}/players/7/report")
        assert response.status_code == 404

        response = await client.get("/share/not-a-share-code")
        assert response.status_code == 422
