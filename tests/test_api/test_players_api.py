"""
Tests for the Prospect API.

Every response must be a client-safe view.
"""

import pytest
from fastapi.testclient import TestClient

from prospect.api.main import create_app
from prospect.api.routers.players import resolve_scheme
from prospect.api.services.player_store import PlayerStore, get_player_store, reset_player_store
from prospect.core.models.scheme_fit import OffensiveScheme
from prospect.core.models.view import validate_view_model_privacy
from prospect.core.sampling import make_rng
from prospect.generators.player import ROSTER_SIZE


@pytest.fixture
def client():
    """Test client over a seeded store."""
    reset_player_store(PlayerStore(rng=make_rng(7), current_year=2025))
    with TestClient(create_app()) as client:
        yield client
    reset_player_store()


class TestAppEndpoints:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Prospect API"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "players": 0, "rosters": 0}

    def test_resolve_scheme(self):
        assert resolve_scheme(None) is None
        assert resolve_scheme("west_coast") == OffensiveScheme.WEST_COAST


class TestPlayerEndpoints:
    """Test player creation and lookup."""

    def test_create_player(self, client):
        response = client.post(
            "/api/v1/players",
            json={"position": "WR", "tier": "starter", "scheme": "west_coast"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["position"] == "WR"
        assert "West Coast" in data["scheme_fit_description"]
        assert validate_view_model_privacy(response.text)

    def test_create_draft_prospect(self, client):
        response = client.post("/api/v1/players", json={"for_draft": True})
        assert response.status_code == 201
        assert response.json()["experience"] == 0
        assert response.json()["draft_info"]["year"] == 2025

    def test_create_veteran(self, client):
        response = client.post("/api/v1/players", json={"veteran": True})
        assert response.status_code == 201
        assert 25 <= response.json()["age"] <= 35

    @pytest.mark.parametrize(
        "body",
        [
            {"scheme": "wishbone"},
            {"position": "QBX"},
            {"tier": "legend"},
        ],
    )
    def test_create_rejects_bad_input(self, client, body):
        assert client.post("/api/v1/players", json=body).status_code == 422

    def test_get_player(self, client):
        created = client.post("/api/v1/players", json={"position": "CB"}).json()
        response = client.get(f"/api/v1/players/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_player_with_scheme(self, client):
        created = client.post("/api/v1/players", json={"position": "ILB"}).json()
        response = client.get(
            f"/api/v1/players/{created['id']}", params={"scheme": "cover_two"}
        )
        assert response.status_code == 200
        assert response.json()["scheme_fit_description"] != "Scheme fit unknown"

    def test_get_player_bad_scheme(self, client):
        created = client.post("/api/v1/players", json={}).json()
        response = client.get(f"/api/v1/players/{created['id']}", params={"scheme": "nope"})
        assert response.status_code == 422

    def test_get_unknown_player(self, client):
        response = client.get("/api/v1/players/not-a-player")
        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    def test_players_counted_in_health(self, client):
        client.post("/api/v1/players", json={})
        assert client.get("/health").json()["players"] == 1


class TestRosterEndpoints:
    def test_roster(self, client):
        response = client.get("/api/v1/teams/team-3/roster")
        assert response.status_code == 200
        data = response.json()
        assert data["team_id"] == "team-3"
        assert data["size"] == ROSTER_SIZE
        assert len(data["players"]) == ROSTER_SIZE
        assert validate_view_model_privacy(response.text)

    def test_roster_stable_across_reads(self, client):
        first = client.get("/api/v1/teams/team-3/roster").json()
        second = client.get("/api/v1/teams/team-3/roster").json()
        assert first == second
        assert get_player_store().roster_count == 1

    def test_roster_players_retrievable(self, client):
        roster = client.get("/api/v1/teams/team-5/roster").json()
        player_id = roster["players"][0]["id"]
        assert client.get(f"/api/v1/players/{player_id}").status_code == 200


class TestDraftClassEndpoint:
    def test_draft_class(self, client):
        response = client.get("/api/v1/draft-class", params={"size": 5})
        assert response.status_code == 200
        data = response.json()
        assert data["year"] == 2025
        assert data["size"] == 5
        assert all(p["experience"] == 0 for p in data["prospects"])
        assert validate_view_model_privacy(response.text)

    @pytest.mark.parametrize("size", [0, 1001])
    def test_draft_class_size_bounds(self, client, size):
        response = client.get("/api/v1/draft-class", params={"size": size})
        assert response.status_code == 422

    def test_only_latest_class_kept(self, client):
        first = client.get("/api/v1/draft-class", params={"size": 50}).json()
        for _ in range(4):
            latest = client.get("/api/v1/draft-class", params={"size": 50}).json()
        assert get_player_store().player_count == 50
        old_id = first["prospects"][0]["id"]
        assert client.get(f"/api/v1/players/{old_id}").status_code == 404
        new_id = latest["prospects"][0]["id"]
        assert client.get(f"/api/v1/players/{new_id}").status_code == 200


class TestPlayerStore:
    def test_replacing_class_leaves_rosters(self):
        store = PlayerStore(rng=make_rng(3), current_year=2025)
        store.get_roster("team-1")
        for _ in range(3):
            store.create_draft_class(100)
        assert store.player_count == ROSTER_SIZE + 100
        store.clear()
        assert store.player_count == 0
