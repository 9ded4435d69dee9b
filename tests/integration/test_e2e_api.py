import asyncio
import pytest
from fastapi.testclient import TestClient
from pokedetail.main import app
from pokedetail.dependencies import get_poke_client
from pokedetail.clients.pokeapi_client import PokeAPIClient

# Mock data for the external API
MOCK_POKEAPI_PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
    "sprites": {
        "front_default": "https://img.example/25.png",
        "front_shiny": "https://img.example/shiny/25.png",
        "other": {"official-artwork": {"front_default": "https://img.example/art/25.png"}},
    },
    "types": [{"slot": 1, "type": {"name": "electric"}}],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed"}},
    ],
}

@pytest.fixture(scope="function")
def test_client():
    """
    Provides a TestClient whose PokeAPI client is created per test,
    so no connection pool is shared between tests.
    """
    poke_client = PokeAPIClient(base_url="https://pokeapi.co/api/v2")

    # Override the dependency to return our per-test client
    app.dependency_overrides[get_poke_client] = lambda: poke_client

    with TestClient(app) as client:
        yield client

    # Cleanup: Clear dependency overrides after test
    app.dependency_overrides.clear()
    asyncio.run(poke_client.close())


def test_e2e_get_detail_success(httpx_mock, test_client):
    """
    E2E test for Endpoint 1: the view-model for pikachu.
    """
    # Arrange Mocks
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/pikachu",
        json=MOCK_POKEAPI_PIKACHU,
        status_code=200
    )

    # Act (Hit the public API endpoint)
    response = test_client.get("/pokemon/Pikachu")

    # Assert
    assert response.status_code == 200
    body = response.json()
    assert body["display_name"] == "Pikachu"
    assert body["padded_id"] == "025"
    assert len(body["type_badges"]) == len(MOCK_POKEAPI_PIKACHU["types"])
    assert body["hero_image_url"] == "https://img.example/art/25.png"
    assert [f["label"] for f in body["forms"]] == ["Default", "Shiny", "Artwork"]
    assert [row["fill_ratio"] for row in body["stat_rows"]] == [0.175, 0.45]


def test_e2e_not_found_maps_to_404(httpx_mock, test_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/missingno",
        status_code=404
    )

    response = test_client.get("/pokemon/missingno")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


def test_e2e_upstream_failure_maps_to_503(httpx_mock, test_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/pikachu",
        status_code=500
    )

    response = test_client.get("/pokemon/pikachu")

    assert response.status_code == 503
    assert "External API Error" in response.json()["detail"]


def test_e2e_stats_tab(httpx_mock, test_client):
    """
    E2E test for Endpoint 2: only the stats slice is returned.
    """
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/pikachu",
        json=MOCK_POKEAPI_PIKACHU,
        status_code=200
    )

    response = test_client.get("/pokemon/pikachu/tabs/stats")

    assert response.status_code == 200
    body = response.json()
    assert body["tab"] == "stats"
    assert [row["name"] for row in body["stat_rows"]] == ["hp", "speed"]
    assert "forms" not in body


def test_e2e_forms_tab(httpx_mock, test_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/pikachu",
        json=MOCK_POKEAPI_PIKACHU,
        status_code=200
    )

    response = test_client.get("/pokemon/pikachu/tabs/forms")

    assert response.status_code == 200
    body = response.json()
    assert body["tab"] == "forms"
    assert body["hero_image_url"] == "https://img.example/art/25.png"
    assert [f["label"] for f in body["forms"]] == ["Default", "Shiny", "Artwork"]
    assert "stat_rows" not in body


def test_e2e_unknown_tab_is_rejected(test_client):
    response = test_client.get("/pokemon/pikachu/tabs/moves")

    assert response.status_code == 422


def test_e2e_screen_success(httpx_mock, test_client):
    """
    E2E test for Endpoint 3: a successful load ends in the success state.
    """
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/pikachu",
        json=MOCK_POKEAPI_PIKACHU,
        status_code=200
    )

    response = test_client.get("/pokemon/pikachu/screen")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["error"] is None
    assert body["view_model"]["display_name"] == "Pikachu"
    assert len(body["view_model"]["type_badges"]) == 1


def test_e2e_screen_error_has_no_view_model(httpx_mock, test_client):
    """
    A non-2xx response yields the error state and no populated view-model.
    """
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/missingno",
        status_code=404
    )

    response = test_client.get("/pokemon/missingno/screen")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "error"
    assert body["view_model"] is None
    assert "not found" in body["error"]
