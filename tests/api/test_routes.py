"""Tests for the HTTP surface in src/api/routes.py and the error mapping in src/api/app.py"""

from typing import Any, Generator

import pytest
from fastapi import testclient
from sqlalchemy.orm import Session, sessionmaker

from src.api.app import create_app
from src.core.config import Settings

PREFIX = "/game_testing"


@pytest.fixture
def client(session_factory: sessionmaker[Session]) -> Generator[testclient.TestClient, None, None]:
    app = create_app(Settings(api_prefix=PREFIX), session_factory=session_factory)
    with testclient.TestClient(app) as test_client:
        yield test_client


def _create_publisher(client: testclient.TestClient, name: str = "Nova") -> dict[str, Any]:
    response = client.post(
        f"{PREFIX}/publisher",
        json={
            "name": name,
            "email": f"{name.lower()}@example.com",
            "phone": "555-0100",
            "location": "Utrecht",
            "rating": 4.5,
        },
    )
    assert response.status_code == 201
    return response.json()


def _create_game(client: testclient.TestClient, publisher_id: int, **fields: Any) -> dict[str, Any]:
    response = client.post(f"{PREFIX}/{publisher_id}/game", json=fields)
    assert response.status_code == 201
    return response.json()


def _create_tester(client: testclient.TestClient, name: str = "Ada") -> dict[str, Any]:
    response = client.post(
        f"{PREFIX}/tester", json={"name": name, "email": f"{name.lower()}@example.com"}
    )
    assert response.status_code == 201
    return response.json()


# --- Publishers ---
def test_create_and_get_publisher(client: testclient.TestClient) -> None:
    created = _create_publisher(client)
    assert created["id"] == 1
    assert created["games"] == []

    response = client.get(f"{PREFIX}/publisher/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_create_ignores_id_in_body(client: testclient.TestClient) -> None:
    response = client.post(f"{PREFIX}/publisher", json={"id": 40, "name": "Nova"})
    assert response.status_code == 201
    assert response.json()["id"] == 1


def test_update_publisher_uses_path_id(client: testclient.TestClient) -> None:
    created = _create_publisher(client)
    response = client.put(
        f"{PREFIX}/publisher/{created['id']}", json={"id": 999, "name": "Nova 2"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["name"] == "Nova 2"
    assert body["email"] is None


def test_update_unknown_publisher(client: testclient.TestClient) -> None:
    response = client.put(f"{PREFIX}/publisher/5", json={"name": "Ghost"})
    assert response.status_code == 404


def test_list_publishers_sorted(client: testclient.TestClient) -> None:
    for name in ["Nova", "Atlas", "Meridian"]:
        _create_publisher(client, name)

    response = client.get(f"{PREFIX}/publisher")
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Atlas", "Meridian", "Nova"]


def test_delete_publisher(client: testclient.TestClient) -> None:
    publisher = _create_publisher(client)
    game = _create_game(client, publisher["id"], name="Orbit")

    response = client.delete(f"{PREFIX}/publisher/{publisher['id']}")
    assert response.status_code == 200
    assert response.json() == {
        "message": f"Publisher with ID={publisher['id']} was deleted successfully."
    }

    assert client.get(f"{PREFIX}/publisher/{publisher['id']}").status_code == 404
    assert client.get(f"{PREFIX}/game/{game['id']}/testers").status_code == 404


def test_delete_unknown_publisher(client: testclient.TestClient) -> None:
    response = client.delete(f"{PREFIX}/publisher/3")
    assert response.status_code == 404
    assert "Publisher with ID=3" in response.json()["message"]


# --- Games ---
def test_add_game(client: testclient.TestClient) -> None:
    publisher = _create_publisher(client)
    game = _create_game(
        client, publisher["id"], name="Orbit", genre="Puzzle", platforms="PC"
    )

    assert game == {
        "id": 1,
        "name": "Orbit",
        "genre": "Puzzle",
        "platforms": "PC",
        "testerIds": [],
    }
    stored = client.get(f"{PREFIX}/publisher/{publisher['id']}").json()
    assert stored["games"] == [game]


def test_update_game_of_other_publisher(client: testclient.TestClient) -> None:
    owner = _create_publisher(client, "Owner")
    other = _create_publisher(client, "Other")
    game = _create_game(client, owner["id"], name="Orbit")

    response = client.post(
        f"{PREFIX}/{other['id']}/game", json={"id": game["id"], "name": "Stolen"}
    )
    assert response.status_code == 400
    assert "is not published by" in response.json()["message"]


def test_add_game_to_unknown_publisher(client: testclient.TestClient) -> None:
    response = client.post(f"{PREFIX}/9/game", json={"name": "Orbit"})
    assert response.status_code == 404


# --- Testers & associations ---
def test_create_and_get_tester(client: testclient.TestClient) -> None:
    tester = _create_tester(client)
    assert tester == {"id": 1, "name": "Ada", "email": "ada@example.com", "phone": None}

    response = client.get(f"{PREFIX}/tester/{tester['id']}")
    assert response.status_code == 200
    assert response.json() == tester


def test_get_unknown_tester(client: testclient.TestClient) -> None:
    assert client.get(f"{PREFIX}/tester/1").status_code == 404


def test_assign_tester_flow(client: testclient.TestClient) -> None:
    publisher = _create_publisher(client)
    game = _create_game(client, publisher["id"], name="Orbit")
    tester = _create_tester(client)

    response = client.post(f"{PREFIX}/game/{game['id']}/tester/{tester['id']}")
    assert response.status_code == 200
    assert response.json()["testerIds"] == [tester["id"]]

    # second assignment does not duplicate
    response = client.post(f"{PREFIX}/game/{game['id']}/tester/{tester['id']}")
    assert response.json()["testerIds"] == [tester["id"]]

    testers = client.get(f"{PREFIX}/game/{game['id']}/testers")
    assert testers.status_code == 200
    assert testers.json() == [tester]

    games = client.get(f"{PREFIX}/tester/{tester['id']}/games")
    assert games.status_code == 200
    assert [g["id"] for g in games.json()] == [game["id"]]


def test_assign_tester_to_unknown_game(client: testclient.TestClient) -> None:
    tester = _create_tester(client)
    response = client.post(f"{PREFIX}/game/77/tester/{tester['id']}")
    assert response.status_code == 404


def test_non_positive_path_id_rejected(client: testclient.TestClient) -> None:
    assert client.get(f"{PREFIX}/publisher/0").status_code == 422


def test_update_publisher_body_id_replaced_by_path(client: testclient.TestClient) -> None:
    """Any valid body ID is overridden by the path; an invalid one is still rejected up front."""
    created = _create_publisher(client)

    ok = client.put(f"{PREFIX}/publisher/{created['id']}", json={"id": 7, "name": "Nova 3"})
    assert ok.status_code == 200
    assert ok.json()["id"] == created["id"]

    rejected = client.put(f"{PREFIX}/publisher/{created['id']}", json={"id": 0, "name": "Nova 3"})
    assert rejected.status_code == 422
    # Nothing was written
    assert client.get(f"{PREFIX}/publisher/{created['id']}").json()["name"] == "Nova"
