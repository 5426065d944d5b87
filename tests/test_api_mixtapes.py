from fastapi.testclient import TestClient

from mixtape.api.fastapi_app import app

client = TestClient(app)


def test_create_and_open_mixtape() -> None:
    body = {
        "name": "Road trip",
        "owner": "Alice",
        "description": "<p>Long &amp; winding</p>",
        "tracks": ["abc123", {"id": "def456", "name": "T2", "artist": "A2"}],
    }

    created = client.post("/mixtape", json=body)

    assert created.status_code == 200
    data = created.json()
    assert data["url"].endswith(f"/listen/{data['token']}")
    assert data["track_count"] == 2

    opened = client.get(f"/mixtape/{data['token']}")

    assert opened.status_code == 200
    assert opened.json() == {
        "name": "Road trip",
        "owner": "Alice",
        "description": "Long & winding",
        "track_ids": ["abc123", "def456"],
        "track_uris": ["spotify:track:abc123", "spotify:track:def456"],
        "track_count": 2,
    }


def test_create_mixtape_bounds_description() -> None:
    body = {"name": "Mix", "description": "z" * 500, "tracks": ["a1"]}

    token = client.post("/mixtape", json=body).json()["token"]
    opened = client.get(f"/mixtape/{token}").json()

    assert len(opened["description"]) == 100
    assert opened["owner"] == ""


def test_create_mixtape_requires_tracks() -> None:
    response = client.post("/mixtape", json={"name": "Mix", "tracks": []})
    assert response.status_code == 422

    response = client.post("/mixtape", json={"name": "Mix", "tracks": ["  "]})
    assert response.status_code == 422


def test_open_invalid_mixtape() -> None:
    for token in ["garbage!!", "bm90IGpzb24", "eyJuIjoieCJ9"]:
        response = client.get(f"/mixtape/{token}")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid mixtape link"}
