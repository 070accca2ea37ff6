"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from avatarforge.dependencies import get_avatar_service
from avatarforge.main import create_app
from avatarforge.utils.codec import decode_png


@pytest.fixture
def client(service):
    app = create_app()
    app.dependency_overrides[get_avatar_service] = lambda: service
    return TestClient(app)


def _create(client, **body):
    response = client.post("/api/v1/generate", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["generators_registered"] == 3
    assert data["avatars"] == 0


def test_generate_v1(client):
    data = _create(client, seed="octocat", primaryColor="#000000", foreignColor="#ffffff")
    assert data["type"] == "pixelize"
    assert data["id"]
    assert data["created_at"]


def test_generate_camel_and_snake_case(client):
    data = _create(client, type="wave", colorScheme="teal")
    assert data["type"] == "wave"
    data = _create(client, type="wave", color_scheme="teal")
    assert data["type"] == "wave"


@pytest.mark.parametrize("body", [
    {"type": "spiral"},
    {"seed": "x" * 33},
    {"type": "gradient", "angle": 400},
])
def test_generate_v1_invalid(client, body):
    response = client.post("/api/v1/generate", json=body)
    assert response.status_code == 400
    assert response.json()["detail"]


def test_generate_v2_gradient(client):
    response = client.post("/api/v2/generate", json={"angle": 45, "colorScheme": "ocean"})
    assert response.status_code == 201
    assert response.json()["type"] == "gradient"


def test_generate_v2_requires_angle(client):
    response = client.post("/api/v2/generate", json={"colorScheme": "ocean"})
    assert response.status_code == 422


def test_generate_v2_angle_range(client):
    response = client.post("/api/v2/generate", json={"angle": -5})
    assert response.status_code == 400


def test_get_avatar_png(client):
    avatar = _create(client, seed="octocat")
    response = client.get(f"/api/avatars/{avatar['id']}")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["x-avatar-id"] == avatar["id"]
    assert response.headers["x-created-at"]
    assert decode_png(response.content).shape == (64, 64, 4)


def test_get_avatar_size_and_filter(client):
    avatar = _create(client, seed="octocat")
    response = client.get(f"/api/avatars/{avatar['id']}", params={"size": 9, "filter": "negative"})
    assert response.status_code == 200
    assert decode_png(response.content).shape == (512, 512, 4)


def test_get_avatar_bad_size(client):
    avatar = _create(client, seed="octocat")
    response = client.get(f"/api/avatars/{avatar['id']}", params={"size": 3})
    assert response.status_code == 400


def test_get_avatar_not_found(client):
    response = client.get("/api/avatars/nope")
    assert response.status_code == 404
    assert response.json()["detail"] == "Avatar with ID nope not found"


def test_list_avatars(client):
    for i in range(3):
        _create(client, seed=f"s{i}")
    response = client.get("/api/avatars", params={"pick": 2})
    assert response.status_code == 200
    data = response.json()
    assert len(data["avatars"]) == 2
    assert data["pagination"] == {"total": 3, "offset": 0, "pick": 2, "has_more": True}


def test_list_avatars_bad_pick(client):
    response = client.get("/api/avatars", params={"pick": 0})
    assert response.status_code == 400


def test_delete_avatar(client):
    avatar = _create(client, seed="octocat")
    response = client.delete(f"/api/avatars/{avatar['id']}")
    assert response.status_code == 204
    assert client.get(f"/api/avatars/{avatar['id']}").status_code == 404
    assert client.delete(f"/api/avatars/{avatar['id']}").status_code == 404


def test_color_schemes(client):
    response = client.get("/api/color-schemes", params={"type": "wave"})
    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "wave"
    assert len(data["schemes"]) == 9
    assert data["schemes"][0] == {"name": "green", "primary_color": "green", "foreign_color": "lightgreen"}


def test_color_schemes_unknown_type(client):
    response = client.get("/api/color-schemes", params={"type": "spiral"})
    assert response.status_code == 400
