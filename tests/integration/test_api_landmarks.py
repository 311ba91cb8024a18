"""Integration tests for the landmark API."""

import pytest
from fastapi.testclient import TestClient

from landmap.api.main import create_app
from landmap.config import AppConfig
from landmap.context import AppContext
from landmap.services.geolocation import FixedGeolocation
from landmap.models.landmark import Position

pytest.importorskip("httpx")


@pytest.fixture
def app_context():
    """Context with image optional and geolocation denied."""
    return AppContext.create(AppConfig(require_image=False), geolocation=FixedGeolocation())


@pytest.fixture
def client(app_context):
    app = create_app(context=app_context)
    with TestClient(app) as test_client:
        yield test_client


def _create(client, title, lat="43.26", lng="-79.92", files=None):
    return client.post(
        "/api/landmarks",
        data={"title": title, "description": f"About {title}", "latitude": lat, "longitude": lng},
        files=files,
    )


# ---------------------------------------------------------------------------
# Health / config
# ---------------------------------------------------------------------------

class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_config(self, client):
        data = client.get("/api/config").json()
        assert data["default_zoom"] == 14
        assert data["require_image"] is False


# ---------------------------------------------------------------------------
# POST /api/landmarks
# ---------------------------------------------------------------------------

class TestCreateLandmark:
    def test_201_response(self, client):
        response = _create(client, "Museum")
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "1"
        assert data["title"] == "Museum"
        assert data["visible"] is True
        assert data["position"] == {"lat": 43.26, "lng": -79.92}
        assert data["has_image"] is False
        assert data["marker_id"]

    def test_with_image(self, client, png_bytes):
        response = _create(client, "Museum", files={"image": ("museum.png", png_bytes, "image/png")})
        assert response.status_code == 201
        data = response.json()
        assert data["has_image"] is True

        image = client.get(data["image_url"])
        assert image.status_code == 200
        assert image.headers["content-type"] == "image/png"
        assert image.content == png_bytes

    def test_empty_title_rejected(self, client):
        response = _create(client, "")
        assert response.status_code == 422
        assert response.json()["detail"] == "Please enter a landmark title."
        assert client.get("/api/landmarks").json() == []

    def test_bad_coordinates_rejected(self, client):
        response = _create(client, "Museum", lat="abc")
        assert response.status_code == 422

    def test_unreadable_image_rejected(self, client):
        response = _create(client, "Museum", files={"image": ("museum.png", b"junk", "image/png")})
        assert response.status_code == 400
        assert client.get("/api/landmarks").json() == []

    def test_form_error_visible(self, client):
        _create(client, "")
        assert client.get("/api/form").json()["error"] == "Please enter a landmark title."


# ---------------------------------------------------------------------------
# Listing, lookup, delete, visibility
# ---------------------------------------------------------------------------

class TestLandmarkLifecycle:
    def test_list_in_order(self, client):
        for title in ("A", "B", "C"):
            _create(client, title)
        ids = [lm["id"] for lm in client.get("/api/landmarks").json()]
        assert ids == ["1", "2", "3"]

    def test_get_unknown_404(self, client):
        assert client.get("/api/landmarks/99").status_code == 404

    def test_image_missing_404(self, client):
        _create(client, "A")
        assert client.get("/api/landmarks/1/image").status_code == 404

    def test_delete(self, client):
        _create(client, "A")
        _create(client, "B")
        response = client.delete("/api/landmarks/1")
        assert response.json() == {"deleted": True, "id": "1"}
        assert [lm["id"] for lm in client.get("/api/landmarks").json()] == ["2"]

    def test_delete_unknown_is_soft(self, client):
        response = client.delete("/api/landmarks/42")
        assert response.status_code == 200
        assert response.json()["deleted"] is False

    def test_visibility(self, client):
        _create(client, "A")
        response = client.put("/api/landmarks/1/visibility", json={"visible": False})
        assert response.status_code == 200
        assert client.get("/api/landmarks/1").json()["visible"] is False
        assert client.get("/api/map").json()["markers"] == []

        client.put("/api/landmarks/1/visibility", json={"visible": True})
        assert len(client.get("/api/map").json()["markers"]) == 1


# ---------------------------------------------------------------------------
# Selection through clicks
# ---------------------------------------------------------------------------

class TestSelection:
    def test_marker_click_highlights(self, client):
        _create(client, "A")
        marker_id = _create(client, "B").json()["marker_id"]

        response = client.post(f"/api/map/markers/{marker_id}/click")
        assert response.status_code == 200

        view = client.get("/api/view").json()
        assert view["active_id"] == "2"
        assert [e["id"] for e in view["entries"] if e["active"]] == ["2"]
        assert view["popup"]["title"] == "B"
        assert client.get("/api/map").json()["popup"]["marker_id"] == marker_id

    def test_unknown_marker_404(self, client):
        assert client.post("/api/map/markers/nope/click").status_code == 404

    def test_list_click_pans(self, client):
        _create(client, "A", lat="10", lng="20")
        client.post("/api/landmarks/1/click", json={"target": "entry"})
        assert client.get("/api/map").json()["center"] == {"lat": 10.0, "lng": 20.0}
        assert client.get("/api/view").json()["active_id"] == "1"

    def test_control_click_ignored(self, client):
        _create(client, "A")
        client.post("/api/landmarks/1/click", json={"target": "delete"})
        assert client.get("/api/view").json()["active_id"] is None

    def test_delete_selected_clears_view(self, client):
        _create(client, "A")
        client.post("/api/landmarks/1/click", json={})
        client.delete("/api/landmarks/1")

        view = client.get("/api/view").json()
        assert view["active_id"] is None
        assert view["popup"] is None
        assert client.get("/api/map").json()["popup"] is None


# ---------------------------------------------------------------------------
# Map bootstrap and form location
# ---------------------------------------------------------------------------

class TestMapAndForm:
    def test_default_center_when_denied(self, client):
        center = client.get("/api/map").json()["center"]
        assert center == {"lat": 43.2615047, "lng": -79.9195802}

    def test_location_denied(self, client):
        data = client.post("/api/form/location").json()
        assert data["error"] == "Unable to retrieve your location."

    def test_location_filled(self):
        ctx = AppContext.create(
            AppConfig(),
            geolocation=FixedGeolocation(Position(lat=1.25, lng=2.5)),
        )
        with TestClient(create_app(context=ctx)) as client:
            assert client.get("/api/map").json()["center"] == {"lat": 1.25, "lng": 2.5}
            data = client.post("/api/form/location").json()
        assert data["latitude"] == "1.250000"
        assert data["longitude"] == "2.500000"


# ---------------------------------------------------------------------------
# WebSocket
# ---------------------------------------------------------------------------

class TestViewWebsocket:
    def test_initial_view(self, client):
        _create(client, "A")
        with client.websocket_connect("/api/ws/view") as websocket:
            message = websocket.receive_json()
        assert message["type"] == "view"
        assert [e["id"] for e in message["data"]["entries"]] == ["1"]

    def test_ping(self, client):
        with client.websocket_connect("/api/ws/view") as websocket:
            websocket.receive_json()
            websocket.send_json({"type": "ping"})
            assert websocket.receive_json() == {"type": "pong"}
