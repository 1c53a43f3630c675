import pytest
from fastapi.testclient import TestClient

from imagery_ui.main import create_app
from imagery_ui.models.errors import TransportError

from .fakes import FakeClient


@pytest.fixture
def client_factory(settings):
    def build(outcome=None):
        backend = FakeClient(outcome)
        app = create_app(settings=settings, client=backend)
        return TestClient(app), backend, app

    return build


def test_index_renders_empty_form(client_factory):
    http, _, _ = client_factory()

    response = http.get("/")

    assert response.status_code == 200
    assert "AI Product Imagery" in response.text
    assert 'name="youtube_url"' in response.text
    assert 'class="error"' not in response.text


def test_submit_success_flow(client_factory):
    http, backend, _ = client_factory({"youtube_url": "https://youtu.be/abc123", "save_dir": None, "products": []})

    response = http.post("/submit", data={"youtube_url": "https://youtu.be/abc123", "save": "true"})

    assert response.status_code == 200
    assert backend.calls == [{"youtube_url": "https://youtu.be/abc123", "save": True}]
    assert "No products found." in response.text
    assert 'href="https://youtu.be/abc123"' in response.text

    state = http.get("/api/state").json()
    assert state["phase"] == "succeeded"
    assert state["has_result"] is True
    assert state["can_submit"] is True


def test_unchecked_save_sends_false(client_factory):
    http, backend, _ = client_factory({"youtube_url": "u"})

    http.post("/submit", data={"youtube_url": "u"})

    assert backend.calls == [{"youtube_url": "u", "save": False}]


def test_empty_url_shows_validation_error(client_factory):
    http, backend, _ = client_factory()

    response = http.post("/submit", data={"youtube_url": "  "})

    assert "Please paste a YouTube URL." in response.text
    assert backend.calls == []
    assert http.get("/api/state").json()["phase"] == "failed"


def test_backend_error_body_is_shown(client_factory):
    http, _, _ = client_factory(TransportError("rate limited", status_code=429))

    response = http.post("/submit", data={"youtube_url": "u", "save": "true"})

    assert '<div class="error">rate limited</div>' in response.text
    assert http.get("/api/state").json()["error"] == "rate limited"


def test_result_text_endpoint(client_factory, full_response):
    http, _, _ = client_factory(full_response)

    assert http.get("/api/result").status_code == 404

    http.post("/submit", data={"youtube_url": "https://youtu.be/abc123", "save": "true"})
    response = http.get("/api/result")

    assert response.status_code == 200
    assert response.json() == full_response


def test_submit_is_ignored_while_in_flight(client_factory):
    http, backend, app = client_factory({"youtube_url": "u"})
    controller = app.state.controller
    controller.set_url("pending")
    pending = controller.begin_submit()

    http.post("/submit", data={"youtube_url": "other"})

    assert backend.calls == []
    assert controller.url == "pending"
    pending.close()


def test_health(client_factory):
    http, _, _ = client_factory()
    assert http.get("/health").json() == {"status": "healthy"}
