"""
Application-level tests: health, security headers, rate limiting
and startup wiring.
"""

from fastapi.testclient import TestClient

from catalog_api import __main__ as server
from catalog_api.core.config import Settings
from catalog_api.domain.catalog.outcome import Ok
from catalog_api.main import create_app
from catalog_api.shared.security.headers import SECURE_HEADERS
from tests.conftest import make_settings


def test_health_check(mock_client: TestClient) -> None:
    response = mock_client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "0.1.0"}


def test_security_headers_on_success(mock_client: TestClient) -> None:
    response = mock_client.get("/api/v1/health")

    for name, value in SECURE_HEADERS.items():
        assert response.headers[name] == value


def test_security_headers_on_errors(mock_client: TestClient) -> None:
    response = mock_client.get("/review/1/comments")

    assert response.status_code == 404
    assert response.headers["X-Frame-Options"] == "DENY"


def test_docs_hidden_outside_debug(mock_client: TestClient) -> None:
    assert mock_client.get("/docs").status_code == 404


def test_rate_limit_returns_429(mock_repositories) -> None:
    app_settings = Settings(rate_limit_default="2/minute", log_level="WARNING")
    client = TestClient(create_app(app_settings, mock_repositories))

    statuses = [client.get("/api/v1/health").status_code for _ in range(3)]

    assert statuses == [200, 200, 429]
    assert client.get("/api/v1/health").json()["error"].startswith(
        "Rate limit exceeded"
    )


def test_startup_creates_schema() -> None:
    """With create_schema set, the default SQL wiring serves requests."""
    app_settings = make_settings().model_copy(
        update={"database_url": "sqlite://", "create_schema": True}
    )

    with TestClient(create_app(app_settings)) as client:
        response = client.get("/review")

    assert response.status_code == 200
    assert response.json() == []


def test_rate_limit_covers_resource_routes(mock_repositories) -> None:
    mock_repositories.reviews.list_all.return_value = Ok([])
    app_settings = Settings(rate_limit_default="2/minute", log_level="WARNING")
    client = TestClient(create_app(app_settings, mock_repositories))

    statuses = [client.get("/review").status_code for _ in range(3)]

    assert statuses == [200, 200, 429]
    assert mock_repositories.reviews.list_all.await_count == 2


def test_rate_limit_disabled(mock_client: TestClient) -> None:
    statuses = {mock_client.get("/api/v1/health").status_code for _ in range(70)}
    assert statuses == {200}


def test_server_entry_point(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(
        server.uvicorn, "run", lambda app, **options: calls.append((app, options))
    )

    server.main(["--port", "9001"])

    assert calls == [
        ("catalog_api.main:app", {"host": "127.0.0.1", "port": 9001, "reload": False})
    ]
