"""Smoke tests for health and app wiring."""

from unittest.mock import AsyncMock

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from bizdirectory.core.config import get_settings
from bizdirectory.infrastructure.persistence.database import get_db
from bizdirectory.main import app


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": get_settings().app_version}


async def test_readiness_with_database(client: AsyncClient) -> None:
    """GET /api/v1/health/ready runs SELECT 1 against the database."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_readiness_without_database_is_503(unconfigured_client: AsyncClient) -> None:
    response = await unconfigured_client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"


async def test_liveness_does_not_need_database(unconfigured_client: AsyncClient) -> None:
    response = await unconfigured_client.get("/api/v1/health")
    assert response.status_code == 200


async def test_unknown_route_is_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"


async def test_readiness_database_error_is_503(client: AsyncClient) -> None:
    failing_session = AsyncMock()
    failing_session.execute = AsyncMock(
        side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
    )

    async def _failing_db():
        yield failing_session

    app.dependency_overrides[get_db] = _failing_db
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json() == {"status": "not_ready", "database": "unreachable"}
