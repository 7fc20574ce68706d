"""Health check schemas: liveness carries the build version, readiness the database state."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    version: str


class ReadinessResponse(BaseModel):
    """GET /health/ready body; status is "not_ready" (HTTP 503) when SELECT 1 fails."""

    status: Literal["ok", "not_ready"]
    database: Literal["ok", "unreachable"]
