"""
Dog House API - Shared Response Schemas
=======================================

Error and health payloads, used in route `responses=` declarations so the
OpenAPI document describes them.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body for every application error.

    Example:
        {"error": "Review not found"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for container and load balancer probes."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
