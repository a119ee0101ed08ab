from pydantic import BaseModel, Field


class ServiceStatus(BaseModel):
    """Health of a single data source."""

    name: str = Field(..., description="Data source name")
    status: str = Field(..., description="healthy or unhealthy")
    message: str | None = Field(None, description="Additional status information")
    response_time_ms: float | None = Field(None, description="Check duration in milliseconds")


class HealthCheckResponse(BaseModel):
    status: str = Field(..., description="Overall status: healthy, unhealthy, degraded")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment: development, staging, production")
    services: dict[str, ServiceStatus] = Field(..., description="Per data source statuses")
    timestamp: str = Field(..., description="ISO 8601 timestamp")


class LivenessResponse(BaseModel):
    status: str = Field(default="ok", description="Application is alive")


class ReadinessResponse(BaseModel):
    status: str = Field(..., description="ready or not_ready")
    ready: bool = Field(..., description="Whether the picker can serve requests")
