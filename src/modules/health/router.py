from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.modules.health.schemas import HealthCheckResponse, LivenessResponse, ReadinessResponse
from src.modules.health.service import HealthCheckService

router = APIRouter(prefix="/api/v1/health", tags=["Health"])


@router.get(
    "/",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Complete Health Check",
    description="Check that the country directory can be built and locale data is installed.",
)
async def health_check():
    """
    Comprehensive health check endpoint.

    Status values:
    - healthy: All data sources available
    - degraded: Some data sources missing
    - unhealthy: Nothing available
    """
    service = HealthCheckService()
    return service.get_health_status()


@router.get(
    "/live",
    response_model=LivenessResponse,
    status_code=status.HTTP_200_OK,
    summary="Liveness Probe",
    description="Simple liveness check for container orchestration.",
)
async def liveness():
    return LivenessResponse(status="ok")


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness Probe",
    description="Check if the picker is ready to serve requests.",
)
async def readiness():
    """
    Readiness probe endpoint.

    Returns 200 once a country directory can be built, 503 otherwise.
    """
    service = HealthCheckService()
    directory_status = service.check_directory()

    if directory_status.status != "healthy":
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ReadinessResponse(status="not_ready", ready=False).model_dump(),
        )

    return ReadinessResponse(status="ready", ready=True)
