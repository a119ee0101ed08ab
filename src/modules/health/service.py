import time
from datetime import UTC, datetime
from pathlib import Path

import pycountry

from src.core.config import settings
from src.core.logging import get_logger
from src.modules.country_picker.dependencies import create_picker
from src.modules.health.schemas import HealthCheckResponse, ServiceStatus

logger = get_logger(__name__)


class HealthCheckService:
    """Service for checking health of the picker's data sources."""

    def check_directory(self) -> ServiceStatus:
        """Build a country directory with the configured locale."""
        start = time.time()
        try:
            total: int = len(create_picker().directory)
            response_time = (time.time() - start) * 1000
            if total == 0:
                return ServiceStatus(
                    name="directory",
                    status="unhealthy",
                    message="Country directory is empty",
                    response_time_ms=round(response_time, 2),
                )
            return ServiceStatus(
                name="directory",
                status="healthy",
                message=f"{total} countries available",
                response_time_ms=round(response_time, 2),
            )
        except Exception as e:
            response_time = (time.time() - start) * 1000
            logger.error(f"Directory health check failed: {e}")
            return ServiceStatus(
                name="directory",
                status="unhealthy",
                message=f"Directory build failed: {e!s}",
                response_time_ms=round(response_time, 2),
            )

    def check_locale_data(self) -> ServiceStatus:
        """Check that translated country names are installed."""
        locales_dir = Path(pycountry.LOCALES_DIR)
        if locales_dir.is_dir():
            return ServiceStatus(name="locale_data", status="healthy", message=str(locales_dir))

        logger.warning(f"Locale catalogs missing at {locales_dir}")
        return ServiceStatus(
            name="locale_data",
            status="unhealthy",
            message="Country name translations are not installed",
        )

    def get_health_status(self) -> HealthCheckResponse:
        """
        Get comprehensive health status of all data sources.

        Returns:
            HealthCheckResponse with overall status and individual statuses.
        """
        services = {
            "directory": self.check_directory(),
            "locale_data": self.check_locale_data(),
        }

        unhealthy_count = sum(1 for s in services.values() if s.status == "unhealthy")
        if unhealthy_count == 0:
            overall_status = "healthy"
        elif unhealthy_count == len(services):
            overall_status = "unhealthy"
        else:
            overall_status = "degraded"

        return HealthCheckResponse(
            status=overall_status,
            version="1.0.0",
            environment=settings.ENVIRONMENT,
            services=services,
            timestamp=datetime.now(tz=UTC).isoformat(),
        )
