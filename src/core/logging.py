import logging
import sys

from pythonjsonlogger import jsonlogger

from src.core.config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps every record with the environment and app name."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["environment"] = settings.ENVIRONMENT
        log_record["app"] = settings.PROJECT_NAME


def configure_logging():
    """Configure process-wide logging: JSON lines in production, plain text otherwise."""

    log_level = logging.WARNING if settings.is_production else logging.INFO

    if settings.is_production:
        formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
    else:
        formatter = logging.Formatter(
            fmt=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        force=True,
    )

    # Uvicorn installs its own handlers; route everything through ours.
    logging.getLogger("uvicorn.access").handlers = []
    logging.getLogger("uvicorn.error").handlers = []

    logging.getLogger("api_logger").setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the level matching the current environment.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if not settings.is_production else logging.INFO)
    return logger
