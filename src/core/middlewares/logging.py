import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import (
    BaseHTTPMiddleware,
    RequestResponseEndpoint,
)

logger = logging.getLogger("api_logger")

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request, tagged with a request id echoed back to the client."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time: float = time.time()
        request_id: str = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        query: str = f"?{request.url.query}" if request.url.query else ""

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"RID={request_id} | {request.method} {request.url.path}{query} | "
                f"Failed | Time={process_time:.3f}s | Error={e!s}"
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            f"RID={request_id} | {request.method} {request.url.path}{query} | "
            f"Status={response.status_code} | Time={process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
