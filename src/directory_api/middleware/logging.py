"""Request logging middleware."""

import time
from uuid import uuid4

from fastapi import Request

from directory_api.utils.logger import get_logger

logger = get_logger(__name__)


async def add_request_id_middleware(request: Request, call_next):
    """Add a request ID to every request and log its outcome."""
    request_id = str(uuid4())
    request.state.request_id = request_id

    start_time = time.time()
    logger.info(f"[{request_id}] {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"[{request_id}] {request.method} {request.url.path} - "
        f"{response.status_code} ({duration:.2f}s)"
    )

    response.headers["X-Request-ID"] = request_id
    return response
