import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from filmorate_api.core.trace import TRACE_HEADER, set_trace_id

alog = logging.getLogger("access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """trace_id на каждый запрос + одна JSON-строка access-лога."""

    async def dispatch(self, request: Request, call_next):
        trace_id = set_trace_id(request.headers.get(TRACE_HEADER))
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            alog.info(
                "access",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "path_params": dict(request.path_params),
                    "status": status,
                    "latency_ms": int(
                        (time.perf_counter() - start) * 1000),
                },
            )
