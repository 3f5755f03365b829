import logging
import time
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    记录每个影片目录请求的方法、路径、状态码和耗时，并把耗时写入响应头
    """
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        client = request.client.host if request.client else "-"

        try:
            response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - start_time
            logger.error(f"{route} 来自 {client} 未返回响应，耗时 {elapsed:.3f}s")
            raise

        elapsed = time.perf_counter() - start_time
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.3f}"
        # 5xx 单独用 warning 级别，便于在日志中筛出存储故障
        log = logger.warning if response.status_code >= 500 else logger.info
        log(f"{route} 来自 {client} -> {response.status_code} ({elapsed:.3f}s)")
        return response


def setup_middlewares(app: FastAPI):
    app.add_middleware(LoggingMiddleware)
