import logging
import time
from typing import Awaitable, Callable

from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


def elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 4)


async def log_request(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    Записывает в журнал начало и завершение обработки запроса.

    :param request: Запрос для обработки.
    :param call_next: Следующий вызов.
    :return: Ответ на запрос.
    """
    start_time: float = time.perf_counter()
    method: str = request.method
    path: str = request.url.path

    logger.info(
        "Request started",
        extra={
            "method": method,
            "path": path,
            "user_agent": request.headers.get("user-agent", "-"),
        }
    )

    try:
        response: Response = await call_next(request)

    except Exception:
        logger.exception(
            "Request failed",
            extra={"method": method, "path": path, "duration_ms": elapsed_ms(start_time)}
        )
        raise

    logger.info(
        "Request completed",
        extra={
            "method": method,
            "path": path,
            "status": response.status_code,
            "duration_ms": elapsed_ms(start_time),
        }
    )
    return response


def create_request_logging_layer() -> Middleware:
    return Middleware(BaseHTTPMiddleware, dispatch=log_request)
