from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hwhkit.exceptions import HwhKitError


async def hwhkit_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Превращает ошибку библиотеки, поднятую в обработчике запроса, в JSON ответ.

    :param request: Запрос, при обработке которого возникла ошибка.
    :param exc: Ошибка.
    :return: Ответ вида {"error": ..., "status": ...}.
    """
    status_code: int = getattr(exc, "status_code", 500)
    message: str = getattr(exc, "message", str(exc))
    return JSONResponse({"error": message, "status": status_code}, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HwhKitError, hwhkit_error_handler)
