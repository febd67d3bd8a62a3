import re
from typing import Iterable

from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware

from hwhkit.exceptions import InvalidCorsPolicy
from hwhkit.utils.config import WILDCARD, CorsSettings

# RFC 9110 token, used by both method and header field names
TOKEN_PATTERN: re.Pattern[str] = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
ORIGIN_PATTERN: re.Pattern[str] = re.compile(
    r"^[A-Za-z][A-Za-z0-9+.\-]*://(\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9\-._~%!$&'()*+,;=]+)(:\d{1,5})?$"
)
NULL_ORIGIN: str = "null"


def checked_values(category: str, values: Iterable[str], pattern: re.Pattern[str]) -> list[str]:
    """
    Проверяет, что каждое значение допустимо для своей категории.

    :param category: Название категории для сообщения об ошибке.
    :param values: Значения для проверки.
    :param pattern: Шаблон допустимого значения.
    :return: Список проверенных значений.
    :raise InvalidCorsPolicy: Значение не соответствует шаблону.
    """
    checked: list[str] = []
    for value in values:
        if not pattern.fullmatch(value):
            raise InvalidCorsPolicy(category, value)

        checked.append(value)

    return checked


def allowed_origins(settings: CorsSettings) -> list[str]:
    if settings.allows_any_origin:
        return [WILDCARD]

    origins: list[str] = []
    for origin in settings.origins:
        if origin != NULL_ORIGIN and not ORIGIN_PATTERN.fullmatch(origin):
            raise InvalidCorsPolicy("origin", origin)

        origins.append(origin)

    return origins


def allowed_methods(settings: CorsSettings) -> list[str]:
    if settings.allows_any_method:
        return [WILDCARD]

    return [method.upper() for method in checked_values("method", settings.methods, TOKEN_PATTERN)]


def allowed_headers(settings: CorsSettings) -> list[str]:
    if settings.allows_any_header:
        return [WILDCARD]

    return checked_values("header", settings.headers, TOKEN_PATTERN)


def create_cors_layer(settings: CorsSettings) -> Middleware:
    """
    Создает слой CORS по настройкам.
    Значение "*" в списке источников или заголовков разрешает любые значения,
    даже если рядом указаны конкретные.

    :param settings: Настройки CORS.
    :return: Промежуточный слой CORS.
    :raise InvalidCorsPolicy: Источник, метод или заголовок имеет неверный формат.
    """
    return Middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(settings),
        allow_methods=allowed_methods(settings),
        allow_headers=allowed_headers(settings),
    )
