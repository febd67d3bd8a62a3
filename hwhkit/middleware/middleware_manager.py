import logging

from fastapi import APIRouter, FastAPI
from starlette.middleware import Middleware

from hwhkit.error_handlers import register_error_handlers
from hwhkit.middleware.cors import create_cors_layer
from hwhkit.middleware.jwt_auth import create_jwt_auth
from hwhkit.middleware.middleware_factory import MiddlewareFactory
from hwhkit.middleware.request_logging import create_request_logging_layer
from hwhkit.middleware.static_files import create_static_files_layer
from hwhkit.templates import create_template_engine
from hwhkit.utils.config import Config

logger = logging.getLogger(__name__)


class MiddlewareManager:
    """
    Подключает промежуточные слои к маршрутизатору в фиксированном порядке.

    Первый слой в стеке является внешним: он первым получает запрос и последним ответ.
    Порядок стека: журнал запросов, CORS, статические файлы, пользовательские слои
    в порядке регистрации.
    """

    def __init__(self, config: Config):
        self.config: Config = config
        self.custom_middleware: list[MiddlewareFactory] = []

    def add_custom_middleware(self, middleware: MiddlewareFactory) -> None:
        self.custom_middleware.append(middleware)

    def build_layers(self) -> list[tuple[str, Middleware]]:
        """
        Создает слои для всех включенных в конфигурации функций.

        :return: Пары (имя слоя, слой), начиная с внешнего.
        :raise InvalidCorsPolicy: Неверное значение в политике CORS.
        :raise StaticDirectoryMissing: Директория статических файлов не существует.
        """
        middleware_config = self.config.middleware
        layers: list[tuple[str, Middleware]] = []

        # Outermost layer
        if middleware_config.logging.request_logging_enabled:
            layers.append(("request_logging", create_request_logging_layer()))

        # Cross-origin checks apply to static assets too
        if middleware_config.cors.enabled:
            layers.append(("cors", create_cors_layer(middleware_config.cors)))

        if middleware_config.static_files.enabled:
            layers.append(("static_files", create_static_files_layer(middleware_config.static_files)))

        for middleware in self.custom_middleware:
            logger.info("Applying custom middleware", extra={"middleware": middleware.name})
            layers.append((middleware.name, middleware.create_layer()))

        return layers

    def apply_middleware(self, router: APIRouter) -> FastAPI:
        """
        Оборачивает маршрутизатор во все включенные слои.

        :param router: Маршрутизатор с обработчиками приложения.
        :return: Приложение со стеком промежуточных слоев.
        :raise MiddlewareError: Один из слоев не удалось создать.
        """
        layers: list[tuple[str, Middleware]] = self.build_layers()

        app: FastAPI = FastAPI(middleware=[layer for _, layer in layers])
        app.include_router(router)
        register_error_handlers(app)

        app.state.config = self.config
        app.state.middleware_layers = [name for name, _ in layers]
        app.state.templates = create_template_engine(self.config.middleware.templates)
        app.state.jwt_auth = create_jwt_auth(self.config.middleware.jwt)

        return app
