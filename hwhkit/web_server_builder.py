import logging
from pathlib import Path
from typing import Any, Iterable

import orjson
from fastapi import APIRouter, FastAPI
from pydantic import BaseModel, ValidationError

from hwhkit.exceptions import BuilderAlreadyUsed, ConfigError
from hwhkit.middleware import MiddlewareFactory, MiddlewareManager
from hwhkit.utils import setup_logging
from hwhkit.utils.config import ArchitectureType, Config
from hwhkit.utils.config.cors_config import unique_values
from hwhkit.web_server import WebServer

logger = logging.getLogger(__name__)


class WebServerBuilder:
    """
    Собирает конфигурацию, маршрутизатор и пользовательские слои, после чего создает сервер.

    Все методы настройки возвращают сам построитель для цепочки вызовов.
    Построитель одноразовый: после build() любые вызовы поднимают BuilderAlreadyUsed.
    """

    def __init__(self) -> None:
        self._config: Config = Config()
        self._router: APIRouter | None = None
        self._custom_middleware: list[MiddlewareFactory] = []
        self._consumed: bool = False
        self._rejected_settings: list[str] = []

    @property
    def current_config(self) -> Config:
        return self._config

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise BuilderAlreadyUsed()

    def _validated_section(self, section_name: str, section: BaseModel, changes: dict[str, Any]) -> BaseModel:
        """
        Создает новый раздел конфигурации с изменениями и проверкой всех полей.
        Если значения не прошли проверку, ошибка откладывается до build(),
        а раздел остается прежним.

        :param section_name: Имя раздела для сообщения об ошибке.
        :param section: Текущий раздел.
        :param changes: Новые значения полей.
        :return: Обновленный или прежний раздел.
        """
        try:
            return type(section).model_validate({**section.model_dump(), **changes})

        except ValidationError as err:
            logger.debug("Rejected settings", extra={"section": section_name, "changes": list(changes)})
            self._rejected_settings.append(f"Invalid {section_name} settings: {err}")
            return section

    def _update_server(self, **changes: Any) -> None:
        server = self._validated_section("server", self._config.server, changes)
        self._config = self._config.model_copy(update={"server": server})

    def _update_middleware(self, section: str, **changes: Any) -> None:
        middleware = self._config.middleware
        updated_section = self._validated_section(section, getattr(middleware, section), changes)
        self._config = self._config.model_copy(
            update={"middleware": middleware.model_copy(update={section: updated_section})}
        )

    def config_from_file(self, path: Path | str) -> "WebServerBuilder":
        """
        Загружает конфигурацию из файла.
        Если файл не удалось загрузить, в журнал пишется предупреждение
        и остается предыдущая конфигурация.

        :param path: Путь до TOML файла конфигурации.
        :return: Построитель.
        """
        self._ensure_usable()

        try:
            self._config = Config.from_file(path)

        except ConfigError as err:
            logger.warning(
                "Unable to load config file, keeping previous configuration",
                extra={"path": str(path), "error": err.message}
            )

        return self

    def config(self, config: Config) -> "WebServerBuilder":
        self._ensure_usable()
        self._config = config
        return self

    def listen(self, host: str, port: int) -> "WebServerBuilder":
        """
        Устанавливает адрес для прослушивания.

        :param host: IP адрес.
        :param port: Порт.
        :return: Построитель.
        """
        self._ensure_usable()
        self._update_server(host=host, port=port)
        return self

    def architecture(self, architecture: ArchitectureType | str) -> "WebServerBuilder":
        """
        Устанавливает архитектуру сервера.

        :param architecture: Архитектура или ее имя без учета регистра ("api", "Full").
        :return: Построитель.
        """
        self._ensure_usable()
        self._update_server(architecture=str(architecture).lower())
        return self

    def cors(self, origins: Iterable[str]) -> "WebServerBuilder":
        """
        Включает CORS для перечисленных источников.

        :param origins: Разрешенные источники, "*" разрешает любой.
        :return: Построитель.
        """
        self._ensure_usable()
        self._update_middleware("cors", enabled=True, origins=unique_values(origins))
        return self

    def static_files(self, directory: Path | str, prefix: str) -> "WebServerBuilder":
        """
        Включает раздачу статических файлов.

        :param directory: Директория с файлами.
        :param prefix: Префикс URL.
        :return: Построитель.
        """
        self._ensure_usable()
        self._update_middleware("static_files", enabled=True, dir=Path(directory), url_prefix=prefix)
        return self

    def templates(self, directory: Path | str, extension: str) -> "WebServerBuilder":
        """
        Включает отрисовку шаблонов.
        Настройка сохраняется в любой архитектуре, а несовместимость с Api
        обнаруживается при проверке конфигурации в build().

        :param directory: Директория шаблонов.
        :param extension: Расширение файлов шаблонов.
        :return: Построитель.
        """
        self._ensure_usable()
        self._update_middleware(
            "templates", enabled=True, dir=Path(directory), extension=extension.lstrip(".")
        )
        return self

    def jwt_auth(self, secret: str, expires_in: int) -> "WebServerBuilder":
        """
        Включает выдачу и проверку JWT токенов.

        :param secret: Секрет для подписи токенов.
        :param expires_in: Время жизни токена в секундах.
        :return: Построитель.
        """
        self._ensure_usable()
        self._update_middleware("jwt", enabled=True, secret=secret, expires_in_seconds=expires_in)
        return self

    def log_level(self, level: str) -> "WebServerBuilder":
        self._ensure_usable()
        self._update_middleware("logging", level=level)
        return self

    def routes(self, router: APIRouter) -> "WebServerBuilder":
        self._ensure_usable()
        self._router = router
        return self

    def middleware(self, middleware: MiddlewareFactory) -> "WebServerBuilder":
        """
        Добавляет пользовательский слой. Слои подключаются в порядке добавления.

        :param middleware: Фабрика слоя.
        :return: Построитель.
        """
        self._ensure_usable()
        self._custom_middleware.append(middleware)
        return self

    def custom_config(self, key: str, value: Any) -> "WebServerBuilder":
        """
        Сохраняет пользовательский параметр в разделе middleware.custom.
        Значение, которое нельзя представить в JSON, пропускается.

        :param key: Имя параметра.
        :param value: Значение параметра.
        :return: Построитель.
        """
        self._ensure_usable()

        try:
            json_value: Any = orjson.loads(orjson.dumps(value))

        except orjson.JSONEncodeError:
            logger.debug("Custom config value is not JSON serializable", extra={"key": key})
            return self

        middleware = self._config.middleware
        self._config = self._config.model_copy(
            update={"middleware": middleware.model_copy(update={"custom": {**middleware.custom, key: json_value}})}
        )
        return self

    def build(self) -> WebServer:
        """
        Проверяет конфигурацию, подключает промежуточные слои и создает сервер.

        :return: Сервер, готовый к запуску.
        :raise BuilderAlreadyUsed: build() уже вызывался.
        :raise ConfigError: Значения из методов настройки или конфигурация не прошли проверку.
        :raise MiddlewareError: Один из слоев не удалось создать.
        """
        self._ensure_usable()
        self._consumed = True

        if self._rejected_settings:
            raise ConfigError(self._rejected_settings[0])

        config: Config = self._config
        config.validate()
        setup_logging(config.middleware.logging.level)

        middleware_manager = MiddlewareManager(config)
        for middleware in self._custom_middleware:
            middleware_manager.add_custom_middleware(middleware)

        self._custom_middleware = []

        app: FastAPI = middleware_manager.apply_middleware(self._router or APIRouter())
        return WebServer(app, config)
