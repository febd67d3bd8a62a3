import tomllib
from pathlib import Path
from typing import Any, Mapping

import tomli_w
from pydantic import Field, ValidationError

from hwhkit.exceptions import ConfigError
from hwhkit.utils.config.architecture_type import ArchitectureType
from hwhkit.utils.config.middleware_config import MiddlewareConfig
from hwhkit.utils.config.server_config import ServerSettings
from hwhkit.utils.config.settings_model import SettingsModel


class Config(SettingsModel):
    """
    Хранит конфигурацию веб-сервера.
    """
    server: ServerSettings = Field(default_factory=ServerSettings)
    middleware: MiddlewareConfig = Field(default_factory=MiddlewareConfig)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """
        Создает конфигурацию из уже разобранного документа.

        :param data: Словарь с разделами server и middleware.
        :return: Конфигурация сервера.
        :raise ConfigError: Документ не соответствует схеме конфигурации.
        """
        try:
            return cls.model_validate(data)

        except ValidationError as err:
            raise ConfigError(f"Invalid configuration: {err}") from err

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """
        Загружает конфигурацию из TOML файла.

        :param path: Путь до файла конфигурации.
        :return: Конфигурация сервера.
        :raise ConfigError: Файл не удалось прочитать, разобрать или он не соответствует схеме.
        """
        path = Path(path)

        try:
            with open(path, mode="rb") as f:
                data: dict[str, Any] = tomllib.load(f)

        except OSError as err:
            raise ConfigError(f"Unable to read config file {path}: {err}") from err

        except tomllib.TOMLDecodeError as err:
            raise ConfigError(f"Failed to parse config file {path}: {err}") from err

        return cls.from_mapping(data)

    def to_dict(self) -> dict[str, Any]:
        """
        Представляет конфигурацию в виде документа с ключами как в файле конфигурации.

        :return: Словарь, совместимый с JSON.
        """
        return self.model_dump(mode="json", by_alias=True)

    def save_to_file(self, path: Path | str) -> None:
        """
        Сохраняет конфигурацию в TOML файл, который читает from_file.

        :param path: Путь до файла конфигурации.
        :return: Ничего.
        :raise ConfigError: Конфигурацию нельзя записать в TOML или файл не удалось записать.
        """
        path = Path(path)

        try:
            document: str = tomli_w.dumps(self.to_dict())

        except TypeError as err:
            raise ConfigError(f"Configuration can not be written as TOML: {err}") from err

        try:
            path.write_text(document, encoding="utf-8")

        except OSError as err:
            raise ConfigError(f"Unable to write config file {path}: {err}") from err

    def server_address(self) -> str:
        """
        Формирует адрес сервера для прослушивания.

        :return: Адрес в формате host:port.
        """
        host: str = self.server.host

        # IPv6 literals need brackets to keep the port separator unambiguous
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"

        return f"{host}:{self.server.port}"

    def validate(self) -> None:
        """
        Проверяет согласованность настроек между собой.
        Проверки выполняются по порядку, до первой ошибки.

        :return: Ничего.
        :raise ConfigError: Порт равен 0, шаблоны включены в архитектуре Api
            или не существует директория статических файлов или шаблонов.
        """
        if self.server.port == 0:
            raise ConfigError("Port must not be 0")

        templates = self.middleware.templates
        static_files = self.middleware.static_files

        if templates.enabled and self.server.architecture == ArchitectureType.Api:
            raise ConfigError("Templates require Full architecture")

        if static_files.enabled and not static_files.dir.exists():
            raise ConfigError(f"Static files directory does not exist: {static_files.dir}")

        if templates.enabled and not templates.dir.exists():
            raise ConfigError(f"Templates directory does not exist: {templates.dir}")
