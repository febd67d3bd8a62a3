from typing import Any

from pydantic import field_validator

from hwhkit.utils.config.settings_model import SettingsModel

WILDCARD: str = "*"
DEFAULT_CORS_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS")


def unique_values(values: Any) -> tuple[str, ...]:
    """
    Убирает повторы из списка значений, сохраняя порядок.

    :param values: Список значений.
    :return: Кортеж уникальных значений.
    """
    return tuple(dict.fromkeys(values))


class CorsSettings(SettingsModel):
    """
    Конфигурация политики CORS.
    """
    enabled: bool = True
    origins: tuple[str, ...] = (WILDCARD,)
    methods: tuple[str, ...] = DEFAULT_CORS_METHODS
    headers: tuple[str, ...] = (WILDCARD,)

    @field_validator("origins", "methods", "headers", mode="before")
    @classmethod
    def deduplicate(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple, set, frozenset)):
            return unique_values(v)

        return v

    @property
    def allows_any_origin(self) -> bool:
        return WILDCARD in self.origins

    @property
    def allows_any_method(self) -> bool:
        return WILDCARD in self.methods

    @property
    def allows_any_header(self) -> bool:
        return WILDCARD in self.headers
