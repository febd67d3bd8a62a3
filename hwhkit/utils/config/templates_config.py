from pathlib import Path

from pydantic import field_validator

from hwhkit.utils.config.settings_model import SettingsModel


class TemplateSettings(SettingsModel):
    """
    Конфигурация отрисовки HTML шаблонов, доступна только в архитектуре Full.
    """
    enabled: bool = False
    dir: Path = Path("templates")
    extension: str = "html"

    @field_validator("extension")
    @classmethod
    def strip_leading_dot(cls, v: str) -> str:
        return v.lstrip(".")
