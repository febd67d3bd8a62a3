from pathlib import Path

from pydantic import Field, field_validator

from hwhkit.utils.config.settings_model import SettingsModel


class StaticFileSettings(SettingsModel):
    """
    Конфигурация раздачи статических файлов.
    Префикс приводится к виду "/segment" без завершающего "/", корень остается "/".
    """
    enabled: bool = False
    dir: Path = Path("static")
    url_prefix: str = Field(default="/static", alias="prefix")

    @field_validator("url_prefix")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        segments: str = value.strip().strip("/")
        return f"/{segments}" if segments else "/"
