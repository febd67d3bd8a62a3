from pydantic import Field

from hwhkit.utils.config.settings_model import SettingsModel

DEFAULT_JWT_SECRET: str = "your-secret-key-change-this-in-production"


class JwtSettings(SettingsModel):
    """
    Конфигурация выдачи и проверки JWT токенов.
    """
    enabled: bool = False
    secret: str = Field(default=DEFAULT_JWT_SECRET, repr=False)
    expires_in_seconds: int = Field(default=3600, ge=0, alias="expires_in")
