from pydantic import Field

from hwhkit.utils.config.settings_model import SettingsModel


class LoggingSettings(SettingsModel):
    """
    Конфигурация журналирования.
    """
    level: str = "info"
    request_logging_enabled: bool = Field(default=True, alias="requests")
