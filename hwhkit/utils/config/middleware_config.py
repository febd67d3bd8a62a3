from typing import Any

from pydantic import Field

from hwhkit.utils.config.cors_config import CorsSettings
from hwhkit.utils.config.jwt_config import JwtSettings
from hwhkit.utils.config.logging_config import LoggingSettings
from hwhkit.utils.config.settings_model import SettingsModel
from hwhkit.utils.config.static_files_config import StaticFileSettings
from hwhkit.utils.config.templates_config import TemplateSettings


class MiddlewareConfig(SettingsModel):
    """
    Хранит настройки всех промежуточных слоев и пользовательские параметры.
    """
    cors: CorsSettings = Field(default_factory=CorsSettings)
    jwt: JwtSettings = Field(default_factory=JwtSettings)
    static_files: StaticFileSettings = Field(default_factory=StaticFileSettings)
    templates: TemplateSettings = Field(default_factory=TemplateSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    # Values are already JSON compatible
    custom: dict[str, Any] = Field(default_factory=dict)
