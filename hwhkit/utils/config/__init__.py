from .architecture_type import ArchitectureType
from .server_config import ServerSettings
from .cors_config import CorsSettings, WILDCARD
from .jwt_config import JwtSettings
from .static_files_config import StaticFileSettings
from .templates_config import TemplateSettings
from .logging_config import LoggingSettings
from .middleware_config import MiddlewareConfig
from .app_config import Config

__all__ = (
    "ArchitectureType",
    "ServerSettings",
    "CorsSettings",
    "WILDCARD",
    "JwtSettings",
    "StaticFileSettings",
    "TemplateSettings",
    "LoggingSettings",
    "MiddlewareConfig",
    "Config",
)
