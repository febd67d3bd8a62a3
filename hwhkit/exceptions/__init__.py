from .hwhkit_error import HwhKitError
from .config_error import ConfigError
from .middleware_error import MiddlewareError
from .invalid_cors_policy import InvalidCorsPolicy
from .static_directory_missing import StaticDirectoryMissing
from .missing_authorization import MissingAuthorization
from .invalid_token import InvalidToken
from .server_error import ServerError
from .invalid_server_address import InvalidServerAddress
from .bind_failed import BindFailed
from .server_runtime_error import ServerRuntimeError
from .server_already_started import ServerAlreadyStarted
from .builder_already_used import BuilderAlreadyUsed
from .feature_disabled import FeatureDisabled
from .template_render_error import TemplateRenderError

__all__ = (
    "HwhKitError",
    "ConfigError",
    "MiddlewareError",
    "InvalidCorsPolicy",
    "StaticDirectoryMissing",
    "MissingAuthorization",
    "InvalidToken",
    "ServerError",
    "InvalidServerAddress",
    "BindFailed",
    "ServerRuntimeError",
    "ServerAlreadyStarted",
    "BuilderAlreadyUsed",
    "FeatureDisabled",
    "TemplateRenderError",
)
