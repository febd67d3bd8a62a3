from hwhkit.exceptions import (
    BindFailed,
    BuilderAlreadyUsed,
    ConfigError,
    FeatureDisabled,
    HwhKitError,
    InvalidCorsPolicy,
    InvalidServerAddress,
    MiddlewareError,
    ServerError,
)
from hwhkit.middleware import DispatchMiddlewareFactory, MiddlewareFactory, MiddlewareManager
from hwhkit.utils.config import ArchitectureType, Config
from hwhkit.web_server import WebServer
from hwhkit.web_server_builder import WebServerBuilder

__version__ = "0.1.0"

__all__ = (
    "WebServerBuilder",
    "WebServer",
    "Config",
    "ArchitectureType",
    "MiddlewareFactory",
    "DispatchMiddlewareFactory",
    "MiddlewareManager",
    "HwhKitError",
    "ConfigError",
    "MiddlewareError",
    "InvalidCorsPolicy",
    "ServerError",
    "InvalidServerAddress",
    "BindFailed",
    "BuilderAlreadyUsed",
    "FeatureDisabled",
)
