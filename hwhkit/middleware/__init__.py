from .middleware_factory import DispatchMiddlewareFactory, MiddlewareFactory
from .middleware_manager import MiddlewareManager
from .cors import create_cors_layer
from .request_logging import create_request_logging_layer
from .static_files import StaticFilesMiddleware, create_static_files_layer
from .jwt_auth import DisabledJwtAuth, JwtAuth, JwtClaims, JwtMiddlewareFactory, create_jwt_auth

__all__ = (
    "MiddlewareFactory",
    "DispatchMiddlewareFactory",
    "MiddlewareManager",
    "create_cors_layer",
    "create_request_logging_layer",
    "StaticFilesMiddleware",
    "create_static_files_layer",
    "JwtAuth",
    "JwtClaims",
    "DisabledJwtAuth",
    "JwtMiddlewareFactory",
    "create_jwt_auth",
)
