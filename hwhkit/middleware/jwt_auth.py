import datetime
import logging
from typing import Any, Awaitable, Callable, Mapping

import jwt
from pydantic import BaseModel, ValidationError
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from hwhkit.exceptions import FeatureDisabled, InvalidToken, MissingAuthorization
from hwhkit.middleware.middleware_factory import MiddlewareFactory
from hwhkit.utils.config import JwtSettings

logger = logging.getLogger(__name__)

JWT_ALGORITHM: str = "HS256"
JWT_AUDIENCE: str = "hwhkit"
JWT_ISSUER: str = "hwhkit"
BEARER_PREFIX: str = "Bearer "


class JwtClaims(BaseModel):
    """
    Данные, хранимые в токене.
    """
    sub: str
    exp: int
    iat: int
    aud: str
    iss: str


class JwtAuth:
    """
    Выдает и проверяет JWT токены с общим секретом из конфигурации.
    """

    def __init__(self, settings: JwtSettings):
        self.secret: str = settings.secret
        self.expires_in: int = settings.expires_in_seconds

    def generate_token(self, user_id: str) -> str:
        """
        Создает токен для пользователя.

        :param user_id: Идентификатор пользователя.
        :return: Подписанный токен.
        """
        now: datetime.datetime = datetime.datetime.now(tz=datetime.UTC)
        claims: JwtClaims = JwtClaims(
            sub=user_id,
            iat=int(now.timestamp()),
            exp=int((now + datetime.timedelta(seconds=self.expires_in)).timestamp()),
            aud=JWT_AUDIENCE,
            iss=JWT_ISSUER,
        )
        return jwt.encode(claims.model_dump(), self.secret, algorithm=JWT_ALGORITHM)

    def verify_token(self, token: str) -> JwtClaims:
        """
        Проверяет подпись, срок действия, издателя и получателя токена.

        :param token: Токен для проверки.
        :return: Данные из токена.
        :raise InvalidToken: Токен не прошел проверку.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self.secret,
                algorithms=[JWT_ALGORITHM],
                audience=JWT_AUDIENCE,
                issuer=JWT_ISSUER,
            )
            return JwtClaims.model_validate(payload)

        except jwt.PyJWTError as err:
            raise InvalidToken(str(err)) from err

        except ValidationError as err:
            raise InvalidToken("unexpected payload") from err

    @staticmethod
    def extract_token_from_header(headers: Mapping[str, str]) -> str:
        """
        Достает токен из заголовка Authorization.

        :param headers: Заголовки запроса.
        :return: Токен без префикса Bearer.
        :raise MissingAuthorization: Заголовок отсутствует или не в формате Bearer.
        """
        auth_header: str | None = headers.get("authorization")
        if auth_header is None:
            raise MissingAuthorization()

        if not auth_header.startswith(BEARER_PREFIX):
            raise MissingAuthorization("Invalid Authorization format")

        return auth_header[len(BEARER_PREFIX):]


class DisabledJwtAuth:
    """
    Заменяет JwtAuth, когда JWT выключен в конфигурации.
    """

    def generate_token(self, user_id: str) -> str:
        raise FeatureDisabled("jwt")

    def verify_token(self, token: str) -> JwtClaims:
        raise FeatureDisabled("jwt")

    @staticmethod
    def extract_token_from_header(headers: Mapping[str, str]) -> str:
        raise FeatureDisabled("jwt")


def create_jwt_auth(settings: JwtSettings) -> JwtAuth | DisabledJwtAuth:
    if settings.enabled:
        return JwtAuth(settings)

    return DisabledJwtAuth()


class JwtMiddlewareFactory(MiddlewareFactory):
    """
    Слой, который разбирает токен запроса и сохраняет его данные в request.state.jwt_claims.
    Запросы без токена или с неверным токеном не отклоняются.
    """

    def __init__(self, jwt_auth: JwtAuth):
        self.jwt_auth: JwtAuth = jwt_auth

    @property
    def name(self) -> str:
        return "jwt_auth"

    def create_layer(self) -> Middleware:
        return Middleware(BaseHTTPMiddleware, dispatch=self.dispatch)

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request.state.jwt_claims = None

        try:
            token: str = self.jwt_auth.extract_token_from_header(request.headers)
            request.state.jwt_claims = self.jwt_auth.verify_token(token)

        except MissingAuthorization:
            logger.debug("Request without bearer token", extra={"path": request.url.path})

        except InvalidToken as err:
            logger.warning(
                "Rejected bearer token", extra={"path": request.url.path, "reason": err.reason}
            )

        return await call_next(request)
