import jwt
import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from hwhkit.exceptions import FeatureDisabled, InvalidToken, MissingAuthorization
from hwhkit.middleware import DisabledJwtAuth, JwtAuth, JwtMiddlewareFactory, create_jwt_auth
from hwhkit.utils.config import JwtSettings


@pytest.fixture()
def jwt_auth() -> JwtAuth:
    return JwtAuth(JwtSettings(enabled=True, secret="test-secret-key", expires_in_seconds=3600))


def test_jwt_auth_creation(jwt_auth: JwtAuth):
    assert jwt_auth.secret == "test-secret-key"
    assert jwt_auth.expires_in == 3600


def test_token_generation_and_verification(jwt_auth: JwtAuth):
    token: str = jwt_auth.generate_token("user123")

    claims = jwt_auth.verify_token(token)

    assert claims.sub == "user123"
    assert claims.aud == "hwhkit"
    assert claims.iss == "hwhkit"
    assert claims.exp - claims.iat == 3600


def test_token_signed_with_other_secret(jwt_auth: JwtAuth):
    other = JwtAuth(JwtSettings(enabled=True, secret="another-secret"))
    token: str = other.generate_token("user123")

    with pytest.raises(InvalidToken):
        jwt_auth.verify_token(token)


def test_expired_token():
    short_lived = JwtAuth(JwtSettings(enabled=True, secret="test-secret-key", expires_in_seconds=0))
    token: str = short_lived.generate_token("user123")

    with pytest.raises(InvalidToken):
        short_lived.verify_token(token)


def test_token_for_other_audience(jwt_auth: JwtAuth):
    token: str = jwt.encode(
        {"sub": "user123", "aud": "someone-else", "iss": "hwhkit", "iat": 0, "exp": 4102444800},
        "test-secret-key",
        algorithm="HS256"
    )

    with pytest.raises(InvalidToken):
        jwt_auth.verify_token(token)


def test_garbage_token(jwt_auth: JwtAuth):
    with pytest.raises(InvalidToken):
        jwt_auth.verify_token("not.a.token")


def test_extract_token_from_header(jwt_auth: JwtAuth):
    assert jwt_auth.extract_token_from_header({"authorization": "Bearer abc.def"}) == "abc.def"


def test_extract_token_without_header(jwt_auth: JwtAuth):
    with pytest.raises(MissingAuthorization):
        jwt_auth.extract_token_from_header({})


def test_extract_token_with_wrong_scheme(jwt_auth: JwtAuth):
    with pytest.raises(MissingAuthorization, match="format"):
        jwt_auth.extract_token_from_header({"authorization": "Basic dXNlcjpwYXNz"})


def test_create_jwt_auth_follows_enabled_flag():
    assert isinstance(create_jwt_auth(JwtSettings(enabled=True)), JwtAuth)
    assert isinstance(create_jwt_auth(JwtSettings(enabled=False)), DisabledJwtAuth)


def test_disabled_jwt_auth_reports_feature():
    disabled = DisabledJwtAuth()

    with pytest.raises(FeatureDisabled) as exc_info:
        disabled.generate_token("user123")

    assert exc_info.value.feature == "jwt"

    with pytest.raises(FeatureDisabled):
        disabled.verify_token("token")


def make_client(jwt_auth: JwtAuth) -> TestClient:
    app = FastAPI(middleware=[JwtMiddlewareFactory(jwt_auth).create_layer()])

    @app.get("/whoami")
    async def whoami(request: Request) -> dict[str, str | None]:
        claims = request.state.jwt_claims
        return {"user": claims.sub if claims is not None else None}

    return TestClient(app)


def test_middleware_attaches_claims(jwt_auth: JwtAuth):
    token: str = jwt_auth.generate_token("user123")

    response = make_client(jwt_auth).get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.json() == {"user": "user123"}


def test_middleware_passes_requests_without_token(jwt_auth: JwtAuth):
    response = make_client(jwt_auth).get("/whoami")

    assert response.status_code == 200
    assert response.json() == {"user": None}


def test_middleware_passes_requests_with_bad_token(jwt_auth: JwtAuth):
    response = make_client(jwt_auth).get("/whoami", headers={"Authorization": "Bearer broken"})

    assert response.status_code == 200
    assert response.json() == {"user": None}


def test_factory_name(jwt_auth: JwtAuth):
    assert JwtMiddlewareFactory(jwt_auth).name == "jwt_auth"
