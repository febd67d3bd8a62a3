from .middleware_error import MiddlewareError


class MissingAuthorization(MiddlewareError):
    """
    В запросе отсутствует заголовок авторизации или он имеет неверный формат.
    """
    status_code: int = 401

    def __init__(self, message: str = "Missing Authorization header"):
        super().__init__(message)
