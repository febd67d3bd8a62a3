from .middleware_error import MiddlewareError


class InvalidToken(MiddlewareError):
    status_code: int = 401

    def __init__(self, reason: str):
        self.reason: str = reason
        super().__init__(f"Bad authorization token: {reason}")
