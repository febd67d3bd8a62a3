from .middleware_error import MiddlewareError


class InvalidCorsPolicy(MiddlewareError):
    """
    Значение политики CORS не является допустимым для своей категории.
    """
    def __init__(self, category: str, value: str):
        self.category: str = category
        self.value: str = value
        super().__init__(f"Invalid CORS {category}: {value!r}")
