from .hwhkit_error import HwhKitError


class MiddlewareError(HwhKitError):
    """
    Представляет ошибку при создании или работе промежуточного слоя.
    """
