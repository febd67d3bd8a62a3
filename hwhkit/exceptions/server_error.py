from .hwhkit_error import HwhKitError


class ServerError(HwhKitError):
    """
    Представляет ошибку запуска или работы сервера.
    """
