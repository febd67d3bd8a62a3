from .hwhkit_error import HwhKitError


class ConfigError(HwhKitError):
    """
    Представляет ошибку в конфигурации сервера.
    """
