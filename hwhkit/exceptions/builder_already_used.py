from .hwhkit_error import HwhKitError


class BuilderAlreadyUsed(HwhKitError):
    """
    Построитель уже был использован для создания сервера.
    """
    def __init__(self) -> None:
        super().__init__("WebServerBuilder.build() has already been called")
