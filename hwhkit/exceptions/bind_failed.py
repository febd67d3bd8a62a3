from .server_error import ServerError


class BindFailed(ServerError):
    """
    Не удалось занять адрес для прослушивания (например, порт уже используется).
    """
    def __init__(self, address: str, reason: str):
        self.address: str = address
        super().__init__(f"Unable to bind to {address!r}: {reason}")
