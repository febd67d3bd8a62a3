from .server_error import ServerError


class InvalidServerAddress(ServerError):
    """
    Адрес для прослушивания не может быть разобран как адрес сокета.
    """
    def __init__(self, address: str, reason: str):
        self.address: str = address
        super().__init__(f"Invalid address format {address!r}: {reason}")
