from .server_error import ServerError


class ServerRuntimeError(ServerError):
    def __init__(self, reason: str):
        super().__init__(f"Server runtime error: {reason}")
