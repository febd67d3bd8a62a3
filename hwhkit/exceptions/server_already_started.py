from .server_error import ServerError


class ServerAlreadyStarted(ServerError):
    """
    Сервер уже был запущен, повторный запуск того же объекта невозможен.
    """
    def __init__(self) -> None:
        super().__init__("Web server has already been started")
