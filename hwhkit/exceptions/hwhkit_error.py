class HwhKitError(Exception):
    """
    Базовая ошибка библиотеки, от которой наследуются все остальные ошибки.
    """
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message: str = message
