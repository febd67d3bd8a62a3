from enum import StrEnum


class ArchitectureType(StrEnum):
    """
    Тип архитектуры сервера.
    """
    # Frontend and backend are separated, server only serves JSON API
    Api = "api"
    # Server also renders HTML templates
    Full = "full"
