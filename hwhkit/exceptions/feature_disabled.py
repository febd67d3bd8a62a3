from .hwhkit_error import HwhKitError


class FeatureDisabled(HwhKitError):
    """
    Вызвана функция подсистемы, которая выключена в конфигурации.
    """
    status_code: int = 501

    def __init__(self, feature: str):
        self.feature: str = feature
        super().__init__(f"Feature {feature!r} is not enabled")
