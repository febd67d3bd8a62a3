from pydantic import Field

from hwhkit.utils.config.architecture_type import ArchitectureType
from hwhkit.utils.config.settings_model import SettingsModel


class ServerSettings(SettingsModel):
    """
    Конфигурация серверной части приложения для вывода в сеть.
    """
    host: str = "0.0.0.0"
    # Port 0 passes parsing and is rejected by Config.validate
    port: int = Field(default=3000, ge=0, lt=65536)
    architecture: ArchitectureType = ArchitectureType.Api
