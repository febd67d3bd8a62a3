from pydantic import BaseModel, ConfigDict


class SettingsModel(BaseModel):
    """
    Базовая модель раздела конфигурации, неизменяемая после создания.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)
