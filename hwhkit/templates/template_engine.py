import logging
from pathlib import Path
from typing import Any, Mapping

from jinja2 import TemplateError, TemplateNotFound
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.templating import Jinja2Templates

from hwhkit.exceptions import ConfigError, FeatureDisabled, TemplateRenderError
from hwhkit.utils.config import TemplateSettings

logger = logging.getLogger(__name__)


class TemplateEngine:
    """
    Отрисовывает HTML шаблоны Jinja2 из директории шаблонов.
    """

    def __init__(self, settings: TemplateSettings):
        if not settings.dir.is_dir():
            raise ConfigError(f"Templates directory does not exist: {settings.dir}")

        self.directory: Path = settings.dir
        self.extension: str = settings.extension
        self.templates: Jinja2Templates = Jinja2Templates(directory=settings.dir)

        logger.info(
            "Template engine initialized",
            extra={"directory": str(self.directory), "extension": self.extension}
        )

    def template_names(self) -> list[str]:
        """
        Получает имена всех шаблонов с настроенным расширением.

        :return: Имена шаблонов относительно директории шаблонов.
        """
        return self.templates.env.list_templates(extensions=[self.extension])

    def render(self, template_name: str, context: Mapping[str, Any] | None = None) -> str:
        """
        Отрисовывает шаблон в строку.

        :param template_name: Имя шаблона относительно директории шаблонов.
        :param context: Переменные шаблона.
        :return: Готовый HTML.
        :raise TemplateRenderError: Шаблон не найден или содержит ошибку.
        """
        try:
            return self.templates.get_template(template_name).render(**(context or {}))

        except TemplateNotFound as err:
            raise TemplateRenderError(template_name, "template not found") from err

        except TemplateError as err:
            raise TemplateRenderError(template_name, str(err)) from err

    def response(
        self,
        request: Request,
        template_name: str,
        context: Mapping[str, Any] | None = None,
        status_code: int = 200
    ) -> HTMLResponse:
        """
        Отрисовывает шаблон в HTTP ответ. Запрос доступен в шаблоне как request.

        :param request: Текущий запрос.
        :param template_name: Имя шаблона.
        :param context: Переменные шаблона.
        :param status_code: Код ответа.
        :return: HTML ответ.
        """
        html: str = self.render(template_name, {"request": request, **(context or {})})
        return HTMLResponse(html, status_code=status_code)


class DisabledTemplateEngine:
    """
    Заменяет TemplateEngine, когда шаблоны выключены в конфигурации.
    """

    def template_names(self) -> list[str]:
        raise FeatureDisabled("templates")

    def render(self, template_name: str, context: Mapping[str, Any] | None = None) -> str:
        raise FeatureDisabled("templates")

    def response(
        self,
        request: Request,
        template_name: str,
        context: Mapping[str, Any] | None = None,
        status_code: int = 200
    ) -> HTMLResponse:
        raise FeatureDisabled("templates")


def create_template_engine(settings: TemplateSettings) -> TemplateEngine | DisabledTemplateEngine:
    if settings.enabled:
        return TemplateEngine(settings)

    return DisabledTemplateEngine()
