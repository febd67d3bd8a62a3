import logging
from pathlib import Path

from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.responses import PlainTextResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

from hwhkit.exceptions import StaticDirectoryMissing
from hwhkit.utils.config import StaticFileSettings

logger = logging.getLogger(__name__)


class StaticFilesMiddleware:
    """
    Отдает файлы из директории для запросов по префиксу URL,
    остальные запросы передает следующему слою.

    Ошибки StaticFiles (нет файла, неверный метод) превращаются в ответ с их кодом.
    При префиксе "/" запрос, для которого файла нет, передается следующему слою,
    чтобы раздача из корня не закрывала маршруты приложения.
    """

    def __init__(self, app: ASGIApp, directory: Path, url_prefix: str):
        self.app: ASGIApp = app
        self.url_prefix: str = url_prefix.rstrip("/")
        self.static_files: StaticFiles = StaticFiles(directory=directory)

    @property
    def is_root_mount(self) -> bool:
        return self.url_prefix == ""

    def matches(self, route_path: str) -> bool:
        if self.is_root_mount:
            return True

        return route_path == self.url_prefix or route_path.startswith(f"{self.url_prefix}/")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        root_path: str = scope.get("root_path", "")
        path: str = scope["path"]
        route_path: str = path[len(root_path):] if path.startswith(root_path) else path

        if not self.matches(route_path):
            await self.app(scope, receive, send)
            return

        # Same scope layout as a Mount: prefix moves into root_path, path stays whole
        child_scope: Scope = {**scope, "root_path": root_path + self.url_prefix}

        try:
            response: Response = await self.static_files.get_response(
                self.static_files.get_path(child_scope), child_scope
            )

        except HTTPException as err:
            if self.is_root_mount:
                await self.app(scope, receive, send)
                return

            response = PlainTextResponse(err.detail, status_code=err.status_code, headers=err.headers)

        await response(child_scope, receive, send)


def create_static_files_layer(settings: StaticFileSettings) -> Middleware:
    """
    Создает слой раздачи статических файлов по адресу {prefix}/*.

    :param settings: Настройки статических файлов.
    :return: Промежуточный слой раздачи файлов.
    :raise StaticDirectoryMissing: Директория не существует.
    """
    if not settings.dir.is_dir():
        raise StaticDirectoryMissing(settings.dir)

    logger.info(
        "Static files enabled",
        extra={"route": f"{settings.url_prefix.rstrip('/')}/*", "directory": str(settings.dir)}
    )
    return Middleware(StaticFilesMiddleware, directory=settings.dir, url_prefix=settings.url_prefix)
