import asyncio
import ipaddress
import logging
import socket
from typing import Any

import uvicorn
from fastapi import FastAPI

from hwhkit.exceptions import BindFailed, InvalidServerAddress, ServerAlreadyStarted, ServerRuntimeError
from hwhkit.utils.config import Config

logger = logging.getLogger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def parse_socket_address(address: str) -> tuple[IPAddress, int]:
    """
    Разбирает адрес вида host:port, где host является IP адресом.
    IPv6 адрес должен быть записан в квадратных скобках.

    :param address: Адрес для прослушивания.
    :return: IP адрес и порт.
    :raise InvalidServerAddress: Адрес не удалось разобрать.
    """
    host, separator, port_text = address.rpartition(":")
    if not separator or not host:
        raise InvalidServerAddress(address, "expected host:port")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]

    elif ":" in host:
        raise InvalidServerAddress(address, "IPv6 address must be enclosed in brackets")

    try:
        ip_address: IPAddress = ipaddress.ip_address(host)

    except ValueError as err:
        raise InvalidServerAddress(address, str(err)) from err

    if not port_text.isdigit() or int(port_text) > 65535:
        raise InvalidServerAddress(address, f"invalid port {port_text!r}")

    return ip_address, int(port_text)


def bind_socket(address: str, ip_address: IPAddress, port: int) -> socket.socket:
    """
    Создает сокет и занимает им адрес.

    :param address: Исходный адрес для сообщений об ошибке.
    :param ip_address: IP адрес.
    :param port: Порт.
    :return: Привязанный сокет.
    :raise BindFailed: Адрес занят или недоступен.
    """
    family: socket.AddressFamily = socket.AF_INET6 if ip_address.version == 6 else socket.AF_INET
    sock: socket.socket = socket.socket(family, socket.SOCK_STREAM)

    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((str(ip_address), port))

    except OSError as err:
        sock.close()
        raise BindFailed(address, str(err)) from err

    sock.set_inheritable(True)
    return sock


class WebServer:
    """
    Хранит собранное приложение и конфигурацию, запускает прием соединений.
    Объект запускается только один раз.
    """

    def __init__(self, app: FastAPI, config: Config):
        self._app: FastAPI = app
        self._config: Config = config
        self._started: bool = False
        self._uvicorn_server: uvicorn.Server | None = None

    @property
    def app(self) -> FastAPI:
        return self._app

    @property
    def config(self) -> Config:
        return self._config

    @property
    def is_running(self) -> bool:
        return self._uvicorn_server is not None and self._uvicorn_server.started

    def middleware_status(self) -> dict[str, dict[str, Any]]:
        """
        Собирает состояние подсистем сервера. Секрет JWT не включается.

        :return: Словарь вида {имя подсистемы: {enabled: ..., параметры}}.
        """
        middleware = self._config.middleware
        return {
            "request_logging": {
                "enabled": middleware.logging.request_logging_enabled,
                "level": middleware.logging.level,
            },
            "cors": {
                "enabled": middleware.cors.enabled,
                "origins": list(middleware.cors.origins),
            },
            "static_files": {
                "enabled": middleware.static_files.enabled,
                "directory": str(middleware.static_files.dir),
                "prefix": middleware.static_files.url_prefix,
            },
            "templates": {
                "enabled": middleware.templates.enabled,
                "directory": str(middleware.templates.dir),
            },
            "jwt": {
                "enabled": middleware.jwt.enabled,
                "expires_in": middleware.jwt.expires_in_seconds,
            },
        }

    def log_middleware_status(self) -> None:
        for name, status in self.middleware_status().items():
            logger.info("Middleware status", extra={"middleware": name, **status})

        logger.info(
            "Middleware stack",
            extra={"layers": list(getattr(self._app.state, "middleware_layers", []))}
        )

    async def run(self, addr: str | None = None) -> None:
        """
        Занимает адрес и обрабатывает соединения до остановки процесса.

        :param addr: Адрес вида host:port, по умолчанию адрес из конфигурации.
        :return: Ничего.
        :raise ServerAlreadyStarted: Сервер уже запускался.
        :raise InvalidServerAddress: Адрес не удалось разобрать.
        :raise BindFailed: Адрес не удалось занять.
        :raise ServerRuntimeError: Ошибка во время работы сервера.
        """
        if self._started:
            raise ServerAlreadyStarted()

        self._started = True
        bind_address: str = addr if addr is not None else self._config.server_address()

        logger.info(
            "Starting HwhKit web server",
            extra={
                "address": bind_address,
                "architecture": self._config.server.architecture.value,
            }
        )

        ip_address, port = parse_socket_address(bind_address)
        sock: socket.socket = bind_socket(bind_address, ip_address, port)
        self.log_middleware_status()

        server = uvicorn.Server(
            uvicorn.Config(self._app, log_config=None, access_log=False)
        )
        self._uvicorn_server = server
        logger.info("Server started, waiting for connections", extra={"address": bind_address})

        try:
            await server.serve(sockets=[sock])

        except OSError as err:
            raise ServerRuntimeError(str(err)) from err

        finally:
            sock.close()

    def stop(self) -> None:
        """
        Просит запущенный сервер завершить работу после текущих запросов.

        :return: Ничего.
        """
        if self._uvicorn_server is not None:
            logger.info("Stopping HwhKit web server")
            self._uvicorn_server.should_exit = True

    async def serve(self) -> None:
        await self.run(None)

    def start(self, addr: str | None = None) -> None:
        """
        Запускает сервер в новом цикле событий.

        :param addr: Адрес вида host:port, по умолчанию адрес из конфигурации.
        :return: Ничего.
        """
        asyncio.run(self.run(addr))
