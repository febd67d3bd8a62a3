from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

DispatchFunction = Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]


class MiddlewareFactory(ABC):
    """
    Описывает пользовательский промежуточный слой, подключаемый к серверу.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Имя слоя для журнала.

        :return: Имя слоя.
        """

    @abstractmethod
    def create_layer(self) -> Middleware:
        """
        Создает описание слоя для подключения к приложению.

        :return: Промежуточный слой Starlette.
        """


class DispatchMiddlewareFactory(MiddlewareFactory):
    """
    Подключает асинхронную функцию вида (request, call_next) как промежуточный слой.
    """

    def __init__(self, name: str, dispatch: DispatchFunction):
        self._name: str = name
        self.dispatch: DispatchFunction = dispatch

    @property
    def name(self) -> str:
        return self._name

    def create_layer(self) -> Middleware:
        return Middleware(BaseHTTPMiddleware, dispatch=self.dispatch)
