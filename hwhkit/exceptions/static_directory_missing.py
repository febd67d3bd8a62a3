from pathlib import Path

from .middleware_error import MiddlewareError


class StaticDirectoryMissing(MiddlewareError):
    def __init__(self, directory: Path):
        self.directory: Path = directory
        super().__init__(f"Static files directory does not exist: {directory}")
