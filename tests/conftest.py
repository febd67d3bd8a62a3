import logging
from pathlib import Path

import pytest

from hwhkit.utils import logging_setup


@pytest.fixture(autouse=True)
def isolated_logging():
    yield
    logger = logging.getLogger(logging_setup.LIBRARY_LOGGER_NAME)
    if logging_setup._installed_handler is not None:
        logger.removeHandler(logging_setup._installed_handler)
        logging_setup._installed_handler = None

    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def static_dir(tmp_path: Path) -> Path:
    directory: Path = tmp_path / "static"
    directory.mkdir()
    (directory / "hello.txt").write_text("Hello from static", encoding="utf-8")
    return directory


@pytest.fixture()
def templates_dir(tmp_path: Path) -> Path:
    directory: Path = tmp_path / "templates"
    directory.mkdir()
    (directory / "index.html").write_text(
        "<html><head><title>{{ title }}</title></head><body><h1>Hello, {{ name }}!</h1></body></html>",
        encoding="utf-8"
    )
    return directory
