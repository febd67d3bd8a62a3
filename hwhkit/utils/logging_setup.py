import logging
import sys

from pythonjsonlogger import jsonlogger

from hwhkit.exceptions import ConfigError

LIBRARY_LOGGER_NAME: str = "hwhkit"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s %(message)s"
TRACE: int = 5

LOG_LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_installed_handler: logging.Handler | None = None


def parse_log_level(level: str) -> int:
    """
    Переводит текстовый уровень журналирования в числовой.

    :param level: Уровень (trace, debug, info, warn, error, critical).
    :return: Числовой уровень для logging.
    :raise ConfigError: Неизвестный уровень журналирования.
    """
    try:
        return LOG_LEVELS[level.strip().lower()]

    except KeyError as err:
        raise ConfigError(f"Invalid log level: {level!r}") from err


def setup_logging(level: str = "info") -> bool:
    """
    Настраивает вывод журнала библиотеки в формате JSON.
    Настройка выполняется один раз на процесс, повторные вызовы ничего не меняют.

    :param level: Уровень журналирования.
    :return: Был ли установлен обработчик этим вызовом.
    :raise ConfigError: Неизвестный уровень журналирования.
    """
    global _installed_handler

    numeric_level: int = parse_log_level(level)
    if _installed_handler is not None:
        return False

    logging.addLevelName(TRACE, "TRACE")

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(numeric_level)

    _installed_handler = handler
    return True
