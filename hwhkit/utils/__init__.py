from .logging_setup import parse_log_level, setup_logging

__all__ = (
    "parse_log_level",
    "setup_logging",
)
