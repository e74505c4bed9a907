from .logging import JsonFormatter, configure_logging, get_logger, resolve_log_level

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
    "resolve_log_level",
]
