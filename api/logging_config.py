"""
Centralized logging configuration.

Modules log through logging.getLogger(__name__); this module wires the
handlers once at startup and quiets third-party loggers that would
otherwise flood the output with non-actionable messages.
"""
import logging
from logging.handlers import RotatingFileHandler

from config import LoggingConfig

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"

_SUPPRESSED_LOGGERS = [
    'MARKDOWN',
    'watchfiles',
]


def configure_logging(config: LoggingConfig) -> None:
    """Attach console (and optional rotating file) handlers to the root logger"""
    root = logging.getLogger()
    root.setLevel(config.level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(getattr(h, '_docportal', False) for h in root.handlers):
        for handler in _build_handlers(config):
            handler.setFormatter(formatter)
            handler._docportal = True
            root.addHandler(handler)

    for logger_name in _SUPPRESSED_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def _build_handlers(config: LoggingConfig):
    handlers = [logging.StreamHandler()]
    if config.file:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            config.file,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        ))
    return handlers
