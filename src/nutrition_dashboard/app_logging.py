"""Logging configuration helpers."""

import logging

# httpx logs every request URL at INFO, which would leak the webhook address.
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack")


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the package logger with a single stream handler."""
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logger = logging.getLogger("nutrition_dashboard")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
