"""Centralized logging configuration."""

import logging

from meteo_forecast.config import DEBUG

THIRD_PARTY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "fastapi",
)


def configure_logging(level: int = logging.DEBUG if DEBUG else logging.INFO) -> None:
    """
    Route application and server logs through one console format.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(_console_handler(formatter, level))

    for logger_name in THIRD_PARTY_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        # Own handler, no propagation, so uvicorn lines are not printed twice
        logger.propagate = False
        logger.addHandler(_console_handler(formatter, level))


def _console_handler(formatter: logging.Formatter, level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler
