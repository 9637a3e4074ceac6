"""Logging config for the satellite position tracker."""

import logging

from colorlog import ColoredFormatter

FORMAT_DATE = "%Y-%m-%d"
FORMAT_TIME = "%H:%M:%S"
FORMAT_DATETIME = f"{FORMAT_DATE} {FORMAT_TIME}"
fmt = "%(asctime)s.%(msecs)03d %(levelname)s (%(threadName)s) [%(name)s] %(message)s"

HANDLER_NAME = "aioisstracker"
# Loggers which are only worth reading when debugging the tracker
NOISY_LOGGERS = ("aiohttp", "asyncio")


def setup_logging(debug: bool = False) -> logging.Handler:
    """Set up the root logger with colored output for the tracker.

    Debug logging includes request and response bodies of the tracker.
    Without it the loggers of aiohttp and asyncio only report warnings.
    Calling it again only changes the levels.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if debug else logging.WARNING)

    for handler in root_logger.handlers:
        if handler.name == HANDLER_NAME:
            return handler

    handler = logging.StreamHandler()
    handler.name = HANDLER_NAME
    handler.setFormatter(
        ColoredFormatter(
            f"%(log_color)s{fmt}%(reset)s",
            datefmt=FORMAT_DATETIME,
            reset=True,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )
    root_logger.addHandler(handler)
    return handler
