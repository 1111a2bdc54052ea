"""Application-wide logging configuration using loguru.

Standard-library logging (uvicorn, httpx, starlette) is intercepted and
routed through loguru so the gates, the session client and the server share
one output format.
"""

import inspect
import logging
import sys

from loguru import logger

from kcic_site.config import LOG_LEVEL

_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _is_logging_frame(filename: str) -> bool:
    return filename == logging.__file__ or ("importlib" in filename and "_bootstrap" in filename)


class _InterceptHandler(logging.Handler):
    """Re-emit uvicorn and httpx records through loguru.

    The loguru depth is set to the frame that called ``logging``, so
    ``{name}:{function}:{line}`` points at uvicorn or httpx rather than here.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or _is_logging_frame(frame.f_code.co_filename)):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Make loguru the sole logging handler for the application."""
    logger.remove()
    logger.add(sys.stderr, format=_LOG_FORMAT, colorize=True, level=level.upper())

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx"):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [_InterceptHandler()]
        stdlib_logger.propagate = False
