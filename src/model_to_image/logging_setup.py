"""File-based logging for CLI runs: ``stdout.log`` and ``stderr.log``."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "model_to_image"
STDOUT_LOG = "stdout.log"
STDERR_LOG = "stderr.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _BelowErrorFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def configure_logging(log_dir: Path, *, debug: bool = False) -> logging.Logger:
    """Route package logs to ``<log_dir>/stdout.log`` and ``<log_dir>/stderr.log``.

    Records below ``ERROR`` go to the stdout log, the rest to the stderr log.
    Handlers from a previous call are closed and replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_model_to_image", False):
            logger.removeHandler(handler)
            handler.close()

    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    out_handler = logging.FileHandler(log_dir / STDOUT_LOG, encoding="utf-8")
    out_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    out_handler.addFilter(_BelowErrorFilter())

    err_handler = logging.FileHandler(log_dir / STDERR_LOG, encoding="utf-8")
    err_handler.setLevel(logging.ERROR)

    for handler in (out_handler, err_handler):
        handler.setFormatter(formatter)
        handler._model_to_image = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
