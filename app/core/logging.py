# app/core/logging.py
import logging
import sys

from app.core.config import settings
from app.utils.logger import JsonFormatter


def setup_logging() -> None:
    """
    Configure the root logger once.
    JSON lines by default, plain text when LOG_JSON=false.
    """
    root = logging.getLogger()
    if root.handlers:
        # already configured (second create_app, test runner, ...)
        return

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root.addHandler(handler)
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
