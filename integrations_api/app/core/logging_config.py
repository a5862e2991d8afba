"""
Logging configuration for the API process.

``setup_logging`` builds one set of handlers from ``Settings`` (console,
plus a file when ``LOG_FILE`` is set) and shares it between the root
logger and the ``uvicorn`` loggers, so server and application records
come out in the same format and in the same place.  ``run.py`` starts
uvicorn with ``log_config=None`` to keep it from replacing them.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
HANDLER_NAME = "integrations"


def build_handlers(config: Settings) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.set_name(HANDLER_NAME)
    return handlers


def setup_logging(config: Settings) -> None:
    """Attach the project's handlers to the root and uvicorn loggers.

    Calling it again is a no-op once the project's handlers are attached,
    e.g. when tests build the app more than once.
    """
    root = logging.getLogger()
    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return

    handlers = build_handlers(config)
    root.setLevel(config.log_level)
    for handler in handlers:
        root.addHandler(handler)

    # uvicorn.error propagates into uvicorn; the other two are wired directly.
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(config.log_level)
        if name == "uvicorn.error":
            server_logger.propagate = True
            continue
        server_logger.handlers = list(handlers)
        server_logger.propagate = False
