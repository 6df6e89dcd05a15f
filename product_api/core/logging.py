"""Root logger setup shared by the API process and the CLI entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "product_api"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the root logger.

    Calling this more than once only updates the level, so tests and
    repeated ``create_app()`` calls do not stack handlers.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Engine echo (DATABASE_ECHO) raises this again when enabled
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
