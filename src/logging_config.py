"""Logging setup for the API process."""

import logging
import sys


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send application logs to stderr at ``level``.

    Only the ``src`` logger tree is configured so uvicorn keeps its own
    handlers. Existing handlers are replaced to avoid duplicate lines.
    """
    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    for h in list(app_logger.handlers):
        app_logger.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    app_logger.addHandler(ch)
