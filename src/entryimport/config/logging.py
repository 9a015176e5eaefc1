"""Root logger setup for the command line."""

from __future__ import annotations

import logging

from .env import optional_env_var

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Request lines from these are already logged by the resilient client.
_NOISY_LOGGERS = ("httpx", "httpcore", "hishel")


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Configure the root logger for CLI use.

    ``level`` defaults to ``ENTRYIMPORT_LOG_LEVEL`` (a level name) or INFO.
    ``force=True`` replaces handlers installed earlier, e.g. by a test runner.
    """

    if level is None:
        name = (optional_env_var("ENTRYIMPORT_LOG_LEVEL") or "INFO").upper()
        level = logging.getLevelNamesMapping().get(name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))
