"""Console logging for debate-sentiment runs.

Every stage reports progress through the stdlib :mod:`logging` module.
Records go to stderr, one per line, as
``timestamp | LEVEL | logger | message`` so stdout stays free for the
report.  Libraries that chatter at DEBUG (HTTP connection pooling,
matplotlib font lookup, Pillow) are held at WARNING so ``--verbose``
shows the transcript being processed rather than their internals.
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Attribute set on the stderr handler this module owns.
_HANDLER_ATTR = "_debate_sentiment_log_handler"

_NOISY_LOGGERS = ("urllib3", "matplotlib", "PIL")


def _owned_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]


def setup_logging(level: str = "INFO", quiet_libraries: bool = True) -> None:
    """Route log records to stderr at *level*.

    The first call installs one stderr handler on the root logger.  Later
    calls find that handler and only move it, and the root logger, to the
    new level; handlers installed by anyone else are left alone.

    Args:
        level: Level name, in any case (``"debug"``, ``"INFO"``).
        quiet_libraries: Hold :data:`_NOISY_LOGGERS` at WARNING or above.

    Raises:
        ValueError: If *level* does not name a logging level.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    if quiet_libraries:
        library_level = max(numeric_level, logging.WARNING)
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(library_level)

    owned = _owned_handlers(root)
    if not owned:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
        owned = [handler]

    for handler in owned:
        handler.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Logger for a debate-sentiment module; pass ``__name__``."""
    return logging.getLogger(name)
