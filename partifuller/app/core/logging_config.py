"""
Logging configuration for the RSVP service.

``setup_logging`` attaches a console handler, and a file handler when
``LOG_FILE`` is set, to the root logger the first time it is called.
The form parser used by ``POST /rsvp`` logs every parsed field at DEBUG
level; its loggers are capped at WARNING so a DEBUG run shows the
service's own messages rather than one line per form byte range.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Loggers of python-multipart (old and new import names).
NOISY_LOGGERS = ("multipart", "python_multipart")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    noisy_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a UTF-8 log file.  If omitted, only the console is used.
    noisy_loggers : Iterable[str]
        Loggers capped at WARNING regardless of ``level``.

    Handlers are only added when the root logger has none, e.g. when
    uvicorn or an earlier ``create_app`` call configured it already.
    The caps on ``noisy_loggers`` are applied either way.
    """
    for name in noisy_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
