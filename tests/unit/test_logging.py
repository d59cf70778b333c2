from __future__ import annotations

import logging
from pathlib import Path

from partifuller.app.core.config import Settings
from partifuller.app.core.logging_config import NOISY_LOGGERS, setup_logging


def test_setup_logging_configures_root_once(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        logfile = tmp_path / "app.log"
        setup_logging("debug", str(logfile))
        setup_logging("error")

        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("partifuller.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] partifuller.test: hello" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_unknown_level_falls_back_to_info() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_settings_point_at_packaged_assets() -> None:
    settings = Settings()
    assert Path(settings.templates_dir, "rsvp_list.html").is_file()
    assert Path(settings.static_dir, "rsvp.js").is_file()


def test_form_parser_loggers_are_capped_even_when_root_is_configured() -> None:
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    noisy = [logging.getLogger(name) for name in NOISY_LOGGERS]
    saved_levels = [logger.level for logger in noisy]
    root.handlers = [logging.NullHandler()]
    try:
        setup_logging("debug")

        assert len(root.handlers) == 1
        for logger in noisy:
            assert logger.getEffectiveLevel() == logging.WARNING
    finally:
        root.handlers = saved_handlers
        for logger, level in zip(noisy, saved_levels):
            logger.setLevel(level)
