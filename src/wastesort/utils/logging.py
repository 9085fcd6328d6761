"""Logging setup for the wastesort CLI."""
import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

LOGGER_NAME = "wastesort"

def _log_path(log_dir: str, log_file: Optional[str]) -> Path:
    if log_file:
        return Path(log_file)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(log_dir) / f"{LOGGER_NAME}_{ts}.log"

def setup_logging(
    log_dir: str = "./logs",
    console: bool = True,
    level: str = "INFO",
    quiet_console: bool = False,
    console_level: Optional[str] = None,
    log_file: Optional[str] = None,
    file_format: str = "{asctime} {levelname:<7} {name} - {message}",
) -> Tuple[logging.Logger, logging.Logger]:
    """
    Configure the ``wastesort`` logger tree.

    Everything from ``wastesort.*`` goes to one file per run (DEBUG and up).
    ``wastesort.summary`` writes one line per classified image to the same
    file and, when the console is enabled, to stderr.

    Args:
        log_dir: Directory for the per-run log file
        console: Whether to attach a stderr handler
        level: Level of the ``wastesort`` logger
        quiet_console: If True, only errors reach the console
        console_level: Separate level for console (defaults to level)
        log_file: Exact log file path; overrides ``log_dir``
        file_format: str.format-style record format for the log file

    Returns:
        (logger, summary_logger)
    """
    path = _log_path(log_dir, log_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    if quiet_console:
        console_level = "ERROR"
    console_level = (console_level or level).upper()

    handlers = {
        "file": {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": str(path),
            "encoding": "utf-8",
            "mode": "a",
            "level": "DEBUG",
        },
        "summary_file": {
            "class": "logging.FileHandler",
            "formatter": "summary",
            "filename": str(path),
            "encoding": "utf-8",
            "mode": "a",
            "level": "INFO",
        },
    }
    main_handlers = ["file"]
    summary_handlers = ["summary_file"]
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "level": console_level,
        }
        main_handlers.append("console")
        summary_handlers.append("console")

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": file_format, "style": "{"},
            "summary": {"format": "{asctime} SUMMARY - {message}", "style": "{"},
            "console": {"format": "{levelname:<7} {message}", "style": "{"},
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {"level": level, "handlers": main_handlers, "propagate": False},
            f"{LOGGER_NAME}.summary": {"level": "INFO", "handlers": summary_handlers, "propagate": False},
        },
        "root": {"handlers": []},
    })
    logging.captureWarnings(True)

    logger = logging.getLogger(LOGGER_NAME)
    summary_logger = logging.getLogger(f"{LOGGER_NAME}.summary")
    logger.info("Logging initialised. File: %s", path)
    return logger, summary_logger
