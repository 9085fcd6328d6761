import logging

import pytest

from wastesort.config.settings import LoggingSettings
from wastesort.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_loggers():
    yield
    for name in ("wastesort", "wastesort.summary"):
        log = logging.getLogger(name)
        for handler in list(log.handlers):
            log.removeHandler(handler)
            handler.close()


def test_creates_timestamped_file(tmp_path):
    logger, summary = setup_logging(log_dir=str(tmp_path / "logs"), console=False)
    logger.debug("hidden at INFO")
    logger.info("hello")
    summary.info("leaf.png: Detected wet waste with 85% confidence")

    files = list((tmp_path / "logs").glob("wastesort_*.log"))
    assert len(files) == 1
    text = files[0].read_text(encoding="utf-8")
    assert "hello" in text
    assert "hidden at INFO" not in text
    assert "SUMMARY - leaf.png: Detected wet waste" in text


def test_explicit_log_file(tmp_path):
    target = tmp_path / "run.log"
    logger, _ = setup_logging(console=False, level="DEBUG", log_file=str(target))
    logger.debug("verbose")
    assert "verbose" in target.read_text(encoding="utf-8")


def test_console_handler_levels(tmp_path):
    logger, summary = setup_logging(log_dir=str(tmp_path), console=True, console_level="warning")
    console = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(console) == 1
    assert console[0].level == logging.WARNING
    assert console[0] in summary.handlers


def test_quiet_console(tmp_path):
    logger, _ = setup_logging(log_dir=str(tmp_path), console=True, quiet_console=True)
    console = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert console[0].level == logging.ERROR


def test_child_loggers_reach_file(tmp_path):
    setup_logging(log_dir=str(tmp_path), console=False)
    logging.getLogger("wastesort.classification.service").warning("child message")
    text = next(tmp_path.glob("*.log")).read_text(encoding="utf-8")
    assert "child message" in text


def test_file_format_from_settings(tmp_path):
    target = tmp_path / "run.log"
    logger, _ = setup_logging(
        console=False, log_file=str(target), file_format=LoggingSettings().format_string
    )
    logger.info("hello")
    assert "INFO    wastesort - hello" in target.read_text(encoding="utf-8")


def test_custom_file_format(tmp_path):
    target = tmp_path / "run.log"
    logger, _ = setup_logging(console=False, log_file=str(target), file_format="CUSTOM {levelname} {message}")
    logger.warning("careful")
    assert "CUSTOM WARNING careful" in target.read_text(encoding="utf-8")
