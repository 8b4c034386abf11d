from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from logregistry.core.logger import get_logger, reset_logger
from logregistry.core.settings import LOG_LEVEL_ENV, log_level


def _own_handlers(logger: logging.Logger) -> tuple[list[logging.Handler], list[logging.Handler]]:
    # pytest may attach its own capture handlers; only count ours.
    files = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    streams = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    return files, streams


def test_get_logger_configures_once(tmp_path: Path) -> None:
    logger = get_logger()

    assert logger is get_logger()
    assert logger.name == "logregistry"
    assert logger.propagate is False
    files, streams = _own_handlers(logger)
    assert len(files) == 1
    assert len(streams) == 1
    assert (tmp_path / "logs").is_dir()


def test_configuration_survives_earlier_package_use(tmp_path: Path) -> None:
    get_logger().getChild("config").info("first use")
    reset_logger()

    files, streams = _own_handlers(get_logger())

    assert (len(files), len(streams)) == (1, 1)


def test_explicit_log_dir_receives_records(tmp_path: Path) -> None:
    target = tmp_path / "explicit"
    logger = get_logger(target)

    logger.getChild("test").info("hello %s", "registry")
    for handler in logger.handlers:
        handler.flush()

    assert "hello registry" in (target / "logregistry.log").read_text(encoding="utf-8")


def test_reset_detaches_handlers() -> None:
    logger = get_logger()

    reset_logger()

    assert _own_handlers(logging.getLogger("logregistry")) == ([], [])
    assert get_logger() is logger


def test_level_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")

    logger = get_logger()

    assert logger.level == logging.WARNING
    files, streams = _own_handlers(logger)
    assert files[0].level == logging.WARNING


def test_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")

    assert get_logger(level=logging.DEBUG).level == logging.DEBUG


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        ("15", 15),
        ("LOUD", logging.INFO),
    ],
)
def test_log_level_parsing(monkeypatch: pytest.MonkeyPatch, value: str, expected: int) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, value)

    assert log_level() == expected
