from __future__ import annotations

import logging

import pytest

from killer_cage.engine import KillerCage
from killer_cage.logger import configure_logging, get_logger


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_configure_logging_installs_handler_once(restore_root_level):
    root = restore_root_level

    configure_logging("INFO")
    handlers = list(root.handlers)
    assert root.level == logging.INFO

    configure_logging("DEBUG")

    assert root.level == logging.DEBUG
    assert root.handlers == handlers


def test_get_logger_returns_named_logger():
    assert get_logger("killer_cage.engine.cage") is logging.getLogger("killer_cage.engine.cage")


def test_find_combinations_logs_enumeration_counts(caplog):
    with caplog.at_level(logging.DEBUG, logger="killer_cage.engine.cage"):
        KillerCage(9, 2).find_combinations(5)

    messages = [record.getMessage() for record in caplog.records if record.name == "killer_cage.engine.cage"]
    assert messages == ["cage max=9 cells=2 total=5: visited 36 candidates, 2 matched"]
