"""Test the package logger and how the container reports through it."""

import logging

from setmap import SetMap, SetMapConfig
from setmap.logging import ROOT_LOGGER_NAME, enable_debug_logging, get_logger


def test_container_logger_is_under_package_root():
    """The container module logs through a child of the package root."""
    logger = get_logger("setmap.set_map")
    assert logger.name == "setmap.set_map"
    assert logger.parent is logging.getLogger(ROOT_LOGGER_NAME)


def test_root_configured_once():
    """Repeated get_logger calls never attach a second handler."""
    before = len(logging.getLogger(ROOT_LOGGER_NAME).handlers)
    for _ in range(3):
        get_logger("setmap.repeat")
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == before


def test_operation_records_hidden_at_info(package_log):
    """At the default INFO level, mutation records are not emitted."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.INFO)
    SetMap(config=SetMapConfig(log_operations=True)).set(["a"], 1)

    assert "Inserted value" not in package_log.getvalue()


def test_enable_debug_logging_shows_operations(package_log):
    """enable_debug_logging lets per-operation records through."""
    enable_debug_logging()
    set_map = SetMap(config=SetMapConfig(log_operations=True))
    set_map.set(["a", "b"], 1).delete_all("a")

    output = package_log.getvalue()
    assert "Inserted value at [\"'a'\", \"'b'\"]" in output
    assert "Deleted 1 entries containing 'a'" in output
