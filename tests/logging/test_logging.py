"""Tests for package logging configuration."""

import logging
from io import StringIO

import pytest

from routegraph.algorithms.spf import solve
from routegraph.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()


def _capture_on(logger: logging.Logger) -> StringIO:
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    return capture


def test_info_by_default_and_debug_toggle():
    logger = get_logger("routegraph.test")
    capture = _capture_on(logger)

    logger.info("info-1")
    logger.debug("debug-1")
    assert "info-1" in capture.getvalue()
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()


def test_children_inherit_global_level():
    first = get_logger("routegraph.one")
    assert first.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert first.getEffectiveLevel() == logging.WARNING
    assert get_logger("routegraph.two").getEffectiveLevel() == logging.WARNING


def test_module_loggers_have_no_handlers():
    logger = get_logger("routegraph.loader")
    assert logger.handlers == []
    assert logger.level == logging.NOTSET
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1


def test_setup_is_idempotent():
    handler = logging.StreamHandler(StringIO())
    root = setup_root_logger(level=logging.INFO, handler=handler)
    assert root is logging.getLogger(ROOT_LOGGER_NAME)
    assert root.handlers == [handler]

    setup_root_logger(level=logging.DEBUG)
    assert root.handlers == [handler]
    assert root.level == logging.INFO


def test_custom_format_string():
    capture = StringIO()
    setup_root_logger(
        format_string="%(levelname)s|%(name)s|%(message)s",
        handler=logging.StreamHandler(capture),
    )
    get_logger("routegraph.fmt").warning("hello")
    assert "WARNING|routegraph.fmt|hello" in capture.getvalue()


def test_solver_emits_debug_summary(caplog, detour_graph):
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        solve(detour_graph, "start", method="heap")
    assert any(
        "using heap selection: 3 reachable node(s)" in r.getMessage()
        for r in caplog.records
    )
