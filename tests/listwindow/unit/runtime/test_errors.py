from __future__ import annotations

import logging

from listwindow.runtime.errors import (
    RECOVERABLE_RUNTIME_ERRORS,
    InvalidConfiguration,
    ListWindowError,
    log_recoverable,
    log_transient_out_of_range,
)


def test_invalid_configuration_hierarchy() -> None:
    assert issubclass(InvalidConfiguration, ListWindowError)
    assert issubclass(InvalidConfiguration, ValueError)


def test_log_recoverable_attaches_exception(caplog) -> None:
    logger = logging.getLogger("listwindow.test.errors")
    with caplog.at_level(logging.DEBUG, logger="listwindow.test.errors"):
        try:
            raise LookupError("missing row")
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(logger, "row_lookup_failed")

    assert caplog.records[-1].exc_info is not None
    assert caplog.records[-1].getMessage() == "row_lookup_failed"


def test_transient_out_of_range_logged_only_at_debug(caplog) -> None:
    logger = logging.getLogger("listwindow.test.transient")
    with caplog.at_level(logging.INFO, logger="listwindow.test.transient"):
        log_transient_out_of_range(logger, "scroll_offset", -50, 0)
    assert caplog.records == []

    with caplog.at_level(logging.DEBUG, logger="listwindow.test.transient"):
        log_transient_out_of_range(logger, "scroll_offset", -50, 0)
    assert "transient_out_of_range field=scroll_offset raw=-50 clamped=0" in caplog.text
