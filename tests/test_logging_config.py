"""Tests for logging setup, handler events and run metrics."""

import logging

from FontFaceCSS.core_logging_config import (
    HandlerAPI,
    MetricsTracker,
    Verbosity,
    setup_logging,
)


def test_setup_again_starts_fresh_metrics() -> None:
    _logger, handler, first = setup_logging(Verbosity.QUIET)
    first.increment("families_processed")
    first.track_family("inter", ["bold"])

    _logger, same_handler, second = setup_logging(Verbosity.DEBUG)

    assert same_handler is handler
    assert second is not first
    assert second.families_processed == 0
    assert second.styles_by_family == {}
    assert handler.metrics is second
    assert handler.verbosity == Verbosity.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_handler_events_feed_metrics() -> None:
    metrics = MetricsTracker()
    handler = HandlerAPI(Verbosity.QUIET, metrics)

    handler.discovered("inter", ["bold", "regular"])
    handler.skipped("empty", "no font files")

    assert metrics.styles_by_family == {"inter": ["bold", "regular"]}
    assert metrics.families_skipped == 1
