"""Unified logging and output management for CSS generation.

Combines Python logging for diagnostics with console_styles-powered HandlerAPI
for UX events. Tracks metrics and prints a final summary.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from pathlib import Path
from typing import Dict, List, Optional, Tuple


class Verbosity(IntEnum):
    """Verbosity levels following Ubuntu CLI guidelines."""

    QUIET = 0  # Minimal output, errors only
    BRIEF = 1  # Normal user interface messages (default)
    VERBOSE = 2  # Descriptive, thorough descriptions
    DEBUG = 3  # Internal execution steps, developer-focused
    TRACE = 4  # System-generated information


VERBOSITY_TO_LEVEL = {
    Verbosity.QUIET: logging.ERROR,
    Verbosity.BRIEF: logging.INFO,
    Verbosity.VERBOSE: logging.INFO,
    Verbosity.DEBUG: logging.DEBUG,
    Verbosity.TRACE: logging.DEBUG,
}


class MetricsTracker:
    def __init__(self) -> None:
        self.families_processed: int = 0
        self.families_skipped: int = 0
        self.faces_generated: int = 0
        self.styles_by_family: Dict[str, List[str]] = {}

    def increment(self, metric: str, amount: int = 1) -> None:
        if hasattr(self, metric):
            setattr(self, metric, getattr(self, metric) + amount)

    def track_family(self, family: str, styles: List[str]) -> None:
        self.styles_by_family[family] = list(styles)
        self.families_processed += 1
        self.faces_generated += len(styles)


class HandlerAPI:
    def __init__(self, verbosity: Verbosity, metrics: MetricsTracker) -> None:
        self.verbosity = verbosity
        self.metrics = metrics

    def discovered(self, family: str, styles: List[str]) -> None:
        self.metrics.track_family(family, styles)
        if self.verbosity < Verbosity.BRIEF:
            return
        import FontFaceCSS.core_console_styles as cs

        cs.StatusIndicator("discovered").add_message(
            cs.escape_markup(f"[{family}]")
        ).add_message(f"styles: {', '.join(styles)}").emit()

    def mapping(self, token: str, value: str, family: Optional[str] = None) -> None:
        if self.verbosity < Verbosity.VERBOSE:
            return
        import FontFaceCSS.core_console_styles as cs

        prefix = f"[{family}] " if family else ""
        cs.StatusIndicator("mapping").add_message(
            cs.escape_markup(f"{prefix}{token} → {value}")
        ).emit()

    def saved(self, filepath: Path) -> None:
        if self.verbosity < Verbosity.BRIEF:
            return
        import FontFaceCSS.core_console_styles as cs

        cs.StatusIndicator("saved").add_file(
            cs.escape_markup(str(filepath)), filename_only=False
        ).emit()

    def removed(self, families: List[str]) -> None:
        if self.verbosity < Verbosity.BRIEF:
            return
        import FontFaceCSS.core_console_styles as cs

        cs.StatusIndicator("deleted").add_message(
            cs.escape_markup(f"Removed fonts for: {', '.join(families)}")
        ).emit()

    def info(self, message: str, verbose_only: bool = True) -> None:
        min_level = Verbosity.VERBOSE if verbose_only else Verbosity.BRIEF
        if self.verbosity < min_level:
            return
        import FontFaceCSS.core_console_styles as cs

        cs.StatusIndicator("info").add_message(message).emit()

    def skipped(self, family: str, message: str) -> None:
        self.metrics.increment("families_skipped")
        if self.verbosity < Verbosity.BRIEF:
            return
        import FontFaceCSS.core_console_styles as cs

        cs.StatusIndicator("skipped").add_message(
            cs.escape_markup(f"[{family}] {message}")
        ).emit()


def print_summary(metrics: MetricsTracker, console=None) -> None:
    if metrics.families_processed == 0 and metrics.families_skipped == 0:
        return
    import FontFaceCSS.core_console_styles as cs

    current_verbosity = (
        _handler_api.verbosity if _handler_api is not None else Verbosity.BRIEF
    )
    if current_verbosity < Verbosity.BRIEF:
        return

    cs.emit(f"\n{'=' * 60}", console=console)
    cs.fmt_processing_summary(
        families=metrics.families_processed,
        faces=metrics.faces_generated,
        skipped=metrics.families_skipped,
        console=console,
    )
    if metrics.styles_by_family and current_verbosity >= Verbosity.VERBOSE:
        cs.StatusIndicator("info").add_message("Styles per family:").emit(console)
        for family in metrics.styles_by_family:
            cs.emit(
                f"{cs.indent(1)}• {family}: "
                f"{cs.fmt_count(len(metrics.styles_by_family[family]))}",
                console=console,
            )
    cs.emit(f"{'=' * 60}\n", console=console)


_logger: Optional[logging.Logger] = None
_handler_api: Optional[HandlerAPI] = None
_metrics: Optional[MetricsTracker] = None
_initialized: bool = False


def setup_logging(
    verbosity: Verbosity = Verbosity.BRIEF,
) -> Tuple[logging.Logger, HandlerAPI, MetricsTracker]:
    global _logger, _handler_api, _metrics, _initialized
    if _initialized:
        # Each run counts from zero
        _metrics = MetricsTracker()
        if _handler_api:
            _handler_api.verbosity = verbosity
            _handler_api.metrics = _metrics
        logging.getLogger().setLevel(VERBOSITY_TO_LEVEL[verbosity])
        return (_logger, _handler_api, _metrics)
    _metrics = MetricsTracker()
    _handler_api = HandlerAPI(verbosity, _metrics)
    logging.basicConfig(
        level=VERBOSITY_TO_LEVEL[verbosity],
        format="%(levelname)s: %(message)s",
        force=True,
    )
    _logger = logging.getLogger("FontFaceCSS")
    _initialized = True
    return (_logger, _handler_api, _metrics)


def reset_logging() -> None:
    """Forget the configured handler and metrics so the next setup starts fresh."""
    global _logger, _handler_api, _metrics, _initialized
    _logger = None
    _handler_api = None
    _metrics = None
    _initialized = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
