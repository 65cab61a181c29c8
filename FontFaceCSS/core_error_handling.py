#!/usr/bin/env python3
"""
Error types and context tracking for CSS generation runs.

Provides the exception hierarchy raised by the core plus structured error
information (context, severity, recoverability) collected during a run.

Usage:
    from FontFaceCSS.core_error_handling import ErrorContext, ErrorTracker

    tracker = ErrorTracker()
    try:
        css_path.write_text(css, encoding="utf-8")
    except OSError as e:
        tracker.add_from_exception(ErrorContext.FILE_IO, e, filepath=str(css_path))
        raise
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any
from pathlib import Path
import traceback
from datetime import datetime
from FontFaceCSS.core_logging_config import get_logger

logger = get_logger(__name__)


class FontCSSError(Exception):
    """Base class for errors raised by the generator."""


class PathValidationError(FontCSSError):
    """A user-supplied path does not exist or is the wrong kind."""

    def __init__(self, path: str | Path, expected: str):
        self.path = str(path)
        self.expected = expected
        super().__init__(f"Not a valid {expected}: {self.path}")


class EmptyFamilyWarning(UserWarning):
    """A family directory holds no recognized font files."""

    def __init__(self, family: str, directory: str | Path):
        self.family = family
        self.directory = str(directory)
        super().__init__(f"No font files found under {family}")


class ErrorContext(Enum):
    """
    Error context categories for precise failure point identification.
    """

    FILE_IO = "file_io"  # Read/write of the target CSS file
    FAMILY_SCAN = "family_scan"  # Enumerating a family directory
    VALIDATION = "validation"  # User-supplied path checks
    UNKNOWN = "unknown"

    @property
    def is_recoverable_by_default(self) -> bool:
        """Recoverable errors let the run continue with other families."""
        return self in {ErrorContext.FAMILY_SCAN, ErrorContext.VALIDATION}

    @property
    def severity(self) -> str:
        """Get default severity level for this context."""
        if self == ErrorContext.FILE_IO:
            return "critical"
        elif self in {ErrorContext.FAMILY_SCAN, ErrorContext.VALIDATION}:
            return "warning"
        return "error"


class ErrorSeverity(Enum):
    """Error severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"  # Potential problem, processing continues
    ERROR = "error"
    CRITICAL = "critical"  # Run aborted


@dataclass
class ErrorInfo:
    """
    Detailed error information with context.
    """

    context: ErrorContext
    message: str
    filepath: Optional[str] = None
    exception: Optional[BaseException] = None
    recoverable: Optional[bool] = None  # None = use context default
    severity: Optional[ErrorSeverity] = None  # None = use context default
    timestamp: datetime = field(default_factory=datetime.now)
    additional_info: Dict[str, Any] = field(default_factory=dict)
    stack_trace: Optional[str] = None

    def __post_init__(self):
        if self.recoverable is None:
            self.recoverable = self.context.is_recoverable_by_default

        if self.severity is None:
            self.severity = ErrorSeverity(self.context.severity)

        if self.exception and not self.stack_trace and self.exception.__traceback__:
            self.stack_trace = "".join(
                traceback.format_exception(
                    type(self.exception), self.exception, self.exception.__traceback__
                )
            )

    @classmethod
    def from_exception(
        cls,
        context: ErrorContext,
        exception: BaseException,
        filepath: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs,
    ) -> "ErrorInfo":
        """
        Create ErrorInfo from an exception.

        Examples:
            >>> info = ErrorInfo.from_exception(ErrorContext.FILE_IO, OSError("disk full"))
            >>> info.message
            'disk full'
        """
        if message is None:
            message = str(exception)

        return cls(
            context=context,
            message=message,
            filepath=filepath,
            exception=exception,
            **kwargs,
        )

    @property
    def exception_type(self) -> Optional[str]:
        if self.exception:
            return type(self.exception).__name__
        return None

    def to_log_message(self) -> str:
        """Detailed message suitable for the log channel."""
        parts = [
            f"Context: {self.context.value}",
            f"Severity: {self.severity.value if self.severity else 'unknown'}",
            f"Message: {self.message}",
        ]

        if self.filepath:
            parts.append(f"File: {self.filepath}")

        if self.exception:
            parts.append(f"Exception: {self.exception_type}: {self.exception}")

        if self.additional_info:
            parts.append(f"Additional Info: {self.additional_info}")

        if not self.recoverable:
            parts.append("Recoverable: NO")

        return " | ".join(parts)


class ErrorTracker:
    """
    Collect errors and warnings raised during one generation run.
    """

    def __init__(self):
        self.errors: List[ErrorInfo] = []
        self._errors_by_context: Dict[ErrorContext, List[ErrorInfo]] = {}

    def add_error(self, error: ErrorInfo) -> None:
        self.errors.append(error)
        self._errors_by_context.setdefault(error.context, []).append(error)

        log_message = error.to_log_message()
        if error.severity == ErrorSeverity.CRITICAL:
            logger.error(log_message)
            if error.stack_trace:
                logger.debug(f"Stack trace:\n{error.stack_trace}")
        elif error.severity == ErrorSeverity.ERROR:
            logger.error(log_message)
        elif error.severity == ErrorSeverity.WARNING:
            logger.warning(log_message)
        else:
            logger.info(log_message)

    def add_from_exception(
        self,
        context: ErrorContext,
        exception: BaseException,
        filepath: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs,
    ) -> ErrorInfo:
        error = ErrorInfo.from_exception(
            context, exception, filepath, message, **kwargs
        )
        self.add_error(error)
        return error

    def get_summary(self) -> Dict[str, Any]:
        return {
            "total_errors": len(self.errors),
            "recoverable_errors": sum(1 for e in self.errors if e.recoverable),
            "non_recoverable_errors": sum(1 for e in self.errors if not e.recoverable),
            "by_context": {
                ctx.value: len(errs) for ctx, errs in self._errors_by_context.items()
            },
            "by_severity": {
                sev.value: sum(1 for e in self.errors if e.severity == sev)
                for sev in ErrorSeverity
            },
        }

    def get_errors_by_context(self, context: ErrorContext) -> List[ErrorInfo]:
        return self._errors_by_context.get(context, [])

    def has_non_recoverable_errors(self) -> bool:
        return any(not e.recoverable for e in self.errors)

    def print_summary(self, console=None) -> None:
        """Print the warnings and errors of the run, if any."""
        from FontFaceCSS.core_console_styles import (
            emit,
            fmt_header,
            fmt_count,
            WARNING_LABEL,
        )

        summary = self.get_summary()

        if summary["total_errors"] == 0:
            return

        emit("", console=console)
        fmt_header("ISSUES", console=console)
        emit(
            f"{WARNING_LABEL} Total: {fmt_count(summary['total_errors'])}",
            console=console,
        )
        for context, count in sorted(summary["by_context"].items()):
            emit(f"    {context:20} : {fmt_count(count)}", console=console)


__all__ = [
    "FontCSSError",
    "PathValidationError",
    "EmptyFamilyWarning",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorInfo",
    "ErrorTracker",
]
