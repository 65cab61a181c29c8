#!/usr/bin/env python3
"""
Shared console styling utilities for consistent output across the generator.

Primary API: StatusIndicator class for unified console output formatting.
Secondary APIs: Core formatting primitives, prompts and high-level helpers.

Usage:
from FontFaceCSS.core_console_styles import (
    INFO_LABEL, ERROR_LABEL, WARNING_LABEL, SAVED_LABEL, INPUT_LABEL,
    SUCCESS_LABEL, SKIPPED_LABEL, DISCOVERED_LABEL, MAPPING_LABEL, REMOVED_LABEL,
    INDENT, indent,
    fmt_field, fmt_file, fmt_count, fmt_header, fmt_processing_summary,
    emit, get_console, get_error_console, escape_markup,
    prompt_input, prompt_text, prompt_select, prompt_checkbox, QuitRequested,
    StatusIndicator,
)
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# ============================================================================
# CONFIGURATION
# ============================================================================
CONSOLE_CONFIG = {
    "label_width": 11,  # width for labels (keeps alignment)
    "indent_size": 12,  # base indent spaces
    "theme_mode": "dark",  # "dark" or "light"
}

# ============================================================================
# THEME DEFINITION
# ============================================================================
CUSTOM_THEME = Theme(
    {
        # Text colors
        "darktext": "#282a39",
        "lighttext": "grey100",
        # Label backgrounds
        "info": "dodger_blue1",
        "error": "red3",
        "warning": "gold1",
        "saved": "green",
        "removed": "medium_violet_red",
        "input": "cornsilk1",
        "success": "green_yellow",
        "skipped": "orange1",
        "discovered": "magenta",
        "mapping": "cyan3",
        "header": "deep_sky_blue1",
        # Content styling
        "file.name": "green",
        "file.path": "grey37",
        "count": "bold turquoise2",
        "field": "honeydew2",
        "field.number": "bold honeydew2",
        "repr.number": "bold turquoise2",
        "repr.str": "grey100",
        "repr.path": "grey37",
        "repr.filename": "green",
    }
)

_console_singleton: Optional[Console] = None


# ============================================================================
# CONSOLE INFRASTRUCTURE
# ============================================================================


def get_console() -> Console:
    """Get the shared Rich console instance."""
    global _console_singleton
    if _console_singleton is None:
        _console_singleton = Console(theme=CUSTOM_THEME)
    return _console_singleton


def get_error_console() -> Console:
    """Console bound to stderr for fatal error reporting."""
    return Console(theme=CUSTOM_THEME, stderr=True)


def emit(message: str, console: Optional[Console] = None, end: str = "\n") -> None:
    """Emit a message via the Rich console."""
    (console or get_console()).print(message, end=end, overflow="fold", no_wrap=False)


def escape_markup(text: str) -> str:
    """Escape user-supplied text so brackets are not read as Rich markup."""
    return escape(text)


def indent(level: int = 1, additional: int = 0) -> str:
    """
    Generate indentation for hierarchical output with natural wrapping support.
    """
    if level <= 0:
        return ""

    base = CONSOLE_CONFIG.get("indent_size", 12)
    level_spacing = (level - 1) * 2  # Each level adds 2 spaces
    return " " * (base + level_spacing + additional)


# ============================================================================
# STATUS LABELS
# ============================================================================


def _build_status_label(
    text: str, foreground_theme_key: str, background_theme_key: str = "lighttext"
) -> str:
    """Build a fixed-width status label using theme colors."""
    width = CONSOLE_CONFIG.get("label_width", 11)
    foreground_color = CUSTOM_THEME.styles.get(foreground_theme_key, "yellow1")
    background_color = CUSTOM_THEME.styles.get(background_theme_key, "red3")
    return (
        f"[bold {foreground_color} on {background_color}]{text:<{width}}"
        f"[/bold {foreground_color} on {background_color}]"
    )


INFO_LABEL: str = _build_status_label(" INFO", "lighttext", "info")
ERROR_LABEL: str = _build_status_label(" ERROR", "lighttext", "error")
WARNING_LABEL: str = _build_status_label(" WARNING", "darktext", "warning")
SAVED_LABEL: str = _build_status_label(" SAVED TO", "darktext", "saved")
REMOVED_LABEL: str = _build_status_label(" REMOVED", "darktext", "removed")
INPUT_LABEL: str = _build_status_label(" INPUT", "darktext", "input")
SUCCESS_LABEL: str = _build_status_label(" SUCCESS", "darktext", "success")
SKIPPED_LABEL: str = _build_status_label(" SKIPPED", "darktext", "skipped")
DISCOVERED_LABEL: str = _build_status_label(" FOUND", "darktext", "discovered")
MAPPING_LABEL: str = _build_status_label(" MAPPING", "darktext", "mapping")

INDENT: str = " " * CONSOLE_CONFIG.get("indent_size", 12)


# ============================================================================
# CORE FORMATTING PRIMITIVES
# ============================================================================


def fmt_field(field_name: str, value: str | int) -> str:
    """
    Format a field as name: value with automatic number styling.

    Example:
        >>> fmt_field("faces", 4)
        '[field]faces[/field]: [field.number]4[/field.number]'
    """
    if isinstance(value, int):
        return f"[field]{field_name}[/field]: [field.number]{value}[/field.number]"
    return f"[field]{field_name}[/field]: {value}"


def fmt_count(value: int | str) -> str:
    """Format a count with emphasis."""
    return f"[count]{value}[/count]"


def fmt_file(path: str, filename_only: bool = True) -> str:
    """
    Format a file path with consistent styling.

    Example:
        >>> fmt_file("/path/to/app.css")
        '[file.name]app.css[/file.name]'
    """
    path_obj = Path(path)
    if filename_only:
        return f"[file.name]{path_obj.name}[/file.name]"
    parent = str(path_obj.parent) + "/" if path_obj.parent != Path(".") else ""
    return f"[file.path]{parent}[/file.path][file.name]{path_obj.name}[/file.name]"


def fmt_header(text: str, console: Optional[Console] = None) -> None:
    """Print a section header with an underline rule."""
    emit(f"[bold header]{text}[/bold header]", console=console)
    emit(f"[header]{'─' * len(text)}[/header]", console=console)


# ============================================================================
# STATUS INDICATOR
# ============================================================================


class StatusIndicator:
    """
    Universal status indicator for consistent message formatting.

    Builds messages in layers: a base label, context parts on the main line
    and an optional explanation.

    Usage:
        StatusIndicator("info").add_message("Scanning fonts").emit()

        StatusIndicator("saved").add_file("src/app.css", filename_only=False).emit()

        StatusIndicator("warning").with_explanation("No font files found").emit()
    """

    STATUS_THEMES = {
        "info": {"label": INFO_LABEL, "template": "{context}{details}"},
        "warning": {"label": WARNING_LABEL, "template": "{context}{details}"},
        "error": {"label": ERROR_LABEL, "template": "{context}: {details}"},
        "saved": {"label": SAVED_LABEL, "template": "{context}"},
        "deleted": {"label": REMOVED_LABEL, "template": "{context}"},
        "success": {"label": SUCCESS_LABEL, "template": "{context}{details}"},
        "skipped": {"label": SKIPPED_LABEL, "template": "{context}"},
        "discovered": {"label": DISCOVERED_LABEL, "template": "{context}"},
        "mapping": {"label": MAPPING_LABEL, "template": "{context}"},
    }

    def __init__(self, status: str):
        if status not in self.STATUS_THEMES:
            available = ", ".join(sorted(self.STATUS_THEMES.keys()))
            raise ValueError(f"Unknown status: '{status}'. Available: {available}")
        self.status = status
        self.theme = self.STATUS_THEMES[status]
        self.context_parts: List[str] = []
        self.explanation: Optional[str] = None

    def _apply_style(self, content: str, style: str = None) -> str:
        if style:
            return f"[{style}]{content}[/{style}]"
        return content

    def add_message(self, message: str, style: str = None):
        """Add a simple message to the main context line."""
        self.context_parts.append(self._apply_style(message, style))
        return self

    def add_file(self, filepath: str, filename_only: bool = True, style: str = None):
        """Add file context to the main message line."""
        self.context_parts.append(
            self._apply_style(fmt_file(filepath, filename_only), style)
        )
        return self

    def with_explanation(self, message: str, style: str = None):
        """Add a trailing message or reason."""
        self.explanation = self._apply_style(message, style)
        return self

    def with_summary_block(self, **counts: int):
        """Append a formatted line of statistics."""
        summary = " | ".join(fmt_field(name, value) for name, value in counts.items())
        self.context_parts.append(f"\n{INDENT}{summary}")
        return self

    def build(self) -> str:
        """Build the final formatted status message."""
        context = " ".join(self.context_parts)
        details = self.explanation or ""
        if (
            details
            and context
            and not details.startswith(" ")
            and "{context}{details}" in self.theme["template"]
        ):
            details = f" {details}"
        message = self.theme["template"].format(context=context, details=details)
        return f"{self.theme['label']} {message}"

    def emit(self, console=None):
        """Build and emit the message in one call."""
        emit(self.build(), console=console)


# ============================================================================
# HIGH-LEVEL HELPERS
# ============================================================================


def fmt_processing_summary(
    families: int = 0,
    faces: int = 0,
    skipped: int = 0,
    console=None,
) -> None:
    """
    Display a standardized processing summary.

    Shows "Generation Completed!" followed by a families | faces | skipped line.
    """
    StatusIndicator("success").add_message("Generation Completed!").with_summary_block(
        families=families, faces=faces, skipped=skipped
    ).emit(console)


# ============================================================================
# USER INTERACTION
# ============================================================================


class QuitRequested(Exception):
    """Raised when the user aborts an interactive prompt."""

    pass


def prompt_input(message: str, console: Optional[Console] = None) -> str:
    """
    Render an INPUT-labeled prompt and return user input using a two-line layout.

    Raises QuitRequested on EOF or Ctrl-C.
    """
    console_instance = console or get_console()
    console_instance.print(f"{INPUT_LABEL} {message}")
    console_instance.print(f"{INPUT_LABEL} ", end="")
    try:
        return input()
    except (EOFError, KeyboardInterrupt) as exc:
        raise QuitRequested("Input aborted") from exc


def prompt_text(message: str, default: str = "") -> str:
    """Text input with an optional default shown in brackets."""
    label = f"{message} {escape(f'[{default}]')}" if default else message
    result = prompt_input(label).strip()
    return result if result else default


def prompt_select(message: str, choices: Sequence[str], default=None) -> str:
    """Numbered single selection; re-asks until a valid number is entered."""
    emit(f"{INPUT_LABEL} {message}")
    for i, choice in enumerate(choices, 1):
        emit(f"  {i}. {escape(choice)}")

    while True:
        selection = prompt_input("Enter number").strip()
        if not selection and default is not None:
            return default
        if selection.isdigit() and 1 <= int(selection) <= len(choices):
            return choices[int(selection) - 1]
        emit(f"{WARNING_LABEL} Please select 1-{len(choices)}")


def prompt_checkbox(
    message: str, choices: Sequence[str], all_label: str = "All"
) -> List[str]:
    """
    Numbered multi-selection.

    Accepts comma/space separated numbers; 0 selects every choice. Re-asks until
    at least one valid choice is picked.
    """
    emit(f"{INPUT_LABEL} {message}")
    emit(f"  0. {all_label}")
    for i, choice in enumerate(choices, 1):
        emit(f"  {i}. {escape(choice)}")

    while True:
        raw = prompt_input("Enter numbers (e.g. 1,3)").strip()
        parts = [p for p in re.split(r"[,\s]+", raw) if p]
        if parts and all(p.isdigit() and 0 <= int(p) <= len(choices) for p in parts):
            picks = [int(p) for p in parts]
            if 0 in picks:
                return list(choices)
            selected: List[str] = []
            for p in picks:
                choice = choices[p - 1]
                if choice not in selected:
                    selected.append(choice)
            return selected
        emit(f"{WARNING_LABEL} Pick at least one of 0-{len(choices)}")
