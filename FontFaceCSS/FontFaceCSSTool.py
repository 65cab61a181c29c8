#!/usr/bin/env python3
"""
FontFaceCSS generator tool

Scans a fonts folder (one subdirectory per family) and writes @font-face CSS,
either into an existing TailwindCSS stylesheet (with @theme tokens) or as a
standalone Standard CSS file with utility classes.

Usage:
    fontface-css [options]

Anything not given as an option is asked for interactively.

Examples:
    fontface-css
    fontface-css --type tailwind --fonts-root src/Fonts --all --css-file src/app.css
    fontface-css --type tailwind --fonts-root src/Fonts --family Inter --clean
    fontface-css --type standard --fonts-root src/Fonts --family Inter --family Roboto
    fontface-css --legacy --format extension -v
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import FontFaceCSS.core_console_styles as cs
from FontFaceCSS.core_error_handling import (
    ErrorContext,
    ErrorTracker,
    FontCSSError,
    PathValidationError,
)
from FontFaceCSS.core_face_attributes import FormatPolicy
from FontFaceCSS.core_file_collector import list_family_directories
from FontFaceCSS.core_font_css_generator import (
    clean_tailwind,
    generate_standard,
    generate_tailwind,
)
from FontFaceCSS.core_generator_config import (
    GENERATOR_CONFIG,
    CssTarget,
    GeneratorConfig,
)
from FontFaceCSS.core_logging_config import (
    HandlerAPI,
    Verbosity,
    print_summary,
    setup_logging,
)
from FontFaceCSS.core_path_resolver import (
    resolve_project_path,
    validate_directory,
    validate_file,
)
from FontFaceCSS.core_string_utils import family_slug, is_empty, normalize_empty


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Run configuration from parsed options."""
    project_root = Path(args.project_root or Path.cwd()).expanduser().absolute()
    overrides = {}
    if args.format:
        overrides["format_policy"] = FormatPolicy(args.format)
    if args.recursive:
        overrides["recursive"] = True
    fallback = normalize_empty(args.fallback)
    if fallback:
        overrides["fallback"] = fallback
    font_display = normalize_empty(args.font_display)
    if font_display:
        overrides["font_display"] = font_display

    if args.legacy:
        return GeneratorConfig.legacy(project_root, **overrides)
    return GeneratorConfig(project_root=project_root, **overrides)


def ask_css_target(value: Optional[str]) -> CssTarget:
    if value:
        return CssTarget(value)
    labels = [target.label for target in CssTarget]
    choice = cs.prompt_select(
        "Choose the type of CSS to generate:", labels, default=labels[0]
    )
    return next(target for target in CssTarget if target.label == choice)


def ask_fonts_root(config: GeneratorConfig, value: Optional[str]) -> Path:
    """Fonts root from the option, or prompt until an existing directory is given."""
    if not is_empty(value):
        return validate_directory(resolve_project_path(config.project_root, value))
    while True:
        answer = cs.prompt_text(
            "Top-level fonts folder (e.g. src/Fonts):", GENERATOR_CONFIG["fonts_root"]
        )
        try:
            return validate_directory(resolve_project_path(config.project_root, answer))
        except PathValidationError as e:
            cs.StatusIndicator("error").with_explanation(
                cs.escape_markup(str(e))
            ).emit()


def _match_family(subdirs: Sequence[Path], name: str) -> Path:
    for directory in subdirs:
        if directory.name == name:
            return directory
    wanted = family_slug(name)
    for directory in subdirs:
        if family_slug(directory.name) == wanted:
            return directory
    raise PathValidationError(name, "family directory")


def choose_families(
    fonts_root: Path, names: Optional[List[str]], select_all: bool
) -> List[Path]:
    """Family directories picked by option or interactively."""
    subdirs = list_family_directories(fonts_root)
    if not subdirs:
        raise FontCSSError(f"No family directories under {fonts_root}")
    if select_all:
        return subdirs
    if names:
        return [_match_family(subdirs, name) for name in names]

    picked = cs.prompt_checkbox(
        "Select font families:", [d.name for d in subdirs], all_label="All"
    )
    return [d for name in picked for d in subdirs if d.name == name]


def ask_tailwind_file(config: GeneratorConfig, value: Optional[str]) -> Path:
    """Existing Tailwind stylesheet; the tool never creates it."""
    if not is_empty(value):
        return validate_file(resolve_project_path(config.project_root, value))
    while True:
        answer = cs.prompt_text(
            "Tailwind CSS file to update:", GENERATOR_CONFIG["tailwind_css"]
        )
        try:
            return validate_file(resolve_project_path(config.project_root, answer))
        except PathValidationError as e:
            cs.StatusIndicator("error").with_explanation(
                cs.escape_markup(f"Not found: {e.path}")
            ).emit()


def run(args: argparse.Namespace, handler: HandlerAPI, tracker: ErrorTracker) -> int:
    config = build_config(args)
    target = ask_css_target(args.type)
    if args.clean and target is not CssTarget.TAILWIND:
        raise FontCSSError("--clean only applies to TailwindCSS output")
    config = config.with_target(target)

    fonts_root = ask_fonts_root(config, args.fonts_root)
    family_dirs = choose_families(fonts_root, args.family, args.all)
    names = ", ".join(d.name for d in family_dirs)
    handler.info(cs.escape_markup(f"Families: {names}"))

    if target is CssTarget.TAILWIND:
        css_path = ask_tailwind_file(config, args.css_file)
        if args.clean:
            clean_tailwind(config, family_dirs, css_path, handler=handler)
            return 0
        generate_tailwind(
            config, family_dirs, css_path, tracker=tracker, handler=handler
        )
    else:
        generate_standard(
            config,
            family_dirs,
            args.css_file or GENERATOR_CONFIG["standard_css"],
            tracker=tracker,
            handler=handler,
        )

    cs.StatusIndicator("success").add_message(
        f"{target.label} font generation completed successfully!"
    ).emit()
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontface-css",
        description="Generate @font-face CSS (and Tailwind @theme tokens) from a fonts folder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fontface-css
  fontface-css --type tailwind --fonts-root src/Fonts --all --css-file src/app.css
  fontface-css --type tailwind --fonts-root src/Fonts --family Inter --clean
  fontface-css --type standard --fonts-root src/Fonts --family Inter
        """,
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove generated blocks for the selected families instead of adding them",
    )
    parser.add_argument(
        "--type",
        choices=[target.value for target in CssTarget],
        help="CSS flavor to generate (asked when omitted)",
    )
    parser.add_argument(
        "--fonts-root", help="Top-level fonts folder, relative to the project root"
    )
    parser.add_argument(
        "--family",
        "-f",
        action="append",
        help="Family directory to include (repeatable)",
    )
    parser.add_argument(
        "--all", action="store_true", help="Include every family directory"
    )
    parser.add_argument(
        "--css-file",
        help="Stylesheet to update (TailwindCSS) or write (Standard CSS)",
    )
    parser.add_argument(
        "--project-root",
        help="Directory relative paths resolve against (default: current directory)",
    )
    parser.add_argument(
        "--format",
        choices=[policy.value for policy in FormatPolicy],
        help="format() strings: canonical CSS keywords or raw file extensions",
    )
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="Only .ttf files, scanned recursively",
    )
    parser.add_argument(
        "--recursive", "-r", action="store_true", help="Scan family folders recursively"
    )
    parser.add_argument(
        "--fallback", help=f"Generic fallback family (default: {GENERATOR_CONFIG['fallback']})"
    )
    parser.add_argument(
        "--font-display", help="Add a font-display descriptor (e.g. swap)"
    )
    parser.add_argument(
        "--verbose", "-v", action="count", default=0, help="More output (-vv for debug)"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Errors only"
    )
    return parser


def _verbosity(args: argparse.Namespace) -> Verbosity:
    if args.quiet:
        return Verbosity.QUIET
    return Verbosity(min(Verbosity.BRIEF + args.verbose, Verbosity.TRACE))


def _report_error(error: BaseException) -> None:
    cs.StatusIndicator("error").add_message(type(error).__name__).with_explanation(
        cs.escape_markup(str(error))
    ).emit(cs.get_error_console())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    _logger, handler, metrics = setup_logging(_verbosity(args))
    tracker = ErrorTracker()

    try:
        code = run(args, handler, tracker)
    except cs.QuitRequested:
        cs.StatusIndicator("warning").with_explanation("Aborted").emit(
            cs.get_error_console()
        )
        return 1
    except PathValidationError as e:
        tracker.add_from_exception(ErrorContext.VALIDATION, e, filepath=e.path)
        _report_error(e)
        return 1
    except OSError as e:
        tracker.add_from_exception(
            ErrorContext.FILE_IO, e, filepath=str(e.filename) if e.filename else None
        )
        _report_error(e)
        return 1
    except Exception as e:
        tracker.add_from_exception(ErrorContext.UNKNOWN, e)
        _report_error(e)
        return 1

    print_summary(metrics)
    if handler.verbosity >= Verbosity.BRIEF:
        tracker.print_summary()
    return code


if __name__ == "__main__":
    sys.exit(main())
