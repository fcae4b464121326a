from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from .config import DEFAULT_APP_JS
from .config import DEFAULT_SUFFIX
from .config import DEFAULT_VIEWS_DIR
from .config import ScanConfig
from .logging import LogConfig
from .logging import configure_logging
from .report import format_report
from .report import report_to_json
from .walker import ViewsRootError
from .walker import run


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="find-vue",
        description=(
            "Scan Blade templates for Vue usage (directives, @event/:prop "
            "shorthands, escaped mustaches and registered component tags)."
        ),
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Project root (defaults to the current directory).",
    )
    parser.add_argument(
        "--views",
        type=Path,
        default=DEFAULT_VIEWS_DIR,
        help=f"Views directory, relative to the root (default: {DEFAULT_VIEWS_DIR}).",
    )
    parser.add_argument(
        "--app-js",
        type=Path,
        default=DEFAULT_APP_JS,
        help=(
            "Script that registers Vue components, relative to the root "
            f"(default: {DEFAULT_APP_JS})."
        ),
    )
    parser.add_argument(
        "--exclude",
        type=Path,
        action="append",
        default=[],
        metavar="PATH",
        help=(
            "Extra path prefix to skip, relative to the root. May be repeated; "
            "vendor/, node_modules/ and vendor-published views are always skipped."
        ),
    )
    parser.add_argument(
        "--no-custom-tags",
        action="store_false",
        dest="flag_custom_tags",
        help="Only report definite Vue hits, not unknown custom tag names.",
    )
    parser.add_argument(
        "--suffix",
        default=DEFAULT_SUFFIX,
        help=f"Template filename suffix to scan (default: {DEFAULT_SUFFIX}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of a human-readable report.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    args = parser.parse_args(argv)

    logger = configure_logging(
        LogConfig(log_level=logging.DEBUG if args.verbose else logging.INFO)
    )

    config = ScanConfig.for_project(
        args.root,
        views_dir=args.views,
        app_js=args.app_js,
        extra_excludes=args.exclude,
        flag_custom_tags=args.flag_custom_tags,
        suffix=args.suffix,
    )

    try:
        report = run(config)
    except ViewsRootError as e:
        logger.error("%s", e)
        return 1

    if args.json:
        print(report_to_json(report))
    else:
        print(format_report(report), end="")
    return 0
