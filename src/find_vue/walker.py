"""
Directory walk over the views tree.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

from .components import load_components
from .config import ScanConfig
from .scanner import scan_file
from .types import Report

logger = logging.getLogger(__name__)


class ViewsRootError(RuntimeError):
    """The views root could not be enumerated, so no report can be produced."""


def _normalize(path: Path | str) -> str:
    return str(path).replace("\\", "/")


def path_is_excluded(
    path: Path | str,
    exclude_paths: Iterable[Path | str],
) -> bool:
    """
    Return True when `path` starts with any of the excluded prefixes.

    This is a plain string-prefix test on slash-normalized paths, so
    `vendor` also excludes `vendor-assets`.
    """
    p = _normalize(path)
    return any(p.startswith(_normalize(ex).rstrip("/")) for ex in exclude_paths)


def iter_template_files(config: ScanConfig) -> Iterator[Path]:
    """
    Yield template files under the views root, depth first.

    Entries are visited in sorted order so repeated runs are identical.
    Unreadable subdirectories are skipped with a warning; failing to read the
    views root itself raises `ViewsRootError`.
    """
    root = config.views_root
    if not root.is_dir():
        raise ViewsRootError(f"Views root not found or not a directory: {root}")

    def _on_error(err: OSError) -> None:
        if err.filename is not None and Path(err.filename) == root:
            raise ViewsRootError(f"Cannot read views root {root}: {err}") from err
        logger.warning("Skipping unreadable directory %s: %s", err.filename, err)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path_is_excluded(path, config.exclude_paths):
                continue
            if not name.endswith(config.suffix):
                continue
            yield path


def run(config: ScanConfig) -> Report:
    """
    Scan every template under the configured views root.

    Only files with at least one hit appear in the report, in walk order.
    """
    components = load_components(config.app_js)
    report: Report = {}
    scanned = 0

    for path in iter_template_files(config):
        try:
            hits = scan_file(
                path,
                components,
                flag_custom_tags=config.flag_custom_tags,
            )
        except OSError as e:
            logger.warning("Skipping unreadable file %s: %s", path, e)
            continue

        scanned += 1
        if hits:
            report[path] = hits

    logger.debug("Scanned %d files, %d with hits", scanned, len(report))
    return report
