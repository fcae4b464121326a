from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_VIEWS_DIR = Path("resources") / "views"
DEFAULT_APP_JS = Path("resources") / "js" / "app.js"
DEFAULT_SUFFIX = ".blade.php"

# Relative to the project root.
DEFAULT_EXCLUDES: tuple[Path, ...] = (
    Path("vendor"),
    Path("node_modules"),
)

# Relative to the views root; vendor-published views.
DEFAULT_VIEWS_EXCLUDES: tuple[Path, ...] = (Path("vendor"),)


@dataclass(frozen=True)
class ScanConfig:
    """Everything a scan needs to know, passed explicitly to the walker."""

    root: Path
    views_root: Path
    app_js: Path
    exclude_paths: tuple[Path, ...] = ()
    # Set False to report only definite Vue hits.
    flag_custom_tags: bool = True
    suffix: str = DEFAULT_SUFFIX

    @classmethod
    def for_project(
        cls,
        root: Path,
        *,
        views_dir: Path = DEFAULT_VIEWS_DIR,
        app_js: Path = DEFAULT_APP_JS,
        extra_excludes: Iterable[Path] = (),
        flag_custom_tags: bool = True,
        suffix: str = DEFAULT_SUFFIX,
    ) -> ScanConfig:
        """
        Build a config rooted at a Laravel-style project directory.

        `root` is made absolute so walk paths and excludes compare as absolute
        paths. Relative paths are resolved against `root`; absolute ones are
        kept.
        """
        root = root.resolve()
        views_root = root / views_dir
        excludes = [root / p for p in DEFAULT_EXCLUDES]
        excludes.extend(views_root / p for p in DEFAULT_VIEWS_EXCLUDES)
        excludes.extend(root / p for p in extra_excludes)
        return cls(
            root=root,
            views_root=views_root,
            app_js=root / app_js,
            exclude_paths=tuple(excludes),
            flag_custom_tags=flag_custom_tags,
            suffix=suffix,
        )
