"""
Helpers for discovering Vue components registered in the app entry script.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# Registration call forms, both `<object>.component("name", ...)`:
# - `Vue.component("name", ...)` (Vue 2 global registration)
# - `app.component("name", ...)` (Vue 3 `createApp()` instance)
COMPONENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"Vue\.component\(\s*['\"]([^'\"]+)['\"]\s*,", re.IGNORECASE),
    re.compile(r"\bapp\.component\(\s*['\"]([^'\"]+)['\"]\s*,", re.IGNORECASE),
)

_CASE_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")


def pascal_to_kebab(name: str) -> str:
    """
    Convert a PascalCase component name into its kebab-case tag form.

    A hyphen is inserted only between a lowercase letter or digit and the
    uppercase letter that follows it, then the result is lowercased:

    - "OtherThing"  -> "other-thing"
    - "HTMLEditor"  -> "htmleditor" (runs of capitals are not split)
    - "MyHTMLThing" -> "my-htmlthing"
    - "Widget2Box"  -> "widget2-box"
    - "Modal"       -> "modal" (no leading hyphen)
    """
    return _CASE_BOUNDARY_RE.sub(r"\1-\2", name).lower()


def extract_component_names(source: str) -> frozenset[str]:
    """
    Return registered component names plus derived kebab-case aliases.

    Vue resolves `<other-thing>` to a component registered as `OtherThing`,
    so PascalCase names without a hyphen also contribute their kebab form.
    """
    names: dict[str, None] = {}
    for pattern in COMPONENT_PATTERNS:
        for m in pattern.finditer(source):
            if m.group(1):
                names.setdefault(m.group(1))

    aliases = [
        pascal_to_kebab(n)
        for n in names
        if "-" not in n and any(c.isupper() for c in n)
    ]
    return frozenset(names) | frozenset(aliases)


def load_components(app_js: Path) -> frozenset[str]:
    """
    Load the component registry from the app entry script.

    A missing or unreadable script means no known components; it never
    fails the run.
    """
    if not app_js.is_file():
        logger.debug("No app entry at %s; component registry is empty", app_js)
        return frozenset()

    try:
        source = app_js.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Cannot read app entry %s: %s", app_js, e)
        return frozenset()

    components = extract_component_names(source)
    logger.debug("Loaded %d component names from %s", len(components), app_js)
    return components
