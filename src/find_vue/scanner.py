"""
Per-file Vue usage scanning.

Combines the tag finder, the attribute heuristics and the component registry
into a line-ordered list of hits.
"""

from __future__ import annotations

from collections.abc import Set
from pathlib import Path

from .markup.attributes import scan_attributes
from .markup.standard_tags import STANDARD_TAGS
from .markup.tags import TagFinder
from .markup.tags import find_tags as default_find_tags
from .markup.tags import line_from_offset
from .types import Hit
from .types import HitKind

# Blade components (`<x-alert>`) and Flux UI components (`<flux:button>`).
BLADE_COMPONENT_PREFIXES = ("x-", "flux:")

# Valid in plain HTML as well, so never a custom-tag signal on its own.
PLACEHOLDER_TAG = "template"


def is_blade_component(tag: str) -> bool:
    return tag.lower().startswith(BLADE_COMPONENT_PREFIXES)


def scan_text(
    content: str,
    components: Set[str],
    *,
    standard_tags: Set[str] = STANDARD_TAGS,
    flag_custom_tags: bool = True,
    find_tags: TagFinder = default_find_tags,
) -> list[Hit]:
    """
    Scan template text for Vue usage.

    Hits are sorted by line; hits on the same line keep discovery order
    (component tag, then attribute hits, then custom tag).
    """
    known = {name.lower() for name in components}
    hits: list[Hit] = []

    for tag, attrs, offset in find_tags(content):
        if is_blade_component(tag):
            continue

        lower = tag.lower()
        line = line_from_offset(content, offset)
        is_component = lower in known

        if is_component:
            hits.append(Hit(line=line, kind=HitKind.COMPONENT_TAG, detail=f"<{tag}>"))

        for attr_hit in scan_attributes(attrs):
            hits.append(Hit(line=line, kind=attr_hit.kind, detail=attr_hit.attr))

        if (
            flag_custom_tags
            and not is_component
            and lower not in standard_tags
            and lower != PLACEHOLDER_TAG
        ):
            hits.append(Hit(line=line, kind=HitKind.CUSTOM_TAG, detail=f"<{tag}>"))

    # list.sort is stable, so ties keep discovery order.
    hits.sort(key=lambda h: h.line)
    return hits


def scan_file(
    path: Path,
    components: Set[str],
    *,
    standard_tags: Set[str] = STANDARD_TAGS,
    flag_custom_tags: bool = True,
) -> list[Hit]:
    """
    Scan one template file. Raises `OSError` if the file cannot be read.
    """
    content = path.read_text(encoding="utf-8", errors="replace")
    return scan_text(
        content,
        components,
        standard_tags=standard_tags,
        flag_custom_tags=flag_custom_tags,
    )
