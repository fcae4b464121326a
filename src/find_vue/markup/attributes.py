"""
Vue heuristics applied to a single tag's raw attribute run.
"""

from __future__ import annotations

import re

from ..types import AttributeHit
from ..types import HitKind

# v-if, v-else-if, v-for, v-on:click, v-bind:href, ...; `else-if` must come
# before `else` in the alternation.
DIRECTIVE_RE = re.compile(
    r"\s(v-(?:if|else-if|else|for|show|model|on:[\w.-]+|bind:[\w.-]+"
    r"|html|text|cloak|once|slot))\s*=",
    re.IGNORECASE,
)

# @click="..." and friends. Must be an attribute, i.e. followed by `=`.
EVENT_RE = re.compile(r"\s(@[A-Za-z][\w.-]*)\s*=", re.IGNORECASE)

# :prop="...", except XML namespace attributes (xmlns:, xlink:, xml:).
BIND_RE = re.compile(
    r"\s:(?!xmlns\b|xlink\b|xml\b)([A-Za-z_][\w.-]*)\s*=",
    re.IGNORECASE,
)

MUSTACHE_ESCAPE = "@{{"
MUSTACHE_ESCAPE_DETAIL = "@{{ ... }}"


def scan_attributes(attrs: str) -> list[AttributeHit]:
    """
    Classify Vue-ish usage in an attribute run.

    Rules are independent and run in a fixed order (directives, events,
    bindings, escaped mustache); a single run can produce several hits of
    different kinds. The escaped-mustache marker is reported at most once.
    """
    hits: list[AttributeHit] = []

    for m in DIRECTIVE_RE.finditer(attrs):
        hits.append(AttributeHit(kind=HitKind.DIRECTIVE, attr=m.group(1)))

    for m in EVENT_RE.finditer(attrs):
        hits.append(AttributeHit(kind=HitKind.EVENT, attr=m.group(1)))

    for m in BIND_RE.finditer(attrs):
        hits.append(AttributeHit(kind=HitKind.BIND, attr=f":{m.group(1)}"))

    # Blade's `@{{ }}` escape is a strong hint of a Blade+Vue mix.
    if MUSTACHE_ESCAPE in attrs:
        hits.append(
            AttributeHit(kind=HitKind.MUSTACHE_ESCAPE, attr=MUSTACHE_ESCAPE_DETAIL)
        )

    return hits
