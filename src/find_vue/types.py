"""
Shared types for tag scanning and reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NamedTuple


class HitKind(str, Enum):
    """Classification of a Vue-usage finding."""

    COMPONENT_TAG = "vue-component-tag"  # <my-widget>
    DIRECTIVE = "v-directive"  # v-if="..."
    EVENT = "@event"  # @click="..."
    BIND = ":bind"  # :title="..."
    MUSTACHE_ESCAPE = "mustache-escape"  # @{{ ... }}
    CUSTOM_TAG = "custom-tag"  # unknown, non-standard tag name

    def __str__(self) -> str:
        return self.value


class TagOccurrence(NamedTuple):
    """An opening tag as seen by the tag finder."""

    name: str
    attrs: str
    offset: int


@dataclass(frozen=True, slots=True)
class AttributeHit:
    kind: HitKind
    attr: str


@dataclass(frozen=True, slots=True)
class Hit:
    """One detected occurrence of a Vue-usage pattern in a template."""

    line: int
    kind: HitKind
    detail: str


# Files with at least one hit, in walk order.
Report = dict[Path, list[Hit]]
