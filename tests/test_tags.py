from __future__ import annotations

import pytest

from find_vue.markup.tags import find_tags
from find_vue.markup.tags import line_from_offset
from find_vue.types import TagOccurrence


def test_find_tags_yields_opening_tags_in_order() -> None:
    content = '<div class="a"><span>x</span></div>'
    assert list(find_tags(content)) == [
        TagOccurrence(name="div", attrs=' class="a"', offset=0),
        TagOccurrence(name="span", attrs="", offset=15),
    ]


def test_find_tags_skips_closing_tags_and_non_tags() -> None:
    content = "</div> a < b <1> {{ $x }}"
    assert list(find_tags(content)) == []


def test_find_tags_keeps_namespaced_and_hyphenated_names() -> None:
    names = [t.name for t in find_tags("<flux:button/><my-widget><x-alert />")]
    assert names == ["flux:button", "my-widget", "x-alert"]


def test_find_tags_spans_newlines_inside_a_tag() -> None:
    content = '<div\n  v-if="ok"\n  class="b">'
    (tag,) = find_tags(content)
    assert tag.name == "div"
    assert tag.attrs == '\n  v-if="ok"\n  class="b"'


def test_find_tags_stops_at_gt_inside_quoted_value() -> None:
    # Known limitation of the regex approximation.
    (tag,) = find_tags('<div title="a > b" v-if="x">')
    assert tag.attrs == ' title="a '


def test_find_tags_is_single_pass() -> None:
    tags = find_tags("<a><b>")
    assert [t.name for t in tags] == ["a", "b"]
    assert list(tags) == []


@pytest.mark.parametrize(
    "content",
    [
        "<a>",
        "\n<a>",
        "x\ny\n\n  <a>",
        "\n\n\n\n<p>\n<a>",
    ],
)
def test_line_from_offset_counts_preceding_newlines(content: str) -> None:
    for tag in find_tags(content):
        expected = 1 + content[: tag.offset].count("\n")
        assert line_from_offset(content, tag.offset) == expected


def test_line_from_offset_is_one_based() -> None:
    assert line_from_offset("<a>", 0) == 1
    assert line_from_offset("one\ntwo\n<a>", 8) == 3
