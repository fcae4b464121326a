"""
Built-in HTML/SVG tag names that are never reported as custom tags.

Not exhaustive. Names are stored lowercase because lookups are done on the
lowercased tag name (so `clipPath` is matched as `clippath`).
"""

from __future__ import annotations

HTML_TAGS: frozenset[str] = frozenset(
    {
        # document
        "html", "head", "title", "meta", "link", "style", "script", "body",
        # sections
        "header", "footer", "nav", "main", "section", "article", "aside",
        "h1", "h2", "h3", "h4", "h5", "h6",
        # grouping and lists
        "p", "div", "span", "a", "ul", "ol", "li", "dl", "dt", "dd",
        # tables
        "table", "thead", "tbody", "tfoot", "tr", "td", "th",
        # forms
        "form", "label", "input", "textarea", "select", "option", "button",
        "fieldset", "legend", "datalist", "output", "progress", "meter",
        # embedded content
        "img", "picture", "source", "figure", "figcaption", "canvas",
        "iframe", "video", "audio", "track", "map", "area", "blockquote",
        "pre", "code",
        # text-level
        "small", "strong", "em", "i", "b", "u", "s", "sub", "sup", "br",
        "hr", "time", "mark", "kbd", "samp", "var", "template", "slot",
    }
)  # fmt: skip

SVG_TAGS: frozenset[str] = frozenset(
    {
        "svg", "g", "path", "rect", "circle", "ellipse", "line", "polyline",
        "polygon", "text", "defs", "use", "symbol", "clippath", "mask",
        "lineargradient", "radialgradient", "stop", "pattern", "filter",
    }
)  # fmt: skip

STANDARD_TAGS: frozenset[str] = HTML_TAGS | SVG_TAGS
