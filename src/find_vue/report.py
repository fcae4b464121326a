"""
Human-readable and JSON renderings of a scan report.
"""

from __future__ import annotations

import json

from .types import Report

NO_FINDINGS = "✅ No Vue-like usage found in Blade templates (after filters)."

# `[vue-component-tag]` is the one kind wider than the column.
KIND_COLUMN_WIDTH = 18


def count_hits(report: Report) -> int:
    return sum(len(hits) for hits in report.values())


def format_report(report: Report) -> str:
    """
    Render the report as text, one block per file plus a summary line.

    The result always ends with a newline.
    """
    if not report:
        return NO_FINDINGS + "\n"

    lines: list[str] = []
    for path, hits in report.items():
        lines.append(f"📄 {path}")
        for hit in hits:
            kind = f"[{hit.kind}]"
            lines.append(f"  Line {hit.line}: {kind:<{KIND_COLUMN_WIDTH}} {hit.detail}")
        lines.append("")

    lines.append(
        f"— Scanned complete. {count_hits(report)} hits across {len(report)} files."
    )
    return "\n".join(lines) + "\n"


def report_to_json(report: Report) -> str:
    rows = [
        {
            "path": str(path),
            "hits": [
                {"line": h.line, "kind": h.kind.value, "detail": h.detail}
                for h in hits
            ],
        }
        for path, hits in report.items()
    ]
    return json.dumps(rows, indent=2, sort_keys=True)
