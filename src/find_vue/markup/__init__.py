"""
Regex-level view of HTML markup: opening tags and their attribute runs.
"""

from __future__ import annotations
