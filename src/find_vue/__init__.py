"""
find-vue - flag Blade templates that mix in Vue.

The scanner looks only inside opening HTML tags and reports Vue directives,
event/prop shorthands, escaped mustaches and registered component tags.
"""

from __future__ import annotations
