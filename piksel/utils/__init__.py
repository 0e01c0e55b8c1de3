"""Utility functions."""

from piksel.utils.text import (
    strip_accents,
    slugify,
    humanize,
    camelize,
    natural_sort_key,
)

__all__ = [
    "strip_accents",
    "slugify",
    "humanize",
    "camelize",
    "natural_sort_key",
]
