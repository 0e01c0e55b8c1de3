"""Text helpers for slugs, category titles and API response keys."""

import re
import unicodedata
from typing import Any, List, Union

# Ligatures and letters that NFD decomposition does not reduce to ASCII
LIGATURE_MAP = {
    'œ': 'oe', 'æ': 'ae', 'ß': 'ss', 'ø': 'o', 'đ': 'd', 'ł': 'l',
}

_NON_ALNUM = re.compile(r'[^a-z0-9]+')
_NATURAL_CHUNKS = re.compile(r'(\d+)')


def strip_accents(text: str) -> str:
    """
    Remove diacritics and expand ligatures.

    Args:
        text: Input string that may contain accented characters.

    Returns:
        String with accents removed and ligatures expanded.

    Examples:
        >>> strip_accents("café")
        'cafe'
        >>> strip_accents("cœur")
        'coeur'
    """
    if not text:
        return ""

    for special, plain in LIGATURE_MAP.items():
        text = text.replace(special, plain)
        text = text.replace(special.upper(), plain.capitalize())

    text = unicodedata.normalize('NFD', text)
    return ''.join(c for c in text if unicodedata.category(c) != 'Mn')


def slugify(text: str) -> str:
    """
    Build a URL slug from a title.

    Lowercases, strips diacritics and collapses every run of
    non-alphanumeric characters into a single hyphen.

    Examples:
        >>> slugify("Summer Campaign!")
        'summer-campaign'
        >>> slugify("Éléphant & Château")
        'elephant-chateau'
    """
    text = strip_accents(str(text or '')).lower()
    return _NON_ALNUM.sub('-', text).strip('-')


def humanize(text: str) -> str:
    """
    Make a technical name (slug, snake_case, CamelCase) human readable.

    Underscores, hyphens and whitespace runs become single spaces, the
    result is lowercased and its first letter capitalized.

    Examples:
        >>> humanize("summer-campaign")
        'Summer campaign'
        >>> humanize("tag_menu")
        'Tag menu'
    """
    text = re.sub(r'([A-Z])', r'_\1', text)
    text = re.sub(r'[_\s]+', ' ', text)
    text = re.sub(r'[-\s]+', ' ', text)
    text = text.strip().lower()
    return text[:1].upper() + text[1:]


def camelize(name: str) -> str:
    """
    Camelize an endpoint name.

    Examples:
        >>> camelize("ws_asset")
        'WsAsset'
        >>> camelize("ws_search_programs")
        'WsSearchPrograms'
    """
    words = name.replace('_', ' ').split(' ')
    return ''.join(word[:1].upper() + word[1:] for word in words)


def natural_sort_key(value: Any) -> List[Union[int, str]]:
    """
    Key for natural ordering ("video2" before "video10").

    Args:
        value: Any value; it is compared through its string form.

    Returns:
        List alternating text chunks and integers.
    """
    chunks = _NATURAL_CHUNKS.split('' if value is None else str(value))
    return [int(chunk) if chunk.isdecimal() else chunk for chunk in chunks]
