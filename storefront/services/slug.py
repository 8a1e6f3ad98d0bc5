"""
Генерация slug для URL.
"""

import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^\w-]+", re.ASCII)
_MULTI_DASH_RE = re.compile(r"--+")


def slugify(text) -> str:
    """
    Преобразует текст в slug: "Create Slugify" -> "create-slugify".

    Args:
        text: Исходный текст (не-строки приводятся через str())

    Returns:
        str: Slug в нижнем регистре с дефисами
    """
    slug = str(text).lower()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = slug.replace("&", "-and-")
    slug = _NON_WORD_RE.sub("", slug)
    return _MULTI_DASH_RE.sub("-", slug)
