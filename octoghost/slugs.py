"""Slug helpers for tags and post file names."""

from __future__ import annotations

import re

_INVALID_CHARS_RE = re.compile(r"[^a-z0-9_-]")
_DASH_RUN_RE = re.compile(r"-{2,}")
_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}-")


def slugify(value: str) -> str:
    s = _INVALID_CHARS_RE.sub("-", value.lower())
    s = _DASH_RUN_RE.sub("-", s)
    return s.strip("-")


def slug_from_filename(file_name: str) -> str:
    """Derive a post slug from an Octopress file name.

    ``2013-05-01-my-post.markdown`` becomes ``my-post``. Only the date prefix
    and the extension are removed; the rest is kept as written.
    """

    stem = _DATE_PREFIX_RE.sub("", file_name, count=1)
    if "." in stem:
        stem = stem.rsplit(".", 1)[0]
    return stem.strip()


__all__ = ["slug_from_filename", "slugify"]
