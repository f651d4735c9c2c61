"""String cleanup and Octopress inline tag conversion."""

from __future__ import annotations

import re
from typing import Any

DEFAULT_IMAGE_PREFIX = "/content"

# Subset of the Octopress image tag: path, optional width/height, optional alt.
# Class names and quoted titles are not recognized.
IMG_TAG_RE = re.compile(r"\{%\s*img\s+(\S+)(?:\s+(\d+))?(?:\s+(\d+))?\s*(.*?)%\}")


def clean_string(value: Any) -> str:
    """Return ``value`` as a string with surrounding whitespace removed."""

    if value is None:
        return ""
    return str(value).strip()


def convert_tags(value: Any, image_prefix: str = DEFAULT_IMAGE_PREFIX) -> str:
    """Clean ``value`` and rewrite the first ``{% img %}`` tag into HTML.

    Only the first image tag is converted; any later ones are left as written.
    """

    text = clean_string(value)

    def _img(match: re.Match) -> str:
        path, _width, _height, alt = match.groups()
        return f'<img src="{image_prefix}{path}" alt="{alt}" />'

    return IMG_TAG_RE.sub(_img, text, count=1)


__all__ = ["DEFAULT_IMAGE_PREFIX", "IMG_TAG_RE", "clean_string", "convert_tags"]
