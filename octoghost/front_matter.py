"""Split Octopress post files into YAML front matter and Markdown body."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from .errors import FileAccessError, FrontMatterParseError
from .models import RawPost

_DELIMITER = "---"
_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?=\r?$)",
    re.DOTALL | re.MULTILINE,
)


def _opens_front_matter(text: str) -> bool:
    first_line = text.split("\n", 1)[0]
    return first_line.rstrip() == _DELIMITER


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Return the parsed front matter mapping and the untouched remainder.

    Text that does not start with a ``---`` line has no front matter; the whole
    text is returned as content.
    """

    if text.startswith("\ufeff"):
        text = text[1:]

    if not _opens_front_matter(text):
        return {}, text

    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        raise FrontMatterParseError("front matter block is not terminated by '---'")

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise FrontMatterParseError(f"invalid YAML front matter: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterParseError(
            f"front matter must be a mapping, got {type(data).__name__}"
        )

    front_matter = {str(key): value for key, value in data.items()}
    return front_matter, text[match.end():]


def parse_post(text: str, file_name: str) -> RawPost:
    front_matter, content = split_front_matter(text)
    return RawPost(file_name=file_name, front_matter=front_matter, content=content)


def read_post(path: Path) -> RawPost:
    """Read and parse one post file, attaching the path to any failure."""

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(f"cannot read post file: {exc}", path) from exc

    try:
        return parse_post(text, path.name)
    except FrontMatterParseError as exc:
        raise exc.with_path(path) from exc


__all__ = ["parse_post", "read_post", "split_front_matter"]
