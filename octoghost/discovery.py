"""Locate Octopress post files on disk."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .config import ConverterSettings
from .errors import ConfigurationError

PathLike = Union[str, Path]


def expand_path(path: PathLike) -> Path:
    """Expand ``~`` and return an absolute path."""

    return Path(path).expanduser().resolve()


def posts_dir_for(octopress_dir: Path, settings: ConverterSettings) -> Path:
    return octopress_dir / settings.posts_dir


def find_post_files(octopress_dir: PathLike, settings: ConverterSettings) -> List[Path]:
    """Return post files under the Octopress posts directory, sorted by path."""

    root = Path(octopress_dir)
    if not root.is_dir():
        raise ConfigurationError(
            "You must specify the path to your Octopress installation, "
            f"e.g. octoghost /path/to/octopress (got {root})"
        )

    posts_dir = posts_dir_for(root, settings)
    if not posts_dir.is_dir():
        raise ConfigurationError(f"Posts dir not found: {posts_dir}")

    files = sorted(path for path in posts_dir.glob(settings.pattern) if path.is_file())
    if not files:
        raise ConfigurationError(f"No post found in dir: {posts_dir}")
    return files


__all__ = ["expand_path", "find_post_files", "posts_dir_for"]
