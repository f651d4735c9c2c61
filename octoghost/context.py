"""Mutable state carried through one conversion run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .config import ConverterSettings
from .models import Post
from .tags import TagRegistry


@dataclass
class ConversionContext:
    """Counters, tag registry and built posts for a single run.

    A fresh context starts every counter at 1, so two runs over the same files
    produce the same ids.
    """

    settings: ConverterSettings = field(default_factory=ConverterSettings)
    registry: TagRegistry = field(default_factory=TagRegistry)
    posts: List[Post] = field(default_factory=list)
    _next_post_id: int = field(default=1, init=False, repr=False)

    def next_post_id(self) -> int:
        post_id = self._next_post_id
        self._next_post_id += 1
        return post_id


__all__ = ["ConversionContext"]
