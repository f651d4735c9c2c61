"""Tag deduplication and post/tag relation rows."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Mapping

from .models import Post, PostTagRelation, Tag
from .slugs import slugify

logger = logging.getLogger(__name__)

TAG_FIELDS = ("categories", "tags")


def _names_from(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    if isinstance(value, str):
        return [value] if value else []
    return []


def collect_tag_names(front_matter: Mapping[str, Any]) -> List[str]:
    """Return tag candidates: all categories first, then all tags.

    Duplicates between the two fields are kept; each one produces its own
    relation row.
    """

    names: List[str] = []
    for field in TAG_FIELDS:
        names.extend(_names_from(front_matter.get(field)))
    return names


class TagRegistry:
    """Tags seen so far, keyed by slug, plus every post/tag relation row."""

    def __init__(self) -> None:
        self._tags: Dict[str, Tag] = {}
        self._relations: List[PostTagRelation] = []
        self._next_tag_id = 1
        self._next_relation_id = 1

    @property
    def tags(self) -> List[Tag]:
        return list(self._tags.values())

    @property
    def relations(self) -> List[PostTagRelation]:
        return list(self._relations)

    def get(self, slug: str) -> Tag | None:
        return self._tags.get(slug)

    def _create_tag(self, name: str, slug: str, post: Post) -> Tag:
        tag = Tag(
            id=self._next_tag_id,
            uuid=str(uuid.uuid4()),
            name=name,
            slug=slug,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
        self._next_tag_id += 1
        self._tags[slug] = tag
        logger.debug("New tag %r (slug %s, id %d)", name, slug, tag.id)
        return tag

    def register(self, post: Post, front_matter: Mapping[str, Any]) -> List[PostTagRelation]:
        """Link ``post`` to every tag named in its front matter."""

        added: List[PostTagRelation] = []
        for name in collect_tag_names(front_matter):
            slug = slugify(name)
            if not slug:
                logger.warning("Tag %r on post %r has an empty slug", name, post.slug)

            tag = self.get(slug) or self._create_tag(name, slug, post)
            relation = PostTagRelation(
                id=self._next_relation_id, post_id=post.id, tag_id=tag.id
            )
            self._next_relation_id += 1
            self._relations.append(relation)
            added.append(relation)

        return added


__all__ = ["TAG_FIELDS", "TagRegistry", "collect_tag_names"]
