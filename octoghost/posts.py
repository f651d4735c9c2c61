"""Build Ghost post records from parsed Octopress posts."""

from __future__ import annotations

import logging
import uuid

from .context import ConversionContext
from .dates import resolve_created, resolve_updated, to_epoch_ms
from .errors import MissingRequiredFieldError
from .models import Post, RawPost
from .slugs import slug_from_filename, slugify
from .text import clean_string, convert_tags

logger = logging.getLogger(__name__)


def resolve_slug(raw: RawPost, title: str) -> str:
    """Front matter slug, else the file name without date and extension."""

    slug = clean_string(raw.front_matter.get("slug"))
    if slug:
        return slug

    slug = slug_from_filename(raw.file_name)
    source = "the file name"
    if not slug:
        slug = slugify(title)
        source = "the title"
    logger.info("No slug in %s, using %r from %s", raw.file_name, slug, source)
    return slug


def build_post(raw: RawPost, context: ConversionContext) -> Post:
    """Create the export record for ``raw`` and consume the next post id.

    Unparseable dates are kept as ``None`` rather than rejected.
    """

    meta = raw.front_matter
    title = clean_string(meta.get("title"))
    if not title:
        raise MissingRequiredFieldError("post has no title")

    tz = context.settings.tz
    created_source = resolve_created(meta, raw.file_name)
    created_at = to_epoch_ms(created_source, tz)
    updated_at = to_epoch_ms(resolve_updated(meta, created_source), tz)
    if created_at is None:
        logger.warning("Cannot parse date %r in %s", created_source, raw.file_name)

    slug = resolve_slug(raw, title)
    if not slug:
        raise MissingRequiredFieldError("cannot derive a slug for post")

    markdown = convert_tags(raw.content, context.settings.image_prefix)

    return Post(
        id=context.next_post_id(),
        uuid=str(uuid.uuid4()),
        title=title,
        created_at=created_at,
        published_at=created_at,
        updated_at=updated_at,
        markdown=markdown,
        slug=slug,
    )


__all__ = ["build_post", "resolve_slug"]
