"""Sequential conversion of post files into a Ghost export document."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable, Optional

from .config import ConverterSettings
from .context import ConversionContext
from .errors import PostError
from .front_matter import read_post
from .models import ExportData, ExportDocument, ExportMeta, Post, RawPost
from .posts import build_post

logger = logging.getLogger(__name__)


def convert_raw_post(raw: RawPost, context: ConversionContext) -> Post:
    post = build_post(raw, context)
    context.registry.register(post, raw.front_matter)
    context.posts.append(post)
    return post


def convert_file(path: Path, context: ConversionContext) -> Post:
    """Read, parse and convert one file; errors carry the file path."""

    raw = read_post(path)
    try:
        return convert_raw_post(raw, context)
    except PostError as exc:
        if exc.path is None:
            raise exc.with_path(path) from exc
        raise


def build_export(
    context: ConversionContext, exported_on: Optional[int] = None
) -> ExportDocument:
    if exported_on is None:
        exported_on = int(time.time() * 1000)
    return ExportDocument(
        meta=ExportMeta(exported_on=exported_on),
        data=ExportData(
            posts=list(context.posts),
            tags=context.registry.tags,
            posts_tags=context.registry.relations,
        ),
    )


def convert_files(
    paths: Iterable[Path],
    settings: Optional[ConverterSettings] = None,
    *,
    exported_on: Optional[int] = None,
) -> ExportDocument:
    """Convert ``paths`` in the given order, stopping at the first failure."""

    context = ConversionContext(settings=settings or ConverterSettings())
    for path in paths:
        logger.debug("Converting %s", path)
        convert_file(Path(path), context)
    return build_export(context, exported_on=exported_on)


__all__ = ["build_export", "convert_file", "convert_files", "convert_raw_post"]
