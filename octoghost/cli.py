"""Command-line interface for octoghost."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import load_settings
from .context import ConversionContext
from .discovery import expand_path, find_post_files, posts_dir_for
from .errors import ConfigurationError, ExportWriteError, PostError
from .io_utils import configure_logging, write_json
from .pipeline import build_export, convert_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERT_FAILED = 1
EXIT_WRITE_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="octoghost",
        description="Convert an Octopress blog into a Ghost import JSON file.",
    )
    parser.add_argument("octopress", help="Path to the Octopress installation.")
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Export file to write (default: GhostData.json).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with converter settings.",
    )
    parser.add_argument(
        "--pattern",
        default=None,
        help="Glob for post files inside the posts directory (default: **/*.markdown).",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Write the export without indentation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output.",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(args.config, pattern=args.pattern)
        if args.compact:
            settings = settings.model_copy(update={"indent": None})
        octopress_dir = expand_path(args.octopress)
        post_files = find_post_files(octopress_dir, settings)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_CONVERT_FAILED

    output = expand_path(args.output or settings.output)
    posts_dir = posts_dir_for(octopress_dir, settings)

    logger.info("%d Octopress blog posts found. Importing...", len(post_files))

    context = ConversionContext(settings=settings)
    for path in post_files:
        logger.info("Processing file %s", path.relative_to(posts_dir).as_posix())
        try:
            convert_file(path, context)
        except PostError as exc:
            logger.error("Conversion failed: %s", exc)
            return EXIT_CONVERT_FAILED

    export = build_export(context)
    try:
        write_json(output, export, indent=settings.indent)
    except ExportWriteError as exc:
        logger.error("%s", exc)
        return EXIT_WRITE_FAILED

    logger.info("Export file created: %s", output)
    return EXIT_OK


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.verbose)
    return run(args)


__all__ = ["build_parser", "main", "run"]
