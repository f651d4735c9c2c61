"""Utility helpers for JSON IO and logging."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

from .errors import ExportWriteError

LOG_FORMAT = "[%(levelname)s] %(message)s"


def export_json_dumps(obj: Any, indent: Optional[int] = 2) -> str:
    """Serialize JSON keeping field order and non-ASCII text, with a trailing newline."""
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(mode="json")
    return json.dumps(obj, ensure_ascii=False, indent=indent) + "\n"


def write_json(path: Path, data: Any, indent: Optional[int] = 2) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(export_json_dumps(data, indent=indent), encoding="utf-8")
    except OSError as exc:
        raise ExportWriteError(f"Failed to write export file {path}: {exc}") from exc
    return path


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send ``octoghost`` log records to stderr."""

    log = logging.getLogger("octoghost")
    log.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    return log


__all__ = ["configure_logging", "export_json_dumps", "write_json"]
