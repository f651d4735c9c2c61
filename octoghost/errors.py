"""Exception types raised while converting Octopress posts."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ConverterError(Exception):
    """Base exception for all converter errors."""


class ConfigurationError(ConverterError):
    """Raised when settings, input directories, or the post list are unusable."""


# =============================================================================
# Per-post errors
# =============================================================================


class PostError(ConverterError):
    """Base exception for failures tied to a single post file."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def with_path(self, path: Union[str, Path]) -> "PostError":
        """Return a copy of this error that names the offending file."""
        return type(self)(self.message, path)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class FileAccessError(PostError):
    """Raised when a post file cannot be read."""


class FrontMatterParseError(PostError):
    """Raised when the YAML front matter block is malformed."""


class MissingRequiredFieldError(PostError):
    """Raised when a post lacks a field the export requires (e.g. title)."""


# =============================================================================
# Output errors
# =============================================================================


class ExportWriteError(ConverterError):
    """Raised when the export file cannot be written."""


__all__ = [
    "ConfigurationError",
    "ConverterError",
    "ExportWriteError",
    "FileAccessError",
    "FrontMatterParseError",
    "MissingRequiredFieldError",
    "PostError",
]
