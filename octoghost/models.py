"""Pydantic models for the Ghost import document."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

EXPORT_VENDOR = "ghost_octopress_converter"
EXPORT_VERSION = "002"


class RawPost(BaseModel):
    """One Octopress post file split into front matter and body."""

    file_name: str = Field(..., description="Base name of the source file.")
    front_matter: Dict[str, Any] = Field(
        default_factory=dict, description="Parsed YAML front matter."
    )
    content: str = Field("", description="Everything after the front matter block.")

    model_config = ConfigDict(frozen=True)


class Post(BaseModel):
    """Entry inside data.posts of a Ghost import file."""

    id: int = Field(..., ge=1, description="Sequential post id, in processing order.")
    uuid: str = Field(..., description="Canonical UUID string.")
    author_id: int = 1
    created_by: int = 1
    published_by: int = 1
    updated_by: int = 1
    title: str = Field(..., description="Post title from the front matter.")
    created_at: Optional[int] = Field(
        None, description="Creation time in epoch milliseconds, null when unparseable."
    )
    published_at: Optional[int] = Field(
        None, description="Always equal to created_at."
    )
    updated_at: Optional[int] = Field(
        None, description="Last change in epoch milliseconds, null when unparseable."
    )
    markdown: str = Field("", description="Normalized Markdown body.")
    slug: str = Field(..., min_length=1, description="URL slug, never empty.")
    status: Literal["published"] = "published"


class Tag(BaseModel):
    """Entry inside data.tags of a Ghost import file."""

    id: int = Field(..., ge=1, description="Sequential tag id, in first-seen order.")
    uuid: str
    name: str = Field(..., description="Tag text as first written in a post.")
    slug: str = Field(..., description="Deduplication key produced by slugify.")
    description: Optional[str] = None
    parent_id: Optional[int] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    created_at: Optional[int] = None
    created_by: int = 1
    updated_at: Optional[int] = None
    updated_by: int = 1


class PostTagRelation(BaseModel):
    """Entry inside data.posts_tags linking a post to a tag."""

    id: int = Field(..., ge=1)
    post_id: int
    tag_id: int


class ExportMeta(BaseModel):
    exported_on: int = Field(..., description="Export time in epoch milliseconds.")
    vendor: str = EXPORT_VENDOR
    version: str = EXPORT_VERSION


class ExportData(BaseModel):
    posts: List[Post] = Field(default_factory=list)
    tags: List[Tag] = Field(default_factory=list)
    posts_tags: List[PostTagRelation] = Field(default_factory=list)


class ExportDocument(BaseModel):
    """Top-level Ghost import document."""

    meta: ExportMeta
    data: ExportData = Field(default_factory=ExportData)


__all__ = [
    "EXPORT_VENDOR",
    "EXPORT_VERSION",
    "ExportData",
    "ExportDocument",
    "ExportMeta",
    "Post",
    "PostTagRelation",
    "RawPost",
    "Tag",
]
