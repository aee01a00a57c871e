"""Pydantic schemas for content — pages, blog posts, testimonials.

Learn: The three kinds share one table but not one shape. Here they are a
discriminated union on "type", so a page can't carry blog tags and a
blog post can't carry a testimonial's company. Fields that don't belong
to the chosen kind are ignored on input and never emitted.

- *Write models: request bodies for POST/PUT (full replace, no PATCH)
- *Read models: what the API returns (adds id + timestamps)
- to_row_values / from_row: the only place that knows the flat row shape
"""

import re
from datetime import datetime
from typing import Annotated, Any, Iterable, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator, model_validator

ContentType = Literal["page", "blog", "testimonial"]

# Columns every kind writes, plus the kind-specific ones. Anything not
# set by the chosen kind is reset on write.
_KIND_COLUMNS = {
    "featured": False,
    "image": None,
    "category": None,
    "position": None,
    "company": None,
}


def slugify(title: str) -> str:
    """Derive a URL slug from a title: "Hello, World!" → "hello-world"."""
    slug = title.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Strip, drop empties, and de-duplicate keeping first occurrence."""
    seen: dict[str, None] = {}
    for tag in tags:
        tag = tag.strip()
        if tag:
            seen.setdefault(tag, None)
    return list(seen)


# ─── Write models ────────────────────────────────────────

class _ContentWriteBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, max_length=255)
    author: str = Field(..., min_length=1, max_length=255)

    @model_validator(mode="before")
    @classmethod
    def _default_slug(cls, data: Any) -> Any:
        """Fill a missing slug from the title."""
        if isinstance(data, dict) and not data.get("slug") and data.get("title"):
            data = {**data, "slug": slugify(str(data["title"]))}
        return data


class PageWrite(_ContentWriteBase):
    type: Literal["page"]


class BlogPostWrite(_ContentWriteBase):
    type: Literal["blog"]
    featured: bool = False
    image: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=255)
    tags: list[Annotated[str, Field(max_length=255)]] = Field(default_factory=list)

    @field_validator("featured", mode="before")
    @classmethod
    def _null_featured(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, v: Any) -> Any:
        return [] if v is None else v


class TestimonialWrite(_ContentWriteBase):
    type: Literal["testimonial"]
    image: Optional[str] = Field(None, max_length=255)  # profile photo
    position: Optional[str] = Field(None, max_length=255)
    company: Optional[str] = Field(None, max_length=255)


ContentWrite = Annotated[
    Union[PageWrite, BlogPostWrite, TestimonialWrite],
    Field(discriminator="type"),
]


# ─── Read models ─────────────────────────────────────────

# Same shapes as the write models, minus their input limits: a stored
# row is returned as it is, even if it predates those limits.

class _ContentReadBase(BaseModel):
    id: int
    title: str
    content: str
    slug: str
    author: str
    created_at: datetime
    updated_at: datetime


class PageRead(_ContentReadBase):
    type: Literal["page"]


class BlogPostRead(_ContentReadBase):
    type: Literal["blog"]
    featured: bool = False
    image: Optional[str] = None
    category: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class TestimonialRead(_ContentReadBase):
    type: Literal["testimonial"]
    image: Optional[str] = None
    position: Optional[str] = None
    company: Optional[str] = None


ContentRead = Annotated[
    Union[PageRead, BlogPostRead, TestimonialRead],
    Field(discriminator="type"),
]

_content_read_adapter = TypeAdapter(ContentRead)


# ─── Storage boundary ────────────────────────────────────

def to_row_values(body: Union[PageWrite, BlogPostWrite, TestimonialWrite]) -> dict:
    """Flatten a write model into a complete set of content column values.

    Every writable column is present in the result, so applying it to an
    existing row replaces the record rather than merging into it.
    """
    values = {
        "type": body.type,
        "title": body.title,
        "body": body.content,
        "slug": body.slug,
        "author": body.author,
        **_KIND_COLUMNS,
    }
    for column in _KIND_COLUMNS:
        if column in type(body).model_fields:
            values[column] = getattr(body, column)
    return values


def tags_of(body: Union[PageWrite, BlogPostWrite, TestimonialWrite]) -> list[str]:
    """Normalised tag list of a write model (empty for non-blog kinds)."""
    return normalize_tags(getattr(body, "tags", []))


def from_row(row: Any, tags: list[str]) -> Union[PageRead, BlogPostRead, TestimonialRead]:
    """Build the read model for a content ORM row and its tag strings."""
    return _content_read_adapter.validate_python({
        "id": row.id,
        "type": row.type,
        "title": row.title,
        "content": row.body,
        "slug": row.slug,
        "author": row.author,
        "featured": bool(row.featured),
        "image": row.image,
        "category": row.category,
        "position": row.position,
        "company": row.company,
        "tags": tags,
        "created_at": row.created_at,
        "updated_at": row.updated_at,
    })
