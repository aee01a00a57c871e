"""Content schema tests — the tagged union and its flat-row translation."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import TypeAdapter, ValidationError

from tredumo.schemas.content import (
    BlogPostRead,
    BlogPostWrite,
    ContentWrite,
    PageRead,
    PageWrite,
    from_row,
    normalize_tags,
    slugify,
    to_row_values,
)

content_write = TypeAdapter(ContentWrite)


@pytest.mark.parametrize(
    "title, slug",
    [
        ("Home", "home"),
        ("The Future of Education Management", "the-future-of-education-management"),
        ("Terms  of -- Service!", "terms-of-service"),
        ("  Padded  ", "padded"),
    ],
)
def test_slugify(title, slug):
    assert slugify(title) == slug


def test_normalize_tags():
    assert normalize_tags(["AI", " AI", "", "Future", "AI "]) == ["AI", "Future"]


def test_union_picks_variant_by_type():
    body = content_write.validate_python(
        {"type": "page", "title": "t", "content": "c", "slug": "s", "author": "a"}
    )
    assert isinstance(body, PageWrite)


def test_union_rejects_missing_type():
    with pytest.raises(ValidationError):
        content_write.validate_python({"title": "t", "content": "c", "author": "a"})


def test_page_ignores_blog_fields():
    body = content_write.validate_python({
        "type": "page", "title": "t", "content": "c", "slug": "s", "author": "a",
        "tags": ["x"], "featured": True,
    })
    assert not hasattr(body, "tags")
    assert to_row_values(body)["featured"] is False


def test_to_row_values_sets_every_column():
    body = BlogPostWrite(
        type="blog", title="t", content="c", slug="s", author="a", category="Tech"
    )
    assert to_row_values(body) == {
        "type": "blog",
        "title": "t",
        "body": "c",
        "slug": "s",
        "author": "a",
        "featured": False,
        "image": None,
        "category": "Tech",
        "position": None,
        "company": None,
    }


def _row(**overrides):
    now = datetime.now(timezone.utc)
    fields = dict(
        id=1, type="blog", title="t", body="c", slug="s", author="a",
        featured=True, image=None, category="Tech", position="CTO",
        company="Acme", created_at=now, updated_at=now,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_from_row_builds_blog_post():
    read = from_row(_row(), ["AI"])
    assert isinstance(read, BlogPostRead)
    assert read.tags == ["AI"]
    assert read.content == "c"
    assert "position" not in read.model_dump()


def test_from_row_builds_page_without_stray_fields():
    read = from_row(_row(type="page"), [])
    assert isinstance(read, PageRead)
    assert set(read.model_dump()) == {
        "id", "type", "title", "content", "slug", "author", "created_at", "updated_at",
    }


def test_from_row_accepts_stored_values_outside_write_limits():
    read = from_row(_row(type="page", title="", body=""), [])
    assert read.content == ""
    assert read.title == ""


def test_from_row_testimonial_keeps_profile_image():
    read = from_row(_row(type="testimonial", image="/img/jude.jpg"), [])
    assert read.image == "/img/jude.jpg"
    assert read.company == "Acme"
    assert "featured" not in read.model_dump()


def test_blog_null_featured_and_tags_fall_back_to_defaults():
    body = content_write.validate_python({
        "type": "blog", "title": "t", "content": "c", "author": "a",
        "featured": None, "tags": None,
    })
    assert body.featured is False
    assert body.tags == []


def test_testimonial_image_is_written():
    body = content_write.validate_python({
        "type": "testimonial", "title": "t", "content": "c", "author": "a",
        "image": "/img/jude.jpg",
    })
    assert to_row_values(body)["image"] == "/img/jude.jpg"
