"""Starter content for a fresh site — `tredumo init-db --seed`.

Learn: Seeding goes through the same services as the API, so tags are
written transactionally and every row passes the write-model checks.
No user accounts are seeded; create the admin with `tredumo create-user`.
"""

import structlog
from pydantic import TypeAdapter
from sqlalchemy.ext.asyncio import AsyncSession

from tredumo.schemas.content import ContentWrite
from tredumo.schemas.media import MediaCreate
from tredumo.services.content_service import ContentService
from tredumo.services.media_service import MediaService

logger = structlog.get_logger()

_content_write = TypeAdapter(ContentWrite)

DEFAULT_CONTENT = [
    {
        "type": "page", "title": "Home", "slug": "home", "author": "Admin",
        "content": "Welcome to Tredumo, the revolutionary education management platform.",
    },
    {
        "type": "page", "title": "About", "slug": "about", "author": "Admin",
        "content": "Tredumo was founded in 2022 with a mission to transform education management.",
    },
    {
        "type": "page", "title": "Privacy Policy", "slug": "privacy", "author": "Admin",
        "content": (
            "At Tredumo, we take your privacy seriously. This policy explains "
            "how we collect and use your data."
        ),
    },
    {
        "type": "page", "title": "Terms of Service", "slug": "terms", "author": "Admin",
        "content": "By using Tredumo, you agree to these terms of service.",
    },
    {
        "type": "blog",
        "title": "The Future of Education Management",
        "slug": "future-education-management",
        "author": "Admin",
        "content": "Explore how AI is transforming education management systems worldwide.",
        "featured": True,
        "category": "Technology",
        "tags": ["AI", "Education", "Future"],
    },
    {
        "type": "blog",
        "title": "Streamlining Admissions Processes",
        "slug": "streamlining-admissions",
        "author": "Admin",
        "content": "Learn how to improve your institution's admissions workflow.",
        "category": "Best Practices",
        "tags": ["Admissions", "Workflow", "Efficiency"],
    },
    {
        "type": "testimonial",
        "title": "Transformed Our Institution",
        "slug": "testimonial-1",
        "author": "Jude Lubega",
        "content": (
            "Tredumo has completely transformed how we manage our "
            "educational processes."
        ),
        "position": "Vice Chancellor",
        "company": "Nkumba University",
    },
    {
        "type": "testimonial",
        "title": "Incredible Analytics",
        "slug": "testimonial-2",
        "author": "Hakim Mulinde",
        "content": (
            "The AI-driven insights have helped us identify areas for "
            "improvement that we never would have noticed otherwise."
        ),
        "position": "CTO",
        "company": "Nkumba University",
    },
]

_UNSPLASH = "https://images.unsplash.com/{}?auto=format&fit=crop&q=80"

DEFAULT_MEDIA = [
    {
        "type": "image",
        "title": "Dashboard Preview",
        "url": _UNSPLASH.format("photo-1531403009284-440f080d1e12"),
        "thumbnail_url": _UNSPLASH.format("photo-1531403009284-440f080d1e12") + "&w=200",
        "dimensions": "1920x1080",
        "uploaded_by": "Admin",
    },
    {
        "type": "image",
        "title": "Analytics Dashboard",
        "url": _UNSPLASH.format("photo-1551288049-bebda4e38f71"),
        "thumbnail_url": _UNSPLASH.format("photo-1551288049-bebda4e38f71") + "&w=200",
        "dimensions": "1920x1080",
        "uploaded_by": "Admin",
    },
]


async def seed_defaults(db: AsyncSession) -> bool:
    """Insert the starter pages, posts, testimonials and media.

    Does nothing (and returns False) if any content or media already
    exists, so it is safe to run against a live database.
    """
    content = ContentService(db)
    media = MediaService(db)
    existing = sum((await content.count_by_type()).values()) + await media.count()
    if existing:
        logger.info("seed.skipped", existing_rows=existing)
        return False

    for item in DEFAULT_CONTENT:
        await content.create_content(_content_write.validate_python(item))
    for item in DEFAULT_MEDIA:
        await media.create_media(MediaCreate(**item))

    logger.info("seed.done", content=len(DEFAULT_CONTENT), media=len(DEFAULT_MEDIA))
    return True
