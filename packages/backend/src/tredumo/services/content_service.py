"""Content service — pages, blog posts, testimonials and their tags.

Learn: Service layer separates business logic from HTTP routing.
API routes call services, services call the database.

Writes that touch both content and content_tags run in one session
transaction. On any error the transaction is rolled back before the
error leaves the service, so readers never see a row without its tags
(or tags from a half-applied update). Results are always re-read from
the database after commit, never echoed from the request.
"""

from collections import defaultdict
from typing import Optional, Union

import structlog
from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tredumo.db.models import CONTENT_TYPES, Content, ContentTag, utcnow
from tredumo.schemas.content import (
    BlogPostWrite,
    PageWrite,
    TestimonialWrite,
    from_row,
    tags_of,
    to_row_values,
)
from tredumo.services.errors import ContentNotFound

logger = structlog.get_logger()

AnyContentWrite = Union[PageWrite, BlogPostWrite, TestimonialWrite]


class ContentService:
    """Business logic for content management."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ──────────────────────────────────────────

    async def list_content(self, type_filter: Optional[str] = None) -> list:
        """All content, newest update first.

        A filter that isn't a known content type is ignored. Rows with the
        same updated_at come back in no particular order.
        """
        q = select(Content)
        if type_filter in CONTENT_TYPES:
            q = q.where(Content.type == type_filter)
        q = q.order_by(Content.updated_at.desc())

        result = await self.db.execute(q)
        rows = list(result.scalars().all())
        tags = await self._tags_for([row.id for row in rows])
        return [from_row(row, tags.get(row.id, [])) for row in rows]

    async def get_content(self, content_id: int):
        row = await self._get_row(content_id)
        if row is None:
            raise ContentNotFound(content_id)
        tags = await self._tags_for([content_id])
        return from_row(row, tags.get(content_id, []))

    async def count_by_type(self) -> dict[str, int]:
        """Number of content rows per type (every type present, 0 if none)."""
        result = await self.db.execute(
            select(Content.type, func.count(Content.id)).group_by(Content.type)
        )
        counts = {content_type: 0 for content_type in CONTENT_TYPES}
        counts.update({content_type: n for content_type, n in result.all()})
        return counts

    # ─── Writes ─────────────────────────────────────────

    async def create_content(self, body: AnyContentWrite):
        """Insert a content row and its tags atomically."""
        tags = tags_of(body)
        try:
            content = Content(**to_row_values(body))
            self.db.add(content)
            await self.db.flush()  # get the auto-generated id
            content_id = content.id

            await self._insert_tags(content_id, tags)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.warning("content.create_failed", slug=body.slug, exc_info=True)
            raise

        logger.info("content.created", content_id=content_id, type=body.type)
        return await self._read_back(content_id)

    async def update_content(self, content_id: int, body: AnyContentWrite):
        """Replace a content row and its whole tag set atomically.

        Every writable column is overwritten. Fields missing from the
        body are reset, not kept. Raises ContentNotFound before touching
        any tags if the row doesn't exist.
        """
        tags = tags_of(body)
        try:
            content = await self._get_row(content_id)
            if content is None:
                raise ContentNotFound(content_id)

            for column, value in to_row_values(body).items():
                setattr(content, column, value)
            content.updated_at = utcnow()  # bump even if only tags changed
            await self.db.flush()

            await self.db.execute(
                delete(ContentTag).where(ContentTag.content_id == content_id)
            )
            await self._insert_tags(content_id, tags)
            await self.db.commit()
        except ContentNotFound:
            await self.db.rollback()
            raise
        except Exception:
            await self.db.rollback()
            logger.warning(
                "content.update_failed", content_id=content_id, exc_info=True
            )
            raise

        logger.info("content.updated", content_id=content_id, type=body.type)
        return await self._read_back(content_id)

    async def delete_content(self, content_id: int) -> None:
        """Delete a content row. Its tags go with it via ON DELETE CASCADE."""
        try:
            result = await self.db.execute(
                delete(Content).where(Content.id == content_id)
            )
            if result.rowcount == 0:
                raise ContentNotFound(content_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info("content.deleted", content_id=content_id)

    # ─── Helpers ────────────────────────────────────────

    async def _get_row(self, content_id: int) -> Content | None:
        result = await self.db.execute(
            select(Content).where(Content.id == content_id)
        )
        return result.scalars().first()

    async def _read_back(self, content_id: int):
        """Fresh copy of a row from the database, bypassing the identity map."""
        result = await self.db.execute(
            select(Content)
            .where(Content.id == content_id)
            .execution_options(populate_existing=True)
        )
        row = result.scalars().first()
        if row is None:
            raise ContentNotFound(content_id)
        tags = await self._tags_for([content_id])
        return from_row(row, tags.get(content_id, []))

    async def _tags_for(self, content_ids: list[int]) -> dict[int, list[str]]:
        """Tag strings per content id, in insertion order."""
        if not content_ids:
            return {}
        result = await self.db.execute(
            select(ContentTag.content_id, ContentTag.tag)
            .where(ContentTag.content_id.in_(content_ids))
            .order_by(ContentTag.id)
        )
        tags: dict[int, list[str]] = defaultdict(list)
        for content_id, tag in result.all():
            tags[content_id].append(tag)
        return tags

    async def _insert_tags(self, content_id: int, tags: list[str]) -> None:
        if not tags:
            return
        await self.db.execute(
            insert(ContentTag),
            [{"content_id": content_id, "tag": tag} for tag in tags],
        )
