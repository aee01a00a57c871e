"""Media service — image, video, and document references.

Single-table writes, no child rows. There is deliberately no update:
media is replaced by deleting and re-adding.
"""

from typing import Optional

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tredumo.db.models import MEDIA_TYPES, Media
from tredumo.schemas.media import MediaCreate
from tredumo.services.errors import MediaNotFound

logger = structlog.get_logger()


class MediaService:
    """Business logic for the media library."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_media(self, type_filter: Optional[str] = None) -> list[Media]:
        """All media, newest first. Unknown type filters are ignored."""
        q = select(Media)
        if type_filter in MEDIA_TYPES:
            q = q.where(Media.type == type_filter)
        q = q.order_by(Media.created_at.desc())
        result = await self.db.execute(q)
        return list(result.scalars().all())

    async def get_media(self, media_id: int) -> Media:
        result = await self.db.execute(select(Media).where(Media.id == media_id))
        media = result.scalars().first()
        if media is None:
            raise MediaNotFound(media_id)
        return media

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(Media.id)))
        return result.scalar_one()

    async def create_media(self, body: MediaCreate) -> Media:
        try:
            media = Media(**body.model_dump())
            self.db.add(media)
            await self.db.flush()
            media_id = media.id
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.warning("media.create_failed", url=body.url, exc_info=True)
            raise

        logger.info("media.created", media_id=media_id, type=body.type)
        await self.db.refresh(media)
        return media

    async def delete_media(self, media_id: int) -> None:
        try:
            result = await self.db.execute(delete(Media).where(Media.id == media_id))
            if result.rowcount == 0:
                raise MediaNotFound(media_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info("media.deleted", media_id=media_id)
