"""Dashboard counters for the admin UI's overview page."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tredumo.db.engine import get_db
from tredumo.schemas.stats import StatsRead
from tredumo.services.content_service import ContentService
from tredumo.services.media_service import MediaService

router = APIRouter()


@router.get("/stats", response_model=StatsRead)
async def get_stats(db: AsyncSession = Depends(get_db)):
    counts = await ContentService(db).count_by_type()
    return StatsRead(
        pages=counts["page"],
        blog_posts=counts["blog"],
        testimonials=counts["testimonial"],
        media=await MediaService(db).count(),
    )
