"""Content API routes — pages, blog posts, testimonials.

Learn: Reads are public (the marketing site renders from them).
Writes depend on require_admin, which itself depends on the token
verifier, so an anonymous request is rejected with 401 before the role
check or any database work happens.

PUT is a full replace: send every field, including the whole tag list.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tredumo.auth.dependencies import require_admin
from tredumo.db.engine import get_db
from tredumo.schemas.content import ContentRead, ContentWrite
from tredumo.services.content_service import ContentService
from tredumo.services.errors import ContentNotFound

router = APIRouter(prefix="/content")

_admin = [Depends(require_admin)]


def _svc(db: AsyncSession = Depends(get_db)) -> ContentService:
    return ContentService(db)


def _content_id(content_id: str) -> int:
    """Path id. Anything that isn't a plain integer matches no row."""
    if not (content_id.isascii() and content_id.isdigit()):
        raise HTTPException(status_code=404, detail=str(ContentNotFound(content_id)))
    return int(content_id)


@router.get("", response_model=list[ContentRead])
async def list_content(
    type: Optional[str] = Query(None, description="page, blog, or testimonial"),
    svc: ContentService = Depends(_svc),
):
    return await svc.list_content(type)


@router.get("/{content_id}", response_model=ContentRead)
async def get_content(
    content_id: int = Depends(_content_id), svc: ContentService = Depends(_svc)
):
    try:
        return await svc.get_content(content_id)
    except ContentNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "", response_model=ContentRead, status_code=201, dependencies=_admin
)
async def create_content(
    body: ContentWrite,
    svc: ContentService = Depends(_svc),
):
    """Create content. Tags (blog posts only) are written in the same transaction."""
    return await svc.create_content(body)


@router.put("/{content_id}", response_model=ContentRead, dependencies=_admin)
async def update_content(
    body: ContentWrite,
    content_id: int = Depends(_content_id),
    svc: ContentService = Depends(_svc),
):
    """Replace content and its full tag set."""
    try:
        return await svc.update_content(content_id, body)
    except ContentNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{content_id}", dependencies=_admin)
async def delete_content(
    content_id: int = Depends(_content_id), svc: ContentService = Depends(_svc)
):
    try:
        await svc.delete_content(content_id)
    except ContentNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Content deleted"}
