"""Media API routes. Same auth split as content; no update route."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tredumo.auth.dependencies import require_admin
from tredumo.db.engine import get_db
from tredumo.schemas.media import MediaCreate, MediaRead
from tredumo.services.errors import MediaNotFound
from tredumo.services.media_service import MediaService

router = APIRouter(prefix="/media")


def _svc(db: AsyncSession = Depends(get_db)) -> MediaService:
    return MediaService(db)


def _media_id(media_id: str) -> int:
    if not (media_id.isascii() and media_id.isdigit()):
        raise HTTPException(status_code=404, detail=str(MediaNotFound(media_id)))
    return int(media_id)


@router.get("", response_model=list[MediaRead])
async def list_media(
    type: Optional[str] = Query(None, description="image, video, or document"),
    svc: MediaService = Depends(_svc),
):
    return await svc.list_media(type)


@router.get("/{media_id}", response_model=MediaRead)
async def get_media(media_id: int = Depends(_media_id), svc: MediaService = Depends(_svc)):
    try:
        return await svc.get_media(media_id)
    except MediaNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=MediaRead,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_media(body: MediaCreate, svc: MediaService = Depends(_svc)):
    return await svc.create_media(body)


@router.delete("/{media_id}", dependencies=[Depends(require_admin)])
async def delete_media(
    media_id: int = Depends(_media_id), svc: MediaService = Depends(_svc)
):
    try:
        await svc.delete_media(media_id)
    except MediaNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Media deleted"}
