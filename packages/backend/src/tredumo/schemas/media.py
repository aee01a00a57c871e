"""Pydantic schemas for media references."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

MediaType = Literal["image", "video", "document"]


class MediaCreate(BaseModel):
    type: MediaType
    title: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=255)
    thumbnail_url: Optional[str] = Field(None, max_length=255)
    file_size: Optional[int] = Field(None, ge=0)
    dimensions: Optional[str] = Field(None, max_length=50)
    uploaded_by: str = Field(..., min_length=1, max_length=255)


class MediaRead(BaseModel):
    id: int
    type: MediaType
    title: str
    url: str
    thumbnail_url: Optional[str]
    file_size: Optional[int]
    dimensions: Optional[str]
    uploaded_by: str
    created_at: datetime

    model_config = {"from_attributes": True}
