# ============================================================================
# FILE: app/schemas/catalog.py
# ============================================================================
from pydantic import Field
from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel, PartialUpdate

# Artists

class ArtistCreate(CamelModel):
    """Schema for creating an artist"""
    name: str = Field(..., min_length=1)
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    cover_image_url: Optional[str] = None

class ArtistUpdate(PartialUpdate):
    REQUIRED_COLUMNS = ("name",)

    name: Optional[str] = Field(None, min_length=1)
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    cover_image_url: Optional[str] = None

class ArtistResponse(CamelModel):
    id: str
    name: str
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    created_at: Optional[datetime] = None

# Albums

class AlbumCreate(CamelModel):
    """Schema for creating an album"""
    title: str = Field(..., min_length=1)
    artist_id: Optional[str] = None
    cover_image_url: Optional[str] = None
    release_date: Optional[datetime] = None

class AlbumUpdate(PartialUpdate):
    REQUIRED_COLUMNS = ("title",)

    title: Optional[str] = Field(None, min_length=1)
    artist_id: Optional[str] = None
    cover_image_url: Optional[str] = None
    release_date: Optional[datetime] = None

class AlbumResponse(CamelModel):
    id: str
    title: str
    artist_id: Optional[str] = None
    cover_image_url: Optional[str] = None
    release_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

# Songs

class SongCreate(CamelModel):
    """
    Schema for creating a song.
    album_id also accepts the sentinels "default" (the artist's default album,
    created on first use) and "none".
    """
    title: str = Field(..., min_length=1)
    artist_id: Optional[str] = None
    album_id: Optional[str] = None
    audio_url: str = Field(..., min_length=1)
    lyrics: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)

class SongUpdate(PartialUpdate):
    REQUIRED_COLUMNS = ("title", "audio_url")

    title: Optional[str] = Field(None, min_length=1)
    artist_id: Optional[str] = None
    album_id: Optional[str] = None
    audio_url: Optional[str] = Field(None, min_length=1)
    lyrics: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)

class SongResponse(CamelModel):
    id: str
    title: str
    artist_id: Optional[str] = None
    album_id: Optional[str] = None
    audio_url: str
    lyrics: Optional[str] = None
    duration: Optional[int] = None
    play_count: int = 0
    created_at: Optional[datetime] = None

# Videos

class VideoCreate(CamelModel):
    """Schema for creating a video"""
    title: str = Field(..., min_length=1)
    artist_id: Optional[str] = None
    video_url: str = Field(..., min_length=1)
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)

class VideoUpdate(PartialUpdate):
    REQUIRED_COLUMNS = ("title", "video_url")

    title: Optional[str] = Field(None, min_length=1)
    artist_id: Optional[str] = None
    video_url: Optional[str] = Field(None, min_length=1)
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)

class VideoResponse(CamelModel):
    id: str
    title: str
    artist_id: Optional[str] = None
    video_url: str
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = None
    view_count: int = 0
    created_at: Optional[datetime] = None
