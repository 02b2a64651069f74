# ============================================================================
# FILE: app/schemas/playlist.py
# ============================================================================
from pydantic import Field
from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel, PartialUpdate

class PlaylistCreate(CamelModel):
    """Schema for creating a playlist (owner is always the caller)"""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_public: bool = True
    cover_image_url: Optional[str] = None

class PlaylistUpdate(PartialUpdate):
    """Schema for updating a playlist"""
    REQUIRED_COLUMNS = ("name", "is_public")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    is_public: Optional[bool] = None
    cover_image_url: Optional[str] = None

class PlaylistSongAdd(CamelModel):
    """Schema for adding a song to playlist"""
    song_id: str = Field(..., min_length=1)
    position: Optional[int] = Field(None, ge=0)

class PlaylistSongResponse(CamelModel):
    """Schema for playlist song response"""
    id: str
    playlist_id: str
    song_id: str
    position: int
    added_at: Optional[datetime] = None

class PlaylistResponse(CamelModel):
    """Schema for playlist response"""
    id: str
    name: str
    description: Optional[str] = None
    user_id: Optional[str] = None
    is_public: bool = True
    cover_image_url: Optional[str] = None
    created_at: Optional[datetime] = None

class FavoriteAdd(CamelModel):
    song_id: str = Field(..., min_length=1)

class FavoriteResponse(CamelModel):
    id: str
    user_id: str
    song_id: str
    created_at: Optional[datetime] = None

class FavoriteStatus(CamelModel):
    is_favorite: bool
