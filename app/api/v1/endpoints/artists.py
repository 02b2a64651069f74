# ============================================================================
# FILE: app/api/v1/endpoints/artists.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.api.dependencies import require_admin
from app.schemas.base import MessageResponse
from app.schemas.catalog import (
    ArtistCreate,
    ArtistUpdate,
    ArtistResponse,
    AlbumResponse,
    SongResponse,
    VideoResponse
)
from app.services.artist_service import artist_service
from app.services.album_service import album_service
from app.services.song_service import song_service
from app.services.video_service import video_service
from app.core.cache import cache
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[ArtistResponse])
async def list_artists(db: Session = Depends(get_db)):
    """
    All artists, alphabetically
    Available to all users
    """
    return cache.cached_read(
        "artists", "all",
        lambda: [ArtistResponse.model_validate(a) for a in artist_service.list(db)]
    )

@router.get("/{artist_id}", response_model=ArtistResponse)
async def get_artist(artist_id: str, db: Session = Depends(get_db)):
    artist = artist_service.get(db, artist_id)
    if not artist:
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist

@router.get("/{artist_id}/albums", response_model=List[AlbumResponse])
async def list_artist_albums(artist_id: str, db: Session = Depends(get_db)):
    return cache.cached_read(
        "albums", f"artist:{artist_id}",
        lambda: [AlbumResponse.model_validate(a) for a in album_service.list_by_artist(db, artist_id)]
    )

@router.get("/{artist_id}/songs", response_model=List[SongResponse])
async def list_artist_songs(artist_id: str, db: Session = Depends(get_db)):
    return cache.cached_read(
        "songs", f"artist:{artist_id}",
        lambda: [SongResponse.model_validate(s) for s in song_service.list_by_artist(db, artist_id)]
    )

@router.get("/{artist_id}/videos", response_model=List[VideoResponse])
async def list_artist_videos(artist_id: str, db: Session = Depends(get_db)):
    return cache.cached_read(
        "videos", f"artist:{artist_id}",
        lambda: [VideoResponse.model_validate(v) for v in video_service.list_by_artist(db, artist_id)]
    )

@router.post("", response_model=ArtistResponse, status_code=status.HTTP_201_CREATED)
async def create_artist(
    artist_data: ArtistCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Create an artist
    Requires admin
    """
    try:
        artist = artist_service.create(db, artist_data.model_dump())
    except SQLAlchemyError as e:
        logger.error(f"Create artist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create artist")
    cache.invalidate_resource("artists")
    return artist

@router.put("/{artist_id}", response_model=ArtistResponse)
async def update_artist(
    artist_id: str,
    update_data: ArtistUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Update artist fields that are present in the body
    Requires admin
    """
    try:
        artist = artist_service.update(db, artist_id, update_data.changes())
    except SQLAlchemyError as e:
        logger.error(f"Update artist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update artist")
    if not artist:
        raise HTTPException(status_code=404, detail="Artist not found")
    cache.invalidate_resource("artists")
    return artist

@router.delete("/{artist_id}", response_model=MessageResponse)
async def delete_artist(
    artist_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Delete an artist. Albums, songs and videos referencing it are kept.
    Requires admin
    """
    try:
        artist_service.delete(db, artist_id)
    except SQLAlchemyError as e:
        logger.error(f"Delete artist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete artist")
    cache.invalidate_resource("artists")
    return {"message": "Artist deleted successfully"}
