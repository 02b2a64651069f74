# ============================================================================
# FILE: app/api/v1/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.api.dependencies import require_admin
from app.schemas.base import MessageResponse
from app.schemas.catalog import SongCreate, SongUpdate, SongResponse
from app.services.song_service import song_service, DEFAULT_ALBUM_SENTINEL, DEFAULT_TRENDING_LIMIT
from app.core.cache import cache
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[SongResponse])
async def list_songs(db: Session = Depends(get_db)):
    """Newest songs first"""
    return cache.cached_read(
        "songs", "all",
        lambda: [SongResponse.model_validate(s) for s in song_service.list(db)]
    )

@router.get("/trending", response_model=List[SongResponse])
async def trending_songs(
    limit: int = Query(DEFAULT_TRENDING_LIMIT, ge=1, le=100, description="Number of songs"),
    db: Session = Depends(get_db)
):
    """
    Most played songs
    Available to all users (authenticated and anonymous)
    """
    return cache.cached_read(
        "songs", f"trending:{limit}",
        lambda: [SongResponse.model_validate(s) for s in song_service.get_trending(db, limit)]
    )

@router.get("/{song_id}", response_model=SongResponse)
async def get_song(song_id: str, db: Session = Depends(get_db)):
    song = song_service.get(db, song_id)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song

@router.post("", response_model=SongResponse, status_code=status.HTTP_201_CREATED)
async def create_song(
    song_data: SongCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Create a song
    albumId "default" files it under the artist's default album (created if needed)
    Requires admin
    """
    try:
        song = song_service.create(db, song_data.model_dump())
    except SQLAlchemyError as e:
        logger.error(f"Create song error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create song")
    cache.invalidate_resource("songs")
    if song_data.album_id == DEFAULT_ALBUM_SENTINEL:
        cache.invalidate_resource("albums")
    return song

@router.put("/{song_id}", response_model=SongResponse)
async def update_song(
    song_id: str,
    update_data: SongUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        song = song_service.update(db, song_id, update_data.changes())
    except SQLAlchemyError as e:
        logger.error(f"Update song error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update song")
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    cache.invalidate_resource("songs")
    if update_data.album_id == DEFAULT_ALBUM_SENTINEL:
        cache.invalidate_resource("albums")
    return song

@router.delete("/{song_id}", response_model=MessageResponse)
async def delete_song(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        song_service.delete(db, song_id)
    except SQLAlchemyError as e:
        logger.error(f"Delete song error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete song")
    cache.invalidate_resource("songs")
    return {"message": "Song deleted successfully"}

@router.api_route("/{song_id}/play", methods=["POST", "PUT"], response_model=MessageResponse)
async def play_song(song_id: str, db: Session = Depends(get_db)):
    """
    Count one play
    Available to all users (authenticated and anonymous)
    """
    try:
        found = song_service.increment_play_count(db, song_id)
    except SQLAlchemyError as e:
        logger.error(f"Play count error: {e}")
        raise HTTPException(status_code=500, detail="Failed to increment play count")
    if not found:
        raise HTTPException(status_code=404, detail="Song not found")
    cache.invalidate_resource("songs")
    return {"message": "Play count incremented"}
