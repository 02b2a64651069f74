# ============================================================================
# FILE: app/api/v1/endpoints/albums.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.api.dependencies import require_admin
from app.schemas.base import MessageResponse
from app.schemas.catalog import AlbumCreate, AlbumUpdate, AlbumResponse, SongResponse
from app.services.album_service import album_service
from app.services.song_service import song_service
from app.core.cache import cache
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[AlbumResponse])
async def list_albums(db: Session = Depends(get_db)):
    """Newest albums first"""
    return cache.cached_read(
        "albums", "all",
        lambda: [AlbumResponse.model_validate(a) for a in album_service.list(db)]
    )

@router.get("/{album_id}", response_model=AlbumResponse)
async def get_album(album_id: str, db: Session = Depends(get_db)):
    album = album_service.get(db, album_id)
    if not album:
        raise HTTPException(status_code=404, detail="Album not found")
    return album

@router.get("/{album_id}/songs", response_model=List[SongResponse])
async def list_album_songs(album_id: str, db: Session = Depends(get_db)):
    return cache.cached_read(
        "songs", f"album:{album_id}",
        lambda: [SongResponse.model_validate(s) for s in song_service.list_by_album(db, album_id)]
    )

@router.post("", response_model=AlbumResponse, status_code=status.HTTP_201_CREATED)
async def create_album(
    album_data: AlbumCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        album = album_service.create(db, album_data.model_dump())
    except SQLAlchemyError as e:
        logger.error(f"Create album error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create album")
    cache.invalidate_resource("albums")
    return album

@router.put("/{album_id}", response_model=AlbumResponse)
async def update_album(
    album_id: str,
    update_data: AlbumUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        album = album_service.update(db, album_id, update_data.changes())
    except SQLAlchemyError as e:
        logger.error(f"Update album error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update album")
    if not album:
        raise HTTPException(status_code=404, detail="Album not found")
    cache.invalidate_resource("albums")
    return album

@router.delete("/{album_id}", response_model=MessageResponse)
async def delete_album(
    album_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        album_service.delete(db, album_id)
    except SQLAlchemyError as e:
        logger.error(f"Delete album error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete album")
    cache.invalidate_resource("albums")
    return {"message": "Album deleted successfully"}
