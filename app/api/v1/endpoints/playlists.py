# ============================================================================
# FILE: app/api/v1/endpoints/playlists.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.api.dependencies import (
    get_current_user,
    require_current_user,
    ensure_playlist_owner,
    can_view_playlist
)
from app.schemas.base import MessageResponse
from app.schemas.playlist import (
    PlaylistCreate,
    PlaylistUpdate,
    PlaylistResponse,
    PlaylistSongAdd,
    PlaylistSongResponse
)
from app.services.playlist_service import playlist_service
from app.services.song_service import song_service
from app.core.cache import cache
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _get_visible_playlist(db: Session, playlist_id: str, user: Optional[User]):
    # Private playlists look absent to everyone but the owner and admins
    playlist = playlist_service.get(db, playlist_id)
    if not playlist or not can_view_playlist(playlist, user):
        raise HTTPException(status_code=404, detail="Playlist not found")
    return playlist

@router.get("", response_model=List[PlaylistResponse])
async def list_public_playlists(db: Session = Depends(get_db)):
    """
    All public playlists, newest first
    Available to all users
    """
    return cache.cached_read(
        "playlists", "public",
        lambda: [PlaylistResponse.model_validate(p) for p in playlist_service.list_public(db)]
    )

@router.post("", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
async def create_playlist(
    playlist_data: PlaylistCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Create a new playlist owned by the caller
    Requires authentication
    """
    fields = playlist_data.model_dump()
    fields["user_id"] = current_user.id
    try:
        playlist = playlist_service.create(db, fields)
    except SQLAlchemyError as e:
        logger.error(f"Create playlist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create playlist")
    cache.invalidate_resource("playlists")
    return playlist

@router.get("/{playlist_id}", response_model=PlaylistResponse)
async def get_playlist(
    playlist_id: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Get a specific playlist
    Private playlists require ownership or admin
    """
    return _get_visible_playlist(db, playlist_id, current_user)

@router.put("/{playlist_id}", response_model=PlaylistResponse)
async def update_playlist(
    playlist_id: str,
    update_data: PlaylistUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Update playlist details
    Requires authentication and ownership (or admin)
    """
    ensure_playlist_owner(playlist_service.get(db, playlist_id), current_user)
    try:
        playlist = playlist_service.update(db, playlist_id, update_data.changes())
    except SQLAlchemyError as e:
        logger.error(f"Update playlist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update playlist")
    cache.invalidate_resource("playlists")
    return playlist

@router.delete("/{playlist_id}", response_model=MessageResponse)
async def delete_playlist(
    playlist_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Delete a playlist
    Requires authentication and ownership (or admin)
    """
    ensure_playlist_owner(playlist_service.get(db, playlist_id), current_user)
    try:
        playlist_service.delete(db, playlist_id)
    except SQLAlchemyError as e:
        logger.error(f"Delete playlist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete playlist")
    cache.invalidate_resource("playlists")
    return {"message": "Playlist deleted successfully"}

@router.get("/{playlist_id}/songs", response_model=List[PlaylistSongResponse])
async def get_playlist_songs(
    playlist_id: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """Playlist entries ordered by position"""
    _get_visible_playlist(db, playlist_id, current_user)
    return playlist_service.get_playlist_songs(db, playlist_id)

@router.post("/{playlist_id}/songs", response_model=PlaylistSongResponse, status_code=status.HTTP_201_CREATED)
async def add_song_to_playlist(
    playlist_id: str,
    song_data: PlaylistSongAdd,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Add a song to a playlist (appended unless a position is given)
    Requires authentication and ownership (or admin)
    """
    ensure_playlist_owner(playlist_service.get(db, playlist_id), current_user)
    if not song_service.get(db, song_data.song_id):
        raise HTTPException(status_code=404, detail="Song not found")
    try:
        return playlist_service.add_song_to_playlist(
            db, playlist_id, song_data.song_id, song_data.position
        )
    except SQLAlchemyError as e:
        logger.error(f"Add song to playlist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to add song to playlist")

@router.delete("/{playlist_id}/songs/{song_id}", response_model=MessageResponse)
async def remove_song_from_playlist(
    playlist_id: str,
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Remove a song from a playlist
    Requires authentication and ownership (or admin)
    """
    ensure_playlist_owner(playlist_service.get(db, playlist_id), current_user)
    try:
        playlist_service.remove_song_from_playlist(db, playlist_id, song_id)
    except SQLAlchemyError as e:
        logger.error(f"Remove song from playlist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to remove song from playlist")
    return {"message": "Song removed from playlist"}
