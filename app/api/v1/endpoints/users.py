# ============================================================================
# FILE: app/api/v1/endpoints/users.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.api.dependencies import require_current_user, ensure_self
from app.api.v1.endpoints.favorites import add_favorite, remove_favorite
from app.schemas.base import MessageResponse
from app.schemas.playlist import PlaylistResponse, FavoriteAdd, FavoriteResponse
from app.services.playlist_service import playlist_service
from app.services.favorite_service import favorite_service
from app.db.models.user import User

router = APIRouter()

@router.get("/{user_id}/playlists", response_model=List[PlaylistResponse])
async def get_user_playlists(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    All playlists of a user, private ones included
    Only the user themself or an admin
    """
    ensure_self(current_user, user_id, allow_admin=True)
    return playlist_service.get_user_playlists(db, user_id)

@router.get("/{user_id}/favorites", response_model=List[FavoriteResponse])
async def get_user_favorites(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    ensure_self(current_user, user_id, allow_admin=True)
    return favorite_service.get_user_favorites(db, user_id)

@router.post("/{user_id}/favorites", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_user_favorite(
    user_id: str,
    favorite_data: FavoriteAdd,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Favorites can only be changed by their owner, admins included"""
    ensure_self(current_user, user_id)
    return add_favorite(db, user_id, favorite_data.song_id)

@router.delete("/{user_id}/favorites/{song_id}", response_model=MessageResponse)
async def remove_user_favorite(
    user_id: str,
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    ensure_self(current_user, user_id)
    return remove_favorite(db, user_id, song_id)
