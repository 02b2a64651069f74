# ============================================================================
# FILE: app/api/v1/endpoints/favorites.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.api.dependencies import require_current_user
from app.schemas.base import MessageResponse
from app.schemas.playlist import FavoriteResponse, FavoriteStatus
from app.services.favorite_service import favorite_service
from app.services.song_service import song_service
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def add_favorite(db: Session, user_id: str, song_id: str):
    if not song_service.get(db, song_id):
        raise HTTPException(status_code=404, detail="Song not found")
    try:
        return favorite_service.add_to_favorites(db, user_id, song_id)
    except SQLAlchemyError as e:
        logger.error(f"Add favorite error: {e}")
        raise HTTPException(status_code=500, detail="Failed to add to favorites")

def remove_favorite(db: Session, user_id: str, song_id: str):
    try:
        favorite_service.remove_from_favorites(db, user_id, song_id)
    except SQLAlchemyError as e:
        logger.error(f"Remove favorite error: {e}")
        raise HTTPException(status_code=500, detail="Failed to remove from favorites")
    return {"message": "Removed from favorites"}

@router.get("", response_model=List[FavoriteResponse])
async def get_my_favorites(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Favorites of the current user
    Requires authentication
    """
    return favorite_service.get_user_favorites(db, current_user.id)

@router.post("/{song_id}", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_to_my_favorites(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return add_favorite(db, current_user.id, song_id)

@router.delete("/{song_id}", response_model=MessageResponse)
async def remove_from_my_favorites(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return remove_favorite(db, current_user.id, song_id)

@router.get("/{song_id}/check", response_model=FavoriteStatus)
async def check_favorite(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Whether the current user has favorited this song"""
    return {"is_favorite": favorite_service.is_favorite(db, current_user.id, song_id)}
