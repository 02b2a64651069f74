# ============================================================================
# FILE: app/api/v1/endpoints/videos.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.api.dependencies import require_admin
from app.schemas.base import MessageResponse
from app.schemas.catalog import VideoCreate, VideoUpdate, VideoResponse
from app.services.video_service import video_service
from app.core.cache import cache
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[VideoResponse])
async def list_videos(db: Session = Depends(get_db)):
    return cache.cached_read(
        "videos", "all",
        lambda: [VideoResponse.model_validate(v) for v in video_service.list(db)]
    )

@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(video_id: str, db: Session = Depends(get_db)):
    video = video_service.get(db, video_id)
    if not video:
        raise HTTPException(status_code=404, detail="Video not found")
    return video

@router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def create_video(
    video_data: VideoCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        video = video_service.create(db, video_data.model_dump())
    except SQLAlchemyError as e:
        logger.error(f"Create video error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create video")
    cache.invalidate_resource("videos")
    return video

@router.put("/{video_id}", response_model=VideoResponse)
async def update_video(
    video_id: str,
    update_data: VideoUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        video = video_service.update(db, video_id, update_data.changes())
    except SQLAlchemyError as e:
        logger.error(f"Update video error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update video")
    if not video:
        raise HTTPException(status_code=404, detail="Video not found")
    cache.invalidate_resource("videos")
    return video

@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(
    video_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        video_service.delete(db, video_id)
    except SQLAlchemyError as e:
        logger.error(f"Delete video error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete video")
    cache.invalidate_resource("videos")
    return {"message": "Video deleted successfully"}

@router.api_route("/{video_id}/view", methods=["POST", "PUT"], response_model=MessageResponse)
async def view_video(video_id: str, db: Session = Depends(get_db)):
    """Count one view, no authentication needed"""
    try:
        found = video_service.increment_view_count(db, video_id)
    except SQLAlchemyError as e:
        logger.error(f"View count error: {e}")
        raise HTTPException(status_code=500, detail="Failed to increment view count")
    if not found:
        raise HTTPException(status_code=404, detail="Video not found")
    cache.invalidate_resource("videos")
    return {"message": "View count incremented"}
