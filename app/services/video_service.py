# ============================================================================
# FILE: app/services/video_service.py
# ============================================================================
from typing import List
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.video import Video
from app.services.base import CrudService
import logging

logger = logging.getLogger(__name__)

class VideoService(CrudService):
    """Service layer for video operations"""
    model = Video
    label = "video"

    def _ordered(self, db: Session):
        return db.query(Video).order_by(Video.created_at.desc(), Video.id.asc())

    def list_by_artist(self, db: Session, artist_id: str) -> List[Video]:
        return self._ordered(db).filter(Video.artist_id == artist_id).all()

    def increment_view_count(self, db: Session, video_id: str) -> bool:
        """Add one view in a single UPDATE; returns whether the video exists"""
        try:
            result = db.execute(
                update(Video)
                .where(Video.id == video_id)
                .values(view_count=Video.view_count + 1)
                .execution_options(synchronize_session=False)
            )
            db.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error incrementing view count for {video_id}: {e}")
            raise

# Create singleton instance
video_service = VideoService()
