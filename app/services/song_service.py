# ============================================================================
# FILE: app/services/song_service.py
# ============================================================================
from typing import Any, Dict, List, Optional
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.song import Song
from app.services.base import CrudService
from app.services.album_service import album_service
import logging

logger = logging.getLogger(__name__)

# album_id sentinels accepted on song creation
DEFAULT_ALBUM_SENTINEL = "default"
NO_ALBUM_SENTINEL = "none"

DEFAULT_TRENDING_LIMIT = 10

class SongService(CrudService):
    """Service layer for song operations"""
    model = Song
    label = "song"

    def _ordered(self, db: Session):
        # Newest first
        return db.query(Song).order_by(Song.created_at.desc(), Song.id.asc())

    def list_by_artist(self, db: Session, artist_id: str) -> List[Song]:
        return self._ordered(db).filter(Song.artist_id == artist_id).all()

    def list_by_album(self, db: Session, album_id: str) -> List[Song]:
        return self._ordered(db).filter(Song.album_id == album_id).all()

    def get_trending(self, db: Session, limit: int = DEFAULT_TRENDING_LIMIT) -> List[Song]:
        """Most played songs first; id breaks ties so the order is stable"""
        return db.query(Song).order_by(
            Song.play_count.desc(), Song.id.asc()
        ).limit(limit).all()

    def resolve_album_id(self, db: Session, artist_id: Optional[str], album_id: Optional[str]) -> Optional[str]:
        """
        Map album_id sentinels to a real reference.

        "default" looks up the artist's default album and creates it when
        missing. The album is committed on its own, so a song insert that
        fails afterwards leaves the (empty) album in place.
        """
        if not album_id or album_id == NO_ALBUM_SENTINEL:
            return None
        if album_id == DEFAULT_ALBUM_SENTINEL:
            return album_service.get_or_create_default(db, artist_id).id
        return album_id

    def create(self, db: Session, fields: Dict[str, Any]) -> Song:
        fields = dict(fields)
        fields["album_id"] = self.resolve_album_id(db, fields.get("artist_id"), fields.get("album_id"))
        return super().create(db, fields)

    def update(self, db: Session, item_id: str, changes: Dict[str, Any]) -> Optional[Song]:
        song = self.get(db, item_id)
        if not song:
            return None
        if "album_id" in changes:
            changes = dict(changes)
            artist_id = changes.get("artist_id", song.artist_id)
            changes["album_id"] = self.resolve_album_id(db, artist_id, changes["album_id"])
        return super().update(db, item_id, changes)

    def increment_play_count(self, db: Session, song_id: str) -> bool:
        """Add one play in a single UPDATE; returns whether the song exists"""
        try:
            result = db.execute(
                update(Song)
                .where(Song.id == song_id)
                .values(play_count=Song.play_count + 1)
                .execution_options(synchronize_session=False)
            )
            db.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error incrementing play count for {song_id}: {e}")
            raise

# Create singleton instance
song_service = SongService()
