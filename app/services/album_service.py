# ============================================================================
# FILE: app/services/album_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session
from app.db.models.album import Album
from app.services.base import CrudService

# Title of the per-artist album that collects songs created without one
DEFAULT_ALBUM_TITLE = "Singles"

class AlbumService(CrudService):
    """Service layer for album operations"""
    model = Album
    label = "album"

    def _ordered(self, db: Session):
        # Newest first
        return db.query(Album).order_by(Album.created_at.desc(), Album.id.asc())

    def list_by_artist(self, db: Session, artist_id: str) -> List[Album]:
        return self._ordered(db).filter(Album.artist_id == artist_id).all()

    def find_by_title(self, db: Session, artist_id: Optional[str], title: str) -> Optional[Album]:
        """Oldest album of an artist with exactly this title"""
        return db.query(Album).filter(
            Album.artist_id == artist_id,
            Album.title == title
        ).order_by(Album.created_at.asc(), Album.id.asc()).first()

    def get_or_create_default(self, db: Session, artist_id: Optional[str]) -> Album:
        """Return the artist's default album, creating it on first use"""
        album = self.find_by_title(db, artist_id, DEFAULT_ALBUM_TITLE)
        if album:
            return album
        return self.create(db, {"title": DEFAULT_ALBUM_TITLE, "artist_id": artist_id})

# Create singleton instance
album_service = AlbumService()
