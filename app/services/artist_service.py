# ============================================================================
# FILE: app/services/artist_service.py
# ============================================================================
from sqlalchemy.orm import Session
from app.db.models.artist import Artist
from app.services.base import CrudService

class ArtistService(CrudService):
    """Service layer for artist operations"""
    model = Artist
    label = "artist"

    def _ordered(self, db: Session):
        # Alphabetical by name
        return db.query(Artist).order_by(Artist.name.asc(), Artist.id.asc())

# Create singleton instance
artist_service = ArtistService()
