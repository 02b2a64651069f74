# ============================================================================
# FILE: app/db/models/album.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base, generate_id

class Album(Base):
    """Album model, optionally owned by an artist"""
    __tablename__ = "albums"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String, nullable=False)
    artist_id = Column(String(36), ForeignKey("artists.id"), nullable=True, index=True)
    cover_image_url = Column(String, nullable=True)
    release_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    artist = relationship("Artist", back_populates="albums")
    songs = relationship("Song", back_populates="album")
