# ============================================================================
# FILE: app/db/models/artist.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base, generate_id

class Artist(Base):
    """Artist model, referenced by albums, songs and videos"""
    __tablename__ = "artists"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False, index=True)
    bio = Column(Text, nullable=True)
    profile_image_url = Column(String, nullable=True)
    cover_image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # No cascade: deleting an artist leaves its albums, songs and videos in place
    albums = relationship("Album", back_populates="artist")
    songs = relationship("Song", back_populates="artist")
    videos = relationship("Video", back_populates="artist")
