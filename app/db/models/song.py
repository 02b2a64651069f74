# ============================================================================
# FILE: app/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base, generate_id

class Song(Base):
    """Song model with its play counter"""
    __tablename__ = "songs"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String, nullable=False)
    artist_id = Column(String(36), ForeignKey("artists.id"), nullable=True, index=True)
    album_id = Column(String(36), ForeignKey("albums.id"), nullable=True, index=True)
    audio_url = Column(String, nullable=False)
    lyrics = Column(Text, nullable=True)
    duration = Column(Integer, nullable=True)  # Duration in seconds
    play_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    artist = relationship("Artist", back_populates="songs")
    album = relationship("Album", back_populates="songs")
