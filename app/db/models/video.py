# ============================================================================
# FILE: app/db/models/video.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base, generate_id

class Video(Base):
    """Music video model with its view counter"""
    __tablename__ = "videos"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String, nullable=False)
    artist_id = Column(String(36), ForeignKey("artists.id"), nullable=True, index=True)
    video_url = Column(String, nullable=False)
    thumbnail_url = Column(String, nullable=True)
    duration = Column(Integer, nullable=True)  # Duration in seconds
    view_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    artist = relationship("Artist", back_populates="videos")
