# ============================================================================
# FILE: app/db/models/favorite.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base, generate_id

class Favorite(Base):
    """A song favorited by a user, at most once per (user, song)"""
    __tablename__ = "user_favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "song_id", name="uq_user_favorite"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    song_id = Column(String(36), ForeignKey("songs.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="favorites")
    song = relationship("Song")
