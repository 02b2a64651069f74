# ============================================================================
# FILE: app/services/favorite_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.favorite import Favorite
import logging

logger = logging.getLogger(__name__)

class FavoriteService:
    """Service layer for a user's favorite songs"""

    def get_user_favorites(self, db: Session, user_id: str) -> List[Favorite]:
        """Most recently favorited first"""
        return db.query(Favorite).filter(
            Favorite.user_id == user_id
        ).order_by(Favorite.created_at.desc(), Favorite.id.asc()).all()

    def get_favorite(self, db: Session, user_id: str, song_id: str) -> Optional[Favorite]:
        return db.query(Favorite).filter(
            Favorite.user_id == user_id,
            Favorite.song_id == song_id
        ).first()

    def is_favorite(self, db: Session, user_id: str, song_id: str) -> bool:
        return self.get_favorite(db, user_id, song_id) is not None

    def add_to_favorites(self, db: Session, user_id: str, song_id: str) -> Favorite:
        """Favorite a song; favoriting it again returns the existing row"""
        existing = self.get_favorite(db, user_id, song_id)
        if existing:
            return existing

        try:
            favorite = Favorite(user_id=user_id, song_id=song_id)
            db.add(favorite)
            db.commit()
            db.refresh(favorite)
            logger.info(f"Favorite added for user {user_id}: {song_id}")
            return favorite
        except IntegrityError:
            # The unique (user_id, song_id) constraint caught a concurrent add
            db.rollback()
            existing = self.get_favorite(db, user_id, song_id)
            if existing:
                return existing
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error adding favorite: {e}")
            raise

    def remove_from_favorites(self, db: Session, user_id: str, song_id: str) -> bool:
        try:
            deleted = db.query(Favorite).filter(
                Favorite.user_id == user_id,
                Favorite.song_id == song_id
            ).delete()
            db.commit()
            if deleted:
                logger.info(f"Favorite removed for user {user_id}: {song_id}")
            return bool(deleted)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error removing favorite: {e}")
            raise

# Create singleton instance
favorite_service = FavoriteService()
