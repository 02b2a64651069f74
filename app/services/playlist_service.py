# ============================================================================
# FILE: app/services/playlist_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.playlist import Playlist, PlaylistSong
from app.services.base import CrudService
import logging

logger = logging.getLogger(__name__)

class PlaylistService(CrudService):
    """Service layer for playlist operations"""
    model = Playlist
    label = "playlist"

    def _ordered(self, db: Session):
        return db.query(Playlist).order_by(Playlist.created_at.desc(), Playlist.id.asc())

    def list_public(self, db: Session) -> List[Playlist]:
        """Get all public playlists"""
        return self._ordered(db).filter(Playlist.is_public.is_(True)).all()

    def get_user_playlists(self, db: Session, user_id: str) -> List[Playlist]:
        """Get all playlists for a user, public and private"""
        return self._ordered(db).filter(Playlist.user_id == user_id).all()

    def delete(self, db: Session, item_id: str) -> bool:
        """Delete a playlist together with its song entries"""
        playlist = self.get(db, item_id)
        if not playlist:
            return False

        try:
            db.delete(playlist)
            db.commit()
            logger.info(f"Playlist deleted: {item_id}")
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise

    def get_playlist_songs(self, db: Session, playlist_id: str) -> List[PlaylistSong]:
        """Songs of a playlist in playback order"""
        return db.query(PlaylistSong).filter(
            PlaylistSong.playlist_id == playlist_id
        ).order_by(PlaylistSong.position.asc(), PlaylistSong.added_at.asc()).all()

    def get_entry(self, db: Session, playlist_id: str, song_id: str) -> Optional[PlaylistSong]:
        return db.query(PlaylistSong).filter(
            PlaylistSong.playlist_id == playlist_id,
            PlaylistSong.song_id == song_id
        ).first()

    def _next_position(self, db: Session, playlist_id: str) -> int:
        current = db.query(func.max(PlaylistSong.position)).filter(
            PlaylistSong.playlist_id == playlist_id
        ).scalar()
        return 0 if current is None else current + 1

    def add_song_to_playlist(self, db: Session, playlist_id: str, song_id: str, position: Optional[int] = None) -> PlaylistSong:
        """
        Add a song to a playlist, appending when no position is given.
        Adding a song that is already there returns the existing entry.
        """
        # Check if song already exists in playlist
        existing = self.get_entry(db, playlist_id, song_id)
        if existing:
            logger.info(f"Song already in playlist {playlist_id}: {song_id}")
            return existing

        if position is None:
            position = self._next_position(db, playlist_id)

        try:
            playlist_song = PlaylistSong(playlist_id=playlist_id, song_id=song_id, position=position)
            db.add(playlist_song)
            db.commit()
            db.refresh(playlist_song)
            logger.info(f"Song added to playlist {playlist_id}: {song_id}")
            return playlist_song
        except IntegrityError:
            # Lost a race with a concurrent add of the same song
            db.rollback()
            existing = self.get_entry(db, playlist_id, song_id)
            if existing:
                return existing
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error adding song to playlist: {e}")
            raise

    def remove_song_from_playlist(self, db: Session, playlist_id: str, song_id: str) -> bool:
        """Remove a song from a playlist; returns whether it was there"""
        try:
            deleted = db.query(PlaylistSong).filter(
                PlaylistSong.playlist_id == playlist_id,
                PlaylistSong.song_id == song_id
            ).delete()
            db.commit()
            if deleted:
                logger.info(f"Song removed from playlist {playlist_id}: {song_id}")
            return bool(deleted)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error removing song from playlist: {e}")
            raise

# Create singleton instance
playlist_service = PlaylistService()
