# ============================================================================
# FILE: app/services/session_service.py
# ============================================================================
import secrets
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.user_session import UserSession
from app.config import settings
import logging

logger = logging.getLogger(__name__)

class SessionService:
    """
    Server-side sessions mirroring the bearer token.

    The cookie only carries the (signed) session id; the token itself
    stays in the sessions table until logout or expiry.
    """

    def create_session(self, db: Session, user_id: str, token: str) -> UserSession:
        """Store a new session for a freshly issued token"""
        try:
            record = UserSession(
                sid=secrets.token_urlsafe(32),
                sess={"token": token, "userId": user_id},
                expire=datetime.utcnow() + timedelta(days=settings.SESSION_EXPIRE_DAYS)
            )
            db.add(record)
            db.commit()
            db.refresh(record)
            return record
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating session: {e}")
            raise

    def get_token(self, db: Session, sid: str) -> Optional[str]:
        """Token stored in a live session, None if missing or expired"""
        record = db.get(UserSession, sid)
        if not record or record.expire <= datetime.utcnow():
            return None
        return (record.sess or {}).get("token")

    def destroy_session(self, db: Session, sid: str) -> bool:
        """Remove a session; a session that is already gone is fine"""
        try:
            deleted = db.query(UserSession).filter(UserSession.sid == sid).delete()
            db.commit()
            return bool(deleted)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error destroying session: {e}")
            raise

    def purge_expired(self, db: Session) -> int:
        """Delete expired sessions, returns how many were removed"""
        try:
            deleted = db.query(UserSession).filter(
                UserSession.expire <= datetime.utcnow()
            ).delete()
            db.commit()
            logger.info(f"Purged {deleted} expired sessions")
            return deleted
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error purging sessions: {e}")
            raise

# Create singleton instance
session_service = SessionService()
