# ============================================================================
# FILE: app/db/seed.py
# One-off deployment step: create tables, ensure the admin account exists
# and drop expired sessions. Safe to run repeatedly.
#
#   ADMIN_PASSWORD=... python -m app.db.seed
# ============================================================================
import sys
from typing import Optional
from sqlalchemy.orm import Session
from app.config import settings
from app.core.logging import setup_logging
from app.db.init_db import init_db
from app.db.session import SessionLocal
from app.db.models.user import User
from app.schemas.user import UserCreate
from app.services.user_service import user_service
from app.services.session_service import session_service
import logging

logger = logging.getLogger(__name__)

def ensure_admin(db: Session, username: str, password: str, email: Optional[str] = None) -> User:
    """Create the admin account, or promote an existing user with that name"""
    user = user_service.get_user_by_username(db, username)
    if user:
        if not user.is_admin:
            user_service.set_admin(db, user, True)
        logger.info(f"Admin account present: {username}")
        return user

    user = user_service.create_user(
        db,
        UserCreate(username=username, email=email, password=password),
        is_admin=True
    )
    logger.info(f"Admin account created: {username}")
    return user

def main() -> int:
    setup_logging()
    if not settings.ADMIN_PASSWORD:
        logger.error("ADMIN_PASSWORD is not set, refusing to seed an admin account")
        return 1

    init_db()
    db = SessionLocal()
    try:
        ensure_admin(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD, settings.ADMIN_EMAIL)
        session_service.purge_expired(db)
    finally:
        db.close()
    return 0

if __name__ == "__main__":
    sys.exit(main())
