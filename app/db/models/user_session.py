# ============================================================================
# FILE: app/db/models/user_session.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, JSON
from app.db.base import Base

class UserSession(Base):
    """Server-side session record, keyed by the id carried in the session cookie"""
    __tablename__ = "sessions"

    sid = Column(String, primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime, nullable=False, index=True)
