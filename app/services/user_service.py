# ============================================================================
# FILE: app/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.user import User
from app.schemas.user import UserCreate
from app.core.security import get_password_hash, verify_password
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def create_user(self, db: Session, user_data: UserCreate, is_admin: bool = False) -> User:
        """Create a new user account"""
        try:
            hashed_password = get_password_hash(user_data.password)
            user = User(
                username=user_data.username,
                email=user_data.email,
                hashed_password=hashed_password,
                first_name=user_data.first_name,
                last_name=user_data.last_name,
                is_admin=is_admin
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.username}")
            return user
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

    def get_user(self, db: Session, user_id: str) -> Optional[User]:
        return db.get(User, user_id)

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by username"""
        return db.query(User).filter(User.username == username).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()

    def get_user_by_login(self, db: Session, login: str) -> Optional[User]:
        """Look up by username, falling back to email when it looks like one"""
        user = self.get_user_by_username(db, login)
        if not user and "@" in login:
            user = self.get_user_by_email(db, login)
        return user

    def authenticate_user(self, db: Session, login: str, password: str) -> Optional[User]:
        """Authenticate user with username (or email) and password"""
        user = self.get_user_by_login(db, login)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    def set_admin(self, db: Session, user: User, is_admin: bool = True) -> User:
        try:
            user.is_admin = is_admin
            db.commit()
            db.refresh(user)
            logger.info(f"Admin flag for {user.username} set to {is_admin}")
            return user
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating user: {e}")
            raise

# Create singleton instance
user_service = UserService()
