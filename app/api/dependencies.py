# ============================================================================
# FILE: app/api/dependencies.py
# ============================================================================
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import decode_access_token, unsign_session_id
from app.services.session_service import session_service
from app.services.user_service import user_service
from app.db.models.user import User
from app.db.models.playlist import Playlist
from app.config import settings
from typing import Optional

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

def get_session_id(request: Request) -> Optional[str]:
    """Session id from the signed session cookie, if present and valid"""
    cookie = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not cookie:
        return None
    return unsign_session_id(cookie)

def get_current_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Resolve the caller from a bearer token, else from the session cookie.
    Returns None if no credential or an invalid one (allows anonymous access)
    """
    if not token:
        sid = get_session_id(request)
        if sid:
            token = session_service.get_token(db, sid)
    if not token:
        return None

    user_id = decode_access_token(token)
    if user_id is None:
        return None
    return user_service.get_user(db, user_id)

def require_current_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """
    Require authenticated user (raises 401 if not authenticated)
    Use this dependency for protected endpoints
    """
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user

def require_admin(
    current_user: User = Depends(require_current_user)
) -> User:
    """Require an authenticated admin (401, then 403)"""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user

def ensure_playlist_owner(playlist: Optional[Playlist], user: User) -> Playlist:
    """Existence first (404), then ownership (403); admins pass"""
    if playlist is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Playlist not found")
    if playlist.user_id != user.id and not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to modify this playlist",
        )
    return playlist

def can_view_playlist(playlist: Playlist, user: Optional[User]) -> bool:
    if playlist.is_public:
        return True
    return user is not None and (playlist.user_id == user.id or user.is_admin)

def ensure_self(user: User, user_id: str, allow_admin: bool = False) -> None:
    """Caller must be the user in the path (optionally an admin)"""
    if user.id == user_id:
        return
    if allow_admin and user.is_admin:
        return
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
