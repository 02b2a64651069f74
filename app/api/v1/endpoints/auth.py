# ============================================================================
# FILE: app/api/v1/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.api.dependencies import require_current_user, get_session_id
from app.schemas.user import UserCreate, UserLogin, UserResponse, AuthResponse
from app.schemas.base import MessageResponse
from app.services.user_service import user_service
from app.services.session_service import session_service
from app.core.security import create_access_token, sign_session_id
from app.config import settings
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _start_session(db: Session, response: Response, user: User) -> str:
    """Issue a token, mirror it into a server-side session and set the cookie"""
    token = create_access_token(user.id)
    record = session_service.create_session(db, user.id, token)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sign_session_id(record.sid),
        max_age=settings.SESSION_EXPIRE_DAYS * 24 * 3600,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return token

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Register a new user account
    Returns the public user fields and a bearer token, and starts a session
    """
    # Check if username already exists
    if user_service.get_user_by_username(db, user_data.username):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already registered"
        )
    
    # Check if email already exists
    if user_data.email and user_service.get_user_by_email(db, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered"
        )
    
    try:
        user = user_service.create_user(db, user_data)
        token = _start_session(db, response, user)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name or email
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already registered"
        )
    except SQLAlchemyError as e:
        logger.error(f"Signup error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create user")

    return {
        "message": "Account created successfully",
        "user": UserResponse.model_validate(user),
        "token": token,
    }

@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Login with username (or email) and password
    Returns JWT access token and starts a session
    """
    user = user_service.authenticate_user(db, credentials.username, credentials.password)
    if not user:
        logger.info("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username/email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        token = _start_session(db, response, user)
    except SQLAlchemyError as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(status_code=500, detail="Failed to log in")

    logger.info(f"User logged in: {user.id}")
    return {
        "message": "Logged in successfully",
        "user": UserResponse.model_validate(user),
        "token": token,
    }

@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Clear the session. Always succeeds, even if there was no session.
    A bearer token held elsewhere stays valid until it expires.
    """
    sid = get_session_id(request)
    if sid:
        try:
            session_service.destroy_session(db, sid)
        except SQLAlchemyError as e:
            logger.error(f"Session destruction error: {e}")
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}

@router.get("/user", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(require_current_user)
):
    """
    Get current user information
    Requires authentication
    """
    return current_user
