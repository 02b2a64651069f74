# ============================================================================
# FILE: app/core/security.py
# ============================================================================
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from app.config import settings
import logging

logger = logging.getLogger(__name__)

# Work factor for interactive login, not configurable per call
BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)
cookie_serializer = URLSafeTimedSerializer(settings.SESSION_SECRET, salt="session-cookie")

def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt (salted, one-way)"""
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against its stored hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognized or corrupt hash
        return False

def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed bearer token that encodes only the user id.
    Expires after ACCESS_TOKEN_EXPIRE_DAYS unless expires_delta is given.
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode = {"sub": user_id, "exp": datetime.utcnow() + expires_delta}
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> Optional[str]:
    """
    Recover the user id from a bearer token.
    Returns None for a bad signature, an expired token or a malformed payload.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    user_id = payload.get("sub")
    if not isinstance(user_id, str):
        return None
    return user_id

def sign_session_id(sid: str) -> str:
    """Sign a session id for the session cookie"""
    return cookie_serializer.dumps(sid)

def unsign_session_id(cookie_value: str) -> Optional[str]:
    """Verify a session cookie and return the session id, or None"""
    max_age = settings.SESSION_EXPIRE_DAYS * 24 * 3600
    try:
        return cookie_serializer.loads(cookie_value, max_age=max_age)
    except SignatureExpired:
        return None
    except BadSignature:
        logger.warning("Rejected session cookie with bad signature")
        return None
