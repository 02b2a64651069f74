# ============================================================================
# FILE: app/schemas/user.py
# ============================================================================
from pydantic import EmailStr, Field
from typing import Optional
from app.schemas.base import CamelModel

class UserCreate(CamelModel):
    """Schema for user registration"""
    username: str = Field(..., min_length=3)
    email: Optional[EmailStr] = None
    password: str = Field(..., min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None

class UserLogin(CamelModel):
    """Schema for user login; username may also be an email address"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class UserResponse(CamelModel):
    """Public user fields"""
    id: str
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_admin: bool = False

class AuthResponse(CamelModel):
    """Login/register response: public user fields plus bearer token"""
    message: str
    user: UserResponse
    token: str
    token_type: str = "bearer"
