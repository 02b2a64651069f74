# ============================================================================
# FILE: app/schemas/upload.py
# ============================================================================
from typing import Optional
from app.schemas.base import CamelModel

class UploadResponse(CamelModel):
    """Reference to a stored media file; url goes into the entity's *Url field"""
    message: str
    url: str
    filename: str
    originalname: Optional[str] = None
    size: int
