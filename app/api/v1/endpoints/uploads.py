# ============================================================================
# FILE: app/api/v1/endpoints/uploads.py
# Admin upload of media files; the returned url is then set on the entity
# ============================================================================
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from typing import Optional
from app.api.dependencies import require_admin
from app.schemas.upload import UploadResponse
from app.config import settings
from app.db.models.user import User
import logging
import os
import time
import uuid

logger = logging.getLogger(__name__)
router = APIRouter()

CHUNK_SIZE = 1024 * 1024

# kind -> (MIME top-level type, sub-directory)
MEDIA_KINDS = {
    "image": ("image/", "images"),
    "audio": ("audio/", "audio"),
    "video": ("video/", "video"),
}

def _unique_filename(kind: str, original: str) -> str:
    ext = os.path.splitext(original or "")[1].lower()
    return f"{kind}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}{ext}"

async def save_upload(file: Optional[UploadFile], kind: str) -> dict:
    """Validate and store one uploaded file, return its public reference"""
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    mime_prefix, subdir = MEDIA_KINDS[kind]
    if not (file.content_type or "").startswith(mime_prefix):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type, expected {mime_prefix}*"
        )

    target_dir = os.path.join(settings.UPLOAD_DIR, subdir)
    os.makedirs(target_dir, exist_ok=True)
    filename = _unique_filename(kind, file.filename)
    path = os.path.join(target_dir, filename)

    size = 0
    try:
        with open(path, "wb") as out:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > settings.MAX_UPLOAD_SIZE:
                    raise HTTPException(status_code=413, detail="File too large")
                out.write(chunk)
    except HTTPException:
        os.remove(path)
        raise
    except OSError as e:
        logger.error(f"Failed to store upload {filename}: {e}")
        if os.path.exists(path):
            os.remove(path)
        raise HTTPException(status_code=500, detail=f"Failed to upload {kind}")
    finally:
        await file.close()

    logger.info(f"Stored {kind} upload {filename} ({size} bytes)")
    return {
        "message": f"{kind.capitalize()} uploaded successfully",
        "url": f"/uploads/{subdir}/{filename}",
        "filename": filename,
        "originalname": file.filename,
        "size": size,
    }

@router.post("/image", response_model=UploadResponse)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    current_user: User = Depends(require_admin)
):
    """Upload a cover or profile image (multipart field "image"), admin only"""
    return await save_upload(image, "image")

@router.post("/audio", response_model=UploadResponse)
async def upload_audio(
    audio: Optional[UploadFile] = File(None),
    current_user: User = Depends(require_admin)
):
    """Upload a song's audio file (multipart field "audio"), admin only"""
    return await save_upload(audio, "audio")

@router.post("/video", response_model=UploadResponse)
async def upload_video(
    video: Optional[UploadFile] = File(None),
    current_user: User = Depends(require_admin)
):
    """Upload a video file (multipart field "video"), admin only"""
    return await save_upload(video, "video")
