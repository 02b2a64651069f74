# ============================================================================
# FILE: app/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from app.api.v1.endpoints import (
    auth,
    artists,
    albums,
    songs,
    videos,
    playlists,
    favorites,
    users,
    uploads
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(artists.router, prefix="/artists", tags=["artists"])
api_router.include_router(albums.router, prefix="/albums", tags=["albums"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(videos.router, prefix="/videos", tags=["videos"])
api_router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(uploads.router, prefix="/upload", tags=["upload"])
