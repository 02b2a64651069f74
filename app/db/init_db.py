# ============================================================================
# FILE: app/db/init_db.py
# ============================================================================
from app.db.base import Base
from app.db.session import engine

# Import every model so it is registered on Base.metadata
from app.db.models.user import User  # noqa: F401
from app.db.models.user_session import UserSession  # noqa: F401
from app.db.models.artist import Artist  # noqa: F401
from app.db.models.album import Album  # noqa: F401
from app.db.models.song import Song  # noqa: F401
from app.db.models.video import Video  # noqa: F401
from app.db.models.playlist import Playlist, PlaylistSong  # noqa: F401
from app.db.models.favorite import Favorite  # noqa: F401

def init_db(bind=None):
    """Create all tables that do not exist yet"""
    Base.metadata.create_all(bind=bind or engine)

def drop_db(bind=None):
    Base.metadata.drop_all(bind=bind or engine)
