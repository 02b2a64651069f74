# ============================================================================
# FILE: app/db/base.py
# ============================================================================
import uuid
from sqlalchemy.orm import declarative_base

Base = declarative_base()

def generate_id() -> str:
    """Opaque string primary key"""
    return str(uuid.uuid4())
