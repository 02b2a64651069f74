# ============================================================================
# FILE: app/services/base.py
# ============================================================================
from typing import Any, Dict, List, Optional, Type
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.base import Base
import logging

logger = logging.getLogger(__name__)

class CrudService:
    """
    Shared single-table operations for the catalog services.
    Errors from the database are rolled back, logged and re-raised unchanged;
    the route layer decides the HTTP status.
    """
    model: Type[Base] = None
    label: str = "row"

    def get(self, db: Session, item_id: str) -> Optional[Any]:
        """Get a row by id, None when absent"""
        return db.get(self.model, item_id)

    def _ordered(self, db: Session):
        # Subclasses set the default listing order
        return db.query(self.model)

    def list(self, db: Session) -> List[Any]:
        return self._ordered(db).all()

    def create(self, db: Session, fields: Dict[str, Any]) -> Any:
        """Insert a row and return it with generated id and defaults"""
        try:
            item = self.model(**fields)
            db.add(item)
            db.commit()
            db.refresh(item)
            logger.info(f"{self.label.capitalize()} created: {item.id}")
            return item
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating {self.label}: {e}")
            raise

    def update(self, db: Session, item_id: str, changes: Dict[str, Any]) -> Optional[Any]:
        """Apply only the given fields; None when the row does not exist"""
        item = self.get(db, item_id)
        if not item:
            return None

        try:
            for field, value in changes.items():
                setattr(item, field, value)
            db.commit()
            db.refresh(item)
            logger.info(f"{self.label.capitalize()} updated: {item_id}")
            return item
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating {self.label}: {e}")
            raise

    def delete(self, db: Session, item_id: str) -> bool:
        """Hard delete; returns whether a row was removed (absence is not an error)"""
        try:
            # Bulk DELETE: dependent rows are left alone, not nulled or removed
            deleted = db.query(self.model).filter(self.model.id == item_id).delete()
            db.commit()
            if deleted:
                logger.info(f"{self.label.capitalize()} deleted: {item_id}")
            return bool(deleted)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting {self.label}: {e}")
            raise
