"""
Geo Location Repository - Data access layer for the global geofence
"""
from typing import Any, Dict, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from atams.db import BaseRepository
from app.models.geo_location import GeoLocation, GEOFENCE_SINGLETON_ID


class GeoLocationRepository(BaseRepository[GeoLocation]):
    def __init__(self):
        super().__init__(GeoLocation)

    def get_current(self, db: Session) -> Optional[GeoLocation]:
        """Get the global geofence row, if any"""
        return db.query(GeoLocation).filter(GeoLocation.gl_id == GEOFENCE_SINGLETON_ID).first()

    def upsert(self, db: Session, data: Dict[str, Any]) -> Tuple[GeoLocation, bool]:
        """
        Replace the singleton row in place, or insert it.
        Returns (row, created).

        The fixed primary key makes a concurrent double insert collide;
        the losing writer falls back to updating the winner's row.
        """
        existing = (
            db.query(GeoLocation)
            .filter(GeoLocation.gl_id == GEOFENCE_SINGLETON_ID)
            .with_for_update()
            .first()
        )
        if existing:
            return self.update(db, existing, data), False

        try:
            return self.create(db, {"gl_id": GEOFENCE_SINGLETON_ID, **data}), True
        except IntegrityError:
            db.rollback()
            existing = self.get_current(db)
            if existing is None:
                raise
            return self.update(db, existing, data), False

    def delete_current(self, db: Session) -> bool:
        """Delete the global geofence and return whether one existed"""
        return self.delete(db, GEOFENCE_SINGLETON_ID) is not None
