"""
Geo Location Model - The single global attendance geofence
"""
from sqlalchemy import Column, Integer, String, DateTime, Float, CheckConstraint

from atams.db import Base

GEOFENCE_SINGLETON_ID = 1


class GeoLocation(Base):
    """Geo location model - Table: geo_locations (at most one row)"""
    __tablename__ = "geo_locations"
    __table_args__ = (
        CheckConstraint(f"gl_id = {GEOFENCE_SINGLETON_ID}", name="ck_geo_locations_singleton"),
        CheckConstraint("gl_radius_meters > 0", name="ck_geo_locations_radius_positive"),
    )

    gl_id = Column(Integer, primary_key=True, default=GEOFENCE_SINGLETON_ID, autoincrement=False)
    gl_name = Column(String(100), nullable=False)
    gl_latitude = Column(Float, nullable=False)
    gl_longitude = Column(Float, nullable=False)
    gl_radius_meters = Column(Integer, nullable=False)
    gl_set_by = Column(String(50), nullable=False)  # HR user id that last wrote it
    gl_set_at = Column(DateTime(timezone=True), nullable=False)
