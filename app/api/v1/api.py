from fastapi import APIRouter
from app.api.v1.endpoints import geo_locations, attendance, leaves

api_router = APIRouter()

# Register routes
api_router.include_router(geo_locations.router, prefix="/geo-locations", tags=["Geo Locations"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["Attendance"])
api_router.include_router(leaves.router, prefix="/leaves", tags=["Leaves"])
