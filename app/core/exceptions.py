"""
Domain exceptions

Built on the atams exception classes, so the atams handlers render them as
{"success": false, "message": ..., "details": {...}} with the right status.
"""
from atams.exceptions import BadRequestException, NotFoundException


class ValidationError(BadRequestException):
    """Malformed or missing input; always caller-fixable"""


class AlreadyMarkedError(BadRequestException):
    """Employee already has a Present record for the day"""

    def __init__(self, message: str = "You have already marked yourself present for today.") -> None:
        super().__init__(message)


class OutOfZoneError(BadRequestException):
    """Check-in coordinate lies outside the configured geofence"""

    def __init__(self, distance: float, location_name: str, radius_meters: int) -> None:
        self.distance = distance
        self.location_name = location_name
        self.radius_meters = radius_meters
        super().__init__(
            f"You are outside the allowed attendance zone ({location_name}). "
            f"Distance: {distance:.2f}m",
            details={
                "distance": round(distance, 2),
                "location_name": location_name,
                "radius_meters": radius_meters,
            },
        )


class NotFoundOrAlreadyReviewedError(NotFoundException):
    """Leave request is missing or no longer Pending"""

    def __init__(self, leave_id: int) -> None:
        self.leave_id = leave_id
        super().__init__(
            "Leave application not found or already reviewed.",
            details={"leave_id": leave_id},
        )
