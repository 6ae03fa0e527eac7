from typing import Optional

from atams import AtamsBaseSettings


class Settings(AtamsBaseSettings):
    """
    Application Settings

    Inherits from AtamsBaseSettings which includes:
    - DATABASE_URL (required), DB_POOL_* connection pool tuning
    - LOGGING_ENABLED, LOG_LEVEL, LOG_TO_FILE, LOG_FILE_PATH
    - CORS_ORIGINS, CORS_ALLOW_CREDENTIALS, CORS_ALLOW_METHODS, CORS_ALLOW_HEADERS
    - DEBUG

    All settings can be overridden via .env file or by redefining them here.
    """
    APP_NAME: str = "HRMS Attendance"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Atlas SSO is not used; tokens come from the credential store below
    ATLAS_APP_CODE: str = "HRMS_ATTENDANCE"

    # Access token verification
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Geofence settings
    GEOFENCE_ENFORCED: bool = True
    # IANA zone used to derive the attendance day; server local time when unset
    APP_TIMEZONE: Optional[str] = None

    # Leave settings
    LEAVE_ENFORCE_WORKING_DAYS: bool = False


settings = Settings()
