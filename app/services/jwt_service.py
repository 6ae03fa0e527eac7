"""
JWT Service for access token verification
"""
import jwt
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from app.core.config import settings
from app.core.enums import Role
from atams.exceptions import ForbiddenException


class JwtService:
    def __init__(self) -> None:
        self.secret = settings.JWT_SECRET
        self.algorithm = settings.JWT_ALGORITHM
        self.expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_access_token(self, user_id: str, role: Role, expires_minutes: Optional[int] = None) -> str:
        """
        Issue an access token in the credential store's format

        Payload: {"user": {"id": ..., "role": ...}, "iat": ..., "exp": ...}
        """
        now = datetime.now(timezone.utc)
        minutes = self.expire_minutes if expires_minutes is None else expires_minutes
        payload = {
            "user": {"id": user_id, "role": Role(role).value},
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=minutes)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_access_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a bearer token

        Returns:
            dict: The "user" claim, {"id": str, "role": str}

        Raises:
            ForbiddenException: If the token is invalid, expired or malformed
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise ForbiddenException("Token has expired")
        except jwt.InvalidTokenError:
            raise ForbiddenException("Token is not valid")

        user = payload.get("user")
        if not isinstance(user, dict) or not user.get("id") or not user.get("role"):
            raise ForbiddenException("Token is not valid")

        if user["role"] not in {r.value for r in Role}:
            raise ForbiddenException("Token carries an unknown role")

        return {"id": str(user["id"]), "role": user["role"]}
