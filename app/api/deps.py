"""
Authentication and role guard dependencies
"""
from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.enums import Role
from atams.exceptions import ForbiddenException, UnauthorizedException
from app.schemas.auth import CurrentUser
from app.services.jwt_service import JwtService

bearer_scheme = HTTPBearer(auto_error=False)
jwt_service = JwtService()


async def require_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> CurrentUser:
    """Resolve the caller from the Authorization: Bearer header"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("No token, authorization denied")

    user = jwt_service.verify_access_token(credentials.credentials)
    return CurrentUser(user_id=user["id"], role=Role(user["role"]))


def require_roles(*roles: Role) -> Callable:
    """Dependency factory allowing only the given roles through"""
    async def checker(current_user: CurrentUser = Depends(require_auth)) -> CurrentUser:
        if current_user.role not in roles:
            raise ForbiddenException("Access denied: You do not have the required role.")
        return current_user

    return checker
