from pydantic import BaseModel

from app.core.enums import Role


class CurrentUser(BaseModel):
    """Authenticated principal resolved from the bearer token"""
    user_id: str
    role: Role
