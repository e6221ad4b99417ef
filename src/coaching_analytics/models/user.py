"""Platform user model, as far as the analytics engine needs it."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class UserRole(StrEnum):
    USER = "USER"
    MANAGER = "MANAGER"
    COACH = "COACH"
    ADMIN = "ADMIN"


# Roles allowed to see team statistics
TEAM_VIEWER_ROLES = frozenset({UserRole.MANAGER, UserRole.ADMIN, UserRole.COACH})

# Roles listed in a team view
TEAM_MEMBER_ROLES = frozenset({UserRole.USER, UserRole.COACH})


class User(BaseModel):
    id: str
    name: str
    email: str = ""
    role: UserRole = UserRole.USER
    last_active: datetime | None = None
