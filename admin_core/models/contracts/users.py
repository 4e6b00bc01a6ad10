"""
User contract models.

Users hold a global system role plus independent per-space roles.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SpaceAssociation(BaseModel):
    """Membership of a user in a space."""

    model_config = ConfigDict(populate_by_name=True)

    space_id: str = Field(alias="spaceId")
    role: str = "member"
    space_name: str | None = Field(default=None, alias="spaceName")


class UserPublic(BaseModel):
    """User entity (public fields only)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    name: str | None = None
    role: str = "USER"
    is_active: bool = Field(default=True, alias="isActive")
    avatar: str | None = None
    last_login_at: datetime | None = Field(default=None, alias="lastLoginAt")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    spaces: list[SpaceAssociation] = Field(default_factory=list)


class UserCreate(BaseModel):
    """Request to create a user."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=200)
    password: str | None = Field(default=None, min_length=8)
    role: str = "USER"
    is_active: bool = Field(default=True, alias="isActive")


class UserUpdate(BaseModel):
    """Partial user update."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr | None = None
    name: str | None = Field(default=None, min_length=1, max_length=200)
    role: str | None = None
    is_active: bool | None = Field(default=None, alias="isActive")


class UserPage(BaseModel):
    """Page of users; ``spaces`` is filled by the all-with-spaces listing."""

    users: list[UserPublic] = Field(default_factory=list)
    total: int = 0
    spaces: list[dict] = Field(default_factory=list)
