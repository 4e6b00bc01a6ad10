"""
Space contract models.

A space is an isolated workspace; its sidebar menu is an ordered list stored
inside ``sidebar_config.menu`` and persisted wholesale.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SidebarMenuItem(BaseModel):
    """One entry of a space's sidebar menu."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    label: str
    icon: str | None = None
    href: str | None = None
    visible: bool = True
    children: list["SidebarMenuItem"] = Field(default_factory=list)


class Space(BaseModel):
    """Space entity."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    slug: str
    description: str | None = None
    is_default: bool = False
    is_active: bool = True
    sidebar_config: dict[str, Any] = Field(default_factory=dict)
    member_count: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def menu(self) -> list[SidebarMenuItem]:
        """Sidebar menu items in stored order."""
        return [SidebarMenuItem.model_validate(item) for item in self.sidebar_config.get("menu", [])]


class SpaceCreate(BaseModel):
    """Request to create a space."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str | None = None
    is_default: bool = False


class SpaceUpdate(BaseModel):
    """Partial space update."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    slug: str | None = Field(
        default=None, min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
    )
    description: str | None = None
    is_default: bool | None = None
    is_active: bool | None = None
    sidebar_config: dict[str, Any] | None = None


class SpaceMember(BaseModel):
    """Membership row returned by ``/api/spaces/:id/members``."""

    user_id: str
    role: str = "member"
    user_name: str | None = None
    user_email: str | None = None
    user_system_role: str | None = None
    created_at: datetime | None = None
