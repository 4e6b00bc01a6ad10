"""
Spaces SDK for spaces-admin.

Spaces, their members and their sidebar menu.
All methods are async and must be awaited.
"""

from __future__ import annotations

from typing import Any

from admin_core.models.contracts.spaces import (
    SidebarMenuItem,
    Space,
    SpaceCreate,
    SpaceMember,
    SpaceUpdate,
)
from admin_core.services.reorder import reorder

from .client import get_client, request_body, unwrap_item, unwrap_list, validated

SPACES_PATH = "/api/spaces"


class spaces:
    """
    Space management operations.

    Example:
        >>> from spaces_admin import spaces
        >>> space = await spaces.create(name="Sales", slug="sales")
        >>> await spaces.add_member(space.id, user_id="u-1", role="admin")
    """

    @staticmethod
    async def list(page: int = 1, limit: int = 100) -> list[Space]:
        data = await get_client().get(SPACES_PATH, params={"page": page, "limit": limit})
        return [Space.model_validate(s) for s in unwrap_list(data, "spaces", "data")]

    @staticmethod
    async def create(**values: Any) -> Space:
        body = request_body(validated(SpaceCreate, **values))
        data = await get_client().post(SPACES_PATH, json=body)
        return Space.model_validate(unwrap_item(data, "space"))

    @staticmethod
    async def get(space_id: str) -> Space:
        data = await get_client().get(f"{SPACES_PATH}/{space_id}")
        return Space.model_validate(unwrap_item(data, "space"))

    @staticmethod
    async def update(space_id: str, **changes: Any) -> Space:
        body = request_body(validated(SpaceUpdate, **changes), partial=True)
        data = await get_client().put(f"{SPACES_PATH}/{space_id}", json=body)
        return Space.model_validate(unwrap_item(data, "space"))

    @staticmethod
    async def delete(space_id: str) -> None:
        await get_client().delete(f"{SPACES_PATH}/{space_id}")

    # =========================================================================
    # Members
    # =========================================================================

    @staticmethod
    async def list_members(space_id: str) -> list[SpaceMember]:
        data = await get_client().get(f"{SPACES_PATH}/{space_id}/members")
        return [SpaceMember.model_validate(m) for m in unwrap_list(data, "members", "data")]

    @staticmethod
    async def add_member(space_id: str, user_id: str, role: str = "member") -> SpaceMember:
        data = await get_client().post(
            f"{SPACES_PATH}/{space_id}/members", json={"user_id": user_id, "role": role}
        )
        return SpaceMember.model_validate(unwrap_item(data, "member") or {"user_id": user_id, "role": role})

    @staticmethod
    async def update_member(space_id: str, user_id: str, role: str) -> None:
        await get_client().put(f"{SPACES_PATH}/{space_id}/members/{user_id}", json={"role": role})

    @staticmethod
    async def remove_member(space_id: str, user_id: str) -> None:
        await get_client().delete(f"{SPACES_PATH}/{space_id}/members/{user_id}")

    # =========================================================================
    # Sidebar menu
    # =========================================================================

    @staticmethod
    async def save_menu(space: Space, menu: list[SidebarMenuItem | dict[str, Any]]) -> Space:
        """
        Persist a sidebar menu wholesale.

        Other ``sidebar_config`` keys (style, collapsed state) are preserved.
        """
        items = [
            SidebarMenuItem.model_validate(item).model_dump(mode="json", exclude_none=True)
            for item in menu
        ]
        sidebar_config = {**space.sidebar_config, "menu": items}
        data = await get_client().put(
            f"{SPACES_PATH}/{space.id}", json={"sidebar_config": sidebar_config}
        )
        updated = unwrap_item(data, "space")
        if isinstance(updated, dict) and "id" in updated:
            return Space.model_validate(updated)
        return space.model_copy(update={"sidebar_config": sidebar_config})

    @staticmethod
    async def move_menu_item(space: Space, from_index: int, to_index: int) -> Space:
        """Move one menu item and persist the whole menu."""
        return await spaces.save_menu(space, reorder(space.menu, from_index, to_index))
