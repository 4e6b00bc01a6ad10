"""
Roles SDK for spaces-admin.

All methods are async and must be awaited.
"""

from __future__ import annotations

from typing import Any

from admin_core.models.contracts.roles import Permission, Role, RoleCreate

from .client import get_client, request_body, unwrap_item, unwrap_list, validated


class roles:
    """
    Role and permission operations.

    Example:
        >>> from spaces_admin import roles
        >>> role = await roles.create(name="Editor", level="space")
        >>> await roles.set_permissions(role.id, ["perm-read", "perm-write"])
    """

    @staticmethod
    async def list(level: str | None = None) -> list[Role]:
        """
        List roles.

        Args:
            level: "system" or "space"; all roles when omitted
        """
        params = {"level": level} if level else None
        data = await get_client().get("/api/roles", params=params)
        return [Role.model_validate(r) for r in unwrap_list(data, "roles")]

    @staticmethod
    async def create(**values: Any) -> Role:
        body = request_body(validated(RoleCreate, **values))
        data = await get_client().post("/api/roles", json=body)
        return Role.model_validate(unwrap_item(data, "role"))

    @staticmethod
    async def update(role_id: str, **changes: Any) -> Role:
        data = await get_client().put(f"/api/roles/{role_id}", json=changes)
        return Role.model_validate(unwrap_item(data, "role"))

    @staticmethod
    async def delete(role_id: str) -> None:
        await get_client().delete(f"/api/roles/{role_id}")

    @staticmethod
    async def set_permissions(role_id: str, permission_ids: list[str]) -> None:
        """Replace the permissions granted by a role."""
        await get_client().put(
            f"/api/roles/{role_id}/permissions", json={"permissionIds": permission_ids}
        )

    @staticmethod
    async def list_permissions(resource: str | None = None) -> list[Permission]:
        """All grantable permissions, optionally filtered by resource."""
        data = await get_client().get("/api/permissions")
        permissions = [Permission.model_validate(p) for p in unwrap_list(data, "permissions")]
        if resource is not None:
            permissions = [p for p in permissions if p.resource == resource]
        return permissions
