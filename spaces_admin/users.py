"""
Users SDK for spaces-admin.

All methods are async and must be awaited.
"""

from __future__ import annotations

from typing import Any

from admin_core.core.exceptions import ClientValidationError
from admin_core.models.contracts.users import (
    SpaceAssociation,
    UserCreate,
    UserPage,
    UserPublic,
    UserUpdate,
)

from .client import get_client, request_body, unwrap_item, validated

USERS_PATH = "/api/users"

MIN_PASSWORD_LENGTH = 8


def _query(page: int, limit: int, **filters: Any) -> dict[str, Any]:
    params: dict[str, Any] = {"page": page, "limit": limit}
    params.update({key: value for key, value in filters.items() if value not in (None, "")})
    return params


def _page(data: Any) -> UserPage:
    data = data or {}
    pagination = data.get("pagination") or {}
    users = data.get("users") or []
    return UserPage(
        users=[UserPublic.model_validate(u) for u in users],
        total=pagination.get("total", len(users)),
        spaces=data.get("spaces") or [],
    )


class users:
    """
    User management operations.

    Example:
        >>> from spaces_admin import users
        >>> page = await users.list(search="acme", limit=50)
        >>> for user in page.users:
        ...     print(user.email, user.role)
    """

    @staticmethod
    async def list(
        page: int = 1,
        limit: int = 20,
        search: str | None = None,
        role: str | None = None,
        is_active: bool | None = None,
    ) -> UserPage:
        """
        List users with optional filters.

        Args:
            page: 1-based page number
            limit: Page size
            search: Free-text search on name/email
            role: System role filter
            is_active: Active flag filter

        Returns:
            UserPage: Users and total count
        """
        params = _query(
            page,
            limit,
            search=search,
            role=role,
            is_active=None if is_active is None else str(is_active).lower(),
        )
        return _page(await get_client().get(USERS_PATH, params=params))

    @staticmethod
    async def list_with_spaces(
        page: int = 1,
        limit: int = 20,
        search: str | None = None,
        role: str | None = None,
        is_active: bool | None = None,
        space_id: str | None = None,
    ) -> UserPage:
        """Users together with their space memberships and the space list."""
        params = _query(
            page,
            limit,
            search=search,
            role=role,
            is_active=None if is_active is None else str(is_active).lower(),
            space_id=space_id,
        )
        return _page(await get_client().get(f"{USERS_PATH}/all-with-spaces", params=params))

    @staticmethod
    async def create(**values: Any) -> UserPublic:
        body = request_body(validated(UserCreate, **values))
        data = await get_client().post(USERS_PATH, json=body)
        return UserPublic.model_validate(unwrap_item(data, "user"))

    @staticmethod
    async def get(user_id: str) -> UserPublic:
        data = await get_client().get(f"{USERS_PATH}/{user_id}")
        return UserPublic.model_validate(unwrap_item(data, "user"))

    @staticmethod
    async def update(user_id: str, **changes: Any) -> UserPublic:
        body = request_body(validated(UserUpdate, **changes), partial=True)
        data = await get_client().put(f"{USERS_PATH}/{user_id}", json=body)
        return UserPublic.model_validate(unwrap_item(data, "user"))

    @staticmethod
    async def delete(user_id: str) -> None:
        await get_client().delete(f"{USERS_PATH}/{user_id}")

    @staticmethod
    async def set_space_associations(
        user_id: str, associations: list[SpaceAssociation | dict[str, Any]]
    ) -> None:
        """Replace a user's space memberships."""
        spaces = [
            SpaceAssociation.model_validate(a).model_dump(mode="json", by_alias=True)
            for a in associations
        ]
        await get_client().put(
            f"{USERS_PATH}/{user_id}/space-associations", json={"spaces": spaces}
        )

    @staticmethod
    async def reset_password(user_id: str, new_password: str, confirm_password: str | None = None) -> None:
        """
        Set a new password for a user.

        Raises:
            ClientValidationError: password too short or confirmation mismatch
        """
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise ClientValidationError(
                "newPassword", f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if confirm_password is not None and confirm_password != new_password:
            raise ClientValidationError("confirmPassword", "Passwords do not match")
        await get_client().post(
            f"{USERS_PATH}/{user_id}/reset-password", json={"newPassword": new_password}
        )
