"""
System settings SDK for spaces-admin.

All methods are async and must be awaited.
"""

from __future__ import annotations

from typing import Any

from admin_core.core.exceptions import InvalidResponseError
from admin_core.models.contracts.settings import SystemSettings
from admin_core.services.merge import merge_settings

from .client import get_client

SETTINGS_PATH = "/api/settings"


class settings:
    """
    System settings operations.

    Example:
        >>> from spaces_admin import settings
        >>> current = await settings.get()
        >>> await settings.save(current.model_copy(update={"session_timeout": 12}))
    """

    @staticmethod
    async def fetch() -> dict[str, Any]:
        """Raw key/value settings map (values may be strings)."""
        data = await get_client().get(SETTINGS_PATH)
        if isinstance(data, dict) and isinstance(data.get("settings"), dict):
            return data["settings"]
        if not data:
            return {}
        if not isinstance(data, dict):
            raise InvalidResponseError(f"Unexpected response from {SETTINGS_PATH}", payload=data)
        return data

    @staticmethod
    async def store(payload: dict[str, Any]) -> Any:
        """PUT a prepared ``{"settings": {...}}`` body."""
        return await get_client().put(SETTINGS_PATH, json=payload)

    @staticmethod
    async def get(previous: SystemSettings | None = None) -> SystemSettings:
        """
        Settings merged onto ``previous`` (defaults when omitted).

        Unparseable remote values keep the previous value.
        """
        return merge_settings(previous or SystemSettings(), await settings.fetch())

    @staticmethod
    async def save(values: SystemSettings) -> None:
        await settings.store(values.to_payload())
