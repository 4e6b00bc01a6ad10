"""
Branding SDK for spaces-admin.

Reads and writes the platform branding configuration.
All methods are async and must be awaited.
"""

from __future__ import annotations

from typing import Any

from admin_core.core.exceptions import InvalidResponseError
from admin_core.models.contracts.branding import BrandingConfig
from admin_core.services.merge import merge_branding

from .client import get_client

BRANDING_PATH = "/api/admin/branding"


class branding:
    """
    Branding configuration operations.

    ``fetch``/``store`` work on raw documents and back ``BrandingSession``;
    ``get``/``save`` work on ``BrandingConfig``.

    Example:
        >>> from spaces_admin import branding
        >>> config = await branding.get()
        >>> await branding.save(config.model_copy(update={"application_name": "Acme"}))
    """

    @staticmethod
    async def fetch() -> dict[str, Any] | None:
        """
        Raw branding document as stored, or None when never saved.

        Raises:
            InvalidResponseError: if the body is not a JSON object
        """
        data = await get_client().get(BRANDING_PATH)
        if isinstance(data, dict) and "branding" in data:
            data = data["branding"]
        if not data:
            return None
        if not isinstance(data, dict):
            raise InvalidResponseError(f"Unexpected response from {BRANDING_PATH}", payload=data)
        return data

    @staticmethod
    async def store(payload: dict[str, Any]) -> Any:
        """Replace the stored branding document."""
        return await get_client().put(BRANDING_PATH, json=payload)

    @staticmethod
    async def get() -> BrandingConfig:
        """
        Current branding merged onto the defaults.

        Returns:
            BrandingConfig: Stored values with defaults for missing fields
        """
        return merge_branding(await branding.fetch())

    @staticmethod
    async def save(config: BrandingConfig) -> None:
        await branding.store(config.to_payload())
