"""
External connection SDK for spaces-admin.
"""

from __future__ import annotations

import logging
from typing import Any

from admin_core.core.exceptions import ApiError, ClientValidationError
from admin_core.models.contracts.roles import ConnectionTestResult

from .client import get_client

logger = logging.getLogger(__name__)


class connections:
    """External database / service connection checks."""

    @staticmethod
    async def test(connection_type: str = "database", **params: Any) -> ConnectionTestResult:
        """
        Ask the platform to test connection parameters.

        The platform answers failed tests with a ``{"success": false, "error": ...}``
        body, possibly on a non-2xx status; that body is returned as a result
        rather than raised.

        Args:
            connection_type: "database", "email" or an API connection type
            **params: Connection parameters (host, port, database, username, ...)

        Raises:
            ClientValidationError: no host given for a database connection
            ApiError: the platform failed without a test result
        """
        if connection_type == "database" and not params.get("host"):
            raise ClientValidationError("host", "Host is required")
        body = {"connection_type": connection_type, **params}
        try:
            data = await get_client().post("/api/external-connections/test", json=body)
        except ApiError as e:
            if isinstance(e.payload, dict) and "success" in e.payload:
                logger.info(f"Connection test failed: {e.message}")
                return ConnectionTestResult.model_validate(e.payload)
            raise
        return ConnectionTestResult.model_validate(data or {"success": True})
