"""
Audit log SDK for spaces-admin.
"""

from __future__ import annotations

from datetime import date, datetime

from admin_core.models.contracts.roles import AuditLogPage

from .client import get_client


def _iso(value: date | datetime | str | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.isoformat()


class audit_logs:
    """Read-only access to the audit trail."""

    @staticmethod
    async def list(
        page: int = 1,
        limit: int = 20,
        entity_type: str | None = None,
        action: str | None = None,
        user_id: str | None = None,
        start_date: date | datetime | str | None = None,
        end_date: date | datetime | str | None = None,
    ) -> AuditLogPage:
        """
        Page through audit log entries, newest first.

        Returns:
            AuditLogPage: Entries plus pagination totals
        """
        filters = {
            "entityType": entity_type,
            "action": action,
            "userId": user_id,
            "startDate": _iso(start_date),
            "endDate": _iso(end_date),
        }
        params = {"page": page, "limit": limit}
        params.update({key: value for key, value in filters.items() if value})

        data = await get_client().get("/api/audit-logs", params=params) or {}
        pagination = data.get("pagination") or {}
        return AuditLogPage(
            data=data.get("data") or [],
            total=pagination.get("total", 0),
            page=pagination.get("page", page),
            limit=pagination.get("limit", limit),
        )
