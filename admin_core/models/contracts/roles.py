"""
Role, permission, audit log and connection-test contract models.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Permission(BaseModel):
    """Grantable permission (``resource:action``)."""

    id: str
    name: str
    resource: str | None = None
    action: str | None = None
    description: str | None = None


class Role(BaseModel):
    """Role entity."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str | None = None
    level: str = "space"
    is_system: bool = False
    permissions: list[Permission] = Field(default_factory=list)
    created_at: datetime | None = None


class RoleCreate(BaseModel):
    """Request to create a role."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    level: str = Field(default="space", pattern=r"^(system|space)$")


class AuditLogEntry(BaseModel):
    """One audit trail record."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    action: str
    entity_type: str | None = None
    entity_id: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    details: dict[str, Any] | None = None
    created_at: datetime | None = None


class AuditLogPage(BaseModel):
    """Page of audit log entries."""

    data: list[AuditLogEntry] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20


class ConnectionTestResult(BaseModel):
    """Outcome of ``POST /api/external-connections/test``."""

    success: bool
    message: str | None = None
    error: str | None = None
    details: dict[str, Any] | None = None
