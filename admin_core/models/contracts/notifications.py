"""
Notification template contract models.

Templates hold ``{{variable}}`` placeholders; interpolation happens on the
platform. The admin surface only edits the text and declares which
variables are available.
"""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from admin_core.models.enums import NotificationDeliveryStatus, NotificationType

_PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_.]*)\s*\}\}")


def extract_template_variables(content: str) -> list[str]:
    """
    List placeholder names used in a template, in first-seen order.

    Example:
        >>> extract_template_variables("Hi {{ name }}, see {{link}} {{name}}")
        ['name', 'link']
    """
    seen: list[str] = []
    for name in _PLACEHOLDER.findall(content):
        if name not in seen:
            seen.append(name)
    return seen


class NotificationTemplate(BaseModel):
    """Stored notification template."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    type: NotificationType
    subject: str | None = None
    content: str
    variables: list[str] = Field(default_factory=list)
    is_active: bool = Field(default=True, alias="isActive")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    def undeclared_variables(self) -> list[str]:
        """Placeholders used in subject/content but missing from ``variables``."""
        used = extract_template_variables(f"{self.subject or ''}\n{self.content}")
        return [name for name in used if name not in self.variables]


class NotificationTemplateCreate(BaseModel):
    """Request to create a notification template."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    type: NotificationType = NotificationType.EMAIL
    subject: str | None = None
    content: str = Field(..., min_length=1)
    variables: list[str] = Field(default_factory=list)
    is_active: bool = Field(default=True, alias="isActive")

    @model_validator(mode="after")
    def _email_needs_subject(self) -> "NotificationTemplateCreate":
        if self.type == NotificationType.EMAIL and not (self.subject or "").strip():
            raise ValueError("Email templates require a subject")
        return self


class NotificationTemplateUpdate(BaseModel):
    """Partial update sent with PATCH; unset fields are not transmitted."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, min_length=1, max_length=200)
    type: NotificationType | None = None
    subject: str | None = None
    content: str | None = Field(default=None, min_length=1)
    variables: list[str] | None = None
    is_active: bool | None = Field(default=None, alias="isActive")


class NotificationHistoryEntry(BaseModel):
    """One delivery attempt recorded by the platform."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    template_id: str = Field(alias="templateId")
    template_name: str = Field(default="", alias="templateName")
    recipient: str
    type: str
    status: NotificationDeliveryStatus
    sent_at: datetime = Field(alias="sentAt")
    error: str | None = None
