"""
Notifications SDK for spaces-admin.

Templates, channel settings and delivery history.
All methods are async and must be awaited.
"""

from __future__ import annotations

from typing import Any

from admin_core.models.contracts.notifications import (
    NotificationHistoryEntry,
    NotificationTemplate,
    NotificationTemplateCreate,
    NotificationTemplateUpdate,
)
from admin_core.models.contracts.settings import NotificationSettings

from .client import get_client, request_body, unwrap_item, unwrap_list, validated

TEMPLATES_PATH = "/api/admin/notification-templates"
SETTINGS_PATH = "/api/admin/notification-settings"
HISTORY_PATH = "/api/admin/notification-history"


class notifications:
    """
    Notification template and channel operations.

    Example:
        >>> from spaces_admin import notifications
        >>> template = await notifications.create_template(
        ...     name="Welcome", type="email", subject="Hi {{name}}", content="Welcome {{name}}!"
        ... )
        >>> await notifications.send_test(template.id)
    """

    # =========================================================================
    # Templates
    # =========================================================================

    @staticmethod
    async def list_templates() -> list[NotificationTemplate]:
        data = await get_client().get(TEMPLATES_PATH)
        return [NotificationTemplate.model_validate(t) for t in unwrap_list(data, "templates")]

    @staticmethod
    async def create_template(**values: Any) -> NotificationTemplate:
        """
        Create a template.

        Args:
            **values: ``NotificationTemplateCreate`` fields (name, type,
                subject, content, variables, is_active)

        Raises:
            ClientValidationError: missing name/content, or an email template
                without subject; nothing is sent
        """
        body = request_body(validated(NotificationTemplateCreate, **values))
        data = await get_client().post(TEMPLATES_PATH, json=body)
        return NotificationTemplate.model_validate(unwrap_item(data, "template"))

    @staticmethod
    async def update_template(template_id: str, **changes: Any) -> NotificationTemplate:
        """Partial update (PATCH); only the given fields are sent."""
        body = request_body(validated(NotificationTemplateUpdate, **changes), partial=True)
        data = await get_client().patch(f"{TEMPLATES_PATH}/{template_id}", json=body)
        return NotificationTemplate.model_validate(unwrap_item(data, "template"))

    @staticmethod
    async def replace_template(template_id: str, **values: Any) -> NotificationTemplate:
        """Full update (PUT) with create-time validation."""
        body = request_body(validated(NotificationTemplateCreate, **values))
        data = await get_client().put(f"{TEMPLATES_PATH}/{template_id}", json=body)
        return NotificationTemplate.model_validate(unwrap_item(data, "template"))

    @staticmethod
    async def delete_template(template_id: str) -> None:
        await get_client().delete(f"{TEMPLATES_PATH}/{template_id}")

    @staticmethod
    async def send_test(template_id: str) -> dict[str, Any]:
        """Ask the platform to deliver a test notification for a template."""
        return await get_client().post(f"{TEMPLATES_PATH}/{template_id}/test") or {}

    # =========================================================================
    # Channel settings
    # =========================================================================

    @staticmethod
    async def get_settings() -> NotificationSettings:
        data = await get_client().get(SETTINGS_PATH)
        return NotificationSettings.model_validate(unwrap_item(data, "settings") or {})

    @staticmethod
    async def save_settings(values: NotificationSettings) -> None:
        """Replace the channel settings wholesale."""
        await get_client().put(
            SETTINGS_PATH, json={"settings": values.model_dump(mode="json", by_alias=True)}
        )

    # =========================================================================
    # History
    # =========================================================================

    @staticmethod
    async def history() -> list[NotificationHistoryEntry]:
        data = await get_client().get(HISTORY_PATH)
        return [NotificationHistoryEntry.model_validate(h) for h in unwrap_list(data, "history")]
