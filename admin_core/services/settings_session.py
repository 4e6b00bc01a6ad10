"""
Settings Session

Local copy of the system settings with merge-on-load and wholesale save.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Protocol

from pydantic import ValidationError

from admin_core.core.exceptions import AdminError, ClientValidationError, SaveInProgressError
from admin_core.core.notify import LogNotifier, Notifier
from admin_core.models.contracts.settings import SystemSettings
from admin_core.models.enums import SessionState
from admin_core.services.merge import merge_settings

logger = logging.getLogger(__name__)


class SettingsBackend(Protocol):
    async def fetch(self) -> Mapping[str, Any] | None: ...

    async def store(self, payload: dict[str, Any]) -> Any: ...


class SettingsSession:
    """
    Editor session for ``/api/settings``.

    Loading overlays the remote key/value map onto the current settings
    (defaults on first load). Unparseable remote values keep the local value.
    """

    def __init__(self, backend: SettingsBackend, notifier: Notifier | None = None):
        self.backend = backend
        self.notifier = notifier or LogNotifier()
        self.settings = SystemSettings()
        self.state = SessionState.UNLOADED
        self.last_saved: datetime | None = None
        self._saving = False

    async def load(self) -> SystemSettings:
        self.state = SessionState.LOADING
        try:
            remote = await self.backend.fetch()
            self.settings = merge_settings(self.settings, remote)
        except AdminError as e:
            logger.warning(f"Failed to load settings: {e}")
            self.notifier.notify_error("Failed to load settings")
        self.state = SessionState.LOADED
        return self.settings

    def update(self, **fields: Any) -> SystemSettings:
        """
        Change settings by field name or alias.

        Raises:
            ClientValidationError: a value does not fit its field
        """
        values = self.settings.model_dump()
        aliases = {field.alias: name for name, field in SystemSettings.model_fields.items()}
        for key, value in fields.items():
            name = aliases.get(key, key)
            if name not in SystemSettings.model_fields:
                raise ClientValidationError(key, f"Unknown setting: {key}")
            values[name] = value
        try:
            self.settings = SystemSettings.model_validate(values)
        except ValidationError as e:
            first = e.errors()[0]
            raise ClientValidationError(str(first["loc"][0]), first["msg"]) from e
        self.state = SessionState.EDITING
        return self.settings

    async def save(self) -> bool:
        """
        Persist all settings.

        Raises:
            SaveInProgressError: a previous save has not completed yet
        """
        if self._saving:
            raise SaveInProgressError()
        self._saving = True
        self.state = SessionState.SAVING
        snapshot = self.settings
        try:
            await self.backend.store(snapshot.to_payload())
        except AdminError as e:
            logger.error(f"Failed to save settings: {e}")
            self.state = SessionState.EDITING
            self.notifier.notify_error(e.message or "Failed to save settings")
            return False
        finally:
            self._saving = False

        self.last_saved = datetime.now(timezone.utc)
        self.state = SessionState.LOADED if self.settings is snapshot else SessionState.EDITING
        self.notifier.notify_success("Settings saved successfully")
        return True
