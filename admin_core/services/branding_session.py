"""
Branding Session

Owns the branding configuration for one admin editing session:
load (merge remote onto defaults), local edits, save, export/import and
applying the theme to a rendering surface.

State machine::

    unloaded -> loading -> loaded -> editing <-> saving -> loaded

Failures never leave the session in a broken state: a failed load keeps the
defaults, a failed save keeps the local edits. Both notify the user and
return instead of raising. Starting a save while one is in flight is the
only save error that propagates.
"""

import json
import logging
import typing
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Protocol

from pydantic import BaseModel, ValidationError

from admin_core.core.exceptions import (
    AdminError,
    ClientValidationError,
    InvalidImportError,
    SaveInProgressError,
    SchemaImportError,
)
from admin_core.core.notify import LogNotifier, Notifier
from admin_core.models.contracts.branding import BrandingConfig, ColorPalette, default_branding_config
from admin_core.models.enums import SessionState, ThemeMode
from admin_core.services import component_styling
from admin_core.services.merge import merge_branding, merge_defaults
from admin_core.services.theme_css import (
    ApplyTracker,
    ThemeModeResolver,
    ThemeStylesheet,
    ThemeSurface,
    render_stylesheet,
)

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "branding-config.json"


class BrandingBackend(Protocol):
    """Remote storage of the branding aggregate."""

    async def fetch(self) -> Mapping[str, Any] | None: ...

    async def store(self, payload: dict[str, Any]) -> Any: ...


def _construct_unchecked(model_cls: type[BaseModel], data: Mapping[str, Any]) -> BaseModel:
    """Build a model tree from a document without running validation."""
    values: dict[str, Any] = {}
    known: set[str] = set()
    for name, field in model_cls.model_fields.items():
        key = field.alias if field.alias and field.alias in data else name
        known.update({name, field.alias or name})
        if key not in data:
            continue
        value = data[key]
        annotation = field.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            # Nested sections that are not objects fall back to the field default
            if not isinstance(value, Mapping):
                continue
            value = _construct_unchecked(annotation, value)
        elif typing.get_origin(annotation) is dict:
            item_type = typing.get_args(annotation)[1]
            if isinstance(item_type, type) and issubclass(item_type, BaseModel):
                if not isinstance(value, Mapping):
                    continue
                value = {
                    k: _construct_unchecked(item_type, v)
                    for k, v in value.items()
                    if isinstance(v, Mapping)
                }
        values[name] = value
    extras = {key: value for key, value in data.items() if key not in known}
    return model_cls.model_construct(**values, **extras)


class BrandingSession:
    """
    Editor session bound to the remote branding configuration.

    Args:
        backend: Object with async ``fetch()`` / ``store(payload)``; the
            ``spaces_admin.branding`` SDK module fits.
        surface: Optional rendering surface receiving stylesheets on apply
        mode_resolver: Light/dark decision; defaults to OS-preference light
        notifier: User notification channel; defaults to logging only
    """

    def __init__(
        self,
        backend: BrandingBackend,
        surface: ThemeSurface | None = None,
        mode_resolver: ThemeModeResolver | None = None,
        notifier: Notifier | None = None,
    ):
        self.backend = backend
        self.surface = surface
        self.mode_resolver = mode_resolver or ThemeModeResolver()
        self.notifier = notifier or LogNotifier()
        self.config: BrandingConfig = default_branding_config()
        self.state = SessionState.UNLOADED
        self.last_saved: datetime | None = None
        self.last_error: str | None = None
        self.selection = component_styling.ComponentSelection()
        self._tracker = ApplyTracker()
        self._saving = False

    # ==================== LOAD ====================

    async def load(self) -> BrandingConfig:
        """
        Fetch the remote configuration and merge it onto the defaults.

        On any fetch or schema failure the defaults stay in place and the
        user is notified; the session still ends up ``loaded``.
        """
        self.state = SessionState.LOADING
        try:
            remote = await self.backend.fetch()
            self.config = merge_branding(remote)
            self.last_error = None
        except (AdminError, ValidationError) as e:
            logger.warning(f"Failed to load branding, using defaults: {e}")
            self.config = default_branding_config()
            self.last_error = str(e)
            self.notifier.notify_error("Failed to load branding settings")
        self.state = SessionState.LOADED
        self.apply()
        return self.config

    # ==================== EDIT ====================

    def _replace(self, config: BrandingConfig) -> BrandingConfig:
        self.config = config
        if self.state != SessionState.SAVING:
            self.state = SessionState.EDITING
        self.apply()
        return config

    def update_styling(
        self, component_id: str, mode: ThemeMode | str, field: str, value: str
    ) -> BrandingConfig:
        """Set one property of a component's style record for a mode."""
        return self._replace(
            component_styling.update(self.config, component_id, mode, field, value)
        )

    def resolve_styling(self, component_id: str) -> dict[str, dict[str, str]]:
        return component_styling.resolve(self.config, component_id)

    def update(self, **fields: Any) -> BrandingConfig:
        """
        Replace top-level fields (snake_case names or camelCase aliases).

        Values are validated against the field types.

        Raises:
            ClientValidationError: unknown field or invalid value
        """
        current = self.config.model_dump(by_alias=False, warnings=False)
        for name, value in fields.items():
            attr = self._field_name(name)
            current[attr] = value.model_dump() if isinstance(value, BaseModel) else value
        try:
            config = BrandingConfig.model_validate(current)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "branding"
            raise ClientValidationError(field, first["msg"]) from e
        # Keep unchanged sub-trees shared with the previous version
        shared = {
            name: getattr(self.config, name)
            for name in BrandingConfig.model_fields
            if getattr(config, name) == getattr(self.config, name)
        }
        return self._replace(config.model_copy(update=shared))

    def set_palette(self, mode: ThemeMode | str, **tokens: str) -> BrandingConfig:
        """Set color tokens of the light or dark palette."""
        mode = ThemeMode(mode)
        palette = self.config.palette(mode)
        values = {self._palette_field(name): value for name, value in tokens.items()}
        attr = "dark_mode" if mode == ThemeMode.DARK else "light_mode"
        return self._replace(
            self.config.model_copy(update={attr: palette.model_copy(update=values)})
        )

    def reset_to_defaults(self) -> BrandingConfig:
        return self._replace(default_branding_config())

    @staticmethod
    def _field_name(name: str) -> str:
        for attr, field in BrandingConfig.model_fields.items():
            if name in (attr, field.alias):
                return attr
        raise ClientValidationError(name, f"Unknown branding field: {name}")

    @staticmethod
    def _palette_field(name: str) -> str:
        for attr, field in ColorPalette.model_fields.items():
            if name in (attr, field.alias):
                return attr
        raise ClientValidationError(name, f"Unknown color token: {name}")

    # ==================== SAVE ====================

    @property
    def is_saving(self) -> bool:
        return self._saving

    async def save(self) -> bool:
        """
        Persist the whole configuration.

        Returns:
            True when the backend accepted the configuration, False when the
            save failed (local edits are kept and the user is notified).

        Raises:
            SaveInProgressError: a previous save has not completed yet
        """
        if self._saving:
            raise SaveInProgressError()

        self._saving = True
        previous_state = self.state
        self.state = SessionState.SAVING
        snapshot = self.config
        try:
            await self.backend.store(snapshot.to_payload())
        except AdminError as e:
            logger.error(f"Failed to save branding: {e}")
            self.last_error = e.message
            self.state = (
                SessionState.EDITING if previous_state != SessionState.UNLOADED else previous_state
            )
            self.notifier.notify_error(e.message or "Failed to save branding settings")
            return False
        finally:
            self._saving = False

        self.last_saved = datetime.now(timezone.utc)
        self.last_error = None
        # Edits made while the request was in flight are still unsaved
        self.state = SessionState.LOADED if self.config is snapshot else SessionState.EDITING
        self.notifier.notify_success("Branding settings saved")
        self.apply(force=True)
        return True

    # ==================== EXPORT / IMPORT ====================

    def export_json(self) -> str:
        """Serialize the current configuration (pretty-printed JSON)."""
        return json.dumps(self.config.to_payload(), indent=2)

    def export_to(self, path: str | Path) -> Path:
        """Write the export to ``path``; a directory gets ``branding-config.json``."""
        target = Path(path)
        if target.is_dir():
            target = target / EXPORT_FILENAME
        target.write_text(self.export_json(), encoding="utf-8")
        logger.info(f"Branding exported to {target}")
        return target

    def import_json(self, text: str, unsafe: bool = False) -> BrandingConfig:
        """
        Replace the configuration with an imported document.

        The document is validated against the branding schema unless
        ``unsafe`` is set, in which case it is taken as-is on top of the
        defaults and the caller owns any inconsistency.

        Raises:
            InvalidImportError: ``text`` is not valid JSON
            SchemaImportError: the document does not match the schema, or an
                unchecked document cannot be rendered (the previous
                configuration is kept)
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            self.notifier.notify_error("Invalid JSON")
            raise InvalidImportError() from e

        if not isinstance(data, dict):
            self.notifier.notify_error("Imported branding must be a JSON object")
            raise SchemaImportError("Imported branding must be a JSON object")

        if unsafe:
            logger.warning("Importing branding without schema validation")
            merged = merge_defaults(default_branding_config().to_payload(), data)
            config = _construct_unchecked(BrandingConfig, merged)
        else:
            try:
                config = BrandingConfig.model_validate(data)
            except ValidationError as e:
                self.notifier.notify_error("Imported branding does not match the schema")
                raise SchemaImportError(
                    "Imported branding does not match the schema",
                    errors=e.errors(include_url=False),
                ) from e

        if unsafe:
            return self._replace_unchecked(config)
        self.notifier.notify_success("Branding configuration imported")
        return self._replace(config)

    def _replace_unchecked(self, config: BrandingConfig) -> BrandingConfig:
        previous, previous_state = self.config, self.state
        try:
            self._replace(config)
        except (AttributeError, TypeError, ValueError) as e:
            logger.error(f"Imported branding cannot be rendered: {e}")
            self.config, self.state = previous, previous_state
            self._tracker.reset()
            self.notifier.notify_error("Imported branding cannot be applied")
            raise SchemaImportError("Imported branding cannot be applied") from e
        self.notifier.notify_success("Branding configuration imported")
        return config

    def import_from(self, path: str | Path, unsafe: bool = False) -> BrandingConfig:
        return self.import_json(Path(path).read_text(encoding="utf-8"), unsafe=unsafe)

    # ==================== APPLY ====================

    @property
    def mode(self) -> ThemeMode:
        return self.mode_resolver.resolve()

    def stylesheet(self, mode: ThemeMode | str | None = None) -> ThemeStylesheet:
        return render_stylesheet(self.config, mode or self.mode)

    def apply(self, surface: ThemeSurface | None = None, force: bool = False) -> bool:
        """
        Push the current theme to a surface.

        Skipped when the relevant parts of the configuration and the mode
        are unchanged since the last apply, unless ``force`` is set.

        Returns:
            True if a stylesheet was pushed
        """
        target = surface or self.surface
        if target is None:
            return False
        mode = self.mode
        if force:
            self._tracker.reset()
        if not self._tracker.needs_apply(self.config, mode):
            return False
        target.apply_stylesheet(render_stylesheet(self.config, mode))
        return True
