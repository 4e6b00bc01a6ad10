"""
Unit tests for BrandingSession.

The backend is an AsyncMock, the rendering surface a MagicMock, so these
tests cover the session logic without HTTP.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from admin_core.core.exceptions import (
    ApiError,
    ClientValidationError,
    InvalidImportError,
    SaveInProgressError,
    SchemaImportError,
    TransportError,
)
from admin_core.models.contracts.branding import DEFAULT_BRANDING_CONFIG, BrandingConfig
from admin_core.models.enums import SessionState, ThemeMode
from admin_core.services.branding_session import EXPORT_FILENAME, BrandingSession
from admin_core.services.theme_css import ThemeModeResolver, ThemeStylesheet


@pytest.fixture
def backend():
    backend = MagicMock()
    backend.fetch = AsyncMock(return_value={"applicationName": "Acme"})
    backend.store = AsyncMock(return_value={"success": True})
    return backend


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def surface():
    return MagicMock()


@pytest.fixture
def session(backend, notifier, surface):
    return BrandingSession(backend, surface=surface, notifier=notifier)


class TestLoad:
    """Tests for loading the remote configuration."""

    @pytest.mark.asyncio
    async def test_load_merges_remote(self, session):
        """Test the remote document is merged onto the defaults."""
        config = await session.load()

        assert config.application_name == "Acme"
        assert config.light_mode == DEFAULT_BRANDING_CONFIG.light_mode
        assert session.state == SessionState.LOADED

    @pytest.mark.asyncio
    async def test_load_applies_theme(self, session, surface):
        """Test loading pushes a stylesheet to the surface."""
        await session.load()

        surface.apply_stylesheet.assert_called_once()
        stylesheet = surface.apply_stylesheet.call_args.args[0]
        assert isinstance(stylesheet, ThemeStylesheet)
        assert stylesheet.title == "Acme"

    @pytest.mark.asyncio
    async def test_load_failure_keeps_defaults(self, session, backend, notifier):
        """Test a failed fetch falls back to defaults and notifies."""
        backend.fetch.side_effect = TransportError("Network error: refused")

        config = await session.load()

        assert config == DEFAULT_BRANDING_CONFIG
        assert session.state == SessionState.LOADED
        assert session.last_error == "Network error: refused"
        notifier.notify_error.assert_called_once_with("Failed to load branding settings")

    @pytest.mark.asyncio
    async def test_load_invalid_document_keeps_defaults(self, session, backend, notifier):
        """Test a remote document that fails validation falls back to defaults."""
        backend.fetch.return_value = {"drawerOverlay": {"opacity": "opaque"}}

        config = await session.load()

        assert config == DEFAULT_BRANDING_CONFIG
        notifier.notify_error.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("remote", ["<html>Sign in</html>", ["applicationName"]])
    async def test_load_non_object_keeps_defaults(self, session, backend, notifier, remote):
        """Test a body that is not a JSON object falls back to defaults."""
        backend.fetch.return_value = remote

        config = await session.load()

        assert config == DEFAULT_BRANDING_CONFIG
        assert session.state == SessionState.LOADED
        notifier.notify_error.assert_called_once_with("Failed to load branding settings")


class TestEdit:
    """Tests for local edits."""

    @pytest.mark.asyncio
    async def test_update_styling_marks_editing(self, session):
        """Test a style edit changes the config and enters editing."""
        await session.load()

        session.update_styling("button", "light", "backgroundColor", "#0a84ff")

        assert session.state == SessionState.EDITING
        assert session.resolve_styling("button")["light"]["backgroundColor"] == "#0a84ff"

    @pytest.mark.asyncio
    async def test_edit_reapplies_theme(self, session, surface):
        """Test every relevant edit re-applies the theme."""
        await session.load()
        surface.apply_stylesheet.reset_mock()

        session.update_styling("card", "light", "padding", "12px")

        surface.apply_stylesheet.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_top_level_fields(self, session):
        """Test fields are accepted by name or alias."""
        await session.load()

        config = session.update(application_name="Portal", faviconUrl="/favicon.ico")

        assert config.application_name == "Portal"
        assert config.favicon_url == "/favicon.ico"

    @pytest.mark.asyncio
    async def test_update_shares_unchanged_subtrees(self, session):
        """Test untouched nested records keep their identity."""
        await session.load()
        before = session.config

        after = session.update(application_name="Portal")

        assert after.light_mode is before.light_mode
        assert after.global_styling is before.global_styling

    def test_update_unknown_field(self, session):
        """Test an unknown field is rejected locally."""
        with pytest.raises(ClientValidationError) as exc_info:
            session.update(notAField=1)

        assert exc_info.value.field == "notAField"

    def test_update_invalid_value(self, session):
        """Test a value of the wrong type is rejected."""
        with pytest.raises(ClientValidationError):
            session.update(application_logo_type="video")

    def test_set_palette(self, session):
        """Test palette tokens are set by alias and only in the given mode."""
        session.set_palette("dark", primaryColor="#ff0000")

        assert session.config.dark_mode.primary_color == "#ff0000"
        assert session.config.light_mode is DEFAULT_BRANDING_CONFIG.light_mode

    def test_set_palette_unknown_token(self, session):
        """Test unknown color tokens are rejected."""
        with pytest.raises(ClientValidationError):
            session.set_palette("light", neonColor="#0f0")

    def test_reset_to_defaults(self, session):
        """Test reset restores the defaults."""
        session.update_styling("button", "dark", "textColor", "#fff")

        assert session.reset_to_defaults() == DEFAULT_BRANDING_CONFIG


class TestSave:
    """Tests for saving."""

    @pytest.mark.asyncio
    async def test_save_sends_whole_document(self, session, backend, notifier):
        """Test save stores the full camelCase payload."""
        await session.load()
        session.update_styling("button", "light", "textColor", "#111")

        assert await session.save() is True

        payload = backend.store.await_args.args[0]
        assert payload["applicationName"] == "Acme"
        assert payload["componentStyling"]["button"]["light"]["textColor"] == "#111"
        assert "lightMode" in payload and "darkMode" in payload
        assert session.state == SessionState.LOADED
        assert session.last_saved is not None
        notifier.notify_success.assert_called_once_with("Branding settings saved")

    @pytest.mark.asyncio
    async def test_save_failure_keeps_edits(self, session, backend, notifier):
        """Test a rejected save keeps local edits and reports the error."""
        await session.load()
        session.update_styling("button", "light", "textColor", "#111")
        backend.store.side_effect = ApiError(500, "Database unavailable")

        assert await session.save() is False

        assert session.state == SessionState.EDITING
        assert session.resolve_styling("button")["light"]["textColor"] == "#111"
        assert session.last_error == "Database unavailable"
        notifier.notify_error.assert_called_once_with("Database unavailable")
        assert session.is_saving is False

    @pytest.mark.asyncio
    async def test_double_save_rejected(self, session, backend):
        """Test a second save while one is in flight raises."""
        release = asyncio.Event()

        async def slow_store(payload):
            await release.wait()

        backend.store.side_effect = slow_store
        await session.load()

        first = asyncio.create_task(session.save())
        await asyncio.sleep(0)
        assert session.is_saving is True

        with pytest.raises(SaveInProgressError):
            await session.save()

        release.set()
        assert await first is True
        assert backend.store.await_count == 1

    @pytest.mark.asyncio
    async def test_edit_during_save_stays_unsaved(self, session, backend):
        """Test an edit made while saving leaves the session in editing."""
        release = asyncio.Event()

        async def slow_store(payload):
            await release.wait()

        backend.store.side_effect = slow_store
        await session.load()

        task = asyncio.create_task(session.save())
        await asyncio.sleep(0)
        session.update_styling("card", "dark", "padding", "4px")
        release.set()
        await task

        assert session.state == SessionState.EDITING
        sent = backend.store.await_args.args[0]
        assert "card" not in sent["componentStyling"]


class TestExportImport:
    """Tests for JSON export and import."""

    @pytest.mark.asyncio
    async def test_export_round_trip(self, session, backend, notifier):
        """Test an exported document imports to an equal configuration."""
        await session.load()
        session.update_styling("switch", "dark", "backgroundColor", "#333")
        exported = session.export_json()

        other = BrandingSession(backend, notifier=notifier)
        imported = other.import_json(exported)

        assert imported == session.config

    def test_export_to_directory(self, session, tmp_path):
        """Test exporting to a directory uses the default file name."""
        path = session.export_to(tmp_path)

        assert path == tmp_path / EXPORT_FILENAME
        assert json.loads(path.read_text())["applicationName"] == DEFAULT_BRANDING_CONFIG.application_name

    def test_import_invalid_json(self, session, notifier):
        """Test malformed JSON is rejected and the config is unchanged."""
        with pytest.raises(InvalidImportError):
            session.import_json("{not json")

        assert session.config == DEFAULT_BRANDING_CONFIG
        notifier.notify_error.assert_called_once_with("Invalid JSON")

    def test_import_non_object(self, session):
        """Test a JSON array is not a branding document."""
        with pytest.raises(SchemaImportError):
            session.import_json("[1, 2]")

    def test_import_schema_mismatch(self, session):
        """Test documents failing validation are rejected with details."""
        with pytest.raises(SchemaImportError) as exc_info:
            session.import_json(json.dumps({"applicationLogoType": "video"}))

        assert exc_info.value.errors
        assert session.config == DEFAULT_BRANDING_CONFIG

    def test_import_unsafe_skips_validation(self, session):
        """Test unsafe import takes values as-is on top of the defaults."""
        config = session.import_json(json.dumps({"applicationLogoType": "video"}), unsafe=True)

        assert config.application_logo_type == "video"
        assert config.light_mode.primary_color == DEFAULT_BRANDING_CONFIG.light_mode.primary_color

    def test_import_unsafe_scalar_section_uses_default(self, session, surface, notifier):
        """Test a section given as a scalar falls back to its default and still renders."""
        config = session.import_json(
            json.dumps({"lightMode": "oops", "componentStyling": {"button": 3}}), unsafe=True
        )

        assert config.light_mode == DEFAULT_BRANDING_CONFIG.light_mode
        assert "button" not in config.component_styling
        surface.apply_stylesheet.assert_called_once()
        notifier.notify_success.assert_called_once_with("Branding configuration imported")

    def test_import_unsafe_unrenderable_keeps_previous(self, session, surface, notifier):
        """Test an unchecked document that cannot be rendered leaves the session untouched."""
        session.update(applicationName="Before")
        before = session.config
        surface.reset_mock()

        with pytest.raises(SchemaImportError):
            session.import_json(json.dumps({"lightMode": {"primaryColor": 5}}), unsafe=True)

        assert session.config is before
        assert session.state == SessionState.EDITING
        surface.apply_stylesheet.assert_not_called()
        notifier.notify_error.assert_called_once_with("Imported branding cannot be applied")
        assert session.apply() is True

    def test_import_from_file(self, session, tmp_path, notifier):
        """Test importing a file replaces the config and notifies."""
        path = tmp_path / "branding.json"
        path.write_text(json.dumps({"applicationName": "Imported"}))

        config = session.import_from(path)

        assert isinstance(config, BrandingConfig)
        assert config.application_name == "Imported"
        assert session.state == SessionState.EDITING
        notifier.notify_success.assert_called_once_with("Branding configuration imported")


class TestApply:
    """Tests for applying the theme to a surface."""

    def test_no_surface(self, backend):
        """Test apply without a surface does nothing."""
        assert BrandingSession(backend).apply() is False

    def test_unchanged_not_reapplied(self, session, surface):
        """Test applying twice without changes pushes once."""
        assert session.apply() is True
        assert session.apply() is False
        surface.apply_stylesheet.assert_called_once()

    def test_force(self, session, surface):
        """Test force re-applies an unchanged theme."""
        session.apply()

        assert session.apply(force=True) is True
        assert surface.apply_stylesheet.call_count == 2

    def test_mode_from_resolver(self, backend, surface):
        """Test the stylesheet mode follows the resolver."""
        session = BrandingSession(
            backend, surface=surface, mode_resolver=ThemeModeResolver(document_classes=["dark"])
        )

        session.apply()

        assert surface.apply_stylesheet.call_args.args[0].mode == ThemeMode.DARK

    def test_explicit_surface_argument(self, backend):
        """Test a surface passed to apply is used instead of the session's."""
        target = MagicMock()

        assert BrandingSession(backend).apply(surface=target) is True
        target.apply_stylesheet.assert_called_once()
