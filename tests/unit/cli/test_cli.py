"""
Unit tests for the spaces-admin CLI.

Network commands run against the in-memory backend by injecting a client
before ``main`` is called; the CLI closes it when the command finishes.
"""

import json

import httpx
import pytest

from spaces_admin.cli import main
from spaces_admin.client import AdminClient, _clear_client, set_client

TEST_API_URL = "http://testserver"


@pytest.fixture
def cli_backend(backend):
    set_client(AdminClient(TEST_API_URL, transport=httpx.ASGITransport(app=backend.app)))
    yield backend
    _clear_client()


class TestHelp:
    """Tests for help and dispatch."""

    def test_no_args_prints_help(self, capsys):
        """Test running without a command shows usage."""
        assert main([]) == 0
        assert "Usage:" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        """Test an unknown command fails."""
        assert main(["frobnicate"]) == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().err

    def test_branding_help(self, capsys):
        """Test branding without an action shows its usage."""
        assert main(["branding"]) == 0
        assert "set-style" in capsys.readouterr().out


class TestBrandingCommands:
    """Tests for the branding commands."""

    def test_export_to_directory(self, cli_backend, tmp_path, capsys):
        """Test export writes branding-config.json into a directory."""
        cli_backend.branding = {"applicationName": "Acme"}

        assert main(["branding", "export", str(tmp_path)]) == 0

        exported = json.loads((tmp_path / "branding-config.json").read_text())
        assert exported["applicationName"] == "Acme"
        assert "Branding exported to" in capsys.readouterr().out

    def test_import_saves(self, cli_backend, tmp_path):
        """Test import validates the file and saves it."""
        path = tmp_path / "branding.json"
        path.write_text(json.dumps({"applicationName": "Imported"}))

        assert main(["branding", "import", str(path)]) == 0

        assert cli_backend.branding["applicationName"] == "Imported"

    def test_import_invalid_json(self, cli_backend, tmp_path, capsys):
        """Test invalid JSON is reported and nothing is saved."""
        path = tmp_path / "branding.json"
        path.write_text("{broken")

        assert main(["branding", "import", str(path)]) == 1

        assert "Error: Invalid JSON" in capsys.readouterr().err
        assert cli_backend.calls("PUT", "/api/admin/branding") == []

    def test_import_requires_path(self, capsys):
        """Test import without a path fails."""
        assert main(["branding", "import"]) == 1
        assert "exactly one PATH" in capsys.readouterr().err

    def test_css_dark(self, cli_backend, capsys):
        """Test the dark stylesheet is printed."""
        assert main(["branding", "css", "--dark"]) == 0

        css = capsys.readouterr().out
        assert css.startswith(":root {")
        assert "--brand-body-text: #F5F5F7;" in css

    def test_set_style(self, cli_backend):
        """Test set-style edits one property and saves the document."""
        assert main(["branding", "set-style", "button", "dark", "backgroundColor", "#0a84ff"]) == 0

        assert cli_backend.branding["componentStyling"]["button"]["dark"]["backgroundColor"] == "#0a84ff"

    def test_set_style_invalid_mode(self, capsys):
        """Test MODE must be light or dark."""
        assert main(["branding", "set-style", "button", "dim", "padding", "4px"]) == 1
        assert "MODE must be" in capsys.readouterr().err

    def test_save_failure_exit_code(self, cli_backend):
        """Test a rejected save exits with 1."""
        cli_backend.fail("PUT", "/api/admin/branding", 500, {"error": "Disk full"})

        assert main(["branding", "set-style", "card", "light", "padding", "8px"]) == 1

    def test_logo_icon(self, cli_backend, capsys):
        """Test an icon logo prints the icon on its background color."""
        cli_backend.branding = {
            "applicationLogoType": "icon",
            "applicationLogoIcon": "Building",
            "applicationLogoBackgroundColor": "#123456",
        }

        assert main(["branding", "logo"]) == 0

        out = capsys.readouterr().out
        assert 'data-lucide="building"' in out
        assert "background-color: #123456" in out

    def test_logo_not_configured(self, cli_backend, capsys):
        """Test the default configuration has no logo to print."""
        assert main(["branding", "logo"]) == 0

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No logo configured" in captured.err


class TestSettingsCommand:
    """Tests for settings show."""

    def test_show(self, cli_backend, capsys):
        """Test settings are printed as JSON with wire keys."""
        cli_backend.settings = {"siteName": "Acme", "sessionTimeout": "12"}

        assert main(["settings", "show"]) == 0

        values = json.loads(capsys.readouterr().out)
        assert values["siteName"] == "Acme"
        assert values["sessionTimeout"] == 12


class TestGenerateEndpointTests:
    """Tests for generate-endpoint-tests."""

    def test_generate(self, tmp_path, capsys):
        """Test routes are scanned and the module written."""
        route = tmp_path / "app" / "api" / "users" / "[id]" / "route.ts"
        route.parent.mkdir(parents=True)
        route.write_text("export async function GET() {}\n")
        output = tmp_path / "generated" / "test_api.py"

        assert main([
            "generate-endpoint-tests", str(tmp_path / "app"), "-o", str(output), "--base-url", "http://api.test",
        ]) == 0

        source = output.read_text()
        assert "'/api/users/test-id'" in source
        assert "http://api.test" in source
        assert f"Generated tests for 1 routes in {output}" in capsys.readouterr().out

    def test_requires_root(self, capsys):
        """Test ROOT is mandatory."""
        assert main(["generate-endpoint-tests"]) == 1
        assert "ROOT directory is required" in capsys.readouterr().err

    def test_missing_root(self, tmp_path, capsys):
        """Test a missing ROOT directory fails."""
        assert main(["generate-endpoint-tests", str(tmp_path / "nope"), "-o", str(tmp_path / "out.py")]) == 1
        assert "Route directory not found" in capsys.readouterr().err

    def test_option_requires_value(self, tmp_path, capsys):
        """Test --output without a value fails."""
        assert main(["generate-endpoint-tests", str(tmp_path), "--output"]) == 1
        assert "--output requires a value" in capsys.readouterr().err
