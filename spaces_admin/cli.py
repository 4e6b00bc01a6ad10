"""
Spaces Admin CLI

Command-line interface for the spaces-admin SDK.

Commands:
  spaces-admin branding ...               - Export, import, preview and edit branding
  spaces-admin settings show              - Print the merged system settings
  spaces-admin generate-endpoint-tests    - Generate endpoint smoke tests
"""

import asyncio
import json
import sys
from typing import Any, Awaitable

from admin_core.config import get_settings
from admin_core.core.exceptions import AdminError
from admin_core.models.enums import ThemeMode
from admin_core.services import endpoint_tests
from admin_core.services.branding_session import EXPORT_FILENAME, BrandingSession
from admin_core.services.icon_registry import render_logo
from admin_core.services.settings_session import SettingsSession
from admin_core.services.theme_css import ThemeModeResolver

from . import log
from .branding import branding
from .client import _clear_client, get_client
from .settings import settings as settings_sdk


def _run(coro: Awaitable[Any]) -> Any:
    """Run a coroutine and close the shared HTTP client afterwards."""

    async def runner():
        try:
            return await coro
        finally:
            await get_client().close()
            _clear_client()

    return asyncio.run(runner())


def _branding_session(dark: bool | None = None) -> BrandingSession:
    resolver = ThemeModeResolver(explicit=ThemeMode.DARK if dark else None)
    return BrandingSession(branding, mode_resolver=resolver, notifier=log)


def main(args: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if args is None:
        args = sys.argv[1:]

    log.set_level(get_settings().log_level)

    # No args - show help
    if not args:
        print_help()
        return 0

    command = args[0].lower()

    if command in ("help", "-h", "--help"):
        print_help()
        return 0

    try:
        if command == "branding":
            return handle_branding(args[1:])

        if command == "settings":
            return handle_settings(args[1:])

        if command == "generate-endpoint-tests":
            return handle_generate_endpoint_tests(args[1:])
    except AdminError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    # Unknown command
    print(f"Unknown command: {command}", file=sys.stderr)
    print_help()
    return 1


def print_help() -> None:
    """Print CLI help message."""
    print("""
spaces-admin - Administration toolkit for the spaces platform

Usage:
  spaces-admin <command> [options]

Commands:
  branding export [PATH]                    Write the branding configuration as JSON
  branding import PATH [--unsafe]           Import a branding JSON file and save it
  branding css [--dark]                     Print the generated theme stylesheet
  branding logo                             Print the application logo markup
  branding set-style ID MODE FIELD VALUE    Set one component style property and save
  settings show                             Print the system settings
  generate-endpoint-tests ROOT [options]    Generate endpoint smoke tests
  help                                      Show this help message

Environment:
  SPACES_ADMIN_API_URL     Platform URL (default: http://localhost:3000)
  SPACES_ADMIN_API_TOKEN   Bearer token

Examples:
  spaces-admin branding export ./backups
  spaces-admin branding set-style text-input dark backgroundColor "#1c1c1e"
  spaces-admin generate-endpoint-tests src/app --output tests/generated/test_api.py
""".strip())


# =============================================================================
# branding
# =============================================================================


def print_branding_help() -> None:
    print("""
Usage: spaces-admin branding <action> [arguments]

Actions:
  export [PATH]                    Export to PATH (file or directory; default: export directory)
  import PATH [--unsafe]           Import PATH and save; --unsafe skips schema validation
  css [--dark]                     Print the stylesheet for light (default) or dark mode
  logo                             Print the logo as HTML (image or icon on its background)
  set-style ID MODE FIELD VALUE    Set a component style property, e.g.
                                   set-style button light backgroundColor "#0a84ff"
""".strip())


def handle_branding(args: list[str]) -> int:
    """
    Handle 'spaces-admin branding' commands.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if not args or args[0] in ("--help", "-h"):
        print_branding_help()
        return 0

    action, rest = args[0], args[1:]

    if action == "export":
        if len(rest) > 1:
            print("Error: export takes at most one PATH", file=sys.stderr)
            return 1
        target = rest[0] if rest else get_settings().export_path(EXPORT_FILENAME)
        return _run(_branding_export(target))

    if action == "import":
        unsafe = "--unsafe" in rest
        paths = [arg for arg in rest if arg != "--unsafe"]
        if len(paths) != 1:
            print("Error: import requires exactly one PATH", file=sys.stderr)
            return 1
        return _run(_branding_import(paths[0], unsafe))

    if action == "css":
        unknown = [arg for arg in rest if arg != "--dark"]
        if unknown:
            print(f"Unknown option: {unknown[0]}", file=sys.stderr)
            return 1
        return _run(_branding_css("--dark" in rest))

    if action == "logo":
        if rest:
            print(f"Unknown option: {rest[0]}", file=sys.stderr)
            return 1
        return _run(_branding_logo())

    if action == "set-style":
        if len(rest) != 4:
            print("Error: set-style requires ID MODE FIELD VALUE", file=sys.stderr)
            return 1
        component_id, mode, field, value = rest
        if mode not in (ThemeMode.LIGHT.value, ThemeMode.DARK.value):
            print("Error: MODE must be 'light' or 'dark'", file=sys.stderr)
            return 1
        return _run(_branding_set_style(component_id, mode, field, value))

    print(f"Unknown branding action: {action}", file=sys.stderr)
    print_branding_help()
    return 1


async def _branding_export(target) -> int:
    session = _branding_session()
    await session.load()
    path = session.export_to(target)
    print(f"Branding exported to {path}")
    return 0


async def _branding_import(path: str, unsafe: bool) -> int:
    session = _branding_session()
    await session.load()
    try:
        session.import_from(path, unsafe=unsafe)
    except OSError as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        return 1
    return 0 if await session.save() else 1


async def _branding_css(dark: bool) -> int:
    session = _branding_session(dark=dark)
    await session.load()
    print(session.stylesheet().to_css(), end="")
    return 0


async def _branding_logo() -> int:
    session = _branding_session()
    await session.load()
    markup = render_logo(session.config)
    if not markup:
        print("No logo configured", file=sys.stderr)
        return 0
    print(markup)
    return 0


async def _branding_set_style(component_id: str, mode: str, field: str, value: str) -> int:
    session = _branding_session()
    await session.load()
    session.update_styling(component_id, mode, field, value)
    return 0 if await session.save() else 1


# =============================================================================
# settings
# =============================================================================


def handle_settings(args: list[str]) -> int:
    if not args or args[0] in ("--help", "-h"):
        print("""
Usage: spaces-admin settings show

Print the system settings (remote values merged onto defaults) as JSON.
""".strip())
        return 0

    if args[0] == "show":
        return _run(_settings_show())

    print(f"Unknown settings action: {args[0]}", file=sys.stderr)
    return 1


async def _settings_show() -> int:
    session = SettingsSession(settings_sdk, notifier=log)
    values = await session.load()
    print(json.dumps(values.model_dump(mode="json", by_alias=True), indent=2))
    return 0


# =============================================================================
# generate-endpoint-tests
# =============================================================================


def handle_generate_endpoint_tests(args: list[str]) -> int:
    """
    Handle 'spaces-admin generate-endpoint-tests' command.

    Args:
        args: ROOT plus optional --output/-o and --base-url/-u

    Returns:
        Exit code (0 for success, 1 for error)
    """
    config = get_settings()
    root = None
    output = config.endpoint_tests_output
    base_url = config.api_url

    i = 0
    while i < len(args):
        arg = args[i]

        if arg in ("--output", "-o", "--base-url", "-u"):
            if i + 1 >= len(args):
                print(f"Error: {arg} requires a value", file=sys.stderr)
                return 1
            if arg in ("--output", "-o"):
                output = args[i + 1]
            else:
                base_url = args[i + 1]
            i += 2
        elif arg in ("--help", "-h"):
            print("""
Usage: spaces-admin generate-endpoint-tests ROOT [options]

Scan ROOT for route.ts / route.js / route.py files and write a pytest module
that GETs every route and fails on HTTP 500.

Options:
  --output, -o PATH     Output file (default: SPACES_ADMIN_ENDPOINT_TESTS_OUTPUT)
  --base-url, -u URL    Server the generated tests call (default: SPACES_ADMIN_API_URL)
  --help, -h            Show this help message
""".strip())
            return 0
        elif root is None and not arg.startswith("-"):
            root = arg
            i += 1
        else:
            print(f"Unknown option: {arg}", file=sys.stderr)
            return 1

    if root is None:
        print("Error: ROOT directory is required", file=sys.stderr)
        return 1

    try:
        routes = endpoint_tests.generate(root, output, base_url=base_url)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Generated tests for {len(routes)} routes in {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
