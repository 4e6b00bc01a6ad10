"""
Endpoint smoke-test generator.

Walks an API source tree for route modules (``route.ts``, ``route.js``,
``route.py``), derives the URL of each one and writes a pytest module that
issues a GET per route and asserts the server did not answer 500.

Path rules:
    app/api/users/route.ts            -> /api/users
    app/api/users/[id]/route.ts       -> /api/users/test-id
    app/api/files/[...path]/route.ts  -> /api/files/test-path
    app/api/(admin)/audit/route.ts    -> /api/audit
"""

import logging
import re
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

ROUTE_FILENAMES = frozenset({"route.ts", "route.js", "route.py"})

# Directories never scanned
SKIP_DIRECTORIES = frozenset({"node_modules", ".git", ".next", "__pycache__", ".venv", "dist", "build"})

_DYNAMIC_SEGMENT = re.compile(r"^\[(?:\.\.\.)?\[?(?:\.\.\.)?([^\]]+)\]?\]$")
_ROUTE_GROUP = re.compile(r"^\(.*\)$")

GENERATED_HEADER = '''"""
Generated endpoint smoke tests.

Regenerate with: spaces-admin generate-endpoint-tests {root}
Do not edit by hand.
"""

import os

import httpx
import pytest

BASE_URL = os.environ.get("SPACES_ADMIN_API_URL", "{base_url}")

ROUTES = [
{routes}]


@pytest.mark.parametrize("path", ROUTES)
def test_get_does_not_return_500(path):
    """GET {{path}} must not fail with an internal server error."""
    with httpx.Client(base_url=BASE_URL, timeout=30.0) as client:
        response = client.get(path)
    assert response.status_code != 500, f"GET {{path}} returned 500: {{response.text[:200]}}"
'''


def find_route_files(root: str | Path) -> list[Path]:
    """Route modules under ``root`` (sorted, skipping vendored and build dirs)."""
    root = Path(root)
    found = []
    for path in root.rglob("*"):
        if path.name not in ROUTE_FILENAMES or not path.is_file():
            continue
        if any(part in SKIP_DIRECTORIES for part in path.relative_to(root).parts):
            continue
        found.append(path)
    return sorted(found)


def route_path(route_file: str | Path, root: str | Path) -> str:
    """
    URL path served by a route module.

    The path starts at the ``api`` segment when the file lives under one,
    otherwise at ``root``.
    """
    parts = list(Path(route_file).relative_to(root).parent.parts)
    if "api" in parts:
        parts = parts[parts.index("api"):]

    segments = []
    for part in parts:
        if _ROUTE_GROUP.match(part):
            continue
        dynamic = _DYNAMIC_SEGMENT.match(part)
        if dynamic:
            segments.append(f"test-{dynamic.group(1)}")
        else:
            segments.append(part)
    return "/" + "/".join(segments)


def collect_routes(root: str | Path) -> list[str]:
    """Unique, sorted URL paths of every route module under ``root``."""
    return sorted({route_path(path, root) for path in find_route_files(root)})


def render_test_module(routes: Iterable[str], root: str = ".", base_url: str = "http://localhost:3000") -> str:
    lines = "".join(f"    {path!r},\n" for path in routes)
    return GENERATED_HEADER.format(root=root, base_url=base_url, routes=lines)


def generate(root: str | Path, output: str | Path, base_url: str = "http://localhost:3000") -> list[str]:
    """
    Scan ``root`` and write the smoke-test module to ``output``.

    Returns:
        The route paths written
    """
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Route directory not found: {root}")

    routes = collect_routes(root)
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_test_module(routes, root=str(root), base_url=base_url), encoding="utf-8")
    logger.info(f"Generated {len(routes)} endpoint tests in {output}")
    return routes
