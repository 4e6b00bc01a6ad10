"""
Unit tests for the endpoint smoke-test generator.
"""

import pytest

from admin_core.services.endpoint_tests import (
    collect_routes,
    find_route_files,
    generate,
    render_test_module,
    route_path,
)


def _touch(root, relative):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("export async function GET() {}\n")
    return path


@pytest.fixture
def app_root(tmp_path):
    root = tmp_path / "app"
    _touch(root, "api/users/route.ts")
    _touch(root, "api/users/[id]/route.ts")
    _touch(root, "api/files/[...path]/route.js")
    _touch(root, "api/(admin)/audit/route.ts")
    _touch(root, "api/health/route.py")
    _touch(root, "api/users/helpers.ts")
    _touch(root, "node_modules/pkg/api/route.ts")
    return root


class TestRoutePath:
    """Tests for URL derivation."""

    @pytest.mark.parametrize(
        "relative,expected",
        [
            ("api/users/route.ts", "/api/users"),
            ("api/users/[id]/route.ts", "/api/users/test-id"),
            ("api/files/[...path]/route.ts", "/api/files/test-path"),
            ("api/docs/[[...slug]]/route.ts", "/api/docs/test-slug"),
            ("api/(admin)/audit/route.ts", "/api/audit"),
            ("src/app/api/spaces/route.ts", "/api/spaces"),
        ],
    )
    def test_route_path(self, tmp_path, relative, expected):
        """Test dynamic segments, catch-alls and route groups."""
        assert route_path(tmp_path / relative, tmp_path) == expected


class TestCollect:
    """Tests for scanning a source tree."""

    def test_find_route_files_skips_vendored(self, app_root):
        """Test only route modules outside skipped directories are found."""
        files = find_route_files(app_root)

        assert len(files) == 5
        assert all("node_modules" not in f.parts for f in files)

    def test_collect_routes_sorted(self, app_root):
        """Test routes are unique and sorted."""
        assert collect_routes(app_root) == [
            "/api/audit",
            "/api/files/test-path",
            "/api/health",
            "/api/users",
            "/api/users/test-id",
        ]


class TestGenerate:
    """Tests for writing the generated module."""

    def test_render_contains_routes_and_base_url(self):
        """Test the module lists routes and the default server."""
        source = render_test_module(["/api/users"], root="app", base_url="http://example.test")

        assert "    '/api/users',\n" in source
        assert 'os.environ.get("SPACES_ADMIN_API_URL", "http://example.test")' in source
        assert "def test_get_does_not_return_500(path):" in source
        compile(source, "generated.py", "exec")

    def test_generate_writes_file(self, app_root, tmp_path):
        """Test generate creates parent directories and writes the module."""
        output = tmp_path / "out" / "nested" / "test_endpoints.py"

        routes = generate(app_root, output)

        assert output.exists()
        assert len(routes) == 5
        assert "'/api/users/test-id'" in output.read_text()

    def test_generate_missing_root(self, tmp_path):
        """Test a missing root directory is reported."""
        with pytest.raises(FileNotFoundError):
            generate(tmp_path / "missing", tmp_path / "out.py")
