"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from routesitemap.cli import cli
from routesitemap.config import Config


class TestPathsCommand:
    """Tests for the paths command."""

    def test__prints_flattened_paths(self, routes_file: Path) -> None:
        """Print one path per line."""
        runner = CliRunner()
        with patch.object(Config, "_discover_config", return_value=None):
            result = runner.invoke(cli, ["paths", str(routes_file)])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "/",
            "/auth",
            "/child/:id",
            "/child/:id/grand-child",
        ]

    def test__applies_config_filter_and_params(self, tmp_path: Path, routes_file: Path) -> None:
        """Use filter and params from config file."""
        config_file = tmp_path / "routesitemap.toml"
        config_file.write_text("""
[filter]
rules = ["/auth", "grand-child"]

[params]
"/child/:id" = [{ id = ["1", "2"] }]
""")

        runner = CliRunner()
        result = runner.invoke(cli, ["paths", str(routes_file), "-c", str(config_file)])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["/", "/child/1", "/child/2"]

    def test__strict__fails_on_unbound_param(self, tmp_path: Path, routes_file: Path) -> None:
        """Fail in strict mode when a dynamic path has no binding."""
        config_file = tmp_path / "routesitemap.toml"
        config_file.write_text('[params]\n"/child/:id" = [{ id = "1" }]')

        runner = CliRunner()
        result = runner.invoke(
            cli, ["paths", str(routes_file), "-c", str(config_file), "--strict"]
        )

        assert result.exit_code == 1
        assert "No value for parameter ':id'" in result.output

    def test__fails_without_routes_file(self, tmp_path: Path) -> None:
        """Fail when routes file is neither given nor configured."""
        config_file = tmp_path / "routesitemap.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(cli, ["paths", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "routes file required" in result.output

    def test__fails_on_missing_file(self, tmp_path: Path) -> None:
        """Fail when routes file doesn't exist."""
        runner = CliRunner()
        result = runner.invoke(cli, ["paths", str(tmp_path / "missing.json")])

        assert result.exit_code != 0


class TestBuildCommand:
    """Tests for the build command."""

    def test__writes_single_sitemap(self, tmp_path: Path, routes_file: Path) -> None:
        """Write one sitemap file."""
        dest = tmp_path / "public" / "sitemap.xml"

        runner = CliRunner()
        with patch.object(Config, "_discover_config", return_value=None):
            result = runner.invoke(
                cli,
                [
                    "build",
                    str(routes_file),
                    "--hostname",
                    "https://example.com",
                    "-o",
                    str(dest),
                ],
            )

        assert result.exit_code == 0
        assert "Sitemap generated successfully!" in result.output
        assert "https://example.com/auth" in dest.read_text(encoding="utf-8")

    def test__writes_index_over_limit(self, tmp_path: Path, routes_file: Path) -> None:
        """Write shards and index when paths exceed the limit."""
        config_file = tmp_path / "routesitemap.toml"
        config_file.write_text("""
[sitemap]
hostname = "https://example.com"
dest = "out/sitemap.xml"
limit_count_paths = 3
""")

        runner = CliRunner()
        result = runner.invoke(cli, ["build", str(routes_file), "-c", str(config_file)])

        assert result.exit_code == 0
        assert (tmp_path / "out" / "sitemap-0.xml").exists()
        assert (tmp_path / "out" / "sitemap-1.xml").exists()
        index = (tmp_path / "out" / "sitemap.xml").read_text(encoding="utf-8")
        assert "https://example.com/sitemap-1.xml" in index

    def test__fails_without_hostname(self, tmp_path: Path, routes_file: Path) -> None:
        """Fail when hostname is not provided."""
        config_file = tmp_path / "routesitemap.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(cli, ["build", str(routes_file), "-c", str(config_file)])

        assert result.exit_code == 1
        assert "hostname required" in result.output

    def test__fails_on_invalid_config(self, tmp_path: Path, routes_file: Path) -> None:
        """Report configuration errors."""
        config_file = tmp_path / "routesitemap.toml"
        config_file.write_text("[filter]\nis_valid = 1")

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["build", str(routes_file), "-c", str(config_file), "--hostname", "https://a.b"],
        )

        assert result.exit_code == 1
        assert "filter.is_valid must be a boolean" in result.output
