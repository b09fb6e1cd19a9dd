"""Tests for the sync command."""
import json

import pytest

from wpsync_common import HostError
from wpsync_cli.main import app


class FakeIndex:
    """PackageIndexClient replacement that knows a fixed set of slugs."""

    published = {("plugin", "akismet")}
    created = []

    def __init__(self, url_template=None, timeout=None):
        FakeIndex.created.append((url_template, timeout))

    def exists(self, kind, slug):
        return (kind, slug) in self.published


@pytest.fixture
def fake_index(monkeypatch):
    FakeIndex.created = []
    monkeypatch.setattr("wpsync_cli.sync_cmd.PackageIndexClient", FakeIndex)
    return FakeIndex


class TestSyncCommand:
    def test_confirmed_sync_writes_manifest(self, runner, composer_json, stub_host, fake_index, akismet):
        path = composer_json({"require-dev": {"x/y": "*"}})
        stub_host(plugins=[akismet])

        result = runner.invoke(app, ["sync"], input="y\n")

        assert result.exit_code == 0, result.stdout
        assert "ADD:    roots/wordpress: ^6.0" in result.stdout
        assert "ADD:    wpackagist-plugin/akismet: ^5.0" in result.stdout
        assert "ADD:    Repository at https://wpackagist.org" in result.stdout
        assert "Successfully updated composer.json." in result.stdout
        data = json.loads(path.read_text())
        assert data["require"] == {"roots/wordpress": "^6.0", "wpackagist-plugin/akismet": "^5.0"}
        assert data["require-dev"] == {"x/y": "*"}

    def test_declined_sync_leaves_file(self, runner, composer_json, stub_host, fake_index):
        path = composer_json({"name": "acme/site"})
        before = path.read_bytes()
        stub_host()

        result = runner.invoke(app, ["sync"], input="n\n")

        assert result.exit_code == 0
        assert "Aborted. No changes were made." in result.stdout
        assert path.read_bytes() == before

    def test_yes_skips_prompt(self, runner, composer_json, stub_host, fake_index):
        path = composer_json({})
        stub_host(core_version="6.4.2")

        result = runner.invoke(app, ["sync", "--yes"])

        assert result.exit_code == 0
        assert "Apply these changes?" not in result.stdout
        assert json.loads(path.read_text())["require"] == {"roots/wordpress": "^6.4"}

    def test_dry_run(self, runner, composer_json, stub_host, fake_index):
        path = composer_json({})
        before = path.read_bytes()
        stub_host()

        result = runner.invoke(app, ["sync", "--dry-run"])

        assert result.exit_code == 0
        assert "Dry run. No changes were made." in result.stdout
        assert path.read_bytes() == before

    def test_up_to_date(self, runner, composer_json, stub_host, fake_index):
        composer_json({"require": {"roots/wordpress": "^6.0"}})
        stub_host()

        result = runner.invoke(app, ["sync"])

        assert result.exit_code == 0
        assert "composer.json is already up-to-date. No changes needed." in result.stdout

    def test_offline_skips_index(self, runner, composer_json, stub_host, fake_index, akismet):
        composer_json({})
        stub_host(plugins=[akismet])

        result = runner.invoke(app, ["sync", "--offline", "--dry-run"])

        assert result.exit_code == 0
        assert fake_index.created == []
        assert "wpackagist-plugin/akismet" not in result.stdout
        assert "could not be resolved" in result.stdout

    def test_options_reach_host(self, runner, composer_json, stub_host, fake_index):
        composer_json({})
        calls = stub_host()

        runner.invoke(app, ["sync", "--dry-run", "--path", "/srv/wp", "--wp-bin", "wp-cli.phar"])

        assert calls == {"wp_bin": "wp-cli.phar", "path": "/srv/wp"}

    def test_manifest_option(self, runner, project_dir, stub_host, fake_index):
        site = project_dir / "site"
        site.mkdir()
        (site / "composer.json").write_text("{}")
        stub_host()

        result = runner.invoke(app, ["sync", "-m", "site/composer.json", "-y"])

        assert result.exit_code == 0
        assert "roots/wordpress" in json.loads((site / "composer.json").read_text())["require"]

    def test_missing_manifest(self, runner, project_dir, stub_host, fake_index):
        stub_host()

        result = runner.invoke(app, ["sync"])

        assert result.exit_code == 1
        assert "Please run 'composer init' first." in result.stdout

    def test_invalid_manifest(self, runner, project_dir, stub_host, fake_index):
        (project_dir / "composer.json").write_text("{broken")
        stub_host()

        result = runner.invoke(app, ["sync"])

        assert result.exit_code == 1
        assert "Unable to parse" in result.stdout

    def test_host_error(self, runner, composer_json, stub_host, fake_index):
        composer_json({})
        stub_host(error=HostError("wp-cli not found: 'wp'", command="wp core version"))

        result = runner.invoke(app, ["sync"])

        assert result.exit_code == 1
        assert "wp-cli not found" in result.stdout

    def test_keyboard_interrupt(self, runner, composer_json, stub_host, fake_index):
        composer_json({})
        stub_host(error=KeyboardInterrupt())

        result = runner.invoke(app, ["sync"])

        assert result.exit_code == 130
        assert "Sync cancelled" in result.stdout
