"""Tests for Config class."""

import pytest

from chezdesk.config import Config, ConfigError


class TestConfigDefaults:
    """Tests for default configuration."""

    def test_config_defaults(self):
        """Default config has expected structure."""
        config = Config()
        assert config.get("chezmoi.binary") == "chezmoi"
        assert config.get("chezmoi.include") == "files"
        assert config.get("chezmoi.upstream") == "@{upstream}"
        assert config.get("chezmoi.force") is True
        assert config.get("chezmoi.source") is None

    def test_missing_key_returns_default(self):
        config = Config()
        assert config.get("chezmoi.nope", "fallback") == "fallback"
        assert config.get("chezmoi.binary.deeper") is None

    def test_missing_file_uses_defaults(self, tmp_path):
        config = Config(tmp_path / "absent.yaml")
        assert config.get("chezmoi.binary") == "chezmoi"

    def test_defaults_not_shared_between_instances(self):
        first = Config()
        first.data["chezmoi"]["binary"] = "/changed"
        assert Config().get("chezmoi.binary") == "chezmoi"


class TestConfigFile:
    """Tests for loading YAML files."""

    def test_deep_merges_user_values(self, tmp_path):
        """User keys override defaults without dropping the others."""
        path = tmp_path / ".chezdesk.yaml"
        path.write_text(
            "chezmoi:\n"
            "  binary: /opt/bin/chezmoi\n"
            "  force: false\n"
        )

        config = Config(path)

        assert config.get("chezmoi.binary") == "/opt/bin/chezmoi"
        assert config.get("chezmoi.force") is False
        assert config.get("chezmoi.include") == "files"

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / ".chezdesk.yaml"
        path.write_text("")
        assert Config(path).get("chezmoi.binary") == "chezmoi"

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / ".chezdesk.yaml"
        path.write_text("chezmoi: [unclosed\n")

        with pytest.raises(ConfigError, match=".chezdesk.yaml"):
            Config(path)

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / ".chezdesk.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigError, match="mapping"):
            Config(path)


class TestGlobalArgs:
    """Tests for get_global_args method."""

    def test_no_global_args_by_default(self):
        assert Config().get_global_args() == []

    def test_source_and_config_flags(self, tmp_path):
        path = tmp_path / ".chezdesk.yaml"
        path.write_text(
            "chezmoi:\n"
            "  source: /srv/dots\n"
            "  config: /srv/chezmoi.toml\n"
        )

        assert Config(path).get_global_args() == [
            "--source",
            "/srv/dots",
            "--config",
            "/srv/chezmoi.toml",
        ]


class TestGetBool:
    """Tests for get_bool method."""

    def test_yaml_boolean(self, tmp_path):
        path = tmp_path / ".chezdesk.yaml"
        path.write_text("chezmoi:\n  force: false\n")
        assert Config(path).get_bool("chezmoi.force", True) is False

    def test_missing_key_uses_default(self):
        assert Config().get_bool("chezmoi.nope", False) is False

    def test_null_uses_default(self, tmp_path):
        path = tmp_path / ".chezdesk.yaml"
        path.write_text("chezmoi:\n  force: null\n")
        assert Config(path).get_bool("chezmoi.force", True) is True

    def test_quoted_string_raises(self, tmp_path):
        """A quoted "false" is a string, not a boolean."""
        path = tmp_path / ".chezdesk.yaml"
        path.write_text('chezmoi:\n  force: "false"\n')

        with pytest.raises(ConfigError, match="chezmoi.force"):
            Config(path).get_bool("chezmoi.force", True)
