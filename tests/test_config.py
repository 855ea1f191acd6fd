"""
Tests for dtheader.config module.
"""

import pytest


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_load_config_with_defaults(self, tmp_path):
        """A minimal file is merged over the defaults."""
        from dtheader.config.loader import load_config

        config_file = tmp_path / ".dtheader.toml"
        config_file.write_text("[output]\nformat = \"json\"\n")

        config = load_config(config_file)

        assert config["output"]["format"] == "json"
        assert config["validate"]["strict"] is True
        assert config["files"]["patterns"] == ["index.d.ts"]

    def test_load_config_invalid_value(self, tmp_path):
        from dtheader.config.loader import load_config

        config_file = tmp_path / ".dtheader.toml"
        config_file.write_text("[output]\nformat = \"yaml\"\n")

        with pytest.raises(ValueError, match="output.format"):
            load_config(config_file)

    def test_load_config_malformed_toml(self, tmp_path):
        from dtheader.config.loader import load_config

        config_file = tmp_path / ".dtheader.toml"
        config_file.write_text("[output\n")

        with pytest.raises(Exception):
            load_config(config_file)

    def test_find_config_file(self, tmp_path):
        from dtheader.config.loader import find_config_file

        (tmp_path / ".dtheader.toml").write_text("")
        nested = tmp_path / "types" / "foo"
        nested.mkdir(parents=True)

        config_path = find_config_file(nested)

        assert config_path == (tmp_path / ".dtheader.toml").resolve()

    def test_find_config_file_not_found(self, tmp_path):
        from dtheader.config.loader import find_config_file

        assert find_config_file(tmp_path) is None


class TestConfigMerge:
    """Tests for configuration merging."""

    def test_merge_configs_deep(self):
        from dtheader.config.loader import merge_configs

        defaults = {"files": {"patterns": ["index.d.ts"], "skip": []}, "output": {"format": "text"}}
        user = {"files": {"skip": ["node_modules"]}}

        merged = merge_configs(defaults, user)

        assert merged["files"] == {"patterns": ["index.d.ts"], "skip": ["node_modules"]}
        assert merged["output"]["format"] == "text"
        assert defaults["files"]["skip"] == []

    def test_merge_configs_replaces_lists(self):
        from dtheader.config.loader import merge_configs

        merged = merge_configs({"files": {"patterns": ["a"]}}, {"files": {"patterns": ["b"]}})
        assert merged["files"]["patterns"] == ["b"]


class TestParseToml:
    """Tests for the tomlkit-backed parsers."""

    def test_parse_toml_plain_types(self):
        from dtheader.config import parse_toml

        result = parse_toml('[files]\npatterns = [\n    "index.d.ts",\n    "*.d.ts",\n]\n')

        assert result == {"files": {"patterns": ["index.d.ts", "*.d.ts"]}}
        assert type(result["files"]) is dict

    def test_parse_toml_document_round_trip(self):
        import tomlkit

        from dtheader.config import parse_toml_document

        content = "# comment\n[output]\nformat = \"json\"  # inline\n"
        assert tomlkit.dumps(parse_toml_document(content)) == content


class TestEnvironmentOverrides:
    """Tests for DTHEADER_* environment overrides."""

    def test_env_override_string(self, monkeypatch):
        from dtheader.config.loader import apply_env_overrides

        monkeypatch.setenv("DTHEADER_OUTPUT_FORMAT", "json")

        config = apply_env_overrides({"output": {"format": "text"}})

        assert config["output"]["format"] == "json"

    def test_env_override_bool(self, monkeypatch):
        from dtheader.config.loader import apply_env_overrides

        monkeypatch.setenv("DTHEADER_HEADER_STRICT", "TRUE")

        config = apply_env_overrides({"header": {"strict": False}})

        assert config["header"]["strict"] is True

    def test_env_override_list(self, monkeypatch):
        from dtheader.config.loader import apply_env_overrides

        monkeypatch.setenv("DTHEADER_FILES_PATTERNS", '["*.d.ts"]')

        config = apply_env_overrides({"files": {"patterns": ["index.d.ts"]}})

        assert config["files"]["patterns"] == ["*.d.ts"]

    def test_try_parse_env_value(self):
        from dtheader.config import _try_parse_env_value

        assert _try_parse_env_value("false") is False
        assert _try_parse_env_value('{"a": 1}') == {"a": 1}
        assert _try_parse_env_value("[not json") == "[not json"
        assert _try_parse_env_value("plain") == "plain"

    def test_load_default_config_rejects_bad_override(self, monkeypatch):
        from dtheader.config import load_default_config

        monkeypatch.setenv("DTHEADER_VALIDATE_STRICT", "maybe")

        with pytest.raises(ValueError, match="validate.strict"):
            load_default_config()


class TestValidateConfig:
    """Tests for validate_config."""

    def test_defaults_are_valid(self):
        from dtheader.config import DEFAULT_CONFIG, validate_config

        assert validate_config(DEFAULT_CONFIG) == []

    def test_bad_patterns(self):
        from dtheader.config import validate_config

        errors = validate_config({"files": {"patterns": "index.d.ts"}})
        assert any("files.patterns" in e for e in errors)
