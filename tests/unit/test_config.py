"""Unit tests for scan configuration."""

import pytest

from precheck.core.exceptions import ConfigurationError
from precheck.utils.config import (
    MAX_FILE_SIZE_BYTES,
    SKIP_DIR_NAMES,
    ScanConfig,
    load_config,
)


@pytest.mark.unit
class TestScanConfig:
    """Test ScanConfig defaults and loading."""

    def test_defaults(self):
        """Defaults match the built-in policy."""
        config = ScanConfig()

        assert config.max_file_size == 2_097_152 == MAX_FILE_SIZE_BYTES
        assert config.skip_dir_names == SKIP_DIR_NAMES
        assert set(config.skip_path_substrings) == {
            ".git", "node_modules", "_build", "deps", "target", ".elixir_ls",
        }
        assert config.skip_suffixes == (".beam", ".pyc")
        assert "woff2" in config.skip_extensions
        assert len(config.skip_extensions) == 23

    def test_extensions_normalised(self):
        """Extensions are lowercased and lose their leading dot."""
        config = ScanConfig(skip_extensions=(".PNG", "Jar"))
        assert config.skip_extensions == ("png", "jar")

    def test_negative_size_rejected(self):
        with pytest.raises(ConfigurationError):
            ScanConfig(max_file_size=-1)

    def test_from_dict_round_trip(self):
        """to_dict output loads back unchanged."""
        config = ScanConfig(max_file_size=100, skip_dir_names=("vendor",))
        assert ScanConfig.from_dict(config.to_dict()) == config

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ScanConfig.from_dict({"max_size": 10})

        assert exc_info.value.details["unknown"] == ["max_size"]

    def test_from_dict_wrong_types(self):
        with pytest.raises(ConfigurationError):
            ScanConfig.from_dict({"skip_dir_names": "tests"})
        with pytest.raises(ConfigurationError):
            ScanConfig.from_dict({"max_file_size": "big"})

    def test_from_yaml(self, tmp_path):
        """YAML values override the defaults; missing keys keep them."""
        config_file = tmp_path / "precheck.yaml"
        config_file.write_text(
            "max_file_size: 1024\n"
            "skip_dir_names:\n"
            "  - vendor\n"
            "  - examples\n"
        )

        config = ScanConfig.from_yaml(config_file)

        assert config.max_file_size == 1024
        assert config.skip_dir_names == ("vendor", "examples")
        assert config.skip_suffixes == (".beam", ".pyc")

    def test_from_yaml_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert ScanConfig.from_yaml(config_file) == ScanConfig()

    def test_from_yaml_invalid(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("skip_dir_names: [unclosed\n")

        with pytest.raises(ConfigurationError):
            ScanConfig.from_yaml(config_file)

    def test_from_yaml_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            ScanConfig.from_yaml(config_file)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PRECHECK_MAX_FILE_SIZE", "4096")
        assert load_config().max_file_size == 4096

    def test_env_override_invalid(self, monkeypatch):
        monkeypatch.setenv("PRECHECK_MAX_FILE_SIZE", "lots")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_env_applies_over_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "precheck.yaml"
        config_file.write_text("max_file_size: 10\nskip_dir_names: [vendor]\n")
        monkeypatch.setenv("PRECHECK_MAX_FILE_SIZE", "20")

        config = load_config(config_file)

        assert config.max_file_size == 20
        assert config.skip_dir_names == ("vendor",)
