"""Tests for restore configuration loading."""

import pytest
from pydantic import ValidationError

from selective_restore.config.loader import load_restore_config
from selective_restore.config.models import RestoreConfig


class TestRestoreConfig:
    """Model defaults and validation."""

    def test_defaults(self):
        config = RestoreConfig()
        assert config.only_databases == []
        assert config.tablespace == "base"
        assert config.system_databases == ["template0", "template1", "postgres"]

    def test_default_system_list_not_shared(self):
        first = RestoreConfig()
        first.system_databases.append("extra")
        assert RestoreConfig().system_databases == ["template0", "template1", "postgres"]

    @pytest.mark.parametrize("tablespace", ["", "a/b", "ba*se", "b?", "[base]", "base\\"])
    def test_invalid_tablespace_rejected(self, tablespace):
        with pytest.raises(ValidationError):
            RestoreConfig(tablespace=tablespace)


class TestLoadRestoreConfig:
    """TOML loading."""

    def test_loads_restore_table(self, tmp_path):
        config_file = tmp_path / "restore.toml"
        config_file.write_text(
            '[restore]\n'
            'only_databases = ["app", "billing"]\n'
            'tablespace = "data"\n'
        )

        config = load_restore_config(config_file)

        assert config.only_databases == ["app", "billing"]
        assert config.tablespace == "data"
        assert config.system_databases == ["template0", "template1", "postgres"]

    def test_missing_table_gives_defaults(self, tmp_path):
        config_file = tmp_path / "restore.toml"
        config_file.write_text('[other]\nkey = 1\n')

        assert load_restore_config(str(config_file)) == RestoreConfig()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_restore_config(tmp_path / "missing.toml")

    def test_invalid_toml_raises_value_error(self, tmp_path):
        config_file = tmp_path / "restore.toml"
        config_file.write_text("[restore\n")

        with pytest.raises(ValueError):
            load_restore_config(config_file)

    def test_restore_not_a_table_raises(self, tmp_path):
        config_file = tmp_path / "restore.toml"
        config_file.write_text('restore = "app"\n')

        with pytest.raises(ValueError):
            load_restore_config(config_file)

    def test_invalid_values_raise_value_error(self, tmp_path):
        config_file = tmp_path / "restore.toml"
        config_file.write_text('[restore]\nonly_databases = "app"\n')

        with pytest.raises(ValueError):
            load_restore_config(config_file)
