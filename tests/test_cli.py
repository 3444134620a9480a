"""Tests for the selective-restore CLI."""

import json

import pytest

from selective_restore.cli import main


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


@pytest.fixture
def metadata_file(tmp_path):
    path = tmp_path / "oids.json"
    path.write_text(
        json.dumps({"postgres": 1, "template0": 2, "template1": 3, "app": 5})
    )
    return path


@pytest.fixture
def files_file(tmp_path):
    path = tmp_path / "files.txt"
    path.write_text("/base/5/1\n/base/1/2\n/base/9/3\n\n/global/1262\n")
    return path


class TestPatternsCommand:
    def test_prints_patterns(self, metadata_file, capsys):
        rc = main(["patterns", "--metadata", str(metadata_file), "--db", "app"])

        assert rc == 0
        out = capsys.readouterr().out.split()
        assert out == ["/base/5/*", "/base/2/*", "/base/3/*", "/base/1/*"]

    def test_unknown_database_fails(self, metadata_file, capsys):
        rc = main(["patterns", "--metadata", str(metadata_file), "--db", "ghost"])

        assert rc == 1
        assert "ghost" in capsys.readouterr().out

    def test_missing_metadata_fails(self, tmp_path):
        rc = main(["patterns", "--metadata", str(tmp_path / "none.json")])
        assert rc == 1

    def test_metadata_not_an_object_fails(self, tmp_path):
        path = tmp_path / "oids.json"
        path.write_text("[1, 2]")
        assert main(["patterns", "--metadata", str(path)]) == 1


class TestPlanCommand:
    def test_list_kept(self, metadata_file, files_file, capsys):
        rc = main([
            "plan",
            "--metadata", str(metadata_file),
            "--files", str(files_file),
            "--db", "app",
            "--list-kept",
        ])

        assert rc == 0
        assert capsys.readouterr().out.split() == [
            "/base/1/2",
            "/base/5/1",
            "/global/1262",
        ]

    def test_summary(self, metadata_file, files_file, capsys):
        rc = main([
            "plan",
            "--metadata", str(metadata_file),
            "--files", str(files_file),
            "--db", "app",
        ])

        assert rc == 0
        out = capsys.readouterr().out
        assert "Kept 3 of 4 files" in out
        assert "/base/9/3" in out

    def test_config_supplies_databases(self, tmp_path, metadata_file, files_file, capsys):
        config_file = tmp_path / "restore.toml"
        config_file.write_text('[restore]\nonly_databases = ["app"]\n')

        rc = main([
            "plan",
            "--metadata", str(metadata_file),
            "--files", str(files_file),
            "--config", str(config_file),
            "--list-kept",
        ])

        assert rc == 0
        assert "/base/5/1" in capsys.readouterr().out.split()

    def test_db_overrides_config(self, tmp_path, metadata_file, files_file, capsys):
        config_file = tmp_path / "restore.toml"
        config_file.write_text('[restore]\nonly_databases = ["ghost"]\n')

        rc = main([
            "plan",
            "--metadata", str(metadata_file),
            "--files", str(files_file),
            "--config", str(config_file),
            "--db", "app",
            "--list-kept",
        ])

        assert rc == 0
        kept = capsys.readouterr().out.split()
        assert "/base/5/1" in kept
        assert "/base/9/3" not in kept

    def test_unknown_database_fails(self, metadata_file, files_file):
        rc = main([
            "plan",
            "--metadata", str(metadata_file),
            "--files", str(files_file),
            "--db", "ghost",
        ])
        assert rc == 1

    def test_files_required(self, metadata_file):
        with pytest.raises(SystemExit):
            main(["plan", "--metadata", str(metadata_file)])
