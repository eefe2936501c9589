# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import csv
import io
import json

import pytest
from typer.testing import CliRunner

from patchaudit.cli import app


@pytest.fixture
def runner(isolated_log_dir, monkeypatch, tmp_path):
    # keep user/local config files out of the way
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "patchaudit.core.config.config_loader.GLOBAL_CONFIG_FILE",
        tmp_path / "no-global.toml",
    )
    for key in ("PATCHAUDIT_LOG_LEVEL", "PATCHAUDIT_CONSOLE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return CliRunner()


@pytest.fixture
def patch_file(tmp_path, two_commit_patch):
    path = tmp_path / "range.patch"
    path.write_text(two_commit_patch, encoding="utf-8")
    return path


class TestBasicCLI:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "extract" in result.stdout

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "patchaudit version" in result.stdout

    def test_command_help_skips_config_loading(self, runner, tmp_path):
        (tmp_path / "patchauditconfig.toml").write_text(
            'output_format = "xml"\n', encoding="utf-8"
        )

        result = runner.invoke(app, ["extract", "--help"])

        assert result.exit_code == 0, result.output
        assert "--output" in result.stdout


class TestExtract:
    def test_json_to_stdout(self, runner, patch_file):
        result = runner.invoke(app, ["--silent", "extract", str(patch_file)])

        assert result.exit_code == 0, result.output
        records = json.loads(result.stdout)
        assert [r["path"] for r in records] == [
            "src/dbo/Table.sql",
            "src/dbo/Views/Active.sql",
        ]
        assert records[0]["commit"]["hash"] == "1" * 40
        assert records[0]["additions"] == "    Id INT NOT NULL,\n    Name NVARCHAR(50)"

    def test_stdin_without_attribution(self, runner, two_commit_patch):
        result = runner.invoke(
            app,
            ["--silent", "--no-commit-attribution", "extract"],
            input=two_commit_patch,
        )

        assert result.exit_code == 0, result.output
        records = json.loads(result.stdout)
        assert len(records) == 2
        assert all("commit" not in r for r in records)

    def test_csv_to_file(self, runner, patch_file, tmp_path):
        out = tmp_path / "out.csv"

        result = runner.invoke(
            app,
            [
                "--silent",
                "--output-format",
                "csv",
                "--path-filter",
                "",
                "extract",
                str(patch_file),
                "-o",
                str(out),
            ],
        )

        assert result.exit_code == 0, result.output
        rows = list(csv.DictReader(io.StringIO(out.read_text(encoding="utf-8"))))
        assert [r["path"] for r in rows] == [
            "src/dbo/Table.sql",
            "readme.md",
            "src/dbo/Views/Active.sql",
        ]
        assert rows[1]["additions"] == "hello"

    def test_csv_without_matches_has_header_only(self, runner, patch_file):
        result = runner.invoke(
            app,
            [
                "--silent",
                "--output-format",
                "csv",
                "--no-commit-attribution",
                "--path-filter",
                "/nowhere/",
                "extract",
                str(patch_file),
            ],
        )

        assert result.exit_code == 0, result.output
        assert result.stdout == "path,additions,deletions\n"

    def test_gapped_flag(self, runner, tmp_path):
        patch = tmp_path / "gapped.patch"
        patch.write_text(
            "From " + "7" * 40 + " Mon Sep 17 00:00:00 2001\n"
            "From: Jane\n"
            "Date: today\n"
            "diff --git a/src/dbo/T.sql b/src/dbo/T.sql\n"
            "+a\n"
            "-x\n"
            "+b\n",
            encoding="utf-8",
        )

        result = runner.invoke(app, ["--silent", "--gapped", "extract", str(patch)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[0]["additions"] == "a\n ...\nb\n"

    def test_table_output(self, runner, patch_file):
        result = runner.invoke(
            app, ["--silent", "--output-format", "table", "extract", str(patch_file)]
        )

        assert result.exit_code == 0, result.output
        assert "src/dbo/Table.sql" in result.stdout

    def test_missing_input_exits_with_error(self, runner, tmp_path):
        result = runner.invoke(
            app, ["--silent", "extract", str(tmp_path / "missing.patch")]
        )

        assert result.exit_code == 1

    def test_invalid_output_format(self, runner, patch_file):
        result = runner.invoke(
            app, ["--silent", "--output-format", "xml", "extract", str(patch_file)]
        )

        assert result.exit_code == 1

    def test_local_config_file_is_used(self, runner, patch_file, tmp_path):
        (tmp_path / "patchauditconfig.toml").write_text(
            'path_filter = "readme"\n', encoding="utf-8"
        )

        result = runner.invoke(app, ["--silent", "extract", str(patch_file)])

        assert result.exit_code == 0, result.output
        assert [r["path"] for r in json.loads(result.stdout)] == ["readme.md"]


class TestConfigCommand:
    def test_single_key(self, runner):
        result = runner.invoke(
            app, ["--silent", "--path-filter", "/views/", "config", "path_filter"]
        )

        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "/views/"

    def test_unknown_key(self, runner):
        result = runner.invoke(app, ["--silent", "config", "nope"])

        assert result.exit_code == 1
