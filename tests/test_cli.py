"""Tests for the metadep command line: arguments, config, output and main()."""

import csv
import json
import logging
import os

import pytest

import metadep
from args import parse_args
from cli_config import RunOptions, load_config, resolve_options
from constants import Constants, ExitCodes
from export import export, print_to_console, resolve_format


BUNT = """{<<"licenses">>,[<<"MIT">>]}.
{<<"links">>,[{<<"GitHub">>,<<"https://github.com/rrrene/bunt">>}]}.
{<<"maintainers">>,[<<"René Föhring"/utf8>>]}.
"""

COWBOY = """{<<"licenses">>,[<<"ISC">>]}.
{<<"links">>,[{<<"GitHub">>,<<"https://github.com/ninenines/cowboy">>}]}.
{<<"maintainers">>,[<<"Loïc Hoguin"/utf8>>]}.
"""


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Keep default config lookups and log handlers out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("METADEP_LOG_LEVEL", "INFO")
    monkeypatch.setattr(metadep, "configure_logging", lambda *a, **k: None)


@pytest.fixture
def deps_dir(tmp_path):
    deps = tmp_path / "deps"
    for name, content in (("bunt", BUNT), ("cowboy", COWBOY)):
        (deps / name).mkdir(parents=True)
        (deps / name / "hex_metadata.config").write_text(content, encoding="utf-8")
    return deps


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        metadep.main(argv)
    return exc.value.code


class TestArgParsing:
    """Tests for CLI argument parsing."""

    def test_defaults(self):
        ns = parse_args([])
        assert ns.PATH is None
        assert ns.DEP is None
        assert ns.LICENCES is False
        assert ns.VERBOSE is False
        assert ns.LOG_LEVEL == "INFO"

    def test_combined_short_flags(self):
        ns = parse_args(["-p", "./deps", "-ld", "bunt"])
        assert ns.PATH == "./deps"
        assert ns.LICENCES is True
        assert ns.DEP == "bunt"

    def test_licenses_spelling_alias(self):
        assert parse_args(["--licenses"]).LICENCES is True

    def test_format_is_lowercased(self):
        assert parse_args(["-o", "out", "-f", "CSV"]).OUTPUT_FORMAT == "csv"

    def test_invalid_format_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["-f", "xml"])


class TestResolveOptions:
    """Tests for merging CLI arguments, config and defaults."""

    def test_defaults(self):
        opts = resolve_options(parse_args([]))
        assert opts == RunOptions()
        assert opts.verbose is True
        assert opts.path == Constants.DEFAULT_PATH
        assert opts.dep == "*"

    def test_licences_only(self):
        opts = resolve_options(parse_args(["-l"]))
        assert opts.licences is True
        assert opts.verbose is False

    def test_licences_and_verbose(self):
        opts = resolve_options(parse_args(["-l", "-v"]))
        assert opts.verbose is True

    def test_config_values_apply(self):
        cfg = {"path": "vendor", "dep": "plug*", "metadata_file": "meta.config", "container_marker": "vendor"}
        opts = resolve_options(parse_args([]), cfg)
        assert opts.path == "vendor"
        assert opts.dep == "plug*"
        assert opts.metadata_file == "meta.config"
        assert opts.container_marker == "vendor"

    def test_cli_overrides_config(self):
        opts = resolve_options(parse_args(["-p", "other", "-d", "bunt"]), {"path": "vendor", "dep": "plug*"})
        assert opts.path == "other"
        assert opts.dep == "bunt"

    def test_invalid_config_values_fall_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            opts = resolve_options(parse_args([]), {"path": 3, "dep": ""})
        assert opts.path == Constants.DEFAULT_PATH
        assert opts.dep == Constants.DEFAULT_DEP
        assert "Ignoring config key 'path'" in caplog.text


class TestLoadConfig:
    """Tests for YAML/JSON config loading."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "conf.yml"
        path.write_text("path: vendor\nmetadata_file: meta.config\n", encoding="utf-8")
        assert load_config(str(path)) == {"path": "vendor", "metadata_file": "meta.config"}

    def test_json(self, tmp_path):
        path = tmp_path / "conf.json"
        path.write_text(json.dumps({"dep": "bunt"}), encoding="utf-8")
        assert load_config(str(path)) == {"dep": "bunt"}

    def test_default_location(self, tmp_path):
        (tmp_path / "metadep.yml").write_text("dep: cowboy\n", encoding="utf-8")
        assert load_config() == {"dep": "cowboy"}

    def test_no_config(self):
        assert load_config() == {}

    def test_missing_explicit_file(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            assert load_config(str(tmp_path / "nope.yml")) == {}
        assert "Config file not found" in caplog.text

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "conf.yml"
        path.write_text("path: [unclosed\n", encoding="utf-8")
        assert load_config(str(path)) == {}

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "conf.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        assert load_config(str(path)) == {}


class TestExport:
    """Tests for console and file output."""

    META = {"bunt": {"Licenses": "MIT"}, "cowboy": {"Licenses": "ISC"}}

    def test_print_to_console(self, capsys):
        print_to_console(self.META)
        out = capsys.readouterr().out
        assert out == "\n('bunt', {'Licenses': 'MIT'})\n('cowboy', {'Licenses': 'ISC'})\n\n"

    def test_print_empty(self, capsys):
        print_to_console({})
        assert capsys.readouterr().out == "\n\n"

    @pytest.mark.parametrize("path,fmt,expected", [
        ("out.json", None, "json"),
        ("out.csv", None, "csv"),
        ("out.txt", None, "json"),
        ("out.json", "csv", "csv"),
    ])
    def test_resolve_format(self, path, fmt, expected):
        assert resolve_format(path, fmt) == expected

    def test_export_json(self, tmp_path):
        path = tmp_path / "out.json"
        export(self.META, str(path))
        assert json.loads(path.read_text(encoding="utf-8")) == self.META

    def test_export_csv(self, tmp_path):
        path = tmp_path / "out.csv"
        export({"bunt": {"Licenses": "MIT", "Version": "0.2.0"}}, str(path))
        with open(path, newline="", encoding="utf-8") as fh:
            rows = list(csv.reader(fh))
        assert rows == [
            ["Dependency", "Licenses", "Maintainers", "Repo", "Version"],
            ["bunt", "MIT", "", "", "0.2.0"],
        ]

    def test_export_write_failure_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            export(self.META, str(tmp_path / "missing" / "out.json"))
        assert exc.value.code == ExitCodes.FILE_ERROR.value


class TestMain:
    """End-to-end runs of main()."""

    def test_licences_only_output(self, deps_dir, capsys):
        assert _run(["-p", str(deps_dir), "-l"]) == ExitCodes.SUCCESS.value
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "",
            "('bunt', {'Licenses': 'MIT'})",
            "('cowboy', {'Licenses': 'ISC'})",
            "",
        ]

    def test_verbose_is_default(self, deps_dir, capsys):
        assert _run(["-p", str(deps_dir), "-d", "bunt"]) == ExitCodes.SUCCESS.value
        out = capsys.readouterr().out
        assert "'Maintainers': 'René Föhring'" in out
        assert "'Repo': 'https://github.com/rrrene/bunt'" in out
        assert "cowboy" not in out

    def test_verbose_wins_over_licences(self, deps_dir, capsys):
        _run(["-p", str(deps_dir), "-vl"])
        assert "Maintainers" in capsys.readouterr().out

    def test_default_path(self, deps_dir, capsys):
        assert _run(["-l"]) == ExitCodes.SUCCESS.value
        assert "('bunt', {'Licenses': 'MIT'})" in capsys.readouterr().out

    def test_missing_metadata_file(self, deps_dir, capsys, caplog):
        (deps_dir / "ranch").mkdir()
        with caplog.at_level(logging.ERROR):
            assert _run(["-p", str(deps_dir)]) == ExitCodes.SUCCESS.value
        out = capsys.readouterr().out
        assert "ranch" not in out
        assert "bunt" in out
        assert "Error getting meta data for ranch" in caplog.text

    def test_missing_base_path(self, tmp_path):
        assert _run(["-p", str(tmp_path / "nope")]) == ExitCodes.FILE_ERROR.value

    def test_error_on_empty(self, deps_dir):
        assert _run(["-p", str(deps_dir), "-d", "nothing", "--error-on-empty"]) == ExitCodes.NO_DEPENDENCIES.value

    def test_quiet_with_output_file(self, deps_dir, tmp_path, capsys):
        out_file = tmp_path / "licenses.json"
        assert _run(["-p", str(deps_dir), "-l", "-q", "-o", str(out_file)]) == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out == ""
        assert json.loads(out_file.read_text(encoding="utf-8")) == {
            "bunt": {"Licenses": "MIT"},
            "cowboy": {"Licenses": "ISC"},
        }

    def test_config_file(self, deps_dir, tmp_path, capsys):
        conf = tmp_path / "conf.yml"
        conf.write_text(f"path: {deps_dir}\ndep: cowboy\n", encoding="utf-8")
        _run(["-c", str(conf), "-l"])
        out = capsys.readouterr().out
        assert "cowboy" in out
        assert "bunt" not in out
        assert "('cowboy', {'Licenses': 'ISC'})" in out
        assert "Repo" not in out
        assert "Maintainers" not in out

    def test_licences_only_ignores_field_config(self, deps_dir, tmp_path, capsys):
        conf = tmp_path / "conf.yml"
        conf.write_text(f"path: {deps_dir}\nlicenses_only_drop: [Licenses, Version]\n", encoding="utf-8")
        _run(["-c", str(conf), "-l"])
        out = capsys.readouterr().out
        assert "('bunt', {'Licenses': 'MIT'})" in out
        assert "Repo" not in out

    def test_loglevel_exported_to_environment(self, deps_dir, monkeypatch):
        _run(["-p", str(deps_dir), "-q", "--loglevel", "DEBUG"])
        assert os.environ[Constants.ENV_LOG_LEVEL] == "DEBUG"
