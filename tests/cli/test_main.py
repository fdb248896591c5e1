"""Tests for the phraseline command line."""

import json

import pytest
from typer.testing import CliRunner

from phraseline import __version__
from phraseline.cli.main import app
from phraseline.html import PARENT_STYLE, ZWSP

pytestmark = pytest.mark.unit


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI test runner isolated from any config file in the working directory."""
    monkeypatch.chdir(tmp_path)
    return CliRunner()


@pytest.fixture
def split_on_a(model_file):
    return str(model_file({"UW4": {"a": 10000}}))


@pytest.fixture
def before_b(model_file):
    return str(model_file({"UW4": {"b": 10000}}, name="before_b.json"))


class TestParseCommand:
    def test_splits_argument(self, runner, split_on_a):
        result = runner.invoke(app, ["parse", "--model", split_on_a, "abcdeabcd"])
        assert result.exit_code == 0
        assert result.output == "abcde|abcd\n"

    def test_reads_stdin(self, runner, split_on_a):
        result = runner.invoke(app, ["parse", "--model", split_on_a], input="abcdeabcd\n")
        assert result.exit_code == 0
        assert result.output == "abcde|abcd\n"

    def test_custom_separator(self, runner, split_on_a):
        result = runner.invoke(
            app, ["parse", "--model", split_on_a, "--separator", " / ", "abcdeabcd"]
        )
        assert result.output == "abcde / abcd\n"

    def test_separator_from_environment(self, runner, split_on_a, monkeypatch):
        monkeypatch.setenv("PHRASELINE_CHUNK_SEPARATOR", "#")
        result = runner.invoke(app, ["parse", "--model", split_on_a, "abcdeabcd"])
        assert result.output == "abcde#abcd\n"

    def test_bundled_language_from_models_dir(self, runner, models_dir, monkeypatch):
        monkeypatch.setenv("PHRASELINE_MODELS_DIR", str(models_dir))
        result = runner.invoke(app, ["parse", "--lang", "zh-hant", "abcab"])
        assert result.exit_code == 0
        assert result.output == "a|bca|b\n"

    def test_default_language(self, runner, models_dir, monkeypatch):
        monkeypatch.setenv("PHRASELINE_MODELS_DIR", str(models_dir))
        result = runner.invoke(app, ["parse", "abcab"])
        assert result.exit_code == 0
        assert result.output == "a|bca|b\n"


class TestParseErrors:
    def test_model_and_lang_are_exclusive(self, runner, split_on_a):
        result = runner.invoke(app, ["parse", "--model", split_on_a, "--lang", "ja", "x"])
        assert result.exit_code == 1
        assert "either --model or --lang" in result.output

    def test_unknown_language(self, runner):
        result = runner.invoke(app, ["parse", "--lang", "xx", "abc"])
        assert result.exit_code == 1
        assert "Unknown --lang value: xx" in result.output
        assert "ja, zh-hans, zh-hant, th" in result.output

    def test_missing_model_file(self, runner, tmp_path):
        result = runner.invoke(app, ["parse", "--model", str(tmp_path / "nope.json"), "abc"])
        assert result.exit_code == 1
        assert "Failed to read model file" in result.output

    def test_malformed_model_file(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["parse", "--model", str(path), "abc"])
        assert result.exit_code == 1
        assert "Failed to parse model" in result.output

    def test_unknown_feature_in_model_file(self, runner, model_file):
        path = model_file({"XX9": {"a": 1}})
        result = runner.invoke(app, ["parse", "--model", str(path), "abc"])
        assert result.exit_code == 1
        assert "Failed to parse model" in result.output


class TestTranslateCommand:
    def test_inserts_zwsp(self, runner, before_b):
        result = runner.invoke(app, ["translate", "--model", before_b, "<p>abcab</p>"])
        assert result.exit_code == 0
        assert result.output == f'<p style="{PARENT_STYLE}">a{ZWSP}bca{ZWSP}b</p>\n'

    def test_separator_and_class_name(self, runner, before_b):
        result = runner.invoke(
            app,
            ["translate", "--model", before_b, "--separator", "|", "--class-name", "wrap", "abcab"],
        )
        assert result.exit_code == 0
        assert result.output == '<span class="wrap">a|bca|b</span>\n'

    def test_reads_stdin(self, runner, before_b):
        result = runner.invoke(
            app, ["translate", "--model", before_b, "--separator", "|"], input="abcab\n"
        )
        assert result.output == f'<span style="{PARENT_STYLE}">a|bca|b</span>\n'

    def test_settings_from_config_file(self, runner, before_b, tmp_path):
        (tmp_path / ".phraseline.yaml").write_text(
            "SEPARATOR: '|'\nCLASS_NAME: wrap\n", encoding="utf-8"
        )
        result = runner.invoke(app, ["translate", "--model", before_b, "abcab"])
        assert result.exit_code == 0
        assert result.output == '<span class="wrap">a|bca|b</span>\n'


class TestInfoCommands:
    def test_version(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert result.output.strip() == __version__

    def test_config_json(self, runner, monkeypatch):
        monkeypatch.setenv("PHRASELINE_DEFAULT_LANG", "th")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["DEFAULT_LANG"] == "th"
        assert data["CHUNK_SEPARATOR"] == "|"

    def test_config_plain(self, runner):
        result = runner.invoke(app, ["config", "--plain"])
        assert result.exit_code == 0
        assert "Effective Settings" in result.output
        assert "HTML_PARSER" in result.output
        assert "'html.parser'" in result.output

    def test_explicit_config_file(self, runner, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('DEFAULT_LANG = "zh-hans"\n', encoding="utf-8")
        result = runner.invoke(app, ["--config", str(path), "config"])
        assert json.loads(result.output)["DEFAULT_LANG"] == "zh-hans"

    def test_bad_log_format(self, runner):
        result = runner.invoke(app, ["--log-format", "xml", "version"])
        assert result.exit_code == 1
        assert "Unknown log format" in result.output
