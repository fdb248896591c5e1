"""Global test configuration for phraseline tests."""

import json

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test fresh settings and default structlog config."""
    from phraseline.core import config as config_module

    for var in (
        "PHRASELINE_MODELS_DIR",
        "PHRASELINE_DEFAULT_LANG",
        "PHRASELINE_SEPARATOR",
        "PHRASELINE_CHUNK_SEPARATOR",
        "PHRASELINE_CLASS_NAME",
        "PHRASELINE_HTML_PARSER",
        "PHRASELINE_LOG_FORMAT",
        "PHRASELINE_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config_module, "SETTINGS", config_module.Settings())

    yield

    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clear_model_cache():
    """Bundled models are cached per process; start each test cold."""
    from phraseline.defaults import _load_cached

    _load_cached.cache_clear()
    yield
    _load_cached.cache_clear()


@pytest.fixture
def make_parser():
    """Build a parser from keyword feature tables, e.g. make_parser(UW4={"a": 10000})."""
    from phraseline.parser import Parser

    def _make(**features):
        return Parser(features)

    return _make


@pytest.fixture
def everywhere_parser(make_parser):
    """A parser that places a boundary between every pair of characters.

    The only weight never matches, so the base score alone is positive.
    """
    return make_parser(UW1={"never": -2})


@pytest.fixture
def before_b_parser(make_parser):
    """A parser that breaks before every "b"."""
    return make_parser(UW4={"b": 10000})


@pytest.fixture
def model_file(tmp_path):
    """Write a model JSON file and return its path."""

    def _write(data, name="model.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def models_dir(tmp_path):
    """A directory of small stand-in language models keyed by language code."""
    directory = tmp_path / "models"
    directory.mkdir()
    for lang in ("ja", "zh-hans", "zh-hant", "th"):
        (directory / f"{lang}.json").write_text(
            json.dumps({"UW4": {"b": 10000}}), encoding="utf-8"
        )
    return directory
