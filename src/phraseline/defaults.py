"""Pre-trained models for Japanese, Chinese and Thai.

Model tables are read once per process and shared by every parser built
from them. By default they come from the ``models/`` package data of the
``budoux`` distribution; set ``PHRASELINE_MODELS_DIR`` to read
``<lang>.json`` files from a directory instead.
"""

from __future__ import annotations

import threading
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Optional

from .core import config
from .core.logging import log
from .errors import UnknownLanguageError
from .model import Model, parse_model_json
from .parser import Parser

DEFAULT_LANGUAGES: tuple[str, ...] = ("ja", "zh-hans", "zh-hant", "th")

_load_lock = threading.Lock()


def _read_model_text(lang: str, models_dir: Optional[str]) -> str:
    if models_dir:
        return (Path(models_dir) / f"{lang}.json").read_text(encoding="utf-8")
    return (
        resources.files("budoux")
        .joinpath("models")
        .joinpath(f"{lang}.json")
        .read_text(encoding="utf-8")
    )


@lru_cache(maxsize=None)
def _load_cached(lang: str, models_dir: Optional[str]) -> Model:
    model = parse_model_json(_read_model_text(lang, models_dir))
    log.info(
        "model.loaded",
        lang=lang,
        source=models_dir or "budoux",
        features=len(model),
    )
    return model


def load_default_model(lang: str, models_dir: Optional[str] = None) -> Model:
    """Return the bundled model for ``lang``, loading it on first use."""
    if lang not in DEFAULT_LANGUAGES:
        raise UnknownLanguageError(lang, DEFAULT_LANGUAGES)
    if models_dir is None:
        models_dir = config.SETTINGS.MODELS_DIR
    with _load_lock:
        return _load_cached(lang, models_dir)


def load_default_parser(lang: str, models_dir: Optional[str] = None) -> Parser:
    return Parser(load_default_model(lang, models_dir))


def load_default_japanese_parser() -> Parser:
    return load_default_parser("ja")


def load_default_simplified_chinese_parser() -> Parser:
    return load_default_parser("zh-hans")


def load_default_traditional_chinese_parser() -> Parser:
    return load_default_parser("zh-hant")


def load_default_thai_parser() -> Parser:
    return load_default_parser("th")


def load_default_parsers() -> Dict[str, Parser]:
    """Parsers for every bundled language, keyed by language code."""
    return {lang: load_default_parser(lang) for lang in DEFAULT_LANGUAGES}
