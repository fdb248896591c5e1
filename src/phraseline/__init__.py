"""
Phraseline

Phrase-level line-break opportunities for scripts without word delimiters,
for plain text and for live HTML trees.
"""

from .errors import (
    MalformedModelError,
    ModelError,
    PhraselineError,
    UnknownFeatureError,
    UnknownLanguageError,
)
from .model import FeatureKey, Model, parse_model_json
from .parser import Parser

__version__ = "0.1.0"

__all__ = [
    "FeatureKey",
    "MalformedModelError",
    "Model",
    "ModelError",
    "Parser",
    "PhraselineError",
    "UnknownFeatureError",
    "UnknownLanguageError",
    "parse_model_json",
]
