"""Build immutable weight models from JSON documents or mappings."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Union

from ..errors import MalformedModelError, UnknownFeatureError
from .features import FeatureKey

InnerModel = Mapping[str, int]
Model = Mapping[FeatureKey, InnerModel]


def _to_feature_key(key: Union[str, FeatureKey]) -> FeatureKey:
    if isinstance(key, FeatureKey):
        return key
    try:
        return FeatureKey(key)
    except ValueError:
        raise UnknownFeatureError(str(key)) from None


def build_model(raw: Mapping[Any, Mapping[str, int]]) -> Model:
    """Validate a feature-tag -> {substring: weight} mapping and freeze it.

    Raises:
        UnknownFeatureError: a top-level key is not one of the 13 feature tags.
        MalformedModelError: the structure or a weight has the wrong type.
    """
    if not isinstance(raw, Mapping):
        raise MalformedModelError(
            f"model must be an object, got {type(raw).__name__}"
        )

    model: dict[FeatureKey, InnerModel] = {}
    for key, inner in raw.items():
        feature = _to_feature_key(key)
        if not isinstance(inner, Mapping):
            raise MalformedModelError(
                f"feature {feature} must map to an object, got {type(inner).__name__}"
            )
        weights: dict[str, int] = {}
        for substring, weight in inner.items():
            if not isinstance(substring, str):
                raise MalformedModelError(f"feature {feature} has a non-string key")
            if isinstance(weight, bool) or not isinstance(weight, int):
                raise MalformedModelError(
                    f"feature {feature} weight for {substring!r} is not an integer"
                )
            weights[substring] = weight
        model[feature] = MappingProxyType(weights)
    return MappingProxyType(model)


def parse_model_json(text: Union[str, bytes]) -> Model:
    """Parse a model JSON document.

    Top-level keys must be feature tags (``UW1`` .. ``TW4``); values map
    substrings to integer weights.
    """
    try:
        raw = json.loads(text)
    except ValueError as e:
        raise MalformedModelError(f"invalid model json: {e}") from e
    return build_model(raw)


def load_model_file(path: Union[str, Path]) -> Model:
    """Read and parse a model JSON file."""
    return parse_model_json(Path(path).read_text(encoding="utf-8"))
