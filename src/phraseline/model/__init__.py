"""Weight model types and loaders."""

from .features import FEATURE_WINDOWS, FeatureKey
from .loader import InnerModel, Model, build_model, load_model_file, parse_model_json

__all__ = [
    "FEATURE_WINDOWS",
    "FeatureKey",
    "InnerModel",
    "Model",
    "build_model",
    "load_model_file",
    "parse_model_json",
]
