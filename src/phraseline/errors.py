"""Exceptions raised by phraseline."""


class PhraselineError(Exception):
    """Base class for all phraseline errors."""

    pass


class ModelError(PhraselineError):
    """Raised when a weight model cannot be constructed."""

    pass


class MalformedModelError(ModelError):
    """Raised when model input is not valid JSON of the expected shape."""

    pass


class UnknownFeatureError(ModelError):
    """Raised when a model names a feature tag outside the canonical set."""

    def __init__(self, key: str):
        super().__init__(f"unknown feature key: {key}")
        self.key = key


class UnknownLanguageError(PhraselineError):
    """Raised when no bundled model exists for a language code."""

    def __init__(self, lang: str, available: tuple[str, ...] = ()):
        message = f"unknown language: {lang}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)
        self.lang = lang
        self.available = available
