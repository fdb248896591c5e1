"""
Boundary scoring for phrase segmentation.

A position between two characters is a boundary when the weights of the
character windows around it outweigh the model's base score.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from .model import FEATURE_WINDOWS, Model, build_model


class Parser:
    """Split sentences into phrases with a weight model.

    The model is frozen on construction, so one parser can be shared
    between threads.
    """

    def __init__(self, model: Mapping[Any, Mapping[str, int]]):
        self.model: Model = build_model(model)
        total = sum(sum(weights.values()) for weights in self.model.values())
        self.base_score = -0.5 * total
        self._windows = tuple(
            (self.model.get(feature, {}), start, end)
            for feature, start, end in FEATURE_WINDOWS
            if self.model.get(feature)
        )

    def parse_boundaries(self, sentence: str) -> List[int]:
        """Return the offsets where a break may be inserted.

        Offsets are code point indices in ``1 .. len(sentence) - 1``, ascending.
        """
        boundaries: List[int] = []
        length = len(sentence)
        for i in range(1, length):
            score = self.base_score
            for weights, start, end in self._windows:
                lo = max(i + start, 0)
                hi = min(max(i + end, 0), length)
                if lo >= hi:
                    continue
                score += weights.get(sentence[lo:hi], 0)
            if score > 0:
                boundaries.append(i)
        return boundaries

    def parse(self, sentence: str) -> List[str]:
        """Split a sentence into phrases."""
        if not sentence:
            return []
        return split_by_boundaries(sentence, self.parse_boundaries(sentence))


def split_by_boundaries(sentence: str, boundaries: List[int]) -> List[str]:
    """Cut ``sentence`` at each offset; the pieces join back to the input."""
    chunks = []
    start = 0
    for boundary in boundaries:
        chunks.append(sentence[start:boundary])
        start = boundary
    chunks.append(sentence[start:])
    return chunks
