"""Feature tags understood by the scoring model."""

from enum import Enum


class FeatureKey(str, Enum):
    """Character windows around a candidate boundary.

    Offsets are relative to the character right after the candidate
    position: ``UW4`` is that character, ``UW3`` the one before it.
    """

    UW1 = "UW1"  # unigram at -3
    UW2 = "UW2"  # unigram at -2
    UW3 = "UW3"  # unigram at -1
    UW4 = "UW4"  # unigram at 0
    UW5 = "UW5"  # unigram at +1
    UW6 = "UW6"  # unigram at +2
    BW1 = "BW1"  # bigram -2..0
    BW2 = "BW2"  # bigram -1..+1
    BW3 = "BW3"  # bigram 0..+2
    TW1 = "TW1"  # trigram -3..0
    TW2 = "TW2"  # trigram -2..+1
    TW3 = "TW3"  # trigram -1..+2
    TW4 = "TW4"  # trigram 0..+3

    def __str__(self) -> str:
        return self.value


# (feature, start, end) relative to the candidate index
FEATURE_WINDOWS: tuple[tuple[FeatureKey, int, int], ...] = (
    (FeatureKey.UW1, -3, -2),
    (FeatureKey.UW2, -2, -1),
    (FeatureKey.UW3, -1, 0),
    (FeatureKey.UW4, 0, 1),
    (FeatureKey.UW5, 1, 2),
    (FeatureKey.UW6, 2, 3),
    (FeatureKey.BW1, -2, 0),
    (FeatureKey.BW2, -1, 1),
    (FeatureKey.BW3, 0, 2),
    (FeatureKey.TW1, -3, 0),
    (FeatureKey.TW2, -2, 1),
    (FeatureKey.TW3, -1, 2),
    (FeatureKey.TW4, 0, 3),
)
