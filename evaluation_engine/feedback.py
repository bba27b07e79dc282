from __future__ import annotations

import math
from typing import Sequence, Tuple

Band = Tuple[int, str]

INVALID_INPUT_FEEDBACK = "Could not evaluate answer."

# (exclusive lower threshold, message), highest first. Scores at or below
# the last threshold get the default message.
SIMILARITY_BANDS: Tuple[Band, ...] = (
    (80, "Excellent! Your answer is very comprehensive and closely matches the key points."),
    (60, "Good job! You have the right idea, but you might be missing a few key details."),
    (40, "You're on the right track, but your answer is quite different. Try to be more specific."),
)
SIMILARITY_DEFAULT = "Your answer seems to be missing the main points. Let's review the ideal answer."

KEYWORD_BANDS: Tuple[Band, ...] = (
    (70, "Good! Your answer covers many key concepts."),
    (40, "You're on the right track, but could expand more on key concepts."),
)
KEYWORD_DEFAULT = "Your answer needs more detail. Review the ideal answer for key points."


def band_message(score: int, bands: Sequence[Band], default: str) -> str:
    for threshold, message in bands:
        if score > threshold:
            return message
    return default


def clamp_score(value: float) -> int:
    # Halves round up, so 12.5 becomes 13.
    return max(0, min(100, math.floor(value + 0.5)))


def similarity_feedback(score: int) -> str:
    return f"**Similarity Score: {score}%**\n\n" + band_message(score, SIMILARITY_BANDS, SIMILARITY_DEFAULT)


def keyword_feedback(score: int) -> str:
    return (
        f"**Estimated Score: {score}%** (Using fallback evaluation)\n\n"
        + band_message(score, KEYWORD_BANDS, KEYWORD_DEFAULT)
    )
