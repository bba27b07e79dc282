from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from .feedback import INVALID_INPUT_FEEDBACK, clamp_score, keyword_feedback


_WORD_PATTERN = re.compile(r"\b\w+\b")


@dataclass(frozen=True)
class ScoreResult:
    feedback: str
    score: int


INVALID_RESULT = ScoreResult(feedback=INVALID_INPUT_FEEDBACK, score=0)


def tokenize(text: str) -> List[str]:
    return _WORD_PATTERN.findall(text.lower())


def fallback_evaluation(user_answer: str, ideal_answer: str) -> ScoreResult:
    """
    Keyword-overlap estimate used when the embedding model is unavailable.

    Overlap is measured against the ideal answer's tokens with duplicates
    kept, so repeated key terms weigh more.
    """
    user_words = set(tokenize(user_answer))
    ideal_words = tokenize(ideal_answer)
    if not ideal_words:
        return INVALID_RESULT

    matches = sum(1 for word in ideal_words if word in user_words)
    score = clamp_score(matches / len(ideal_words) * 100)
    return ScoreResult(feedback=keyword_feedback(score), score=score)
