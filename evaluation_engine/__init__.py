from .evaluator import AnswerEvaluator, cosine_similarity
from .feedback import (
    INVALID_INPUT_FEEDBACK,
    KEYWORD_BANDS,
    SIMILARITY_BANDS,
    band_message,
    keyword_feedback,
    similarity_feedback,
)
from .keyword_scorer import INVALID_RESULT, ScoreResult, fallback_evaluation, tokenize

__all__ = [
    "AnswerEvaluator",
    "cosine_similarity",
    "INVALID_INPUT_FEEDBACK",
    "KEYWORD_BANDS",
    "SIMILARITY_BANDS",
    "band_message",
    "keyword_feedback",
    "similarity_feedback",
    "INVALID_RESULT",
    "ScoreResult",
    "fallback_evaluation",
    "tokenize",
]
