from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import numpy as np

from embedding_model import EmbeddingModel, embedding_model
from fallback_chain import StrategyOutcome, run_chain

from .feedback import clamp_score, similarity_feedback
from .keyword_scorer import INVALID_RESULT, ScoreResult, fallback_evaluation


logger = logging.getLogger(__name__)

UNAVAILABLE_ANSWER = "N/A"


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    vec_a = np.asarray(a, dtype=float)
    vec_b = np.asarray(b, dtype=float)
    norm_a = float(np.linalg.norm(vec_a))
    norm_b = float(np.linalg.norm(vec_b))
    if not norm_a or not norm_b:
        return 0.0
    return float(np.dot(vec_a, vec_b) / (norm_a * norm_b))


class AnswerEvaluator:
    """
    Scores a candidate answer against the ideal answer by embedding
    similarity, falling back to keyword overlap whenever the model is
    unavailable or fails. Never raises.
    """

    def __init__(self, model: Optional[EmbeddingModel] = None) -> None:
        self._model = model or embedding_model

    async def warm_up(self) -> bool:
        return await self._model.warm_up()

    async def evaluate(self, user_answer: str, ideal_answer: str) -> ScoreResult:
        if not user_answer or not ideal_answer or ideal_answer == UNAVAILABLE_ANSWER:
            return INVALID_RESULT
        return await run_chain(
            "answer evaluation",
            [self._semantic_score, self._keyword_score],
            user_answer,
            ideal_answer,
        )

    async def _semantic_score(self, user_answer: str, ideal_answer: str) -> StrategyOutcome[ScoreResult]:
        try:
            extractor: Any = await self._model.get_instance()
        except Exception as exc:  # noqa: BLE001
            logger.error("Could not obtain evaluation model: %s", exc)
            return StrategyOutcome.fatal(str(exc))
        if extractor is None:
            logger.warning("Using fallback evaluation (model not available)")
            return StrategyOutcome.fatal("embedding model not available")
        try:
            # The sentence-transformer mean-pools token vectors; normalize for cosine.
            embeddings = extractor.encode(
                [user_answer, ideal_answer],
                normalize_embeddings=True,
                show_progress_bar=False,
            )
            similarity = cosine_similarity(embeddings[0], embeddings[1])
            score = clamp_score(similarity * 100)
        except Exception as exc:  # noqa: BLE001
            logger.error("Error during evaluation: %s", exc)
            return StrategyOutcome.fatal(str(exc))
        return StrategyOutcome.success(ScoreResult(feedback=similarity_feedback(score), score=score))

    async def _keyword_score(self, user_answer: str, ideal_answer: str) -> StrategyOutcome[ScoreResult]:
        return StrategyOutcome.success(fallback_evaluation(user_answer, ideal_answer))
