from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from evaluation_engine import AnswerEvaluator
from question_generator import QuestionGenerator, QuestionResult


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    topic: str
    sub_topic: str
    difficulty: Optional[str] = None


@dataclass(frozen=True)
class EvaluationRequest:
    user_answer: str
    ideal_answer: str


@dataclass(frozen=True)
class EvaluationResult:
    feedback: str
    score: int
    ideal_answer: str

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {"feedback": self.feedback, "score": self.score, "idealAnswer": self.ideal_answer}


class InterviewService:
    """
    Entry point for callers: one question per `start_interview`, one score
    per `evaluate_answer`. Both always return a well-formed result.
    """

    def __init__(
        self,
        generator: Optional[QuestionGenerator] = None,
        evaluator: Optional[AnswerEvaluator] = None,
    ) -> None:
        self.generator = generator or QuestionGenerator()
        self.evaluator = evaluator or AnswerEvaluator()

    async def start_interview(self, request: GenerationRequest) -> QuestionResult:
        logger.info(
            "Generating question for: %s / %s (%s)",
            request.topic,
            request.sub_topic,
            request.difficulty or "any",
        )
        return await self.generator.generate(request.topic, request.sub_topic, request.difficulty)

    async def evaluate_answer(self, request: EvaluationRequest) -> EvaluationResult:
        logger.info("Evaluating answer...")
        result = await self.evaluator.evaluate(request.user_answer, request.ideal_answer)
        # Echo the ideal answer so the caller can show it next to the feedback.
        return EvaluationResult(
            feedback=result.feedback,
            score=result.score,
            ideal_answer=request.ideal_answer or "",
        )

    async def warm_up(self) -> bool:
        ready = await self.evaluator.warm_up()
        if not ready:
            logger.warning("Model pre-loading failed, will use fallback evaluation")
        return ready


_default_service: Optional[InterviewService] = None


def get_interview_service() -> InterviewService:
    global _default_service
    if _default_service is None:
        _default_service = InterviewService()
    return _default_service


async def start_interview(topic: str, sub_topic: str, difficulty: Optional[str] = None) -> QuestionResult:
    return await get_interview_service().start_interview(GenerationRequest(topic, sub_topic, difficulty))


async def evaluate_answer(user_answer: str, ideal_answer: str) -> EvaluationResult:
    return await get_interview_service().evaluate_answer(EvaluationRequest(user_answer, ideal_answer))
