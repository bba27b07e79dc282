from .engine import (
    EvaluationRequest,
    EvaluationResult,
    GenerationRequest,
    InterviewService,
    evaluate_answer,
    get_interview_service,
    start_interview,
)

__all__ = [
    "EvaluationRequest",
    "EvaluationResult",
    "GenerationRequest",
    "InterviewService",
    "evaluate_answer",
    "get_interview_service",
    "start_interview",
]
