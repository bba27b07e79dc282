from .generator import QuestionGenerator
from .models import QuestionResult
from .parsing import extract_json_object, parse_generated_text
from .templates import FALLBACK_TEMPLATES, WARMING_UP_RESULT, fallback_question

__all__ = [
    "QuestionGenerator",
    "QuestionResult",
    "extract_json_object",
    "parse_generated_text",
    "FALLBACK_TEMPLATES",
    "WARMING_UP_RESULT",
    "fallback_question",
]
