from .question_generation_prompt import AVOID_RECENT_CLAUSE, PROMPT_VERBS, QUESTION_GENERATION_PROMPT

__all__ = [
    "AVOID_RECENT_CLAUSE",
    "PROMPT_VERBS",
    "QUESTION_GENERATION_PROMPT",
]
