import asyncio
import math

import pytest

from embedding_model import EmbeddingModel, ModelState
from evaluation_engine import INVALID_RESULT, AnswerEvaluator, cosine_similarity, fallback_evaluation
from evaluation_engine.feedback import SIMILARITY_BANDS, SIMILARITY_DEFAULT


USER = "a hash table maps keys to buckets"
IDEAL = "a hash table maps keys to values using a hash function"


def _evaluator(extractor):
    return AnswerEvaluator(model=EmbeddingModel(model_name="test/model", loader=lambda name: extractor))


@pytest.mark.parametrize("user, ideal", [("", "x"), ("x", ""), ("x", "N/A"), (None, "x")])
def test_invalid_inputs_skip_the_model(user, ideal, extractor_factory):
    model = EmbeddingModel(model_name="test/model", loader=lambda name: extractor_factory())

    result = asyncio.run(AnswerEvaluator(model=model).evaluate(user, ideal))

    assert result == INVALID_RESULT
    assert result.feedback == "Could not evaluate answer."
    assert model.state is ModelState.UNINITIALIZED


def test_identical_meaning_is_excellent(extractor_factory):
    extractor = extractor_factory({USER: [0.6, 0.8], IDEAL: [0.6, 0.8]})

    result = asyncio.run(_evaluator(extractor).evaluate(USER, IDEAL))

    assert result.score == 100
    assert result.feedback == f"**Similarity Score: 100%**\n\n{SIMILARITY_BANDS[0][1]}"


def test_partial_similarity_band(extractor_factory):
    extractor = extractor_factory({USER: [1.0, 0.0], IDEAL: [0.7, math.sqrt(1 - 0.49)]})

    result = asyncio.run(_evaluator(extractor).evaluate(USER, IDEAL))

    assert result.score == 70
    assert result.feedback.endswith(SIMILARITY_BANDS[1][1])


def test_opposite_vectors_clamp_to_zero(extractor_factory):
    extractor = extractor_factory({USER: [1.0, 0.0], IDEAL: [-1.0, 0.0]})

    result = asyncio.run(_evaluator(extractor).evaluate(USER, IDEAL))

    assert result.score == 0
    assert result.feedback.endswith(SIMILARITY_DEFAULT)


def test_unavailable_model_matches_keyword_scorer(failing_model):
    result = asyncio.run(AnswerEvaluator(model=failing_model).evaluate(USER, IDEAL))

    assert result == fallback_evaluation(USER, IDEAL)
    assert failing_model.state is ModelState.FAILED


def test_scoring_error_falls_back_per_call(extractor_factory):
    extractor = extractor_factory(error=RuntimeError("tensor shape mismatch"))
    evaluator = _evaluator(extractor)

    first = asyncio.run(evaluator.evaluate(USER, IDEAL))
    second = asyncio.run(evaluator.evaluate(USER, IDEAL))

    assert first == second == fallback_evaluation(USER, IDEAL)
    # The model stays loaded; each call retries it.
    assert extractor.calls == 2


def test_cosine_similarity_handles_zero_vectors():
    assert cosine_similarity([0.0, 0.0], [1.0, 0.0]) == 0.0
    assert cosine_similarity([2.0, 0.0], [3.0, 0.0]) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "similarity, score, expected",
    [(0.804, 80, SIMILARITY_BANDS[1][1]), (0.806, 81, SIMILARITY_BANDS[0][1]), (0.81, 81, SIMILARITY_BANDS[0][1])],
)
def test_tiers_follow_the_rounded_percentage(similarity, score, expected, extractor_factory):
    other = [similarity, math.sqrt(1 - similarity**2)]
    extractor = extractor_factory({USER: [1.0, 0.0], IDEAL: other})

    result = asyncio.run(_evaluator(extractor).evaluate(USER, IDEAL))

    assert result.score == score
    assert result.feedback == f"**Similarity Score: {score}%**\n\n{expected}"


def test_model_lookup_error_falls_back():
    class BrokenModel:
        async def get_instance(self):
            raise RuntimeError("attached to a different loop")

    result = asyncio.run(AnswerEvaluator(model=BrokenModel()).evaluate(USER, IDEAL))

    assert result == fallback_evaluation(USER, IDEAL)
