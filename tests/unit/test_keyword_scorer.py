from evaluation_engine import INVALID_RESULT, fallback_evaluation, tokenize
from evaluation_engine.feedback import KEYWORD_BANDS, KEYWORD_DEFAULT


def test_tokenize_lowercases_word_runs():
    assert tokenize("Gradient-Descent, minimizes LOSS!") == ["gradient", "descent", "minimizes", "loss"]


def test_partial_credit_example():
    result = fallback_evaluation(
        "gradient descent minimizes loss",
        "gradient descent is an optimization algorithm that minimizes loss",
    )
    assert result.score == 44
    assert result.feedback.startswith("**Estimated Score: 44%** (Using fallback evaluation)\n\n")
    assert result.feedback.endswith(KEYWORD_BANDS[1][1])


def test_ideal_duplicates_count_against_user_set():
    # "cache" appears twice on the ideal side and matches both times.
    result = fallback_evaluation("cache", "cache cache miss")
    assert result.score == 67


def test_full_overlap_is_positive():
    result = fallback_evaluation("A hash table maps keys to values", "hash table maps keys")
    assert result.score == 100
    assert result.feedback.endswith(KEYWORD_BANDS[0][1])


def test_no_overlap_needs_more_detail():
    result = fallback_evaluation("no idea", "binary search halves the range")
    assert result.score == 0
    assert result.feedback.endswith(KEYWORD_DEFAULT)


def test_ideal_without_words_cannot_be_evaluated():
    assert fallback_evaluation("anything", "?!  ...") == INVALID_RESULT


def test_is_deterministic():
    args = ("threads share memory", "processes do not share memory but threads do")
    first = fallback_evaluation(*args)
    assert all(fallback_evaluation(*args) == first for _ in range(5))
    assert isinstance(first.score, int)
    assert 0 <= first.score <= 100


def test_half_scores_round_up():
    # 1 of 8 ideal tokens is exactly 12.5%.
    assert fallback_evaluation("a", "a b c d e f g h").score == 13
