from question_generator import extract_json_object, parse_generated_text
from question_generator.parsing import GENERIC_IDEAL_ANSWER, MISSING_ANSWER, MISSING_QUESTION


def test_raw_text_without_json_becomes_question():
    text = "  Sure! Here's a question: What is a hash table?\n"
    result = parse_generated_text(text, "Data Structures", "Hashing")
    assert result.question == "Sure! Here's a question: What is a hash table?"
    assert result.ideal_answer == GENERIC_IDEAL_ANSWER


def test_json_wrapped_in_prose():
    text = 'Here you go:\n```json\n{"question": "What is a B-tree?", "ideal_answer": "A balanced search tree."}\n```'
    result = parse_generated_text(text, "Databases", "Indexes")
    assert result.question == "What is a B-tree?"
    assert result.ideal_answer == "A balanced search tree."


def test_missing_fields_get_placeholders():
    assert parse_generated_text('{"question": "Why?"}', "T", "S").ideal_answer == MISSING_ANSWER
    assert parse_generated_text('{"ideal_answer": "Because."}', "T", "S").question == MISSING_QUESTION
    assert parse_generated_text('{"question": "", "ideal_answer": ""}', "T", "S").question == MISSING_QUESTION


def test_undecodable_span_is_rejected():
    assert parse_generated_text('{"question": "What is X?", "ideal_answer": "Y",}', "T", "S") is None
    assert parse_generated_text("Here: {question: unquoted}", "T", "S") is None


def test_blank_text_uses_topic_question():
    result = parse_generated_text("   ", "Python", "Generators")
    assert result.question == "What are the key concepts of Generators in Python?"


def test_extract_first_balanced_span():
    assert extract_json_object('a {"q": {"x": 1}} b {"other": 2}') == '{"q": {"x": 1}}'


def test_extract_ignores_braces_inside_strings():
    text = 'x {"question": "What does } mean in {f-strings}?", "ideal_answer": "y"} z'
    assert extract_json_object(text) == text[2:-2]


def test_extract_skips_unbalanced_opening_brace():
    assert extract_json_object('{ broken {"question": "ok"}') == '{"question": "ok"}'
    assert extract_json_object("no braces here") is None
    assert extract_json_object("{ never closed") is None
