PROMPT_VERBS = ("Create", "Generate", "Provide", "Design", "Formulate")

# Gemma chat-turn format. The random question ID discourages the inference
# service from returning cached or duplicate text.
QUESTION_GENERATION_PROMPT = """<start_of_turn>user
{verb} a unique {level}interview question about {sub_topic} in {topic}. Make it different from common questions.{avoid} Return your response in valid JSON format with exactly two fields: "question" and "ideal_answer". Question ID: {seed}<end_of_turn>
<start_of_turn>model
"""

AVOID_RECENT_CLAUSE = " Do not repeat any of these recent questions: {questions}."
