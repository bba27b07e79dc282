from __future__ import annotations

import asyncio
from typing import Any, Dict

import streamlit as st

from config import configure_logging, embedding_config
from interview_engine import EvaluationRequest, GenerationRequest, InterviewService


DIFFICULTIES = ["easy", "medium", "hard"]


@st.cache_resource
def _get_service() -> InterviewService:
    configure_logging()
    service = InterviewService()
    if embedding_config.prewarm:
        # Pre-load the evaluation model once per process.
        asyncio.run(service.warm_up())
    return service


def _get_session() -> Dict[str, Any]:
    if "state" not in st.session_state:
        st.session_state.state = {}
    return st.session_state.state


def _run_main_page() -> None:
    st.title("AI Interviewer")

    state = _get_session()
    service = _get_service()

    st.subheader("1. Choose a topic")
    topic = st.text_input("Topic", placeholder="e.g. Machine Learning")
    sub_topic = st.text_input("Sub-topic", placeholder="e.g. Gradient Descent")
    difficulty = st.selectbox("Difficulty", DIFFICULTIES, index=1)

    if st.button("Get Question"):
        if not topic.strip() or not sub_topic.strip():
            st.error("Topic and Subtopic are required")
            return
        request = GenerationRequest(topic=topic.strip(), sub_topic=sub_topic.strip(), difficulty=difficulty)
        with st.spinner("Generating question..."):
            state["question"] = asyncio.run(service.start_interview(request))
        state.pop("evaluation", None)

    question = state.get("question")
    if question is None:
        return

    st.subheader("2. Answer")
    st.markdown(f"**Question:** {question.question}")
    answer = st.text_area("Your answer", key="answer_text", height=200)

    if st.button("Submit Answer"):
        request = EvaluationRequest(user_answer=answer, ideal_answer=question.ideal_answer)
        with st.spinner("Evaluating answer..."):
            state["evaluation"] = asyncio.run(service.evaluate_answer(request))

    evaluation = state.get("evaluation")
    if evaluation is not None:
        st.subheader("3. Feedback")
        st.markdown(evaluation.feedback)
        st.progress(evaluation.score / 100)
        with st.expander("Ideal answer"):
            st.write(evaluation.ideal_answer)


def main() -> None:
    _run_main_page()


if __name__ == "__main__":
    main()
