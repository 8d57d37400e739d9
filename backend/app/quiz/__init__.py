from app.quiz.questions import QUESTIONS, question_label
from app.quiz.controller import (
    QuizController,
    QuizPhase,
    QuizState,
    build_query,
    filter_by_brand,
)
from app.quiz.client import SneakerSearchClient

__all__ = [
    "QUESTIONS",
    "question_label",
    "QuizController",
    "QuizPhase",
    "QuizState",
    "build_query",
    "filter_by_brand",
    "SneakerSearchClient",
]
