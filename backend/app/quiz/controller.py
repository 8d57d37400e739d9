"""
Questionnaire flow for the sneaker quiz.

The quiz walks a fixed list of questions one step at a time, then submits a
single combined query and shows whatever records come back. State is held in
an immutable QuizState record; every transition replaces it.
"""

import enum
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from app.core.exceptions import QuizStateError
from app.core.sources import ALL_BRANDS
from app.quiz.questions import QUESTIONS, NEXT_LABEL, SUBMIT_LABEL, question_label
from app.schemas.sneaker import SneakerRecord

logger = logging.getLogger(__name__)


class QuizPhase(str, enum.Enum):
    ANSWERING = "answering"
    LOADING = "loading"
    SHOWING_RESULTS = "showing_results"


@dataclass(frozen=True)
class QuizState:
    current_step: int
    answers: Tuple[str, ...]
    phase: QuizPhase = QuizPhase.ANSWERING
    results: Tuple[SneakerRecord, ...] = ()
    selected_brand: str = ALL_BRANDS

    @classmethod
    def initial(cls, question_count: int) -> "QuizState":
        return cls(current_step=0, answers=("",) * question_count)


def build_query(questions: Sequence[str], answers: Sequence[str]) -> str:
    """Combine question/answer pairs into one pipe-delimited summary."""
    return " | ".join(
        f"{question_label(question)}: {answer}"
        for question, answer in zip(questions, answers)
    )


def filter_by_brand(results: Sequence[SneakerRecord], brand: str) -> List[SneakerRecord]:
    if brand == ALL_BRANDS:
        return list(results)
    return [record for record in results if record.brand == brand]


class QuizController:
    """Drives the quiz from the first question to the results grid."""

    def __init__(self, search_client, questions: Sequence[str] = QUESTIONS):
        if not questions:
            raise ValueError("Quiz needs at least one question")

        self.search_client = search_client
        self.questions = tuple(questions)
        self.state = QuizState.initial(len(self.questions))

    @property
    def phase(self) -> QuizPhase:
        return self.state.phase

    @property
    def is_last_step(self) -> bool:
        return self.state.current_step == len(self.questions) - 1

    @property
    def current_question(self) -> str:
        return self.questions[self.state.current_step]

    @property
    def progress(self) -> float:
        """Fraction of questions answered so far."""
        if self.state.phase != QuizPhase.ANSWERING:
            return 1.0
        return self.state.current_step / len(self.questions)

    @property
    def button_label(self) -> str:
        return SUBMIT_LABEL if self.is_last_step else NEXT_LABEL

    def _require_answering(self) -> None:
        if self.state.phase != QuizPhase.ANSWERING:
            raise QuizStateError(f"Quiz is {self.state.phase.value}, not accepting answers")

    def set_answer(self, text: str) -> None:
        """Replace the answer for the current question."""
        self._require_answering()

        answers = list(self.state.answers)
        answers[self.state.current_step] = text
        self.state = replace(self.state, answers=tuple(answers))

    def build_query(self) -> str:
        return build_query(self.questions, self.state.answers)

    async def advance(self, text: Optional[str] = None) -> QuizState:
        """
        Record the current answer and move forward.

        On the last question this submits the combined query. Search failures
        are logged and shown as an empty result grid.
        """
        if text is not None:
            self.set_answer(text)
        else:
            self._require_answering()

        if not self.is_last_step:
            self.state = replace(self.state, current_step=self.state.current_step + 1)
            return self.state

        self.state = replace(self.state, phase=QuizPhase.LOADING)
        query = self.build_query()

        try:
            results = await self.search_client.search(query)
        except Exception as e:
            logger.error(f"Search error: {e}")
            results = []

        self.state = replace(
            self.state,
            phase=QuizPhase.SHOWING_RESULTS,
            results=tuple(results),
        )
        return self.state

    def filter_by_brand(self, brand: str) -> List[SneakerRecord]:
        return filter_by_brand(self.state.results, brand)

    def select_brand(self, brand: str) -> None:
        self.state = replace(self.state, selected_brand=brand)

    @property
    def visible_results(self) -> List[SneakerRecord]:
        """Results for the selected brand filter."""
        return self.filter_by_brand(self.state.selected_brand)

    def preferences(self) -> List[Tuple[str, str]]:
        return list(zip(self.questions, self.state.answers))
