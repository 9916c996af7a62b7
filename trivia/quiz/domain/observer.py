"""Observer port for the quiz domain — defines events in domain language."""

from typing import Protocol


class QuizObserver(Protocol):
    """Observer port emitting structured events while a quiz is played.

    Implementations may log to structlog or record for tests.
    """

    def quiz_started(
        self, total_questions: int, duration_seconds: float | None
    ) -> None: ...

    def question_asked(
        self,
        number: int,
        prompt: str,
        expected_answer: str,
        remaining_seconds: float | None,
    ) -> None: ...

    def answer_scored(self, number: int, answer: str, correct: bool) -> None: ...

    def quiz_timed_out(self, number: int, score: int) -> None: ...

    def quiz_completed(
        self, score: int, total: int, timed_out: bool, elapsed_seconds: float
    ) -> None: ...
