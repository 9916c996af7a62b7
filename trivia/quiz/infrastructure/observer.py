"""StructlogQuizObserver — production observer that delegates to structlog."""

import structlog


class StructlogQuizObserver:
    """Logs quiz domain events to structlog.

    Does NOT inherit from QuizObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def quiz_started(self, total_questions: int, duration_seconds: float | None) -> None:
        self._log.info(
            "quiz.started",
            total_questions=total_questions,
            duration_seconds=duration_seconds,
            timed=duration_seconds is not None,
        )

    def question_asked(
        self,
        number: int,
        prompt: str,
        expected_answer: str,
        remaining_seconds: float | None,
    ) -> None:
        self._log.debug(
            "quiz.question_asked",
            number=number,
            prompt=prompt,
            expected_answer=expected_answer,
            remaining_seconds=(
                None if remaining_seconds is None else round(remaining_seconds, 2)
            ),
        )

    def answer_scored(self, number: int, answer: str, correct: bool) -> None:
        self._log.debug(
            "quiz.answer_scored", number=number, answer=answer, correct=correct
        )

    def quiz_timed_out(self, number: int, score: int) -> None:
        self._log.info("quiz.timed_out", number=number, score=score)

    def quiz_completed(
        self, score: int, total: int, timed_out: bool, elapsed_seconds: float
    ) -> None:
        self._log.info(
            "quiz.completed",
            score=score,
            total=total,
            timed_out=timed_out,
            elapsed_seconds=round(elapsed_seconds, 2),
        )
