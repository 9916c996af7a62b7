"""QuizRunner — drives the question/answer loop and tallies the score."""

import asyncio
from collections.abc import Sequence

from trivia.dataset.domain.question import QuestionRecord
from trivia.quiz.domain.clock import Clock
from trivia.quiz.domain.observer import QuizObserver
from trivia.quiz.domain.result import QuizResult
from trivia.quiz.domain.terminal import QuizTerminal


class QuizRunner:
    """Asks every question in order and counts exact-match answers.

    The runner knows nothing about stdin, wall clocks or logging: it receives a
    terminal, a clock and an observer so each can be replaced in tests.
    """

    def __init__(
        self,
        terminal: QuizTerminal,
        observer: QuizObserver,
        clock: Clock,
    ) -> None:
        self._terminal = terminal
        self._observer = observer
        self._clock = clock

    async def run(
        self,
        records: Sequence[QuestionRecord],
        duration_seconds: float | None = None,
    ) -> QuizResult:
        """Play one session over records and return its result.

        With duration_seconds set, a single deadline is fixed when the session
        starts and shared by all questions. Once it passes, the question being
        asked is abandoned and the remaining ones are never scored. With
        duration_seconds None every question waits for its answer.
        """
        started_at = self._clock.now()
        deadline = None if duration_seconds is None else started_at + duration_seconds
        self._observer.quiz_started(
            total_questions=len(records),
            duration_seconds=duration_seconds,
        )

        score = 0
        answered = 0
        timed_out = False
        for number, record in enumerate(records, start=1):
            self._terminal.show(f"Question {number}: {record.prompt}")
            remaining = None if deadline is None else deadline - self._clock.now()
            self._observer.question_asked(
                number=number,
                prompt=record.prompt,
                expected_answer=record.expected_answer,
                remaining_seconds=remaining,
            )

            answer = await self._next_answer(remaining_seconds=remaining)
            if answer is None:
                timed_out = True
                self._observer.quiz_timed_out(number=number, score=score)
                break

            answered += 1
            correct = answer.strip() == record.expected_answer
            if correct:
                score += 1
            self._observer.answer_scored(number=number, answer=answer, correct=correct)

        result = QuizResult(
            score=score,
            total=len(records),
            answered=answered,
            timed_out=timed_out,
        )
        self._observer.quiz_completed(
            score=result.score,
            total=result.total,
            timed_out=result.timed_out,
            elapsed_seconds=self._clock.now() - started_at,
        )
        return result

    async def _next_answer(self, remaining_seconds: float | None) -> str | None:
        """Race the next answer against the deadline; None means the deadline won.

        On timeout wait_for cancels the pending read, so no reader outlives the
        question it was started for.
        """
        if remaining_seconds is None:
            return await self._terminal.read_answer()
        if remaining_seconds <= 0:
            return None
        try:
            return await asyncio.wait_for(
                self._terminal.read_answer(), timeout=remaining_seconds
            )
        except TimeoutError:
            return None
