"""Tests for QuizRunner application logic."""

from trivia.dataset.domain.question import QuestionRecord
from trivia.quiz.application.runner import QuizRunner
from tests.quiz.fake_clock import FakeClock
from tests.quiz.fake_observer import FakeQuizObserver
from tests.quiz.fake_terminal import FakeTerminal


def _make_records(count: int) -> list[QuestionRecord]:
    return [
        QuestionRecord(prompt=f"{i}+{i}", expected_answer=str(i + i))
        for i in range(1, count + 1)
    ]


def _correct_answers(records: list[QuestionRecord]) -> list[str]:
    return [record.expected_answer for record in records]


def _make_runner(
    terminal: FakeTerminal,
    clock: FakeClock | None = None,
    observer: FakeQuizObserver | None = None,
) -> QuizRunner:
    return QuizRunner(
        terminal=terminal,
        observer=observer or FakeQuizObserver(),
        clock=clock or FakeClock(),
    )


class TestUntimedQuiz:
    """Without a duration every question is asked and scored."""

    async def test_all_correct_answers_score_every_question(self) -> None:
        records = _make_records(4)
        runner = _make_runner(terminal=FakeTerminal(answers=_correct_answers(records)))

        result = await runner.run(records=records)

        assert result.score == 4
        assert result.total == 4
        assert result.answered == 4
        assert result.timed_out is False

    async def test_no_matching_answers_score_zero(self) -> None:
        records = _make_records(3)
        runner = _make_runner(terminal=FakeTerminal(answers=["x", "", "nope"]))

        result = await runner.run(records=records)

        assert result.score == 0
        assert result.answered == 3

    async def test_mixed_answers_count_only_matches(self) -> None:
        records = _make_records(3)
        runner = _make_runner(terminal=FakeTerminal(answers=["2", "5", "6"]))

        result = await runner.run(records=records)

        assert result.score == 2

    async def test_answers_are_trimmed_before_comparison(self) -> None:
        records = _make_records(2)
        runner = _make_runner(terminal=FakeTerminal(answers=["  2  ", "4\n"]))

        result = await runner.run(records=records)

        assert result.score == 2

    async def test_comparison_is_case_sensitive(self) -> None:
        records = [QuestionRecord(prompt="capital of France", expected_answer="Paris")]
        runner = _make_runner(terminal=FakeTerminal(answers=["paris"]))

        result = await runner.run(records=records)

        assert result.score == 0

    async def test_questions_are_shown_in_order_with_numbers(self) -> None:
        records = _make_records(3)
        terminal = FakeTerminal(answers=_correct_answers(records))

        await _make_runner(terminal=terminal).run(records=records)

        assert terminal.lines == [
            "Question 1: 1+1",
            "Question 2: 2+2",
            "Question 3: 3+3",
        ]

    async def test_slow_answers_never_end_an_untimed_quiz(self) -> None:
        records = _make_records(3)
        clock = FakeClock()
        terminal = FakeTerminal(
            answers=_correct_answers(records), clock=clock, seconds_per_answer=10_000
        )

        result = await _make_runner(terminal=terminal, clock=clock).run(records=records)

        assert result.score == 3
        assert result.timed_out is False

    async def test_zero_records_scores_zero_and_prints_nothing(self) -> None:
        terminal = FakeTerminal(answers=[])

        result = await _make_runner(terminal=terminal).run(records=[])

        assert result.score == 0
        assert result.total == 0
        assert terminal.lines == []
        assert terminal.reads_started == 0


class TestTimedQuiz:
    """A single deadline fixed at the start bounds the whole session."""

    async def test_far_deadline_with_correct_answers_matches_untimed(self) -> None:
        records = _make_records(5)
        clock = FakeClock()
        terminal = FakeTerminal(
            answers=_correct_answers(records), clock=clock, seconds_per_answer=1
        )

        result = await _make_runner(terminal=terminal, clock=clock).run(
            records=records, duration_seconds=1000
        )

        assert result.score == 5
        assert result.timed_out is False

    async def test_zero_duration_scores_zero_without_reading_input(self) -> None:
        records = _make_records(3)
        terminal = FakeTerminal(answers=_correct_answers(records))

        result = await _make_runner(terminal=terminal).run(
            records=records, duration_seconds=0
        )

        assert result.score == 0
        assert result.answered == 0
        assert result.timed_out is True
        assert terminal.reads_started == 0

    async def test_negative_duration_behaves_like_expired_deadline(self) -> None:
        records = _make_records(2)
        terminal = FakeTerminal(answers=_correct_answers(records))

        result = await _make_runner(terminal=terminal).run(
            records=records, duration_seconds=-5
        )

        assert result.score == 0
        assert terminal.reads_started == 0

    async def test_expired_deadline_still_shows_only_the_first_question(self) -> None:
        records = _make_records(3)
        terminal = FakeTerminal(answers=_correct_answers(records))

        await _make_runner(terminal=terminal).run(records=records, duration_seconds=0)

        assert terminal.lines == ["Question 1: 1+1"]

    async def test_deadline_between_questions_scores_only_earlier_answers(self) -> None:
        # Each answer takes 4s of a 10s budget: questions 1-3 are answered,
        # question 4 is shown with the deadline already passed.
        records = _make_records(5)
        clock = FakeClock()
        terminal = FakeTerminal(
            answers=["2", "wrong", "6", "8", "10"],
            clock=clock,
            seconds_per_answer=4,
        )

        result = await _make_runner(terminal=terminal, clock=clock).run(
            records=records, duration_seconds=10
        )

        assert result.score == 2
        assert result.answered == 3
        assert result.total == 5
        assert result.timed_out is True
        assert terminal.reads_started == 3
        assert terminal.lines[-1] == "Question 4: 4+4"

    async def test_deadline_is_not_reset_per_question(self) -> None:
        # 3s per answer stays under a 5s per-question limit but exhausts a 5s
        # session budget after the second answer.
        records = _make_records(4)
        clock = FakeClock()
        terminal = FakeTerminal(
            answers=_correct_answers(records), clock=clock, seconds_per_answer=3
        )

        result = await _make_runner(terminal=terminal, clock=clock).run(
            records=records, duration_seconds=5
        )

        assert result.score == 2
        assert result.timed_out is True

    async def test_deadline_while_waiting_cancels_the_pending_read(self) -> None:
        records = _make_records(3)
        terminal = FakeTerminal(answers=["2"])

        result = await _make_runner(terminal=terminal).run(
            records=records, duration_seconds=0.05
        )

        assert result.score == 1
        assert result.answered == 1
        assert result.timed_out is True
        assert terminal.reads_started == 2
        assert terminal.reads_cancelled == 1

    async def test_score_never_exceeds_record_count(self) -> None:
        records = _make_records(2)
        terminal = FakeTerminal(answers=["2", "4", "extra", "answers"])

        result = await _make_runner(terminal=terminal).run(
            records=records, duration_seconds=1000
        )

        assert 0 <= result.score <= len(records)


class TestObserverEvents:
    """Observer events are emitted at the correct points with correct data."""

    async def test_quiz_started_reports_question_count_and_duration(self) -> None:
        observer = FakeQuizObserver()
        records = _make_records(2)
        runner = _make_runner(
            terminal=FakeTerminal(answers=_correct_answers(records)),
            observer=observer,
        )

        await runner.run(records=records, duration_seconds=30)

        assert observer.started[0].total_questions == 2
        assert observer.started[0].duration_seconds == 30

    async def test_question_asked_carries_expected_answer_and_remaining_time(
        self,
    ) -> None:
        observer = FakeQuizObserver()
        clock = FakeClock()
        records = _make_records(2)
        runner = _make_runner(
            terminal=FakeTerminal(
                answers=_correct_answers(records), clock=clock, seconds_per_answer=2
            ),
            clock=clock,
            observer=observer,
        )

        await runner.run(records=records, duration_seconds=30)

        assert [e.expected_answer for e in observer.asked] == ["2", "4"]
        assert [e.remaining_seconds for e in observer.asked] == [30, 28]

    async def test_untimed_question_asked_has_no_remaining_time(self) -> None:
        observer = FakeQuizObserver()
        records = _make_records(1)
        runner = _make_runner(
            terminal=FakeTerminal(answers=["2"]),
            observer=observer,
        )

        await runner.run(records=records)

        assert observer.asked[0].remaining_seconds is None

    async def test_answer_scored_emitted_once_per_answer(self) -> None:
        observer = FakeQuizObserver()
        records = _make_records(2)
        runner = _make_runner(
            terminal=FakeTerminal(answers=["2", "5"]),
            observer=observer,
        )

        await runner.run(records=records)

        assert [(e.number, e.correct) for e in observer.scored] == [
            (1, True),
            (2, False),
        ]

    async def test_timed_out_emitted_with_question_number_and_score(self) -> None:
        observer = FakeQuizObserver()
        clock = FakeClock()
        records = _make_records(3)
        runner = _make_runner(
            terminal=FakeTerminal(answers=["2", "4"], clock=clock, seconds_per_answer=6),
            clock=clock,
            observer=observer,
        )

        await runner.run(records=records, duration_seconds=10)

        assert len(observer.timed_out) == 1
        assert observer.timed_out[0].number == 3
        assert observer.timed_out[0].score == 2

    async def test_completed_emitted_once_with_final_tally(self) -> None:
        observer = FakeQuizObserver()
        clock = FakeClock()
        records = _make_records(2)
        runner = _make_runner(
            terminal=FakeTerminal(answers=["2", "x"], clock=clock, seconds_per_answer=1.5),
            clock=clock,
            observer=observer,
        )

        await runner.run(records=records)

        assert len(observer.completed) == 1
        assert observer.completed[0].score == 1
        assert observer.completed[0].total == 2
        assert observer.completed[0].timed_out is False
        assert observer.completed[0].elapsed_seconds == 3.0

    async def test_no_timed_out_event_when_quiz_finishes(self) -> None:
        observer = FakeQuizObserver()
        records = _make_records(1)
        runner = _make_runner(terminal=FakeTerminal(answers=["2"]), observer=observer)

        await runner.run(records=records, duration_seconds=100)

        assert observer.timed_out == []
