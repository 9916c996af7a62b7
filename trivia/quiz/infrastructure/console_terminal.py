"""ConsoleTerminal — prints questions with rich and reads answers from stdin."""

import asyncio
import sys
import threading
from typing import TextIO, TypeAlias

from rich.console import Console

AnswerQueue: TypeAlias = asyncio.Queue[str | None]


class ConsoleTerminal:
    """Satisfies the QuizTerminal protocol for an interactive console.

    A single daemon thread reads the input stream for the whole session and
    hands each line to the event loop through an asyncio.Queue. Awaiting the
    queue is cancellable, so a question that runs out of time leaves no reader
    behind; the one thread stays parked in readline until the process exits.

    Once the stream reaches EOF every further answer is the empty string.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        console: Console | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._console = (
            console
            if console is not None
            else Console(highlight=False, soft_wrap=True, emoji=False)
        )
        self._answers: AnswerQueue | None = None
        self._eof = False

    def show(self, line: str) -> None:
        self._console.print(line, markup=False)

    async def read_answer(self) -> str:
        if self._eof:
            return ""
        answers = self._answers
        if answers is None:
            answers = self._start_reader()
        line = await answers.get()
        if line is None:
            self._eof = True
            return ""
        return line.rstrip("\r\n")

    def _start_reader(self) -> AnswerQueue:
        loop = asyncio.get_running_loop()
        answers: AnswerQueue = asyncio.Queue()
        reader = threading.Thread(
            target=self._read_lines,
            args=(loop, answers),
            name="trivia-stdin-reader",
            daemon=True,
        )
        reader.start()
        self._answers = answers
        return answers

    def _read_lines(self, loop: asyncio.AbstractEventLoop, answers: AnswerQueue) -> None:
        while True:
            line = self._stream.readline()
            try:
                loop.call_soon_threadsafe(answers.put_nowait, line or None)
            except RuntimeError:
                # Event loop already closed; the session is over.
                return
            if not line:
                return
