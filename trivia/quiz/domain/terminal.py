"""QuizTerminal Protocol — where questions are shown and answers come from."""

from typing import Protocol


class QuizTerminal(Protocol):
    def show(self, line: str) -> None: ...

    async def read_answer(self) -> str: ...
