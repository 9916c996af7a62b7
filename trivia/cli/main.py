"""CLI entrypoint for trivia — typer app with a `run` command."""

import asyncio
import logging
import sys
from pathlib import Path

import structlog
import typer

from trivia.config.infrastructure.observer import StructlogConfigObserver
from trivia.config.infrastructure.yaml_loader import YamlSettingsLoader
from trivia.core.errors import TriviaError
from trivia.dataset.domain.loader import QuestionLoader
from trivia.dataset.infrastructure.file_loader import FileQuestionLoader
from trivia.dataset.infrastructure.observer import StructlogDatasetObserver
from trivia.quiz.application.runner import QuizRunner
from trivia.quiz.domain.result import QuizResult
from trivia.quiz.infrastructure.clock import MonotonicClock
from trivia.quiz.infrastructure.console_terminal import ConsoleTerminal
from trivia.quiz.infrastructure.observer import StructlogQuizObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str, debug: bool) -> None:
    """Configure structlog based on the requested format and verbosity.

    Without debug only warnings and errors are rendered, so log lines do not
    interleave with the questions.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.WARNING
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _print_result(result: QuizResult) -> None:
    if result.timed_out:
        typer.echo("Time's up!")
    typer.echo(f"Your score is {result.score} out of {result.total}")


@app.callback()
def main() -> None:
    """Play a trivia quiz loaded from a CSV, JSON or XML file."""


@app.command()
def run(
    path: Path | None = typer.Argument(
        None,
        help="Question file ending in .csv, .json or .xml [default: problems.csv]",
        show_default=False,
    ),
    separator: str | None = typer.Option(
        None,
        "--separator",
        help="Question separator (accepted but not used by any format) [default: ,]",
    ),
    debug: bool | None = typer.Option(
        None,
        "--debug/--no-debug",
        help="Print verbose diagnostic logs",
    ),
    duration: int | None = typer.Option(
        None,
        "--duration",
        "-d",
        help="Time budget in seconds for the whole quiz [default: 1000]",
    ),
    untimed: bool = typer.Option(
        False,
        "--untimed",
        help="Ask every question without a time limit",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with default settings",
    ),
    log_format: str | None = typer.Option(
        None,
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Ask every question in PATH and print the final score."""
    # Provisional logging until the settings file has been merged in.
    _configure_structlog(log_format=log_format or "console", debug=bool(debug))

    try:
        settings = YamlSettingsLoader(observer=StructlogConfigObserver()).load(
            path=config_path,
            overrides={
                "path": path,
                "separator": separator,
                "debug": debug,
                "duration_seconds": duration,
                "timed": False if untimed else None,
                "log_format": log_format,
            },
        )
        _configure_structlog(log_format=settings.log_format, debug=settings.debug)

        loader: QuestionLoader = FileQuestionLoader(
            observer=StructlogDatasetObserver()
        )
        question_set = loader.load(path=settings.path)

        typer.echo("Game starting!")
        runner = QuizRunner(
            terminal=ConsoleTerminal(),
            observer=StructlogQuizObserver(),
            clock=MonotonicClock(),
        )
        result = asyncio.run(
            runner.run(
                records=question_set.records,
                duration_seconds=settings.time_budget,
            )
        )
        _print_result(result=result)

    except KeyboardInterrupt:
        typer.echo("Quiz interrupted.")
        sys.exit(1)
    except TriviaError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
