"""File question loader — reads a CSV, JSON or XML quiz file into QuestionRecords."""

import csv
import hashlib
import io
import json
import xml.etree.ElementTree as ElementTree
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn, TypeAlias

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from trivia.dataset.domain.errors import UnsupportedFormatError
from trivia.dataset.domain.format import QuestionFormat
from trivia.dataset.domain.observer import DatasetObserver
from trivia.dataset.domain.question import QuestionRecord
from trivia.dataset.domain.question_set import QuestionSet
from trivia.dataset.infrastructure.errors import DatasetLoadError

DecodeOutcome: TypeAlias = tuple[list[QuestionRecord], list[str]]


class _JsonQuestion(BaseModel):
    """Shape of one element of a JSON quiz file. Extra keys are ignored."""

    question: str = Field(min_length=1)
    result: str = Field(min_length=1)


_JSON_QUESTIONS = TypeAdapter(list[_JsonQuestion])


class FileQuestionLoader:
    """Loads a quiz file and returns its questions in source order.

    The decoder is chosen from the file extension. Every problem found in the
    file is collected before a single DatasetLoadError is raised, so no partial
    question list is ever returned.
    """

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer
        self._decoders: dict[QuestionFormat, Callable[[bytes], DecodeOutcome]] = {
            QuestionFormat.CSV: _decode_csv,
            QuestionFormat.JSON: _decode_json,
            QuestionFormat.XML: _decode_xml,
        }

    def load(self, path: Path) -> QuestionSet:
        """
        Load all questions from the file at path.

        Raises:
            UnsupportedFormatError: if the extension is not csv, json or xml.
            DatasetLoadError: if the file cannot be read, or any record is
                malformed.
        """
        path_str = str(path)
        self._observer.dataset_loading_started(path=path_str)

        try:
            source_format = QuestionFormat.from_path(path)
        except UnsupportedFormatError as exc:
            self._observer.dataset_loading_failed(path=path_str, reason=str(exc))
            raise
        self._observer.dataset_format_detected(
            path=path_str, source_format=source_format.value
        )

        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            self._fail(path=path_str, reason=f"file not found: {path_str}")
        except OSError as exc:
            self._fail(path=path_str, reason=f"cannot read {path_str}: {exc}")

        records, errors = self._decoders[source_format](raw)
        if errors:
            self._fail(path=path_str, reason="; ".join(errors))

        for index, record in enumerate(records):
            self._observer.dataset_record_loaded(
                index=index,
                prompt=record.prompt,
                expected_answer=record.expected_answer,
            )

        sha256 = hashlib.sha256(raw).hexdigest()
        self._observer.dataset_loading_completed(
            path=path_str,
            total_records=len(records),
            sha256=sha256,
        )
        return QuestionSet(records=records, source_format=source_format, sha256=sha256)

    def _fail(self, path: str, reason: str) -> NoReturn:
        self._observer.dataset_loading_failed(path=path, reason=reason)
        raise DatasetLoadError(reason=reason)


def _decode_text(raw: bytes) -> str | None:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return None


def _build_record(label: str, prompt: str, answer: str) -> QuestionRecord | str:
    """Return a QuestionRecord, or an error string naming the empty field(s)."""
    fields = (("question", prompt), ("result", answer))
    empty = [name for name, value in fields if not value]
    if empty:
        return f"{label}: empty {' and '.join(empty)}"
    return QuestionRecord(prompt=prompt, expected_answer=answer)


def _decode_csv(raw: bytes) -> DecodeOutcome:
    """Decode headerless `question,result` rows. Blank lines are skipped."""
    text = _decode_text(raw)
    if text is None:
        return [], ["file is not valid UTF-8"]

    records: list[QuestionRecord] = []
    errors: list[str] = []
    try:
        rows = list(csv.reader(io.StringIO(text, newline="")))
    except csv.Error as exc:
        return [], [f"invalid CSV: {exc}"]

    for line_number, row in enumerate(rows, start=1):
        if not row:
            continue
        if len(row) != 2:
            errors.append(f"row {line_number}: expected 2 fields, got {len(row)}")
            continue
        result = _build_record(f"row {line_number}", prompt=row[0], answer=row[1])
        if isinstance(result, str):
            errors.append(result)
        else:
            records.append(result)

    return records, errors


def _decode_json(raw: bytes) -> DecodeOutcome:
    """Decode a top-level array of `{"question": ..., "result": ...}` objects."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return [], [f"invalid JSON: {exc}"]

    try:
        items = _JSON_QUESTIONS.validate_python(data)
    except ValidationError as exc:
        errors: list[str] = []
        for err in exc.errors():
            location = ".".join(str(part) for part in err["loc"]) or "document"
            errors.append(f"{location}: {err['msg']}")
        return [], errors

    records = [
        QuestionRecord(prompt=item.question, expected_answer=item.result)
        for item in items
    ]
    return records, []


def _decode_xml(raw: bytes) -> DecodeOutcome:
    """
    Decode a document whose root children each hold one question and one result.

    Example::

        <problems>
          <problem><question>2+2</question><result>4</result></problem>
        </problems>

    Child and root tag names are free; surrounding whitespace in element text
    is stripped.
    """
    try:
        root = ElementTree.fromstring(raw)
    except ElementTree.ParseError as exc:
        return [], [f"invalid XML: {exc}"]

    records: list[QuestionRecord] = []
    errors: list[str] = []
    for index, element in enumerate(root):
        label = f"element {index} <{element.tag}>"
        questions = element.findall("question")
        results = element.findall("result")
        if len(questions) != 1 or len(results) != 1:
            errors.append(
                f"{label}: expected one <question> and one <result>, "
                f"got {len(questions)} and {len(results)}"
            )
            continue
        result = _build_record(
            label,
            prompt="".join(questions[0].itertext()).strip(),
            answer="".join(results[0].itertext()).strip(),
        )
        if isinstance(result, str):
            errors.append(result)
        else:
            records.append(result)

    return records, errors
