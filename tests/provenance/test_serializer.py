# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for rendering and reading back provenance statements."""

import datetime
import errno
import json
import stat
from pathlib import Path

import pytest

from actions_provenance.context.github import extract_event_input, parse_contexts
from actions_provenance.errors import OutputWriteError, SerializationError
from actions_provenance.intoto.errors import ValidateInTotoPayloadError
from actions_provenance.intoto.v01 import InTotoV01Subject, ProvenanceStatement
from actions_provenance.provenance import serializer
from actions_provenance.provenance.serializer import load_statement, render_statement, write_statement
from actions_provenance.provenance.statement import create_provenance_statement

FINISHED_ON = datetime.datetime(2024, 5, 17, 8, 30, 15, tzinfo=datetime.UTC)


@pytest.fixture(name="statement")
def statement_(github_context_json: str, runner_context_json: str) -> ProvenanceStatement:
    """Return a statement composed from the context fixtures."""
    context, _ = parse_contexts(github_context_json, runner_context_json)
    return create_provenance_statement(
        [InTotoV01Subject(name="app.whl", digest={"sha256": "0123456789abcdef" * 4})],
        context,
        extract_event_input(context),
        hosted=True,
        finished_on=FINISHED_ON,
    )


def test_render_statement_indented(statement: ProvenanceStatement) -> None:
    """The statement is rendered as indented JSON in declared key order."""
    rendered = render_statement(statement)

    assert rendered.startswith(b'{\n  "_type": "https://in-toto.io/Statement/v0.1",\n  "subject": [')
    payload = json.loads(rendered)
    assert list(payload) == ["_type", "subject", "predicateType", "predicate"]
    assert list(payload["predicate"]) == ["builder", "metadata", "recipe", "materials"]
    assert list(payload["predicate"]["metadata"]) == [
        "buildInvocationId",
        "completeness",
        "reproducible",
        "buildFinishedOn",
    ]


def test_render_statement_indent(statement: ProvenanceStatement) -> None:
    """The indentation is configurable."""
    assert render_statement(statement, indent=4).startswith(b'{\n    "_type"')


def test_round_trip(statement: ProvenanceStatement) -> None:
    """Reading back the rendered statement yields the composed statement."""
    loaded = load_statement(render_statement(statement))

    assert loaded == statement
    assert list(loaded) == list(statement)


def test_round_trip_without_subjects(statement: ProvenanceStatement) -> None:
    """A statement without subjects is still valid."""
    statement["subject"] = []

    assert load_statement(render_statement(statement)) == statement


def test_render_statement_unserializable(statement: ProvenanceStatement) -> None:
    """Values that are not JSON are reported as serialization errors."""
    statement["predicate"]["recipe"]["arguments"] = {"key": {1, 2}}  # type: ignore[dict-item]

    with pytest.raises(SerializationError):
        render_statement(statement)


@pytest.mark.parametrize(
    "content",
    [
        pytest.param(b"", id="Empty"),
        pytest.param(b"{", id="Truncated"),
        pytest.param(b"[]", id="List"),
        pytest.param(b"\xff\xfe\x00", id="Not UTF-8"),
    ],
)
def test_load_statement_invalid_json(content: bytes) -> None:
    """Content that is not a JSON object cannot be loaded."""
    with pytest.raises(SerializationError):
        load_statement(content)


def test_load_statement_invalid_statement(statement: ProvenanceStatement) -> None:
    """A JSON object that is not a valid statement cannot be loaded."""
    payload = json.loads(render_statement(statement))
    payload["predicate"]["materials"].append(payload["predicate"]["materials"][0])

    with pytest.raises(ValidateInTotoPayloadError):
        load_statement(json.dumps(payload))


def test_write_statement_overwrites(tmp_path: Path, statement: ProvenanceStatement) -> None:
    """The output file is replaced, not appended to."""
    output = tmp_path.joinpath("build.provenance")
    output.write_text("previous content that is longer than nothing", encoding="utf-8")
    rendered = render_statement(statement)

    write_statement(rendered, str(output))

    assert output.read_bytes() == rendered


def test_write_statement_keeps_previous_output_on_failure(
    tmp_path: Path, statement: ProvenanceStatement, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A failed write leaves the previous output and no temporary file behind."""
    output = tmp_path.joinpath("build.provenance")
    output.write_text("previous provenance", encoding="utf-8")

    def _fail_replace(src: str, dst: str) -> None:
        raise OSError(errno.ENOSPC, "No space left on device")

    monkeypatch.setattr(serializer.os, "replace", _fail_replace)

    with pytest.raises(OutputWriteError):
        write_statement(render_statement(statement), str(output))

    assert output.read_text(encoding="utf-8") == "previous provenance"
    assert [path.name for path in tmp_path.iterdir()] == ["build.provenance"]


def test_write_statement_mode(tmp_path: Path, statement: ProvenanceStatement) -> None:
    """The output file is not left with the private mode of the temporary file."""
    output = tmp_path.joinpath("build.provenance")

    write_statement(render_statement(statement), str(output))

    assert stat.S_IMODE(output.stat().st_mode) == 0o644


def test_write_statement_to_directory(tmp_path: Path, statement: ProvenanceStatement) -> None:
    """An unwritable output path is reported."""
    with pytest.raises(OutputWriteError):
        write_statement(render_statement(statement), str(tmp_path))
