# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module renders provenance statements to JSON and reads them back."""

import json
import logging
import os
import tempfile
from pathlib import Path

from actions_provenance.errors import OutputWriteError, SerializationError
from actions_provenance.intoto import validate_provenance_statement
from actions_provenance.intoto.v01 import ProvenanceStatement
from actions_provenance.json_tools import load_json_object

logger: logging.Logger = logging.getLogger(__name__)

OUTPUT_FILE_MODE = 0o644


def render_statement(statement: ProvenanceStatement, indent: int = 2) -> bytes:
    """Render the statement as indented JSON.

    Keys keep the declared order of the statement structure; they are never sorted.

    Parameters
    ----------
    statement : ProvenanceStatement
        The statement.
    indent : int
        The number of spaces per indentation level.

    Returns
    -------
    bytes
        The UTF-8 encoded JSON document.

    Raises
    ------
    SerializationError
        If the statement cannot be encoded.
    """
    try:
        return json.dumps(statement, indent=indent).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as error:
        raise SerializationError(f"Cannot serialize the provenance statement: {error}") from error


def load_statement(content: str | bytes) -> ProvenanceStatement:
    """Parse a rendered statement back into the data model.

    Parameters
    ----------
    content : str | bytes
        The rendered statement.

    Returns
    -------
    ProvenanceStatement
        The validated statement.

    Raises
    ------
    SerializationError
        If the content is not a JSON object.
    ValidateInTotoPayloadError
        If the JSON object is not a valid provenance statement.
    """
    try:
        payload = load_json_object(content, "provenance statement")
    except ValueError as error:
        raise SerializationError(str(error)) from error

    if validate_provenance_statement(payload):
        return payload

    raise SerializationError("Unexpected error while validating the provenance statement.")


def write_statement(rendered: bytes, output_path: str) -> None:
    """Write the rendered statement to ``output_path``, replacing any existing content.

    The statement is written to a temporary file in the same directory, which then
    replaces ``output_path``. If writing fails, an existing output file is left as it was.

    Parameters
    ----------
    rendered : bytes
        The rendered statement.
    output_path : str
        The output file path.

    Raises
    ------
    OutputWriteError
        If the file cannot be written.
    """
    output_dir = os.path.dirname(os.path.abspath(output_path))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(dir=output_dir, prefix=".provenance-", suffix=".tmp")
        with os.fdopen(fd, mode="wb") as file:
            file.write(rendered)
        os.chmod(tmp_path, OUTPUT_FILE_MODE)
        os.replace(tmp_path, output_path)
    except OSError as error:
        if tmp_path is not None:
            Path(tmp_path).unlink(missing_ok=True)
        raise OutputWriteError(f"Failed to write provenance to {output_path}: {error}") from error

    logger.info("Provenance written to %s.", os.path.relpath(output_path, os.getcwd()))
