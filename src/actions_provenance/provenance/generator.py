# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module runs the provenance generation for one workflow run."""

import datetime
import logging
from typing import NamedTuple

from actions_provenance.artifact.digest import collect_subjects
from actions_provenance.config.run_config import RunConfig
from actions_provenance.context.github import extract_event_input, parse_contexts
from actions_provenance.intoto import validate_provenance_statement
from actions_provenance.intoto.v01 import ProvenanceStatement
from actions_provenance.provenance.serializer import render_statement
from actions_provenance.provenance.statement import create_provenance_statement

logger: logging.Logger = logging.getLogger(__name__)


class ProvenanceResult(NamedTuple):
    """The outcome of a provenance generation."""

    #: The composed statement.
    statement: ProvenanceStatement

    #: The rendered statement, as written to the output file.
    rendered: bytes

    #: The access token removed from the GitHub context. It is empty if none was supplied.
    token: str


def generate_provenance(
    run_config: RunConfig,
    indent: int = 2,
    finished_on: datetime.datetime | None = None,
) -> ProvenanceResult:
    """Collect the subjects, interpret the contexts, then compose, validate and render the statement.

    Nothing is written to disk and the process is never exited here.

    Parameters
    ----------
    run_config : RunConfig
        The inputs of this run.
    indent : int
        The indentation of the rendered statement.
    finished_on : datetime.datetime | None
        The build finish time. The time of composition is used by default.

    Returns
    -------
    ProvenanceResult
        The statement, its rendering and the removed token.

    Raises
    ------
    ProvenanceError
        If any stage fails. See ``actions_provenance.errors`` for the subclasses.
    """
    subjects = collect_subjects(run_config.artifact_path)

    context, token = parse_contexts(run_config.github_context, run_config.runner_context)
    event_input = extract_event_input(context)

    statement = create_provenance_statement(
        subjects,
        context,
        event_input,
        hosted=run_config.hosted,
        finished_on=finished_on,
    )
    validate_provenance_statement(statement)

    return ProvenanceResult(statement=statement, rendered=render_statement(statement, indent=indent), token=token)
