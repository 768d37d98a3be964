# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module interprets the GitHub Actions ``github`` and ``runner`` contexts of a workflow run.

For the content of the contexts, see:
https://docs.github.com/en/actions/learn-github-actions/contexts.
"""

from __future__ import annotations

import json
import logging
from typing import NotRequired, TypedDict

from actions_provenance.errors import ContextParseError
from actions_provenance.json_tools import JsonType, load_json_object

logger: logging.Logger = logging.getLogger(__name__)

# The only event with dynamically-provided input is ``workflow_dispatch``, which
# exposes the user parameters at the key "input".
# See https://docs.github.com/en/actions/reference/events-that-trigger-workflows.
WORKFLOW_DISPATCH_EVENT = "workflow_dispatch"
EVENT_INPUT_KEY = "input"


class GitHubContext(TypedDict):
    """The subset of the ``github`` context recorded in the provenance.

    ``token`` is only present before sanitization.
    """

    action: str
    action_path: str
    actor: str
    base_ref: str
    event: JsonType
    event_name: str
    event_path: str
    head_ref: str
    job: str
    ref: str
    repository: str
    repository_owner: str
    run_id: str
    run_number: str
    sha: str
    token: NotRequired[str]
    workflow: str
    workspace: str


class RunnerContext(TypedDict):
    """The subset of the ``runner`` context recorded in the provenance."""

    os: str
    temp: str
    tool_cache: str


class AnyContext(TypedDict):
    """The environment of the run, composed of the two independently parsed contexts."""

    github: GitHubContext
    runner: RunnerContext


GITHUB_CONTEXT_STRING_FIELDS = (
    "action",
    "action_path",
    "actor",
    "base_ref",
    "event_name",
    "event_path",
    "head_ref",
    "job",
    "ref",
    "repository",
    "repository_owner",
    "run_id",
    "run_number",
    "sha",
    "token",
    "workflow",
    "workspace",
)

RUNNER_CONTEXT_STRING_FIELDS = ("os", "temp", "tool_cache")


def _get_string_field(payload: dict[str, JsonType], field: str, description: str) -> str:
    value = payload.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ContextParseError(f"The value of '{field}' in the {description} is invalid: expecting a string.")
    return value


def parse_github_context(content: str) -> GitHubContext:
    """Parse the ``github`` context of a workflow run.

    Keys that are not part of ``GitHubContext`` are dropped. Missing string fields are empty
    and a missing ``event`` is ``None``. The ``token`` key is only kept when it has a value.

    Parameters
    ----------
    content : str
        The ``${{ toJSON(github) }}`` value.

    Returns
    -------
    GitHubContext
        The parsed context, still carrying the token if one was supplied.

    Raises
    ------
    ContextParseError
        If the content is not a JSON object or a known field has an unexpected type.
    """
    try:
        payload = load_json_object(content, "GitHub context")
    except ValueError as error:
        raise ContextParseError(str(error)) from error

    fields = {field: _get_string_field(payload, field, "GitHub context") for field in GITHUB_CONTEXT_STRING_FIELDS}
    context = GitHubContext(
        action=fields["action"],
        action_path=fields["action_path"],
        actor=fields["actor"],
        base_ref=fields["base_ref"],
        event=payload.get("event"),
        event_name=fields["event_name"],
        event_path=fields["event_path"],
        head_ref=fields["head_ref"],
        job=fields["job"],
        ref=fields["ref"],
        repository=fields["repository"],
        repository_owner=fields["repository_owner"],
        run_id=fields["run_id"],
        run_number=fields["run_number"],
        sha=fields["sha"],
        workflow=fields["workflow"],
        workspace=fields["workspace"],
    )
    if fields["token"]:
        context["token"] = fields["token"]
    return context


def parse_runner_context(content: str) -> RunnerContext:
    """Parse the ``runner`` context of a workflow run.

    Parameters
    ----------
    content : str
        The ``${{ toJSON(runner) }}`` value.

    Returns
    -------
    RunnerContext
        The parsed context.

    Raises
    ------
    ContextParseError
        If the content is not a JSON object or a known field has an unexpected type.
    """
    try:
        payload = load_json_object(content, "runner context")
    except ValueError as error:
        raise ContextParseError(str(error)) from error

    return RunnerContext(
        os=_get_string_field(payload, "os", "runner context"),
        temp=_get_string_field(payload, "temp", "runner context"),
        tool_cache=_get_string_field(payload, "tool_cache", "runner context"),
    )


def parse_contexts(github_content: str, runner_content: str) -> tuple[AnyContext, str]:
    """Parse both contexts and remove the access token from the result.

    The two documents are parsed independently into disjoint parts of the returned context.

    Parameters
    ----------
    github_content : str
        The ``github`` context JSON text.
    runner_content : str
        The ``runner`` context JSON text.

    Returns
    -------
    tuple[AnyContext, str]
        The sanitized context and the removed access token, which is empty if none was supplied.

    Raises
    ------
    ContextParseError
        If either context is malformed.
    """
    github = parse_github_context(github_content)
    runner = parse_runner_context(runner_content)

    # The token must never reach the provenance.
    token = github.pop("token", "")
    return AnyContext(github=github, runner=runner), token


def is_workflow_dispatch(context: AnyContext) -> bool:
    """Return True if the run was triggered manually through ``workflow_dispatch``."""
    return context["github"]["event_name"] == WORKFLOW_DISPATCH_EVENT


def extract_event_input(context: AnyContext) -> JsonType:
    """Return the dynamic user input carried by the triggering event.

    The event may be embedded as an object or as a JSON string. A missing or ``null`` event,
    or an event without an ``input`` key, yields ``None``.

    Parameters
    ----------
    context : AnyContext
        The parsed context.

    Returns
    -------
    JsonType
        The raw ``input`` value of the event, or ``None``.

    Raises
    ------
    ContextParseError
        If the event is neither an object nor a JSON string holding an object.
    """
    event = context["github"]["event"]
    if event is None:
        logger.debug("The GitHub context carries no event.")
        return None

    if isinstance(event, str):
        try:
            event = load_json_object(event, "triggering event")
        except ValueError as error:
            raise ContextParseError(str(error)) from error
    elif not isinstance(event, dict):
        raise ContextParseError("The triggering event in the GitHub context is not a JSON object.")

    event_input = event.get(EVENT_INPUT_KEY)
    if event_input is not None and not is_workflow_dispatch(context):
        logger.debug(
            "Found an event input on a '%s' event: %s",
            context["github"]["event_name"],
            json.dumps(event_input),
        )
    return event_input
