# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module composes the provenance statement from the subjects and the run context."""

import datetime
import logging
from collections.abc import Iterable

from actions_provenance.context.github import AnyContext
from actions_provenance.intoto.v01 import (
    Builder,
    Completeness,
    InTotoV01Subject,
    Item,
    Metadata,
    ProvenancePredicate,
    ProvenanceStatement,
    Recipe,
)
from actions_provenance.json_tools import JsonType

logger: logging.Logger = logging.getLogger(__name__)

STATEMENT_TYPE = "https://in-toto.io/Statement/v0.1"
PREDICATE_TYPE = "https://in-toto.io/provenance/v0.1"
GITHUB_HOSTED_BUILDER_ID = "https://github.com/Attestations/GitHubHostedActions@v1"
SELF_HOSTED_BUILDER_ID = "https://github.com/Attestations/SelfHostedActions@v1"
RECIPE_TYPE = "https://github.com/Attestations/GitHubActionsWorkflow@v1"
SOURCE_HOST_PREFIX = "https://github.com/"
SOURCE_DIGEST_ALGORITHM = "sha1"


def select_builder_id(hosted: bool) -> str:
    """Return the builder id for a GitHub-hosted run or a self-hosted run."""
    if hosted:
        return GITHUB_HOSTED_BUILDER_ID
    return SELF_HOSTED_BUILDER_ID


def format_rfc3339(value: datetime.datetime) -> str:
    """Format a timezone-aware datetime as an RFC 3339 UTC timestamp with seconds precision.

    Parameters
    ----------
    value : datetime.datetime
        The timezone-aware datetime.

    Returns
    -------
    str
        The timestamp, e.g. ``2024-01-31T12:00:00Z``.

    Raises
    ------
    TypeError
        If ``value`` is naive.
    """
    if not value.tzinfo:
        raise TypeError("tzinfo is required")
    value = value.astimezone(datetime.UTC).replace(tzinfo=None)
    return value.isoformat(sep="T", timespec="seconds") + "Z"


def create_provenance_statement(
    subjects: Iterable[InTotoV01Subject],
    context: AnyContext,
    event_input: JsonType,
    hosted: bool,
    finished_on: datetime.datetime | None = None,
) -> ProvenanceStatement:
    """Construct the provenance statement.

    Parameters
    ----------
    subjects : Iterable[InTotoV01Subject]
        The hashed artifacts, in walk order.
    context : AnyContext
        The sanitized run context. It is embedded as the recipe environment.
    event_input : JsonType
        The raw input of the triggering event, or ``None``.
    hosted : bool
        Whether the run happens on a GitHub-hosted runner.
    finished_on : datetime.datetime | None
        The time the build finished. This is the current time by default.

    Returns
    -------
    ProvenanceStatement
        The statement, ready for serialization.
    """
    if finished_on is None:
        finished_on = datetime.datetime.now(tz=datetime.UTC)

    github = context["github"]
    builder_id = select_builder_id(hosted)
    logger.debug("Selected builder %s.", builder_id)

    return ProvenanceStatement(
        _type=STATEMENT_TYPE,
        subject=list(subjects),
        predicateType=PREDICATE_TYPE,
        predicate=ProvenancePredicate(
            builder=Builder(id=builder_id),
            metadata=Metadata(
                # Re-runs are not uniquely identified and can cause run id collisions.
                buildInvocationId=github["run_id"],
                completeness=Completeness(
                    arguments=True,
                    # Context variables are the main dynamic aspect of builds and those are recorded.
                    # Secrets are not considered environment inputs and are omitted.
                    environment=True,
                    # Only the source commit is recorded, not the transitive dependencies.
                    materials=False,
                ),
                reproducible=False,
                buildFinishedOn=format_rfc3339(finished_on),
            ),
            recipe=Recipe(
                type=RECIPE_TYPE,
                definedInMaterial=0,
                entryPoint=github["workflow"],
                arguments=event_input,
                environment=context,
            ),
            materials=[
                Item(
                    uri=SOURCE_HOST_PREFIX + github["repository"],
                    digest={SOURCE_DIGEST_ALGORITHM: github["sha"]},
                )
            ],
        ),
    )
