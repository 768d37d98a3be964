# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""In-toto provenance schema and validation."""

import json
import logging
import os
from functools import cache
from typing import TypeGuard

import jsonschema

from actions_provenance import PACKAGE_PATH
from actions_provenance.intoto.errors import ValidateInTotoPayloadError
from actions_provenance.intoto.v01 import ProvenanceStatement
from actions_provenance.json_tools import JsonType

logger: logging.Logger = logging.getLogger(__name__)

PROVENANCE_SCHEMA_PATH = os.path.join(PACKAGE_PATH, "resources", "schemas", "github-actions-provenance-v0.1.json")


@cache
def load_provenance_schema() -> dict[str, JsonType]:
    """Load the JSON schema of the provenance statement shipped with the package."""
    with open(PROVENANCE_SCHEMA_PATH, encoding="utf-8") as schema_file:
        schema: dict[str, JsonType] = json.load(schema_file)
    return schema


def validate_provenance_statement(payload: dict[str, JsonType] | ProvenanceStatement) -> TypeGuard[ProvenanceStatement]:
    """Validate a provenance statement against the provenance JSON schema.

    The schema pins the fixed identifiers and flags of the statement, requires 64-character lowercase
    hex SHA-256 subject digests and exactly one material, and rejects an access token in the environment.

    Parameters
    ----------
    payload : dict[str, JsonType] | ProvenanceStatement
        The statement to validate.

    Returns
    -------
    TypeGuard[ProvenanceStatement]
        ``True`` if the statement is valid, in which case its type is narrowed to a ``ProvenanceStatement``.

    Raises
    ------
    ValidateInTotoPayloadError
        When the statement does not follow the schema.
    """
    try:
        jsonschema.validate(payload, load_provenance_schema())
    except jsonschema.ValidationError as error:
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        logger.debug("Provenance schema validation failed at %s: %s", location, error.message)
        raise ValidateInTotoPayloadError(
            f"The provenance statement is invalid at '{location}': {error.message}"
        ) from error

    return True
