# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module provides utility functions for JSON data."""

import json
import logging

JsonType = int | float | str | None | bool | list["JsonType"] | dict[str, "JsonType"]

logger: logging.Logger = logging.getLogger(__name__)


def load_json_object(content: str | bytes, description: str) -> dict[str, JsonType]:
    """Deserialize a JSON document whose top-level value must be an object.

    Parameters
    ----------
    content : str | bytes
        The JSON text.
    description : str
        A short description of the document, used in error messages.

    Returns
    -------
    dict[str, JsonType]
        The deserialized object.

    Raises
    ------
    ValueError
        If the content is not valid JSON or its top-level value is not an object.
    """
    try:
        payload = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError, RecursionError) as error:
        raise ValueError(f"Cannot deserialize the {description} as JSON: {error}") from error

    if not isinstance(payload, dict):
        logger.debug("The %s has a top-level value of type %s.", description, type(payload).__name__)
        raise ValueError(f"The {description} is not a JSON object.")

    return payload
