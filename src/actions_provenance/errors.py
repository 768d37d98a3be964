# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains error classes for actions-provenance."""


class ProvenanceError(Exception):
    """The base class for provenance generation errors."""


class ConfigurationError(ProvenanceError):
    """Happens when a required parameter is missing or the defaults configuration cannot be read."""


class ArtifactNotFoundError(ProvenanceError):
    """Happens when the artifact root path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Resource path not found: [provided={path}]")
        self.path = path


class ArtifactReadError(ProvenanceError):
    """Happens when a file under the artifact root cannot be walked or read."""


class ContextParseError(ProvenanceError):
    """Happens when the GitHub context, the runner context or the embedded event is malformed."""


class SerializationError(ProvenanceError):
    """Happens when the provenance statement cannot be rendered or parsed back as JSON."""


class OutputWriteError(ProvenanceError):
    """Happens when the rendered provenance cannot be written to the output path."""
