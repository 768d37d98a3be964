# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Error types related to in-toto attestations."""

from actions_provenance.errors import ProvenanceError


class InTotoAttestationError(ProvenanceError):
    """The base error type for all in-toto related errors."""


class ValidateInTotoPayloadError(InTotoAttestationError):
    """Happens when there is an issue validating an in-toto payload, usually against a schema."""
