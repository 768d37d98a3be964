# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module defines the in-toto version 0.1 statement carrying a GitHub Actions provenance predicate."""

from __future__ import annotations

from typing import TypedDict

from actions_provenance.context.github import AnyContext
from actions_provenance.json_tools import JsonType

# Note: The lint error "N815:mixedCase variable in class scope" is disabled for
# field names to conform with in-toto naming conventions.

#: Mapping from a digest algorithm name to the lowercase hex digest.
#: Specification: https://github.com/in-toto/attestation/blob/main/spec/v0.1.0/field_types.md#DigestSet.
DigestSet = dict[str, str]


class InTotoV01Subject(TypedDict):
    """An in-toto subject.

    Specification: https://github.com/in-toto/attestation/tree/main/spec/v0.1.0#statement.
    """

    name: str
    digest: DigestSet


class ProvenanceStatement(TypedDict):
    """An in-toto version 0.1 statement whose predicate is a GitHub Actions provenance.

    The key order of this class is the key order of the rendered document.
    """

    #: Always ``https://in-toto.io/Statement/v0.1``.
    _type: str

    #: One subject per hashed artifact file, in walk order.
    subject: list[InTotoV01Subject]

    #: Always ``https://in-toto.io/provenance/v0.1``.
    predicateType: str  # noqa: N815

    predicate: ProvenancePredicate


class ProvenancePredicate(TypedDict):
    """The provenance predicate: who built the subjects, how, and from what."""

    builder: Builder
    metadata: Metadata
    recipe: Recipe
    materials: list[Item]


class Builder(TypedDict):
    """The class of build environment, never a specific machine."""

    id: str  # noqa: A003


class Metadata(TypedDict):
    """Metadata of the build.

    ``buildStartedOn`` is not recorded as it is not available from a GitHub Actions run.
    """

    #: The workflow run id. Re-runs of the same run share this id.
    buildInvocationId: str  # noqa: N815

    completeness: Completeness

    reproducible: bool

    #: RFC 3339 UTC timestamp taken when the statement is composed.
    buildFinishedOn: str  # noqa: N815


class Completeness(TypedDict):
    """Which claims of the predicate are asserted to be complete."""

    arguments: bool
    environment: bool
    materials: bool


class Recipe(TypedDict):
    """The steps that produced the subjects, as defined by the workflow."""

    type: str  # noqa: A003

    #: Index into ``materials`` of the material defining the recipe.
    definedInMaterial: int  # noqa: N815

    entryPoint: str  # noqa: N815

    #: The raw ``input`` of the triggering event, or ``None``.
    arguments: JsonType

    environment: AnyContext


class Item(TypedDict):
    """A material consumed by the build."""

    uri: str
    digest: DigestSet
