# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the RunConfig class holding the inputs of one provenance generation."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from actions_provenance.config.defaults import defaults
from actions_provenance.errors import ConfigurationError

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """The inputs of a single provenance generation, built once and passed to each stage."""

    #: The file or directory path of the artifacts for which provenance is generated.
    artifact_path: str

    #: The path to which the generated provenance is written.
    output_path: str

    #: The ``${{ toJSON(github) }}`` context value.
    github_context: str

    #: The ``${{ toJSON(runner) }}`` context value.
    runner_context: str

    #: Whether the run happens on a GitHub-hosted runner rather than a self-hosted one.
    hosted: bool = False


def is_hosted_runner(env: Mapping[str, str] | None = None) -> bool:
    """Return True if the environment indicates a run on the GitHub-hosted runner.

    Parameters
    ----------
    env : Mapping[str, str] | None
        The environment to inspect. This is ``None`` by default, in which case ``os.environ`` is used.

    Returns
    -------
    bool
        True if the hosted-runner marker variable carries its expected value.
    """
    env = os.environ if env is None else env
    var = defaults.get("runner", "hosted_env_var", fallback="GITHUB_ACTIONS")
    expected = defaults.get("runner", "hosted_env_value", fallback="true")
    return env.get(var) == expected


def create_run_config(
    artifact_path: str | None,
    output_path: str | None,
    github_context: str | None,
    runner_context: str | None,
    env: Mapping[str, str] | None = None,
) -> RunConfig:
    """Validate the raw invocation parameters and build the RunConfig.

    The context values fall back to the environment variables configured in ``defaults.ini``
    when they are not given. The hosted-runner marker is read once here.

    Parameters
    ----------
    artifact_path : str | None
        The artifact root path.
    output_path : str | None
        The output file path. The configured default is used when this is ``None``.
    github_context : str | None
        The GitHub context JSON text.
    runner_context : str | None
        The runner context JSON text.
    env : Mapping[str, str] | None
        The environment to read fallbacks and the hosted-runner marker from.
        This is ``None`` by default, in which case ``os.environ`` is used.

    Returns
    -------
    RunConfig
        The configuration of this run.

    Raises
    ------
    ConfigurationError
        If a required parameter has no value.
    """
    env = os.environ if env is None else env

    if output_path is None:
        output_path = defaults.get("provenance", "output_path", fallback="build.provenance")
    if not github_context:
        github_context = env.get(defaults.get("context", "github_context_env_var", fallback="GITHUB_CONTEXT"), "")
    if not runner_context:
        runner_context = env.get(defaults.get("context", "runner_context_env_var", fallback="RUNNER_CONTEXT"), "")

    required = {
        "--artifact-path": artifact_path,
        "--output-path": output_path,
        "--github-context": github_context,
        "--runner-context": runner_context,
    }
    for flag, value in required.items():
        if not value:
            raise ConfigurationError(f"No value found for required flag: {flag}")

    hosted = is_hosted_runner(env)
    logger.debug("Running on a %s runner.", "GitHub-hosted" if hosted else "self-hosted")

    return RunConfig(
        artifact_path=str(artifact_path),
        output_path=str(output_path),
        github_context=str(github_context),
        runner_context=str(runner_context),
        hosted=hosted,
    )
