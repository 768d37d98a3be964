# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This is the main entrypoint to generate the provenance of a GitHub Actions workflow run."""

import argparse
import logging
import os
import sys
from importlib import metadata as importlib_metadata

from actions_provenance.config.defaults import defaults, load_defaults
from actions_provenance.config.run_config import RunConfig, create_run_config
from actions_provenance.console import configure_logging, print_statement
from actions_provenance.errors import (
    ArtifactNotFoundError,
    ArtifactReadError,
    ConfigurationError,
    ContextParseError,
    OutputWriteError,
    SerializationError,
)
from actions_provenance.intoto.errors import ValidateInTotoPayloadError
from actions_provenance.provenance.generator import generate_provenance
from actions_provenance.provenance.serializer import write_statement

logger: logging.Logger = logging.getLogger(__name__)


def create_provenance(run_config: RunConfig, verbose: bool = False) -> int:
    """Generate the provenance for ``run_config`` and write it to the output path.

    Returns
    -------
    int
        Returns os.EX_OK if successful or the corresponding error code on failure.
    """
    try:
        result = generate_provenance(run_config, indent=defaults.getint("provenance", "indent", fallback=2))
    except ArtifactNotFoundError as error:
        logger.error(error)
        return os.EX_NOINPUT
    except ArtifactReadError as error:
        logger.critical("Failed to hash the artifacts: %s", error)
        return os.EX_IOERR
    except ContextParseError as error:
        logger.critical("Failed to parse the workflow run context: %s", error)
        return os.EX_DATAERR
    except (ValidateInTotoPayloadError, SerializationError) as error:
        logger.critical("Failed to produce a valid provenance statement: %s", error)
        return os.EX_DATAERR

    if result.token:
        logger.info("An access token was found in the GitHub context and removed from the provenance.")
    else:
        logger.debug("No access token was found in the GitHub context.")

    if verbose:
        print_statement(result.rendered, run_config.output_path)

    try:
        write_statement(result.rendered, run_config.output_path)
    except OutputWriteError as error:
        logger.error(error)
        return os.EX_IOERR

    return os.EX_OK


def main(argv: list[str] | None = None) -> None:
    """Execute actions-provenance as a standalone command-line tool.

    Parameters
    ----------
    argv: list[str] | None
        Command-line arguments.
        If ``argv`` is ``None``, argparse automatically looks at ``sys.argv``.
        Hence, we set ``argv = None`` by default.
    """
    main_parser = argparse.ArgumentParser(
        prog="actions-provenance",
        description="Generate the in-toto provenance of the artifacts built by a GitHub Actions workflow run.",
    )

    main_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {importlib_metadata.version('actions-provenance')}",
        help="Show the version number and exit",
    )

    main_parser.add_argument(
        "-v",
        "--verbose",
        help="Log debug messages and display the generated provenance",
        action="store_true",
    )

    main_parser.add_argument(
        "-dp",
        "--defaults-path",
        default="",
        help="The path to the defaults configuration file.",
    )

    main_parser.add_argument(
        "-ap",
        "--artifact-path",
        required=False,
        type=str,
        help="The file or dir path of the artifacts for which provenance should be generated.",
    )

    main_parser.add_argument(
        "-op",
        "--output-path",
        required=False,
        type=str,
        help="The path to which the generated provenance should be written. (Default: build.provenance)",
    )

    main_parser.add_argument(
        "-gc",
        "--github-context",
        required=False,
        type=str,
        help="The '${{ toJSON(github) }}' context value. Read from $GITHUB_CONTEXT if not set.",
    )

    main_parser.add_argument(
        "-rc",
        "--runner-context",
        required=False,
        type=str,
        help="The '${{ toJSON(runner) }}' context value. Read from $RUNNER_CONTEXT if not set.",
    )

    args = main_parser.parse_args(argv)

    configure_logging(args.verbose)

    # Load the default values from defaults.ini files.
    if not load_defaults(args.defaults_path):
        logger.error("Exiting because the defaults configuration could not be loaded.")
        sys.exit(os.EX_NOINPUT)

    try:
        run_config = create_run_config(
            artifact_path=args.artifact_path,
            output_path=args.output_path,
            github_context=args.github_context,
            runner_context=args.runner_context,
        )
    except ConfigurationError as error:
        logger.error(error)
        main_parser.print_usage(sys.stderr)
        sys.exit(os.EX_USAGE)

    sys.exit(create_provenance(run_config, verbose=args.verbose))


if __name__ == "__main__":
    main()
