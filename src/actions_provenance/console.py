# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module sets up rich console logging and the diagnostic display of the statement."""

import logging

from rich.console import Console
from rich.json import JSON
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

VERBOSE_LOG_FORMAT = "[%(name)s:%(funcName)s:%(lineno)d] %(message)s"
LOG_FORMAT = "%(message)s"


def configure_logging(verbose: bool, console: Console | None = None) -> RichHandler:
    """Configure the root logger to emit to a rich handler on stderr.

    Parameters
    ----------
    verbose : bool
        If True, log at debug level with the logger name and location of each record.
    console : Console | None
        The console to log to. A stderr console is created by default.

    Returns
    -------
    RichHandler
        The installed handler.
    """
    if verbose:
        log_level = logging.DEBUG
        log_format = VERBOSE_LOG_FORMAT
    else:
        log_level = logging.INFO
        log_format = LOG_FORMAT

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    logging.basicConfig(format=log_format, datefmt="[%X]", handlers=[rich_handler], force=True, level=log_level)
    return rich_handler


def print_statement(rendered: bytes, output_path: str, console: Console | None = None) -> None:
    """Display the rendered statement for the operator.

    Parameters
    ----------
    rendered : bytes
        The rendered statement. It never contains the access token.
    output_path : str
        The path the statement is written to, shown as the panel title.
    console : Console | None
        The console to print to. A stdout console is created by default.
    """
    console = console or Console()
    panel = Panel.fit(JSON(rendered.decode("utf-8")), title=Text(output_path), title_align="left", border_style="blue")
    console.print(panel)
