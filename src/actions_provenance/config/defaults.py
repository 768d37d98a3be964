# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module provides functions to manage default values."""

import configparser
import logging
import os
import pathlib

logger: logging.Logger = logging.getLogger(__name__)

defaults = configparser.ConfigParser()


def get_defaults_path() -> str:
    """Return the path to the ``defaults.ini`` file shipped with the package."""
    return os.path.join(pathlib.Path(__file__).parent.absolute(), "defaults.ini")


def load_defaults(user_config_path: str = "") -> bool:
    """Read the default values from ``defaults.ini`` file and store them in the defaults global object.

    The packaged ``defaults.ini`` is always read first. Values in the user's file, if it exists,
    take precedence over the packaged ones.

    Parameters
    ----------
    user_config_path : str
        The path to the user's defaults configuration file.

    Returns
    -------
    bool
        Return True if succeeded or False if failed.
    """
    config_files = [get_defaults_path()]
    if user_config_path:
        if not os.path.isfile(user_config_path):
            logger.error("The defaults configuration file %s does not exist.", user_config_path)
            return False
        config_files.append(user_config_path)

    try:
        defaults.read(config_files, encoding="utf8")
        return True
    except (configparser.Error, ValueError) as error:
        logger.error("Failed to read the defaults.ini files.")
        logger.error(error)
        return False
