# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module tests the defaults module."""

from pathlib import Path

from actions_provenance.config.defaults import defaults, load_defaults


def test_load_packaged_defaults() -> None:
    """Test loading the packaged defaults."""
    assert load_defaults() is True
    assert defaults.get("provenance", "output_path") == "build.provenance"
    assert defaults.getint("provenance", "indent") == 2
    assert defaults.get("runner", "hosted_env_var") == "GITHUB_ACTIONS"


def test_load_user_defaults(tmp_path: Path) -> None:
    """Test that the values in user configuration are prioritized."""
    user_config = tmp_path.joinpath("defaults.ini")
    user_config.write_text("[provenance]\noutput_path = attestation.intoto.json\n", encoding="utf-8")

    assert load_defaults(str(user_config)) is True
    assert defaults.get("provenance", "output_path") == "attestation.intoto.json"
    assert defaults.getint("provenance", "indent") == 2


def test_load_missing_user_defaults(tmp_path: Path) -> None:
    """Test loading a configuration path that does not exist."""
    assert load_defaults(str(tmp_path.joinpath("invalid.ini"))) is False


def test_load_malformed_user_defaults(tmp_path: Path) -> None:
    """Test loading a configuration file without section header."""
    user_config = tmp_path.joinpath("defaults.ini")
    user_config.write_text("output_path = build.provenance\n", encoding="utf-8")

    assert load_defaults(str(user_config)) is False
