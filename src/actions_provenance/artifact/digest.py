# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module collects the content digests of the build artifacts as in-toto subjects."""

import hashlib
import logging
import os
import stat
from collections.abc import Iterator
from pathlib import PurePath

from actions_provenance.errors import ArtifactNotFoundError, ArtifactReadError
from actions_provenance.intoto.v01 import InTotoV01Subject

logger: logging.Logger = logging.getLogger(__name__)

SUBJECT_DIGEST_ALGORITHM = "sha256"


def hash_file(path: str) -> str:
    """Compute the lowercase hex SHA-256 digest of the content of a file.

    Parameters
    ----------
    path : str
        The path to the file.

    Returns
    -------
    str
        The hex digest.

    Raises
    ------
    ArtifactReadError
        If the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as file:
            return hashlib.file_digest(file, SUBJECT_DIGEST_ALGORITHM).hexdigest()
    except (OSError, ValueError) as error:
        raise ArtifactReadError(f"Cannot hash artifact file {path}: {error}") from error


def _walk_files(directory: str) -> Iterator[str]:
    """Yield the files under ``directory`` depth-first, with the entries of each directory in lexical order.

    Symlinked directories are not followed and special files are skipped.
    """
    try:
        with os.scandir(directory) as scanner:
            entries = sorted(scanner, key=lambda entry: entry.name)
    except OSError as error:
        raise ArtifactReadError(f"Cannot list artifact directory {directory}: {error}") from error

    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                yield from _walk_files(entry.path)
            elif entry.is_symlink() and entry.is_dir():
                logger.debug("Skipping %s as it is a symlink to a directory.", entry.path)
            elif entry.is_symlink() or entry.is_file(follow_symlinks=False):
                yield entry.path
            else:
                logger.debug("Skipping %s as it is not a regular file.", entry.path)
        except OSError as error:
            raise ArtifactReadError(f"Cannot stat artifact path {entry.path}: {error}") from error


def collect_subjects(root: str) -> list[InTotoV01Subject]:
    """Walk the file or directory at ``root`` and hash all the files in it.

    Each file becomes one subject named with its path relative to ``root``. When ``root`` is
    a single file, the subject is named with the base name of ``root``.

    Parameters
    ----------
    root : str
        The file or directory path of the artifacts.

    Returns
    -------
    list[InTotoV01Subject]
        The subjects, in walk order.

    Raises
    ------
    ArtifactNotFoundError
        If ``root`` does not exist.
    ArtifactReadError
        If ``root`` is a special file, or if any file under ``root`` cannot be walked or read.
        No partial result is returned.
    """
    try:
        root_stat = os.stat(root)
    except FileNotFoundError as error:
        raise ArtifactNotFoundError(root) from error
    except OSError as error:
        raise ArtifactReadError(f"Cannot access artifact path {root}: {error}") from error

    if not stat.S_ISDIR(root_stat.st_mode):
        if not stat.S_ISREG(root_stat.st_mode):
            raise ArtifactReadError(f"Artifact path {root} is neither a regular file nor a directory.")
        name = os.path.basename(os.path.normpath(root))
        return [InTotoV01Subject(name=name, digest={SUBJECT_DIGEST_ALGORITHM: hash_file(root)})]

    subjects = []
    for path in _walk_files(root):
        name = PurePath(os.path.relpath(path, root)).as_posix()
        subjects.append(InTotoV01Subject(name=name, digest={SUBJECT_DIGEST_ALGORITHM: hash_file(path)}))
        logger.debug("Hashed artifact %s.", name)

    logger.info("Collected %d subject(s) from %s.", len(subjects), root)
    return subjects
