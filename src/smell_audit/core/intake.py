"""Validate and read a file before it reaches the analyzer."""

from __future__ import annotations

import logging
from pathlib import Path

from smell_audit.core.config import IntakeConfig
from smell_audit.errors import SourceTooLargeError, UnsupportedFileError

logger = logging.getLogger(__name__)


def check_filename(name: str, *, config: IntakeConfig = IntakeConfig()) -> None:
    """Reject names whose suffix is not in ``config.allowed_suffixes``."""
    if not name.lower().endswith(tuple(s.lower() for s in config.allowed_suffixes)):
        raise UnsupportedFileError(name, config.allowed_suffixes)


def check_size(size: int, *, config: IntakeConfig = IntakeConfig()) -> None:
    if size > config.max_source_bytes:
        raise SourceTooLargeError(size, config.max_source_bytes)


def read_source(path: Path, *, config: IntakeConfig = IntakeConfig()) -> str:
    """Validate *path* and return its text.

    Raises
    ------
    UnsupportedFileError
        If the suffix is not allowed.
    SourceTooLargeError
        If the file is larger than ``config.max_source_bytes``.
    OSError, UnicodeDecodeError
        If the file cannot be read as ``config.encoding``.
    """
    check_filename(path.name, config=config)
    check_size(path.stat().st_size, config=config)
    logger.debug(f"Reading {path}")
    return path.read_text(encoding=config.encoding)
