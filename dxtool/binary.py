"""Locate the directory that holds the running executable."""

from __future__ import annotations

import logging
import os
import sys

_log = logging.getLogger(__name__)


def dx_binary_location() -> str:
    """Return the absolute, symlink-resolved directory of the running executable."""
    process_binary = sys.executable
    if not process_binary:
        raise FileNotFoundError("unable to determine the executable path")
    _log.debug("processBinary %s", process_binary)
    process_binary = os.path.abspath(process_binary)
    _log.debug("processBinary %s", process_binary)
    try:
        process_binary = os.path.realpath(process_binary, strict=True)
    except OSError as exc:
        _log.debug("processBinary error %s", exc)
        raise
    _log.debug("processBinary %s", process_binary)
    path = os.path.dirname(process_binary)
    _log.debug("dir from '%s' is '%s'", process_binary, path)
    return path