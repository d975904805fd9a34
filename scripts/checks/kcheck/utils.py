#!/usr/bin/env python3

"""
Utility functions shared by kcheck modules.
"""

import os
import sys
from pathlib import Path

try:
    import tomllib  # py>=3.11
except ModuleNotFoundError:
    import tomli as tomllib  # py<3.11

# gzip member header, RFC 1952
GZIP_MAGIC = b"\x1f\x8b"


def err(msg):
    """Print 'msg' prefixed with the program name and exit with status 1."""
    cmd = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "kcheck"
    sys.exit(f"{cmd}: error: {msg}")


def kernel_release():
    """Returns the running kernel's release string, as 'uname -r' prints it."""
    return os.uname().release


def is_gzip(data):
    return data[:2] == GZIP_MAGIC


def file_contents_as_bytes(path):
    """Reads 'path' in one go. OSError propagates to the caller."""
    with open(Path(path), "rb") as fp:
        return fp.read()


def format_suffix(path):
    """Returns the lowercased file extension of 'path' without the dot."""
    return Path(path).suffix.lower().lstrip(".")
