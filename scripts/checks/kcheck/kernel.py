#!/usr/bin/env python3

"""
Kernel config sources.

A config is either read from a path given by the caller, or located on the
running system. Compressed configs (/proc/config.gz) are inflated
transparently.
"""

import gzip
import logging
import zlib
from pathlib import Path

from . import utils
from .errors import SourceReadError, SourceUnavailableError
from .kconfig import parse_kernel_config

logger = logging.getLogger(__name__)

PROC_CONFIG_GZ = Path("/proc/config.gz")
BOOT_CONFIG = Path("/boot/config")


def system_config_paths():
    """
    Returns the locations searched for the running kernel's config, in
    order: /proc/config.gz, /boot/config, /boot/config-$(uname -r).
    """
    return [
        PROC_CONFIG_GZ,
        BOOT_CONFIG,
        Path(f"/boot/config-{utils.kernel_release()}"),
    ]


def discover_kernel_config(paths=None):
    """
    Returns the first existing path among 'paths' (default:
    system_config_paths()). Raises SourceUnavailableError if none exists.
    """
    if paths is None:
        paths = system_config_paths()
    paths = [Path(p) for p in paths]
    for path in paths:
        if path.exists():
            logger.debug(f"Found kernel config at {path}")
            return path
    raise SourceUnavailableError(paths)


def read_kernel_config(path):
    """
    Returns the text of the kernel config at 'path', inflating it first if it
    starts with the gzip magic bytes.
    """
    path = Path(path)
    try:
        data = utils.file_contents_as_bytes(path)
    except FileNotFoundError:
        raise SourceReadError(path, "File does not exist") from None
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e

    if utils.is_gzip(data):
        try:
            data = gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as e:
            raise SourceReadError(path, f"could not decompress: {e}") from e

    return data


def load_observed(selector=None):
    """
    Loads the observed kernel configuration.

    Args:
        selector: path of a kernel config, or None to use the running
            kernel's config

    Raises SourceReadError if the config can't be read, and
    SourceUnavailableError if no selector was given and no config could be
    located.
    """
    if selector is None:
        path = discover_kernel_config()
        logger.info(f"Using running kernel config {path}")
    else:
        path = Path(selector)
        logger.info(f"Using kernel config {path}")

    return parse_kernel_config(read_kernel_config(path), path)
