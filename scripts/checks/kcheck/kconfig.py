#!/usr/bin/env python3

"""
Parsing of kernel configuration text (.config format).

Recognized lines:

    CONFIG_FOO=y                 -> YES
    CONFIG_FOO=m                 -> MODULE
    CONFIG_FOO=n                 -> ABSENT
    # CONFIG_FOO is not set      -> ABSENT
    CONFIG_FOO="text" / =42      -> present, not tri-state (counts as YES)

Everything else (blank lines, other comments, lines in formats we don't
know) is skipped. The kernel's config format keeps evolving and an unknown
line must not abort the parse.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from .errors import SourceReadError
from .state import RawTriState, observed_label

CONFIG_PREFIX = "CONFIG_"

_SET_RE = re.compile(r"({}\w+)=(.*)$".format(CONFIG_PREFIX))
_UNSET_RE = re.compile(r"# ({}\w+) is not set$".format(CONFIG_PREFIX))


@dataclass(frozen=True)
class ObservedOption:
    """
    One option as found in a kernel config.

    'value' is the raw right-hand side of the assignment, None for "is not
    set" lines. 'explicit' is set when the config states the option is off,
    as opposed to not mentioning it.
    """

    name: str
    state: RawTriState
    value: Optional[str] = None
    explicit: bool = False

    @property
    def label(self):
        return observed_label(self.state, self.value, self.explicit)


class ObservedConfig(Mapping):
    """
    Read-only mapping of option name to ObservedOption.

    Built once from a single configuration source. 'path' is where the
    config was read from, if it came from a file.
    """

    def __init__(self, options=(), path=None):
        self._options = MappingProxyType({opt.name: opt for opt in options})
        self.path = path

    def __getitem__(self, name):
        return self._options[name]

    def __iter__(self):
        return iter(self._options)

    def __len__(self):
        return len(self._options)

    def __repr__(self):
        return f"<ObservedConfig {self.path or '<text>'}, {len(self)} options>"

    def state(self, name):
        """Returns the RawTriState of 'name'. Missing options are ABSENT."""
        opt = self._options.get(name)
        return opt.state if opt is not None else RawTriState.ABSENT


def _parse_line(line):
    match = _SET_RE.match(line)
    if match:
        name, value = match.groups()
        if value == "y":
            return ObservedOption(name, RawTriState.YES, value)
        if value == "m":
            return ObservedOption(name, RawTriState.MODULE, value)
        if value == "n":
            return ObservedOption(name, RawTriState.ABSENT, value, explicit=True)
        return ObservedOption(name, RawTriState.YES, value)

    match = _UNSET_RE.match(line)
    if match:
        return ObservedOption(match.group(1), RawTriState.ABSENT, explicit=True)

    return None


def parse_kernel_config(data, path=None):
    """
    Parses .config text into an ObservedConfig.

    Args:
        data: config contents, bytes or str. Bytes must be UTF-8.
        path: where the contents came from, for error messages

    Raises SourceReadError if 'data' can't be decoded. Later assignments to
    the same option override earlier ones, like the kernel's own tools do.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SourceReadError(path, f"invalid byte encoding: {e}") from e

    options = {}
    for line in data.splitlines():
        opt = _parse_line(line.rstrip())
        if opt is not None:
            options[opt.name] = opt

    return ObservedConfig(options.values(), path)
