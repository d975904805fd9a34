#!/usr/bin/env python3

"""
Fragments: named groups of desired kernel option states.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import DocumentFormatError
from .state import TOKENS, DesiredState


def _require_str(entry, key, where, required=True):
    value = entry.get(key)
    if value is None:
        if required:
            raise DocumentFormatError(f"missing required field '{key}'", field=f"{where}.{key}")
        return None
    if not isinstance(value, str):
        raise DocumentFormatError(
            f"'{key}' must be a string, not {type(value).__name__}", field=f"{where}.{key}"
        )
    return value


def _require_table(entry, where):
    if not isinstance(entry, dict):
        raise DocumentFormatError(f"expected a table, not {type(entry).__name__}", field=where)


@dataclass(frozen=True)
class KernelOption:
    """A kernel option and the state it is required to be in."""

    name: str
    state: DesiredState

    @classmethod
    def from_dict(cls, entry, where="kernel"):
        _require_table(entry, where)
        name = _require_str(entry, "name", where)
        token = entry.get("state")
        if token is None:
            raise DocumentFormatError("missing required field 'state'", field=f"{where}.state")
        try:
            state = DesiredState.from_token(token)
        except ValueError:
            raise DocumentFormatError(
                f"unknown state {token!r}, expected one of {', '.join(TOKENS)}",
                field=f"{where}.state",
            ) from None
        return cls(name, state)

    def to_dict(self):
        return {"name": self.name, "state": self.state.value}

    def __str__(self):
        return f"{self.name}: {self.state.value}"


@dataclass(frozen=True)
class Fragment:
    """
    A named collection of kernel options that are potentially related.

    'reason' is a short description of why the options are selected. It is
    only shown when the fragment fails and never affects the outcome.
    """

    name: str
    reason: Optional[str] = None
    options: Tuple[KernelOption, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable, store a tuple
        object.__setattr__(self, "options", tuple(self.options))

    @classmethod
    def from_dict(cls, entry, where="fragment"):
        _require_table(entry, where)
        name = _require_str(entry, "name", where)
        reason = _require_str(entry, "reason", where, required=False)
        return cls(name, reason, options_from_list(entry.get("kernel", []), f"{where}.kernel"))

    def to_dict(self):
        out = {"name": self.name}
        if self.reason is not None:
            out["reason"] = self.reason
        out["kernel"] = [opt.to_dict() for opt in self.options]
        return out

    def __iter__(self):
        return iter(self.options)

    def __len__(self):
        return len(self.options)


def options_from_list(entries, where):
    """Builds KernelOptions from a list of tables found at 'where'."""
    if not isinstance(entries, list):
        raise DocumentFormatError(f"expected a list, not {type(entries).__name__}", field=where)
    return tuple(KernelOption.from_dict(entry, f"{where}[{i}]") for i, entry in enumerate(entries))
