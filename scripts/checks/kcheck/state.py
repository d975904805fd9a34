#!/usr/bin/env python3

"""
Kernel option states.

RawTriState is what a kernel build writes into its .config. DesiredState is
what a user may ask for in a fragment. It is richer than the tri-state so a
requirement can be expressed without caring how the feature is built in.
"""

import enum


class RawTriState(enum.Enum):
    """
    Observed state of a kernel option.

    Kconfig omits unset booleans instead of writing a negative value, so
    there is no explicit "no": a missing option, "# CONFIG_FOO is not set"
    and CONFIG_FOO=n all end up as ABSENT.
    """

    YES = "y"
    MODULE = "m"
    ABSENT = "n"


class DesiredState(enum.Enum):
    """
    Requested state of a kernel option, as spelled in a fragment.

    The values are the exact (case-sensitive) tokens accepted in documents.
    """

    ON = "On"
    MODULE = "Module"
    OFF = "Off"
    ENABLED = "Enabled"

    @classmethod
    def from_token(cls, token):
        """
        Returns the member for 'token'. Raises ValueError for anything outside
        the vocabulary, including differently cased spellings.
        """
        if not isinstance(token, str):
            raise ValueError(f"state must be a string, not {type(token).__name__}")
        return cls(token)

    @property
    def label(self):
        return _DESIRED_LABELS[self]


# Observed states that satisfy each desired state
_ACCEPTED = {
    DesiredState.ON: frozenset({RawTriState.YES}),
    DesiredState.MODULE: frozenset({RawTriState.MODULE}),
    DesiredState.OFF: frozenset({RawTriState.ABSENT}),
    DesiredState.ENABLED: frozenset({RawTriState.YES, RawTriState.MODULE}),
}

_DESIRED_LABELS = {
    DesiredState.ON: "On",
    DesiredState.MODULE: "Module",
    DesiredState.OFF: "Off",
    DesiredState.ENABLED: "Enabled (On or Module)",
}

TOKENS = tuple(state.value for state in DesiredState)


def matches(desired, observed):
    """Returns True if 'observed' satisfies 'desired'."""
    return observed in _ACCEPTED[desired]


def observed_label(state, value=None, explicit=False):
    """
    Human-readable label for an observed option.

    'value' is the raw right-hand side for options that are not tri-state
    (strings, ints, hex). 'explicit' tells an "is not set" line apart from an
    option that does not appear at all.
    """
    if state is RawTriState.YES:
        if value == "":
            return '""'
        if value is not None and value != RawTriState.YES.value:
            return value
        return "On"
    if state is RawTriState.MODULE:
        return "Module"
    return "NotSet" if explicit else "NotFound"
