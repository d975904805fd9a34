#!/usr/bin/env python3

"""
Comparison of declared fragments against an observed kernel config.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .state import DesiredState, RawTriState, matches, observed_label


class Outcome(enum.Enum):
    PASS = "Pass"
    FAIL = "Fail"

    @classmethod
    def from_bool(cls, ok):
        return cls.PASS if ok else cls.FAIL

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class OptionResult:
    """Desired and observed state of one option, and whether they agree."""

    name: str
    desired: DesiredState
    observed: RawTriState
    outcome: Outcome
    value: Optional[str] = None
    explicit: bool = False

    @property
    def passed(self):
        return self.outcome is Outcome.PASS

    @property
    def desired_label(self):
        return self.desired.label

    @property
    def observed_label(self):
        return observed_label(self.observed, self.value, self.explicit)

    def row(self):
        return (self.name, self.desired_label, self.observed_label, self.outcome)


@dataclass(frozen=True)
class FragmentResult:
    """Results for every option of a fragment, in declaration order."""

    name: str
    reason: Optional[str]
    options: Tuple[OptionResult, ...]

    @property
    def outcome(self):
        return Outcome.from_bool(all(opt.passed for opt in self.options))

    @property
    def passed(self):
        return self.outcome is Outcome.PASS

    @property
    def failures(self):
        return [opt for opt in self.options if not opt.passed]

    def rows(self):
        """(name, desired_label, observed_label, outcome) per option."""
        return [opt.row() for opt in self.options]


def check_option(option, observed):
    """Compares a single KernelOption against 'observed'."""
    found = observed.get(option.name)
    if found is None:
        # Not mentioned at all, which Kconfig uses for "off"
        state, value, explicit = RawTriState.ABSENT, None, False
    else:
        state, value, explicit = found.state, found.value, found.explicit

    return OptionResult(
        name=option.name,
        desired=option.state,
        observed=state,
        outcome=Outcome.from_bool(matches(option.state, state)),
        value=value,
        explicit=explicit,
    )


def compare(fragments, observed):
    """
    Checks every option of every fragment against 'observed'.

    All options are evaluated, even after a failure. The result follows the
    order of 'fragments' and of the options within them exactly.
    """
    return [
        FragmentResult(
            name=fragment.name,
            reason=fragment.reason,
            options=tuple(check_option(option, observed) for option in fragment.options),
        )
        for fragment in fragments
    ]


def all_passed(results):
    """Overall verdict: True if every fragment passed."""
    return all(result.passed for result in results)
