#!/usr/bin/env python3

"""
Error taxonomy for kcheck.

Every error is terminal for a run. The orchestrator turns them into a
message on stderr and a non-zero exit status.
"""


class KcheckError(Exception):
    """Base class for all kcheck errors."""


class DocumentFormatError(KcheckError):
    """
    A declared document is malformed or semantically invalid.

    'field' is the path of the offending entry (e.g.
    "fragment[0].kernel[1].state") and 'line' the line reported by the
    underlying decoder, when either is known.
    """

    def __init__(self, message, field=None, line=None, path=None):
        self.message = message
        self.field = field
        self.line = line
        self.path = path
        super().__init__(message)

    def __str__(self):
        where = []
        if self.path:
            where.append(str(self.path))
        if self.line is not None:
            where.append(f"line {self.line}")
        if self.field:
            where.append(self.field)
        if not where:
            return self.message
        return f"{', '.join(where)}: {self.message}"


class DocumentReadError(KcheckError):
    """A declared document could not be located or read."""

    def __init__(self, path, message="File does not exist"):
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}" if path else message)


class SourceReadError(KcheckError):
    """The observed kernel configuration could not be read or decompressed."""

    def __init__(self, path, message):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class SourceUnavailableError(KcheckError):
    """No kernel configuration could be located on this system."""

    def __init__(self, searched=()):
        self.searched = tuple(str(p) for p in searched)
        msg = "Kernel config not found"
        if self.searched:
            msg += f" (searched {', '.join(self.searched)})"
        super().__init__(msg)
