#!/usr/bin/env python3

"""
Console output for check results.
"""

from .compare import Outcome

# ANSI color codes for colored output
RED = '\033[0;31m'
GREEN = '\033[0;32m'
BOLD = '\033[1m'
NC = '\033[0m'  # No Color

HEADERS = ("Config Option", "Desired State", "Kernel State", "Result")


def _paint(text, color, enabled):
    return f"{color}{text}{NC}" if enabled else text


def render_table(results, color=True):
    """
    Renders 'results' as one table per fragment. A fragment's reason is only
    printed when the fragment fails.
    """
    rows = [tuple(str(cell) for cell in row) for result in results for row in result.rows()]
    widths = [len(h) for h in HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def line(cells):
        return " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    sep = "-+-".join("-" * w for w in widths)
    out = []

    for result in results:
        status = _paint(str(result.outcome), GREEN if result.passed else RED, color)
        out.append(_paint(result.name, BOLD, color) + f" [{status}]")
        if not result.passed and result.reason:
            out.append(f"  Reason: {result.reason}")

        if result.options:
            out.append(line(HEADERS))
            out.append(sep)
            for name, desired, observed, outcome in result.rows():
                cells = [name, desired, observed, str(outcome)]
                text = line(cells)
                if color:
                    painted = _paint(str(outcome), GREEN if outcome is Outcome.PASS else RED, True)
                    text = " | ".join(
                        [c.ljust(w) for c, w in zip(cells[:3], widths)] + [painted]
                    )
                out.append(text)
        out.append("")

    return "\n".join(out)


def summary(results):
    """One-line summary such as '2 of 3 fragment(s) passed'."""
    passed = sum(1 for r in results if r.passed)
    return f"{passed} of {len(results)} fragment(s) passed"


def annotate(result):
    """Returns GitHub Actions-compatible annotations for a failing fragment."""
    lines = []
    for opt in result.failures:
        msg = f"{opt.name}: expected {opt.desired_label}, found {opt.observed_label}"
        if result.reason:
            msg += f"\n{result.reason}"
        msg = msg.replace("%", "%25").replace("\n", "%0A").replace("\r", "%0D")
        lines.append(f"::error title=kcheck ({result.name})::{msg}")
    return lines
