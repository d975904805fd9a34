#!/usr/bin/env python3

"""
Checks a kernel configuration against declared fragments.

Reads the declared documents (the system ones in /etc plus any given with
-c), loads the kernel config (-k, or the running kernel's), and prints a
Pass/Fail table per fragment. The exit status is the number of failing
fragments, capped at 255.
"""

import argparse
import logging
import os
import sys
import traceback

from kcheck import (
    KcheckError,
    all_passed,
    annotate,
    compare,
    load_documents,
    load_observed,
    render_table,
    summary,
    write_junit,
)
from kcheck.utils import err

logger = logging.getLogger(__name__)

MAX_EXIT_STATUS = 255


def init_logs(cli_arg):
    """Initialize logging."""
    global logger

    level = os.environ.get("LOG_LEVEL", "WARN")

    logger = logging.getLogger("")
    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(levelname)-8s: %(message)s"))
        logger.addHandler(console)
    logger.setLevel(cli_arg or level)

    logger.info("Log init completed, level=%s", logging.getLevelName(logger.getEffectiveLevel()))


def parse_args(argv):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="kcheck",
        description="A tool for developing and debugging kernel config options.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-k",
        "--kconfig",
        default=None,
        help="Path to the kernel config file. Default: the running kernel's config.",
    )
    parser.add_argument(
        "-c",
        "--config",
        action="append",
        dest="configs",
        default=[],
        metavar="FILE",
        help="Path to a kcheck config file or fragment (.toml or .json). Can be given multiple times.",
    )
    parser.add_argument(
        "--no-system-config",
        action="store_true",
        help="Do not read /etc/kcheck.toml and /etc/kcheck.json.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Also write results to this file in JUnit format.",
    )
    parser.add_argument(
        "--annotate",
        action="store_true",
        help="Print GitHub Actions-compatible annotations.",
    )
    parser.add_argument("--no-color", action="store_true", help="Do not color the result table.")
    parser.add_argument("-l", "--list", action="store_true", help="List declared fragments and exit")
    parser.add_argument(
        "-v",
        "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="python logging level",
    )

    return parser.parse_args(argv)


def _main(args):
    """Loads both sides, compares them and reports. Returns the exit status."""
    init_logs(args.loglevel)

    fragments = load_documents(args.configs, system=not args.no_system_config)
    logger.info(f"Checking {len(fragments)} fragment(s)")

    if args.list:
        for fragment in fragments:
            print(fragment.name)
        return 0

    observed = load_observed(args.kconfig)
    results = compare(fragments, observed)

    color = not args.no_color and sys.stdout.isatty()
    print(render_table(results, color=color))
    print(summary(results))

    if args.annotate:
        for result in results:
            for line in annotate(result):
                print(line)

    if args.output:
        write_junit(results, args.output)
        print(f"\nComplete results in {args.output}")

    if all_passed(results):
        return 0
    # Only the low 8 bits of an exit status survive
    return min(sum(1 for r in results if not r.passed), MAX_EXIT_STATUS)


def main(argv=None):
    """Entry point."""
    args = parse_args(argv)

    try:
        n_fails = _main(args)
    except KcheckError as e:
        err(e)
    except Exception:
        print(f"Python exception in `{__file__}`:\n\n```\n{traceback.format_exc()}\n```")
        raise

    sys.exit(n_fails)


if __name__ == "__main__":
    main(sys.argv[1:])
