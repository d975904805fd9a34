#!/usr/bin/env python3

"""
kcheck package.

Checks a kernel's build configuration against declared fragments of required
options. Each concern is implemented in its own module.
"""

from .base import FragmentCase, OptionFailure, build_suite, write_junit
from .compare import FragmentResult, OptionResult, Outcome, all_passed, check_option, compare
from .document import SYSTEM_DOCUMENTS, load_document, load_documents, parse_document
from .errors import (
    DocumentFormatError,
    DocumentReadError,
    KcheckError,
    SourceReadError,
    SourceUnavailableError,
)
from .fragment import Fragment, KernelOption
from .kconfig import ObservedConfig, ObservedOption, parse_kernel_config
from .kernel import discover_kernel_config, load_observed, read_kernel_config, system_config_paths
from .report import annotate, render_table, summary
from .state import DesiredState, RawTriState, matches

__version__ = "0.2.1"

__all__ = [
    'DesiredState',
    'DocumentFormatError',
    'DocumentReadError',
    'Fragment',
    'FragmentCase',
    'FragmentResult',
    'KcheckError',
    'KernelOption',
    'ObservedConfig',
    'ObservedOption',
    'OptionFailure',
    'OptionResult',
    'Outcome',
    'RawTriState',
    'SYSTEM_DOCUMENTS',
    'SourceReadError',
    'SourceUnavailableError',
    'all_passed',
    'annotate',
    'build_suite',
    'check_option',
    'compare',
    'discover_kernel_config',
    'load_document',
    'load_documents',
    'load_observed',
    'matches',
    'parse_document',
    'parse_kernel_config',
    'read_kernel_config',
    'render_table',
    'summary',
    'system_config_paths',
    'write_junit',
]
