#!/usr/bin/env python3

"""
Declared documents.

A document lists the kernel options a system needs, grouped into fragments.
TOML and JSON carry the same structure under the same field names:

    name = "my-board"

    [[kernel]]
    name = "CONFIG_FOO"
    state = "On"

    [[fragment]]
    name = "usb-serial"
    reason = "Serial USB support"

    [[fragment.kernel]]
    name = "CONFIG_USB_ACM"
    state = "On"

Top-level 'kernel' entries are options that have not been grouped into a
fragment. They are reported as a leading fragment named after the document's
'name' (or "kernel").
"""

import json
import logging
import re
from pathlib import Path

from .errors import DocumentFormatError, DocumentReadError
from .fragment import Fragment, options_from_list
from .utils import file_contents_as_bytes, format_suffix, tomllib

logger = logging.getLogger(__name__)

# Known system-wide config locations, merged ahead of user documents
ETC_KCHECK_TOML = Path("/etc/kcheck.toml")
ETC_KCHECK_JSON = Path("/etc/kcheck.json")
SYSTEM_DOCUMENTS = (ETC_KCHECK_TOML, ETC_KCHECK_JSON)

FORMATS = ("toml", "json")

DEFAULT_GROUP_NAME = "kernel"

_TOML_LINE_RE = re.compile(r"at line (\d+)")


def _decode(data, fmt):
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentFormatError(f"document is not valid UTF-8: {e}") from e
    else:
        text = data

    if fmt == "toml":
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            line = getattr(e, "lineno", None)
            if line is None:
                m = _TOML_LINE_RE.search(str(e))
                line = int(m.group(1)) if m else None
            raise DocumentFormatError(f"Error parsing toml: {e}", line=line) from e

    if fmt == "json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentFormatError(f"Error parsing json: {e.msg}", line=e.lineno) from e

    raise DocumentFormatError(f"Unknown file type: {fmt}")


def parse_document(data, fmt):
    """
    Parses a declared document into a list of Fragments.

    Args:
        data: document contents, bytes or str
        fmt: "toml" or "json"

    Raises DocumentFormatError on malformed syntax, a missing 'name' or
    'state', or a state outside On/Off/Module/Enabled.
    """
    doc = _decode(data, fmt)
    if not isinstance(doc, dict):
        raise DocumentFormatError(f"document must be a table, not {type(doc).__name__}")

    fragments = []

    if "kernel" in doc:
        group = doc.get("name", DEFAULT_GROUP_NAME)
        if not isinstance(group, str):
            raise DocumentFormatError(f"'name' must be a string, not {type(group).__name__}", field="name")
        options = options_from_list(doc["kernel"], "kernel")
        if options:
            fragments.append(Fragment(group, None, options))

    entries = doc.get("fragment", [])
    if not isinstance(entries, list):
        raise DocumentFormatError(f"expected a list, not {type(entries).__name__}", field="fragment")
    for i, entry in enumerate(entries):
        fragments.append(Fragment.from_dict(entry, f"fragment[{i}]"))

    # An empty 'fragment' or 'kernel' list counts as declaring nothing
    if not fragments:
        raise DocumentFormatError("document declares no 'fragment' or 'kernel' entries")

    return fragments


def load_document(path):
    """
    Reads and parses the document at 'path'. The format comes from the file
    extension (.toml or .json).
    """
    path = Path(path)
    fmt = format_suffix(path)
    if not fmt:
        raise DocumentFormatError("No file extension found", path=path)
    if fmt not in FORMATS:
        raise DocumentFormatError(f"Unknown file type: {fmt}", path=path)

    try:
        data = file_contents_as_bytes(path)
    except FileNotFoundError:
        raise DocumentReadError(path) from None
    except OSError as e:
        raise DocumentReadError(path, e.strerror or str(e)) from e

    try:
        fragments = parse_document(data, fmt)
    except DocumentFormatError as e:
        e.path = path
        raise

    logger.debug(f"Loaded {len(fragments)} fragment(s) from {path}")
    return fragments


def load_documents(paths, system=True):
    """
    Generates a single list of Fragments from a collection of documents.

    The system documents (/etc/kcheck.toml, /etc/kcheck.json) come first and
    are skipped when they do not exist. Every path in 'paths' must exist.
    Raises DocumentReadError if no document was found at all.
    """
    paths = [Path(p) for p in paths]
    for path in paths:
        if not path.exists():
            raise DocumentReadError(path)

    candidates = []
    if system:
        candidates.extend(p for p in SYSTEM_DOCUMENTS if p.exists())
    candidates.extend(paths)

    if not candidates:
        raise DocumentReadError(None, "Could not find a config file")

    fragments = []
    for path in candidates:
        logger.info(f"Reading {path}")
        fragments.extend(load_document(path))
    return fragments
