"""Line parser and serializer for the flat ``[section]`` / ``key=value`` subset.

There is no comment syntax, quoting or escaping.  Lines that neither open a
section nor carry an entry are dropped; in strict mode they raise
:class:`~inistore.errors.IniParseError` instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from .errors import IniParseError

logger = logging.getLogger(__name__)

# section -> (key -> value), insertion ordered
Document = dict[str, dict[str, str]]


def _header_name(line: str) -> str | None:
    if line.startswith("[") and line.endswith("]") and len(line) >= 2:
        return line[1:-1].strip()
    return None


def _reject(lineno: int, line: str, reason: str, *, strict: bool) -> None:
    if strict:
        raise IniParseError(lineno, line, reason)
    logger.debug("ignoring line %d (%s): %r", lineno, reason, line)


def parse_lines(lines: Iterable[str], *, strict: bool = False) -> Document:
    """Build a :data:`Document` from an iterable of raw lines."""
    doc: Document = {}
    current: dict[str, str] | None = None
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        name = _header_name(line)
        if name is not None:
            # a repeated header replaces the earlier section in place
            current = {}
            doc[name] = current
            continue
        if current is None:
            _reject(lineno, line, "entry before first section", strict=strict)
            continue
        key, sep, value = line.partition("=")
        if not sep:
            _reject(lineno, line, "missing '='", strict=strict)
            continue
        current[key.strip()] = value.strip()
    return doc


def loads(text: str, *, strict: bool = False) -> Document:
    return parse_lines(text.splitlines(), strict=strict)


def iter_lines(doc: Mapping[str, Mapping[str, str]]) -> Iterator[str]:
    """Yield the serialized lines of *doc* without line terminators."""
    for section, entries in doc.items():
        yield f"[{section}]"
        for key, value in entries.items():
            yield f"{key}={value}"


def dumps(doc: Mapping[str, Mapping[str, str]]) -> str:
    return "".join(line + "\n" for line in iter_lines(doc))
