"""Structured results for single-key lookups and updates.

:func:`~inistore.store.get_value_by_key` and :func:`~inistore.store.modify_key`
both return one of :class:`Found`, :class:`SectionNotFound` or
:class:`KeyNotFound`.  Absence is not an error at this level; callers that
want an exception use :meth:`unwrap`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeVar, Union

from .errors import MissingKeyError

T = TypeVar("T")


@dataclass(frozen=True)
class Found:
    value: str

    found = True

    def value_or(self, default: T) -> str | T:
        return self.value

    def unwrap(self) -> str:
        return self.value

    def describe(self) -> str:
        return f"value {self.value!r}"


@dataclass(frozen=True)
class SectionNotFound:
    section: str

    found = False

    def value_or(self, default: T) -> str | T:
        return default

    def unwrap(self) -> str:
        raise MissingKeyError(self.section)

    def describe(self) -> str:
        return f"section {self.section!r} not found"


@dataclass(frozen=True)
class KeyNotFound:
    section: str
    key: str

    found = False

    def value_or(self, default: T) -> str | T:
        return default

    def unwrap(self) -> str:
        raise MissingKeyError(self.section, self.key)

    def describe(self) -> str:
        return f"key {self.key!r} not found in section {self.section!r}"


Lookup = Union[Found, SectionNotFound, KeyNotFound]


def lookup(doc: Mapping[str, Mapping[str, str]], section: str, key: str) -> Lookup:
    """Resolve *section*/*key* in an already parsed document."""
    entries = doc.get(section)
    if entries is None:
        return SectionNotFound(section)
    if key not in entries:
        return KeyNotFound(section, key)
    return Found(entries[key])
