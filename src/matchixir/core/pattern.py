"""Structural pattern matching over primitives, sequences and records."""

from __future__ import annotations

import dataclasses
import enum
import math
from collections.abc import Mapping, Sequence
from typing import Any

# text types are sequences to the abc machinery but compare as primitives;
# enum members carry a __dict__ but still compare as primitives
_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, enum.Enum)

_MISSING = object()


class Wildcard:
    """Pattern that matches any value.

    There is exactly one instance per process, exported as ``_`` and
    ``WILDCARD``. Copying or pickling it hands back that same instance.
    """

    _instance: Wildcard | None = None

    def __new__(cls) -> Wildcard:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return other is self

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return "_"

    def __copy__(self) -> Wildcard:
        return self

    def __deepcopy__(self, memo: dict) -> Wildcard:
        return self

    def __reduce__(self) -> tuple:
        return (Wildcard, ())


WILDCARD = Wildcard()
_ = WILDCARD


class Kind(enum.Enum):
    """Shape of a value or pattern as seen by the matcher."""

    WILDCARD = "wildcard"
    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    RECORD = "record"


def kind_of(obj: Any) -> Kind:
    """Classify obj into one of the shapes the matcher knows about.

    - sequences: lists, tuples and other Sequence types, but not str/bytes
    - records: mappings, dataclass instances and objects with a __dict__
    - primitives: everything else
    """
    if obj is WILDCARD:
        return Kind.WILDCARD
    if isinstance(obj, _SCALAR_TYPES):
        return Kind.PRIMITIVE
    if isinstance(obj, Sequence):
        return Kind.SEQUENCE
    if isinstance(obj, Mapping):
        return Kind.RECORD
    # classes carry a __dict__ too, but only their instances are records
    if isinstance(obj, type):
        return Kind.PRIMITIVE
    if dataclasses.is_dataclass(obj) or hasattr(obj, "__dict__"):
        return Kind.RECORD
    return Kind.PRIMITIVE


def _is_number(obj: Any) -> bool:
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


def same_value(a: Any, b: Any) -> bool:
    """Identity or primitive value equality.

    NaN equals NaN, 0.0 and -0.0 differ, and bools only equal bools.
    Composite values are never compared with ``==`` here.
    """
    if a is b:
        return True
    return kind_of(a) is Kind.PRIMITIVE and kind_of(b) is Kind.PRIMITIVE and _same_primitive(a, b)


def _same_primitive(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b

    if _is_number(a) and _is_number(b):
        if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
            return True
        if a == 0 and b == 0:
            return math.copysign(1.0, a) == math.copysign(1.0, b)
        return a == b

    try:
        return bool(a == b)
    except Exception:
        # e.g. array-likes whose == is elementwise, signalling Decimal NaNs
        return False


def _fields(record: Any) -> Mapping:
    """Return the keyed fields of a record without running its properties.

    Mappings are their own fields; other records expose their instance
    __dict__, or their dataclass slots when they have no __dict__.
    """
    if isinstance(record, Mapping):
        return record
    try:
        return vars(record)
    except TypeError:
        pass
    if not dataclasses.is_dataclass(record):
        return {}
    fields = {}
    for field in dataclasses.fields(record):
        # slot descriptors only raise AttributeError, for unset slots
        item = getattr(record, field.name, _MISSING)
        if item is not _MISSING:
            fields[field.name] = item
    return fields


def _lookup(fields: Mapping, key: Any) -> Any:
    """Return the value stored under key, or _MISSING if there is none."""
    try:
        return fields[key] if key in fields else _MISSING
    except Exception:
        # user mappings may fail on lookup; that is a mismatch, not an error
        return _MISSING


def _matches_sequence(value: Sequence, pattern: Sequence) -> bool:
    if len(value) != len(pattern):
        return False
    return all(matches(v, p) for v, p in zip(value, pattern))


def _matches_record(value: Any, pattern: Any) -> bool:
    value_fields = _fields(value)
    for key, sub_pattern in _fields(pattern).items():
        item = _lookup(value_fields, key)
        if item is _MISSING or not matches(item, sub_pattern):
            return False
    return True


def matches(value: Any, pattern: Any) -> bool:
    """Check if value structurally conforms to pattern.

    Patterns:
    - ``_`` -> matches anything, at any depth
    - primitive -> same value (see same_value)
    - sequence -> same length, every position matches
    - record (mapping, dataclass, plain object) -> every key or attribute it
      carries is present in value and matches; extra ones in value are ignored
    """
    pattern_kind = kind_of(pattern)
    if pattern_kind is Kind.WILDCARD:
        return True

    if value is pattern:
        return True

    value_kind = kind_of(value)

    if pattern_kind is Kind.PRIMITIVE and value_kind is Kind.PRIMITIVE:
        return _same_primitive(value, pattern)

    if pattern_kind is Kind.SEQUENCE and value_kind is Kind.SEQUENCE:
        return _matches_sequence(value, pattern)

    if pattern_kind is Kind.RECORD and value_kind is Kind.RECORD:
        return _matches_record(value, pattern)

    return False
