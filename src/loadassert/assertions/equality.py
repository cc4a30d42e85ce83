"""Strict and structural equality for matcher verdicts."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping, Set
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from numbers import Number
from typing import Any

from pydantic import BaseModel

from loadassert.assertions.base import UNDEFINED


class ValueTag(str, Enum):
    UNDEFINED = "undefined"
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    RECORD = "record"
    OTHER = "other"


def tag_of(value: Any) -> ValueTag:
    """Classify *value* for structural comparison."""
    if value is UNDEFINED:
        return ValueTag.UNDEFINED
    if value is None:
        return ValueTag.NULL
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return ValueTag.BOOL
    if isinstance(value, (int, float, Decimal, Fraction)):
        return ValueTag.NUMBER
    if isinstance(value, str):
        return ValueTag.STRING
    if isinstance(value, (bytes, bytearray)):
        return ValueTag.BYTES
    if isinstance(value, (list, tuple)):
        return ValueTag.SEQUENCE
    if isinstance(value, Mapping):
        return ValueTag.MAPPING
    if isinstance(value, Set):
        return ValueTag.SET
    if isinstance(value, BaseModel):
        return ValueTag.RECORD
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ValueTag.RECORD
    if hasattr(value, "__dict__") and not isinstance(value, (type, Number)) and not callable(value):
        return ValueTag.RECORD
    return ValueTag.OTHER


def is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def strict_equals(a: Any, b: Any) -> bool:
    """Equality without coercion, the way ``===`` compares.

    Scalars compare by value within their own kind, NaN equals nothing, and
    everything else compares by identity.
    """
    tag_a, tag_b = tag_of(a), tag_of(b)
    if tag_a is not tag_b:
        return False
    if tag_a is ValueTag.NUMBER:
        if is_nan(a) or is_nan(b):
            return False
        return a == b
    if tag_a in (ValueTag.BOOL, ValueTag.STRING):
        return a == b
    if tag_a is ValueTag.BYTES:
        # bytearray is mutable, so only immutable bytes compare by value
        if isinstance(a, bytes) and isinstance(b, bytes):
            return a == b
        return a is b
    return a is b


def _record_fields(value: Any) -> dict[str, Any]:
    if isinstance(value, BaseModel):
        return {name: getattr(value, name) for name in type(value).model_fields}
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return dict(vars(value))


def _defined_items(mapping: Mapping) -> dict[Any, Any]:
    return {k: v for k, v in mapping.items() if v is not UNDEFINED}


def structural_equals(a: Any, b: Any) -> bool:
    """Recursively compare two values by structure rather than identity.

    Mapping entries holding UNDEFINED are ignored, key order is irrelevant,
    NaN equals NaN, and lists equal tuples with the same items. Cyclic
    values terminate: a pair already under comparison counts as equal.
    """
    return _structural_equals(a, b, set())


def _structural_equals(a: Any, b: Any, in_progress: set[tuple[int, int]]) -> bool:
    if a is b:
        return True

    tag = tag_of(a)
    if tag is not tag_of(b):
        return False

    if tag is ValueTag.NUMBER:
        if is_nan(a) and is_nan(b):
            return True
        return a == b
    if tag in (ValueTag.BOOL, ValueTag.STRING, ValueTag.BYTES, ValueTag.SET, ValueTag.OTHER):
        return a == b
    if tag in (ValueTag.UNDEFINED, ValueTag.NULL):
        return True

    pair = (id(a), id(b))
    if pair in in_progress:
        return True
    in_progress.add(pair)
    try:
        if tag is ValueTag.SEQUENCE:
            return len(a) == len(b) and all(
                _structural_equals(x, y, in_progress) for x, y in zip(a, b)
            )

        if tag is ValueTag.RECORD:
            if type(a) is not type(b):
                return False
            left, right = _defined_items(_record_fields(a)), _defined_items(_record_fields(b))
        else:
            left, right = _defined_items(a), _defined_items(b)

        if left.keys() != right.keys():
            return False
        return all(_structural_equals(left[k], right[k], in_progress) for k in left)
    finally:
        in_progress.discard(pair)
