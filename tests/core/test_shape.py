"""Tests for shape classification.

Critical Invariants:
- Every value maps to exactly one shape
- Behavior values, channels, and raw memory are never copied
- Frozen records are copied by value, mutable records by reference
"""

import ctypes
import io
import os
import queue
import threading
from collections import Counter, OrderedDict, defaultdict, deque, namedtuple
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePosixPath
from uuid import UUID

import pytest
from pydantic import BaseModel, ConfigDict

from maskcopy.core.shape import Shape, UnsupportedReason, classify, unsupported_reason


class Color(Enum):
    RED = 1


Point = namedtuple("Point", ["x", "y"])


@dataclass
class MutableRecord:
    value: int


@dataclass(frozen=True)
class FrozenRecord:
    value: int


@dataclass(slots=True)
class SlottedRecord:
    value: int


class MutableModel(BaseModel):
    value: int


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int


class PlainObject:
    def __init__(self) -> None:
        self.value = 1


class SlotsObject:
    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value = 1


class Tag(str):
    pass


@pytest.mark.parametrize(
    "value",
    [
        True,
        0,
        1.5,
        2j,
        "text",
        b"bytes",
        Tag("sub"),
        Color.RED,
        Decimal("1.10"),
        Fraction(1, 3),
        date(2024, 1, 1),
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        timedelta(seconds=3),
        UUID(int=7),
        PurePosixPath("/etc/passwd"),
    ],
)
def test_atomic_values(value):
    """Immutable scalars, including subclasses, are atomic."""
    assert classify(value) is Shape.ATOMIC
    assert unsupported_reason(value) is None


@pytest.mark.parametrize(
    ("value", "shape"),
    [
        ((), Shape.FIXED_SEQUENCE),
        ((1, "a"), Shape.FIXED_SEQUENCE),
        (Point(1, 2), Shape.FIXED_SEQUENCE),
        (frozenset({1}), Shape.FIXED_SEQUENCE),
        ([], Shape.DYNAMIC_SEQUENCE),
        (deque([1], maxlen=3), Shape.DYNAMIC_SEQUENCE),
        (bytearray(b"x"), Shape.DYNAMIC_SEQUENCE),
        ({1, 2}, Shape.DYNAMIC_SEQUENCE),
        ({}, Shape.MAPPING),
        (OrderedDict(a=1), Shape.MAPPING),
        (defaultdict(list), Shape.MAPPING),
        (Counter("abc"), Shape.MAPPING),
    ],
)
def test_container_shapes(value, shape):
    assert classify(value) is shape


@pytest.mark.parametrize(
    ("value", "shape"),
    [
        (MutableRecord(1), Shape.REFERENCE),
        (SlottedRecord(1), Shape.REFERENCE),
        (MutableModel(value=1), Shape.REFERENCE),
        (PlainObject(), Shape.REFERENCE),
        (SlotsObject(), Shape.REFERENCE),
        (FrozenRecord(1), Shape.RECORD),
        (FrozenModel(value=1), Shape.RECORD),
    ],
)
def test_record_shapes(value, shape):
    """Mutable records are reached by reference; frozen records by value."""
    assert classify(value) is shape


def _generator():
    yield 1


@pytest.mark.parametrize(
    ("value", "reason"),
    [
        (lambda: None, UnsupportedReason.BEHAVIOR),
        (len, UnsupportedReason.BEHAVIOR),
        ([].append, UnsupportedReason.BEHAVIOR),
        (PlainObject, UnsupportedReason.BEHAVIOR),
        (os, UnsupportedReason.BEHAVIOR),
        (_generator(), UnsupportedReason.BEHAVIOR),
        (queue.Queue(), UnsupportedReason.CHANNEL),
        (threading.Lock(), UnsupportedReason.CHANNEL),
        (threading.Event(), UnsupportedReason.CHANNEL),
        (io.StringIO(), UnsupportedReason.CHANNEL),
        (memoryview(b"raw"), UnsupportedReason.RAW_MEMORY),
        (ctypes.c_int(3), UnsupportedReason.RAW_MEMORY),
        (object(), UnsupportedReason.NO_HANDLER),
        (range(3), UnsupportedReason.NO_HANDLER),
    ],
)
def test_unsupported_values(value, reason):
    """CRITICAL: Values that cannot be copied are flagged, never treated as records.

    Why: Functions and queues carry a __dict__; classifying them as records
    would silently produce broken copies.
    """
    assert classify(value) is Shape.UNSUPPORTED
    assert unsupported_reason(value) is reason


def test_none_is_not_a_shape():
    """None is the absent value; the classifier has no handler for it."""
    assert classify(None) is Shape.UNSUPPORTED
