"""Shape classification.

Checks run in a fixed order: atomic scalars first (so ``str`` subclasses with
an instance ``__dict__`` stay atomic), then the unsupported categories (so
functions, which carry a ``__dict__``, never look like records), then the
containers, then records.
"""

from __future__ import annotations

import asyncio
import ctypes
import datetime
import functools
import io
import mmap
import multiprocessing.connection
import multiprocessing.queues
import pathlib
import queue
import socket
import threading
import types
import uuid
from collections import deque
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

from maskcopy.core.record import is_frozen_record, record_kind
from maskcopy.core.shape.models import Shape, UnsupportedReason

ATOMIC_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Enum,
    Decimal,
    Fraction,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    pathlib.PurePath,
)
"""Immutable scalars. Subclasses are atomic too and may declare hooks."""

BEHAVIOR_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ModuleType,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    functools.partial,
    staticmethod,
    classmethod,
    property,
    type,
)

CHANNEL_TYPES: tuple[type, ...] = (
    queue.Queue,
    queue.SimpleQueue,
    asyncio.Queue,
    multiprocessing.queues.Queue,
    multiprocessing.connection.Connection,
    socket.socket,
    io.IOBase,
    type(threading.Lock()),
    type(threading.RLock()),
    threading.Condition,
    threading.Semaphore,
    threading.Event,
    threading.Barrier,
)

RAW_MEMORY_TYPES: tuple[type, ...] = (
    memoryview,
    mmap.mmap,
    ctypes._SimpleCData,
    ctypes._Pointer,
    ctypes.Array,
    ctypes.Structure,
    ctypes.Union,
)

FIXED_SEQUENCE_TYPES: tuple[type, ...] = (tuple, frozenset)
DYNAMIC_SEQUENCE_TYPES: tuple[type, ...] = (list, deque, bytearray, set)


def unsupported_reason(value: Any) -> UnsupportedReason | None:
    """Explain why a value cannot be copied.

    Args:
        value: Any non-None value.

    Returns:
        The reason, or None if the value has a handler.
    """
    if isinstance(value, ATOMIC_TYPES):
        return None
    if isinstance(value, BEHAVIOR_TYPES):
        return UnsupportedReason.BEHAVIOR
    if isinstance(value, CHANNEL_TYPES):
        return UnsupportedReason.CHANNEL
    if isinstance(value, RAW_MEMORY_TYPES):
        return UnsupportedReason.RAW_MEMORY
    if isinstance(value, FIXED_SEQUENCE_TYPES + DYNAMIC_SEQUENCE_TYPES + (dict,)):
        return None
    if record_kind(type(value)) is not None:
        return None
    return UnsupportedReason.NO_HANDLER


def classify(value: Any) -> Shape:
    """Map a runtime value to its traversal shape.

    Args:
        value: Any non-None value. ``None`` is the absent value and is
            short-circuited by the engine before classification.

    Returns:
        The value's Shape; UNSUPPORTED when no handler applies.
    """
    if isinstance(value, ATOMIC_TYPES):
        return Shape.ATOMIC
    if unsupported_reason(value) is not None:
        return Shape.UNSUPPORTED
    if isinstance(value, FIXED_SEQUENCE_TYPES):
        return Shape.FIXED_SEQUENCE
    if isinstance(value, DYNAMIC_SEQUENCE_TYPES):
        return Shape.DYNAMIC_SEQUENCE
    if isinstance(value, dict):
        return Shape.MAPPING
    if is_frozen_record(type(value)):
        return Shape.RECORD
    return Shape.REFERENCE
