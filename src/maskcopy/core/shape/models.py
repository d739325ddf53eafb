"""Shape models: the closed set of traversal categories.

Usage:
    shape = classify(value)
    if shape is Shape.UNSUPPORTED:
        reason = unsupported_reason(value)
"""

from enum import Enum, auto


class Shape(Enum):
    """Structural category of a runtime value, one handler per member."""

    ATOMIC = auto()
    """Immutable scalar, returned as-is."""

    FIXED_SEQUENCE = auto()
    """Immutable sequence rebuilt after its elements (tuple, frozenset)."""

    DYNAMIC_SEQUENCE = auto()
    """Mutable sequence allocated before its elements (list, deque, set)."""

    MAPPING = auto()
    """dict and its subclasses; keys and values are both copied."""

    REFERENCE = auto()
    """Mutable record with identity; receives in-place (mutating) masking."""

    RECORD = auto()
    """Frozen record copied by value; receives transforming masking."""

    UNSUPPORTED = auto()
    """No handler; the engine fails with UnsupportedKindError."""


class UnsupportedReason(Enum):
    """Why a value was classified UNSUPPORTED."""

    BEHAVIOR = "behavior value"
    CHANNEL = "communication channel"
    RAW_MEMORY = "raw memory"
    NO_HANDLER = "a shape without a registered handler"
