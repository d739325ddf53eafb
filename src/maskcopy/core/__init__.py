"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ holds pure functions and models with no per-call state. The call
    state (the identity registry instance) and the dispatch table are owned
    by maskcopy.engine.
"""

from maskcopy.core.hooks import Masker, MaskTransformer, apply_mask_hook
from maskcopy.core.identity import IdentityRegistry
from maskcopy.core.record import RecordKind, record_kind
from maskcopy.core.shape import Shape, UnsupportedReason, classify, unsupported_reason

__all__ = [
    # Shape
    "Shape",
    "UnsupportedReason",
    "classify",
    "unsupported_reason",
    # Identity
    "IdentityRegistry",
    # Record
    "RecordKind",
    "record_kind",
    # Hooks
    "Masker",
    "MaskTransformer",
    "apply_mask_hook",
]
