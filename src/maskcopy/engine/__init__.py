"""Engine functionality: dispatch, handlers, and the recursive entry point."""

from maskcopy.engine.engine import MaskEngine
from maskcopy.engine.handlers import (
    DEFAULT_HANDLERS,
    copy_atomic,
    copy_dynamic_sequence,
    copy_fixed_sequence,
    copy_mapping,
    copy_record,
    copy_reference,
)
from maskcopy.engine.models import EngineConfig, Handler, MaskResult

__all__ = [
    # Engine
    "MaskEngine",
    "EngineConfig",
    "MaskResult",
    "Handler",
    # Handlers
    "DEFAULT_HANDLERS",
    "copy_atomic",
    "copy_fixed_sequence",
    "copy_dynamic_sequence",
    "copy_mapping",
    "copy_reference",
    "copy_record",
]
