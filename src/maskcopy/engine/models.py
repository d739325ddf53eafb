"""Engine models: immutable configuration and call results."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from maskcopy.core.shape import Shape
from maskcopy.errors import MaskAbort, MaskError

if TYPE_CHECKING:
    from maskcopy.core.identity import IdentityRegistry
    from maskcopy.engine.engine import MaskEngine

type Handler = Callable[[MaskEngine, Any, IdentityRegistry], Any]
"""Signature: (engine, value, registry) -> copy"""


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Configuration an engine is built with. Never mutated after construction."""

    handlers: Mapping[Shape, Handler]
    """Dispatch table: one handler per supported shape (read-only mapping)."""

    private_prefix: str = "_"
    """Field names starting with this prefix are not copied."""

    validate_hook_signatures: bool = True
    warn_ignored_hooks: bool = True
    trace_hooks: bool = False

    def __post_init__(self) -> None:
        missing = [
            shape.name
            for shape in Shape
            if shape is not Shape.UNSUPPORTED and shape not in self.handlers
        ]
        if missing:
            raise ValueError(f"No handler registered for shapes: {', '.join(missing)}")
        if Shape.UNSUPPORTED in self.handlers:
            raise ValueError("UNSUPPORTED values cannot have a handler")


@dataclass(frozen=True, slots=True)
class MaskResult[T]:
    """Outcome of a masking call: the copy, or the error that aborted it."""

    value: T | None = None
    error: MaskError | None = None

    @property
    def ok(self) -> bool:
        """True if the call succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the copy, aborting if the call failed.

        Raises:
            MaskAbort: If the call failed.
        """
        if self.error is not None:
            raise MaskAbort(self.error) from self.error
        return self.value  # type: ignore[return-value]
