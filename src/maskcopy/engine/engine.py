"""Masking engine: the single recursive entry point.

Usage:
    engine = MaskEngine(MaskSettings(trace_hooks=True))
    safe = engine.mask(payload)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from maskcopy.config import MaskSettings
from maskcopy.core.hooks import apply_mask_hook
from maskcopy.core.identity import IdentityRegistry
from maskcopy.core.shape import Shape, classify, unsupported_reason
from maskcopy.engine.handlers import DEFAULT_HANDLERS
from maskcopy.engine.models import EngineConfig, Handler, MaskResult
from maskcopy.errors import MaskAbort, MaskError, UnsupportedKindError

logger = logging.getLogger(__name__)


class MaskEngine:
    """Deep-copies values and applies mask hooks to the copies.

    The engine holds only immutable configuration; every top-level call gets
    its own IdentityRegistry, so one engine can serve concurrent callers.

    Args:
        settings: Engine settings. Loaded from the environment if omitted.
        handlers: Handlers overriding the defaults for some shapes.
    """

    __slots__ = ("_config",)

    def __init__(
        self,
        settings: MaskSettings | None = None,
        handlers: Mapping[Shape, Handler] | None = None,
    ) -> None:
        """Build the engine's dispatch table and freeze its configuration."""
        settings = settings or MaskSettings()
        table = dict(DEFAULT_HANDLERS)
        if handlers:
            table.update(handlers)
        self._config = EngineConfig(
            handlers=MappingProxyType(table),
            private_prefix=settings.private_prefix,
            validate_hook_signatures=settings.validate_hook_signatures,
            warn_ignored_hooks=settings.warn_ignored_hooks,
            trace_hooks=settings.trace_hooks,
        )

    @property
    def config(self) -> EngineConfig:
        """The engine's frozen configuration."""
        return self._config

    def classify(self, value: Any) -> Shape:
        """Classify a value into its traversal shape."""
        return classify(value)

    def copy_and_mask(self, value: Any, registry: IdentityRegistry) -> Any:
        """Copy one value, recursively, and apply its mask hook.

        Args:
            value: Value to copy. ``None`` is returned unchanged.
            registry: Registry of the current top-level call.

        Returns:
            The masked copy. For values already in the registry, the
            registered copy, without running hooks again.

        Raises:
            UnsupportedKindError: If the value (or anything inside it) has
                no handler.
            MaskError: Any other copy or hook failure.
        """
        if value is None:
            return None

        shape = self.classify(value)
        if shape is Shape.UNSUPPORTED:
            raise UnsupportedKindError(type(value), unsupported_reason(value))  # type: ignore[arg-type]

        if shape is not Shape.ATOMIC and value in registry:
            return registry[value]

        copy = self._config.handlers[shape](self, value, registry)
        if shape is not Shape.ATOMIC and registry.is_masked(value):
            # A nested call reached this value through a cycle and finished it.
            return registry[value]

        masked = apply_mask_hook(
            shape,
            copy,
            validate_signatures=self._config.validate_hook_signatures,
            warn_ignored=self._config.warn_ignored_hooks,
            trace=self._config.trace_hooks,
        )
        if shape is not Shape.ATOMIC:
            if masked is not copy:
                # Later aliases of this value see the masked replacement.
                registry.register(value, masked)
            registry.mark_masked(value)
        return masked

    def mask[T](self, value: T) -> T:
        """Deep-copy ``value`` and mask the copy.

        Raises:
            MaskError: If any part of the value cannot be copied or masked.
                Nothing is returned and ``value`` is unchanged.
        """
        registry = IdentityRegistry()
        try:
            result = self.copy_and_mask(value, registry)
        except MaskError as e:
            logger.debug(
                "Masking %s failed at %r: %s",
                type(value).__qualname__,
                e.path,
                e.root_cause,
            )
            raise
        logger.debug("Masked %s (%d objects copied)", type(value).__qualname__, len(registry))
        return result  # type: ignore[no-any-return]

    def try_mask[T](self, value: T) -> MaskResult[T]:
        """Mask ``value`` and return the copy or the error as a MaskResult."""
        try:
            return MaskResult(value=self.mask(value))
        except MaskError as e:
            return MaskResult(error=e)

    def must[T](self, value: T) -> T:
        """Mask ``value``; any failure aborts with MaskAbort.

        Raises:
            MaskAbort: If masking fails. Not an Exception subclass.
        """
        try:
            return self.mask(value)
        except MaskError as e:
            raise MaskAbort(e) from e
