"""Module-level entry points backed by a shared default engine.

Usage:
    from maskcopy import mask, must

    safe = mask(request_payload)      # raises MaskError on failure
    safe = must(request_payload)      # aborts with MaskAbort on failure
    result = try_mask(request_payload)
    if not result.ok:
        log.warning("could not mask payload: %s", result.error)
"""

from __future__ import annotations

import functools

from maskcopy.engine import MaskEngine, MaskResult


@functools.cache
def get_default_engine() -> MaskEngine:
    """Access the default engine, built once from environment settings.

    Returns:
        The process-wide MaskEngine. Its configuration is immutable.
    """
    return MaskEngine()


def mask[T](value: T, *, engine: MaskEngine | None = None) -> T:
    """Return a deep copy of ``value`` with mask hooks applied.

    Args:
        value: Any value. It is never modified.
        engine: Engine to use instead of the default one.

    Returns:
        The masked copy.

    Raises:
        MaskError: If the value contains something that cannot be copied,
            or a hook breaks its contract.
    """
    return (engine or get_default_engine()).mask(value)


def try_mask[T](value: T, *, engine: MaskEngine | None = None) -> MaskResult[T]:
    """Like mask, but returns the copy or the error as a MaskResult."""
    return (engine or get_default_engine()).try_mask(value)


def must[T](value: T, *, engine: MaskEngine | None = None) -> T:
    """Like mask, but a failure is treated as a programming error.

    Raises:
        MaskAbort: If masking fails. Derives from BaseException, so it passes
            through ``except Exception`` handlers.
    """
    return (engine or get_default_engine()).must(value)
