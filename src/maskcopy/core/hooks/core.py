"""Mask hook invocation.

Hooks run once per freshly produced copy, after all of the copy's contents
have been copied and masked (post-order).
"""

from __future__ import annotations

import inspect
import logging
import os
import typing
import warnings
from pathlib import Path
from typing import Any

from maskcopy.core.hooks.models import Masker, MaskTransformer
from maskcopy.core.shape import Shape
from maskcopy.errors import HookContractError, HookError, MaskHookIgnoredWarning

logger = logging.getLogger(__name__)

_NO_PARAMETER_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)

# Warnings are attributed to the first frame outside the package.
_PACKAGE_PREFIX = str(Path(__file__).parents[2]) + os.sep


def _annotation_names_receiver(annotation: Any, cls: type) -> bool:
    if annotation is typing.Self or annotation is cls:
        return True
    if isinstance(annotation, str):
        name = annotation.strip("'\"").rsplit(".", 1)[-1]
        return name in ("Self", cls.__name__)
    return False


def check_transformer_signature(copy: Any) -> None:
    """Validate a transforming hook's declared signature.

    The hook must accept no arguments and, if annotated, must declare its
    receiver's own type (or ``Self``) as the return type.

    Args:
        copy: Value implementing MaskTransformer.

    Raises:
        HookContractError: If the declaration breaks the contract.
    """
    cls = type(copy)
    try:
        signature = inspect.signature(copy.__masked__)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures are checked at return.
        return

    required = [
        p.name
        for p in signature.parameters.values()
        if p.default is p.empty and p.kind not in _NO_PARAMETER_KINDS
    ]
    if required:
        raise HookContractError(
            f"{cls.__qualname__}.__masked__ must take no parameters; requires {required}"
        )

    annotation = signature.return_annotation
    if annotation is signature.empty:
        return
    if not _annotation_names_receiver(annotation, cls):
        raise HookContractError(
            f"{cls.__qualname__}.__masked__ must return {cls.__qualname__}; "
            f"declares {annotation!r}"
        )


def _warn_ignored(cls: type, hook: str, shape: Shape) -> None:
    warnings.warn(
        f"{cls.__qualname__} declares {hook} but is copied as {shape.name}; "
        f"the hook is not applied.",
        MaskHookIgnoredWarning,
        skip_file_prefixes=(_PACKAGE_PREFIX,),
    )


def apply_mask_hook(
    shape: Shape,
    copy: Any,
    *,
    validate_signatures: bool = True,
    warn_ignored: bool = True,
    trace: bool = False,
) -> Any:
    """Apply the hook that matches the copy's shape.

    Args:
        shape: Shape the copy was produced as.
        copy: Freshly produced copy, contents already masked.
        validate_signatures: Check ``__masked__`` declarations before calling.
        warn_ignored: Warn when a declared hook does not apply to the shape.
        trace: Log each invocation at DEBUG.

    Returns:
        The copy (mutating hook, or no hook) or its replacement
        (transforming hook).

    Raises:
        HookContractError: If a transforming hook breaks its contract.
        HookError: If a hook raises.
    """
    cls = type(copy)

    if shape is Shape.REFERENCE:
        if isinstance(copy, Masker):
            if trace:
                logger.debug("Applying %s.__mask__", cls.__qualname__)
            try:
                copy.__mask__()
            except Exception as e:
                raise HookError(cls, "__mask__", e) from e
        elif warn_ignored and isinstance(copy, MaskTransformer):
            _warn_ignored(cls, "__masked__", shape)
        return copy

    if not isinstance(copy, MaskTransformer):
        if warn_ignored and isinstance(copy, Masker):
            _warn_ignored(cls, "__mask__", shape)
        return copy

    if validate_signatures:
        check_transformer_signature(copy)
    if trace:
        logger.debug("Applying %s.__masked__", cls.__qualname__)
    try:
        result = copy.__masked__()
    except Exception as e:
        raise HookError(cls, "__masked__", e) from e

    if type(result) is not cls:
        raise HookContractError(
            f"{cls.__qualname__}.__masked__ must return {cls.__qualname__}; "
            f"returned {type(result).__qualname__}"
        )
    return result
