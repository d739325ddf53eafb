"""Exception taxonomy for masking copies.

Every failure raised by ``mask`` derives from ``MaskError``. Positional
context is added as the failure propagates upward, one ``CopyContextError``
per container level, chained through ``__cause__``:

    try:
        mask(payload)
    except MaskError as e:
        print(e.path)  # e.g. "['users'][3].callback"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from maskcopy.core.shape import Shape, UnsupportedReason


class MaskError(Exception):
    """Base class for failures while copying and masking a value."""

    @property
    def path(self) -> str:
        """Location of the failing value relative to the root, '' at the root."""
        segments: list[str] = []
        error: BaseException | None = self
        while isinstance(error, CopyContextError):
            segments.append(error.segment)
            error = error.__cause__
        return "".join(segments)

    @property
    def root_cause(self) -> BaseException:
        """Innermost error, with all positional wrappers removed."""
        error: BaseException = self
        while isinstance(error, CopyContextError) and error.__cause__ is not None:
            error = error.__cause__
        return error


class UnsupportedKindError(MaskError):
    """A value that cannot be copied was found in the graph."""

    def __init__(self, value_type: type, reason: UnsupportedReason) -> None:
        self.value_type = value_type
        self.reason = reason
        super().__init__(
            f"unable to copy a value of type {value_type.__qualname__}: "
            f"{reason.value} is not supported"
        )


class ShapeMismatchError(MaskError):
    """A handler received a value whose shape it does not handle."""

    def __init__(self, expected: Shape, actual: Shape, value_type: type) -> None:
        self.expected = expected
        self.actual = actual
        self.value_type = value_type
        super().__init__(
            f"must pass a value of shape {expected.name}; "
            f"got {value_type.__qualname__} ({actual.name})"
        )


class CopyContextError(MaskError):
    """Wraps a deeper failure with the position it happened at."""

    segment: str = ""


class ElementCopyError(CopyContextError):
    """Failure copying the element at a sequence position."""

    def __init__(self, index: int, cause: BaseException) -> None:
        self.index = index
        self.segment = f"[{index}]"
        super().__init__(f"failed to copy element at index {index}: {cause}")


class FieldCopyError(CopyContextError):
    """Failure copying a named field of a record."""

    def __init__(self, record_type: type, field: str, cause: BaseException) -> None:
        self.record_type = record_type
        self.field = field
        self.segment = f".{field}"
        super().__init__(
            f"failed to copy field {field!r} of {record_type.__qualname__}: {cause}"
        )


class EntryCopyError(CopyContextError):
    """Failure copying the key or the value of a mapping entry."""

    def __init__(self, key: Any, part: str, cause: BaseException) -> None:
        self.key = key
        self.part = part
        self.segment = f"[{key!r}]"
        super().__init__(f"failed to copy the {part} of map entry {key!r}: {cause}")


class ConstructionError(MaskError):
    """A copy could not be instantiated from the value's type."""

    def __init__(self, value_type: type, cause: BaseException) -> None:
        self.value_type = value_type
        super().__init__(f"unable to construct a copy of {value_type.__qualname__}: {cause}")


class HookContractError(MaskError):
    """A transforming hook does not honour its declared contract."""


class HookError(MaskError):
    """A mask hook raised while running on a copy."""

    def __init__(self, value_type: type, hook: str, cause: BaseException) -> None:
        self.value_type = value_type
        self.hook = hook
        super().__init__(f"{value_type.__qualname__}.{hook} raised: {cause!r}")


class MaskAbort(BaseException):
    """Raised by ``must``: a failed mask is a programming error, not a condition.

    Derives from BaseException so ``except Exception`` blocks around logging
    code do not swallow it. The original ``MaskError`` is the ``__cause__``.
    """

    def __init__(self, error: MaskError) -> None:
        self.error = error
        super().__init__(f"mask failed: {error}")


class MaskHookIgnoredWarning(UserWarning):
    """A type declares a mask hook that does not apply to its shape."""
