"""Mask hook protocols.

Types opt into masking by implementing one of these protocols, either
structurally or by listing the protocol as a base class:

    @dataclass
    class Credentials(Masker):
        user: str
        password: str

        def __mask__(self) -> None:
            self.password = "***"

    class ApiKey(str):
        def __masked__(self) -> Self:
            return ApiKey("***")

Which protocol is consulted depends on the copy's shape: mutable records
(reached by reference) get ``__mask__``; everything else gets ``__masked__``.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Masker(Protocol):
    """Copy → same copy, fields redacted in place."""

    def __mask__(self) -> None: ...


@runtime_checkable
class MaskTransformer(Protocol):
    """Copy → replacement of the exact same type."""

    def __masked__(self) -> Self: ...
