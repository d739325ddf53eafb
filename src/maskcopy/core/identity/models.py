"""Call-scoped identity registry.

Usage:
    registry = IdentityRegistry()
    registry.register(original, copy)
    if original in registry:
        copy = registry[original]
"""

from __future__ import annotations

from typing import Any


class IdentityRegistry:
    """Maps original objects, by identity, to the copies produced for them.

    One registry lives for exactly one top-level mask call. Finding an
    original here means it is either being copied higher up the stack (a
    cycle) or was already copied elsewhere (a shared reference); both cases
    reuse the registered copy.

    Entries hold the original alongside the copy so its ``id()`` cannot be
    recycled while the call is running.
    """

    __slots__ = ("_entries", "_masked")

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._entries: dict[int, tuple[Any, Any]] = {}
        self._masked: set[int] = set()

    def register(self, original: Any, copy: Any) -> None:
        """Record (or rebind) the copy produced for an original.

        Args:
            original: Object from the source graph.
            copy: Object that stands in for it in the copy graph.
        """
        self._entries[id(original)] = (original, copy)

    def mark_masked(self, original: Any) -> None:
        """Record that the copy registered for an original has had its hook applied."""
        self._masked.add(id(original))

    def is_masked(self, original: Any) -> bool:
        """True once the registered copy of an original is final."""
        return id(original) in self._masked

    def __contains__(self, original: object) -> bool:
        return id(original) in self._entries

    def __getitem__(self, original: Any) -> Any:
        """Get the copy registered for an original.

        Raises:
            KeyError: If the original has not been registered.
        """
        try:
            return self._entries[id(original)][1]
        except KeyError:
            raise KeyError(f"{type(original).__qualname__} at {id(original):#x}") from None

    def __len__(self) -> int:
        return len(self._entries)
