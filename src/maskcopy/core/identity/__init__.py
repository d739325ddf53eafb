"""Identity functionality: the per-call original-to-copy registry."""

from maskcopy.core.identity.models import IdentityRegistry

__all__ = [
    "IdentityRegistry",
]
