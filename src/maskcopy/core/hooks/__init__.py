"""Mask hook functionality: protocols and the invoker."""

from maskcopy.core.hooks.core import apply_mask_hook, check_transformer_signature
from maskcopy.core.hooks.models import Masker, MaskTransformer

__all__ = [
    # Models
    "Masker",
    "MaskTransformer",
    # Core
    "apply_mask_hook",
    "check_transformer_signature",
]
