"""Shape functionality: traversal categories and the classifier."""

from maskcopy.core.shape.core import ATOMIC_TYPES, classify, unsupported_reason
from maskcopy.core.shape.models import Shape, UnsupportedReason

__all__ = [
    "Shape",
    "UnsupportedReason",
    "ATOMIC_TYPES",
    "classify",
    "unsupported_reason",
]
