"""maskcopy: cycle-safe deep copies with redaction hooks.

Usage:
    from dataclasses import dataclass
    from maskcopy import mask

    @dataclass
    class Login:
        user: str
        password: str

        def __mask__(self) -> None:
            self.password = "***"

    login = Login("ada", "hunter2")
    safe = mask(login)
    assert safe.password == "***" and login.password == "hunter2"
"""

__version__ = "0.1.0"

# Entry points
from maskcopy.api import get_default_engine, mask, must, try_mask

# Configuration
from maskcopy.config import MaskSettings

# Core primitives
from maskcopy.core import (
    IdentityRegistry,
    Masker,
    MaskTransformer,
    Shape,
    UnsupportedReason,
    classify,
)

# Engine
from maskcopy.engine import EngineConfig, MaskEngine, MaskResult

# Errors
from maskcopy.errors import (
    ConstructionError,
    CopyContextError,
    ElementCopyError,
    EntryCopyError,
    FieldCopyError,
    HookContractError,
    HookError,
    MaskAbort,
    MaskError,
    MaskHookIgnoredWarning,
    ShapeMismatchError,
    UnsupportedKindError,
)

__all__ = [
    # Version
    "__version__",
    # Entry points
    "mask",
    "must",
    "try_mask",
    "get_default_engine",
    # Core
    "Masker",
    "MaskTransformer",
    "Shape",
    "UnsupportedReason",
    "classify",
    "IdentityRegistry",
    # Engine
    "MaskEngine",
    "EngineConfig",
    "MaskResult",
    "MaskSettings",
    # Errors
    "MaskError",
    "UnsupportedKindError",
    "ShapeMismatchError",
    "ConstructionError",
    "CopyContextError",
    "ElementCopyError",
    "FieldCopyError",
    "EntryCopyError",
    "HookContractError",
    "HookError",
    "MaskAbort",
    "MaskHookIgnoredWarning",
]
