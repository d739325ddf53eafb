"""Pure functions for reading and rebuilding records.

A record is copied in three steps so callers can register the new instance
before its fields are copied:

    target = allocate_record(type(source))
    values = {name: copy(getattr(source, name)) for name in public_fields(source, "_")}
    populate_record(target, source, values)

Only public fields are read. Fields whose names start with the private
prefix are reset to their declared default in the copy.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from maskcopy.core.record.models import RecordKind


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _slot_names(cls: type) -> list[str]:
    """Collect __slots__ names declared across the MRO."""
    names: list[str] = []
    for base in cls.__mro__:
        slots = vars(base).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def record_kind(cls: type) -> RecordKind | None:
    """Determine how instances of ``cls`` store their fields.

    Args:
        cls: Type of the value being classified.

    Returns:
        The record kind, or None if instances are not records.
    """
    if dataclasses.is_dataclass(cls):
        return RecordKind.DATACLASS
    if _is_pydantic(cls):
        return RecordKind.PYDANTIC
    if cls.__module__ == "builtins":
        return None
    if getattr(cls, "__dictoffset__", 0) or _slot_names(cls):
        return RecordKind.OBJECT
    return None


def is_frozen_record(cls: type) -> bool:
    """Frozen records are copied by value; all others by reference."""
    kind = record_kind(cls)
    if kind is RecordKind.DATACLASS:
        return bool(cls.__dataclass_params__.frozen)  # type: ignore[attr-defined]
    if kind is RecordKind.PYDANTIC:
        return bool(cls.model_config.get("frozen", False))  # type: ignore[attr-defined]
    return False


def public_fields(source: Any, private_prefix: str) -> list[str]:
    """List the externally visible fields that are set on ``source``.

    Args:
        source: Record instance.
        private_prefix: Names starting with this prefix are not public.

    Returns:
        Field names in declaration order.
    """
    cls = type(source)
    kind = record_kind(cls)
    if kind is RecordKind.DATACLASS:
        names = [f.name for f in dataclasses.fields(cls)]
    elif kind is RecordKind.PYDANTIC:
        names = list(cls.model_fields)  # type: ignore[attr-defined]
        if source.__pydantic_extra__:
            names.extend(source.__pydantic_extra__)
    else:
        names = list(getattr(source, "__dict__", {}))
        names.extend(name for name in _slot_names(cls) if name not in names)

    visible = []
    for name in names:
        if private_prefix and name.startswith(private_prefix):
            continue
        if kind is RecordKind.PYDANTIC or hasattr(source, name):
            visible.append(name)
    return visible


def read_field(source: Any, name: str) -> Any:
    """Read a public field, including pydantic extras."""
    extra = getattr(source, "__pydantic_extra__", None)
    if extra and name in extra:
        return extra[name]
    return getattr(source, name)


def _dataclass_default(f: dataclasses.Field[Any]) -> Any:
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return None


def _prefill_pydantic(target: Any) -> None:
    from pydantic_core import PydanticUndefined

    cls = type(target)
    fields: dict[str, Any] = {}
    for name, info in cls.model_fields.items():
        default = info.get_default(call_default_factory=True)
        fields[name] = None if default is PydanticUndefined else default

    private: dict[str, Any] = {}
    for name, attr in cls.__private_attributes__.items():
        default = attr.get_default()
        if default is not PydanticUndefined:
            private[name] = default

    extra = {} if cls.model_config.get("extra") == "allow" else None
    object.__setattr__(target, "__dict__", fields)
    object.__setattr__(target, "__pydantic_extra__", extra)
    object.__setattr__(target, "__pydantic_fields_set__", set())
    object.__setattr__(
        target, "__pydantic_private__", private if cls.__private_attributes__ else None
    )


def allocate_record(cls: type) -> Any:
    """Create an instance without running ``__init__``.

    Declared fields start at their defaults (``None`` where there is none),
    so code reaching the instance before it is populated reads defaults
    rather than missing attributes. Plain objects fall back to class
    attributes.
    """
    target = cls.__new__(cls)
    kind = record_kind(cls)
    if kind is RecordKind.DATACLASS:
        for f in dataclasses.fields(cls):
            object.__setattr__(target, f.name, _dataclass_default(f))
    elif kind is RecordKind.PYDANTIC:
        _prefill_pydantic(target)
    return target


def populate_record(target: Any, source: Any, values: dict[str, Any]) -> None:
    """Set copied field values on an allocated record.

    Fields missing from ``values`` keep the defaults set by allocate_record.

    Args:
        target: Instance returned by allocate_record.
        source: Original record, used for field metadata only.
        values: Copied public field values by name.
    """
    if record_kind(type(target)) is RecordKind.PYDANTIC:
        fields = type(target).model_fields
        target.__dict__.update((k, v) for k, v in values.items() if k in fields)
        if source.__pydantic_extra__ is not None:
            extra = {k: values[k] for k in source.__pydantic_extra__ if k in values}
            object.__setattr__(target, "__pydantic_extra__", extra)
        object.__setattr__(target, "__pydantic_fields_set__", set(source.__pydantic_fields_set__))
        return

    for name, value in values.items():
        object.__setattr__(target, name, value)
