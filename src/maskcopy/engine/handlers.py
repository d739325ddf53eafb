"""Per-shape copy handlers.

Each handler copies one level of a value and recurses into its contents
through ``engine.copy_and_mask``; there is no other traversal path. Mutable
shapes register their (still empty) copy before recursing, so a cycle back to
the value finds the copy instead of recursing forever. Immutable shapes can
only be built once their contents exist, so they register afterwards.

Handlers do not apply hooks and do not look up the registry for the value
they are given; the engine does both.
"""

from __future__ import annotations

from collections import defaultdict, deque
from typing import TYPE_CHECKING, Any

from maskcopy.core.identity import IdentityRegistry
from maskcopy.core.record import allocate_record, populate_record, public_fields, read_field
from maskcopy.core.shape import Shape
from maskcopy.errors import (
    ConstructionError,
    ElementCopyError,
    EntryCopyError,
    FieldCopyError,
    MaskError,
    ShapeMismatchError,
)

if TYPE_CHECKING:
    from maskcopy.engine.engine import MaskEngine


def _expect_shape(engine: MaskEngine, value: Any, shape: Shape) -> None:
    actual = engine.classify(value)
    if actual is not shape:
        raise ShapeMismatchError(shape, actual, type(value))


def _empty_like(value: Any) -> Any:
    """Allocate an empty container of the same type as ``value``."""
    cls = type(value)
    try:
        if isinstance(value, deque):
            return cls(maxlen=value.maxlen)
        if isinstance(value, defaultdict):
            return cls(value.default_factory)
        return cls()
    except TypeError:
        # Subclass constructors with required arguments.
        pass
    try:
        return cls.__new__(cls)
    except TypeError as e:
        raise ConstructionError(cls, e) from e


def _allocate(cls: type) -> Any:
    try:
        return allocate_record(cls)
    except TypeError as e:
        raise ConstructionError(cls, e) from e


def _copy_elements(engine: MaskEngine, value: Any, registry: IdentityRegistry) -> list[Any]:
    items = []
    for index, item in enumerate(value):
        try:
            items.append(engine.copy_and_mask(item, registry))
        except MaskError as e:
            raise ElementCopyError(index, e) from e
    return items


def _copy_fields(engine: MaskEngine, value: Any, registry: IdentityRegistry) -> dict[str, Any]:
    values = {}
    for name in public_fields(value, engine.config.private_prefix):
        try:
            values[name] = engine.copy_and_mask(read_field(value, name), registry)
        except MaskError as e:
            raise FieldCopyError(type(value), name, e) from e
    return values


def copy_atomic(engine: MaskEngine, value: Any, registry: IdentityRegistry) -> Any:
    """Atomic values are immutable; the value is its own copy."""
    _expect_shape(engine, value, Shape.ATOMIC)
    return value


def copy_fixed_sequence(engine: MaskEngine, value: Any, registry: IdentityRegistry) -> Any:
    """Copy a tuple or frozenset element by element, then rebuild it.

    Named tuples are rebuilt with ``_make``; other subclasses with their
    constructor.
    """
    _expect_shape(engine, value, Shape.FIXED_SEQUENCE)
    items = _copy_elements(engine, value, registry)

    # A cycle through a mutable element may have copied this value already.
    if value in registry:
        return registry[value]

    cls = type(value)
    try:
        if cls is tuple:
            copy = tuple(items)
        elif isinstance(value, tuple) and hasattr(cls, "_make"):
            copy = cls._make(items)
        else:
            copy = cls(items)
    except TypeError as e:
        raise ConstructionError(cls, e) from e
    registry.register(value, copy)
    return copy


def copy_dynamic_sequence(engine: MaskEngine, value: Any, registry: IdentityRegistry) -> Any:
    """Copy a list, deque, bytearray, or set element by element.

    Sets are traversed in iteration order; error indices refer to it.
    """
    _expect_shape(engine, value, Shape.DYNAMIC_SEQUENCE)
    copy = _empty_like(value)
    registry.register(value, copy)

    items = _copy_elements(engine, value, registry)
    if isinstance(copy, set):
        copy.update(items)
    else:
        copy.extend(items)
    return copy


def copy_mapping(engine: MaskEngine, value: Any, registry: IdentityRegistry) -> Any:
    """Copy a dict, copying both the key and the value of every entry."""
    _expect_shape(engine, value, Shape.MAPPING)
    copy = _empty_like(value)
    registry.register(value, copy)

    for key, item in value.items():
        try:
            new_item = engine.copy_and_mask(item, registry)
        except MaskError as e:
            raise EntryCopyError(key, "value", e) from e
        try:
            new_key = engine.copy_and_mask(key, registry)
        except MaskError as e:
            raise EntryCopyError(key, "key", e) from e
        copy[new_key] = new_item
    return copy


def copy_reference(engine: MaskEngine, value: Any, registry: IdentityRegistry) -> Any:
    """Copy a mutable record.

    The new instance is registered before any field is copied; fields that
    lead back to ``value`` resolve to it while it is still being populated.
    """
    _expect_shape(engine, value, Shape.REFERENCE)
    copy = _allocate(type(value))
    registry.register(value, copy)

    values = _copy_fields(engine, value, registry)
    populate_record(copy, value, values)
    return copy


def copy_record(engine: MaskEngine, value: Any, registry: IdentityRegistry) -> Any:
    """Copy a frozen record by value.

    Only public fields are copied; non-public fields take their defaults.
    """
    _expect_shape(engine, value, Shape.RECORD)
    values = _copy_fields(engine, value, registry)

    if value in registry:
        return registry[value]

    copy = _allocate(type(value))
    populate_record(copy, value, values)
    registry.register(value, copy)
    return copy


DEFAULT_HANDLERS = {
    Shape.ATOMIC: copy_atomic,
    Shape.FIXED_SEQUENCE: copy_fixed_sequence,
    Shape.DYNAMIC_SEQUENCE: copy_dynamic_sequence,
    Shape.MAPPING: copy_mapping,
    Shape.REFERENCE: copy_reference,
    Shape.RECORD: copy_record,
}
"""Handler per shape. UNSUPPORTED has none by construction."""
