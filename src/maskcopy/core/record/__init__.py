"""Record functionality: field discovery, allocation, and population."""

from maskcopy.core.record.models import RecordKind
from maskcopy.core.record.operations import (
    allocate_record,
    is_frozen_record,
    populate_record,
    public_fields,
    read_field,
    record_kind,
)

__all__ = [
    "RecordKind",
    "record_kind",
    "is_frozen_record",
    "public_fields",
    "read_field",
    "allocate_record",
    "populate_record",
]
