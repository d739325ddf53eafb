"""Record models: the kinds of aggregate with named fields."""

from enum import Enum, auto


class RecordKind(Enum):
    """How a record's fields are declared and stored."""

    DATACLASS = auto()  # dataclasses.fields()
    PYDANTIC = auto()  # model_fields + __pydantic_* internals
    OBJECT = auto()  # instance __dict__ and/or __slots__
