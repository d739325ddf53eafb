"""End-to-end masking scenarios through the public entry points.

Why these tests exist:
- They pin the documented behaviour of mask/must on realistic graphs
- Cycles, shared references, and mixed hook kinds in one payload
"""

from __future__ import annotations

import copy as stdlib_copy
from dataclasses import dataclass, field
from typing import Any

import pytest

from maskcopy import MaskAbort, MaskError, mask, must


@dataclass
class Node:
    bar: int
    next: Node | None = None


class TestString(str):
    __test__ = False

    def __masked__(self) -> TestString:
        return TestString("MASKED")


class MaskedInt(int):
    def __masked__(self) -> MaskedInt:
        return MaskedInt(0)


class SecretMap(dict):
    def __masked__(self) -> SecretMap:
        return SecretMap()


class SecretList(list):
    def __masked__(self) -> SecretList:
        return SecretList()


@dataclass(frozen=True)
class Card:
    number: str

    def __masked__(self) -> Card:
        return Card(number="MASKED")


@dataclass
class Box:
    value: Any = None


@dataclass
class Payload:
    s1: TestString
    s2: Box
    i1: MaskedInt
    i2: Box
    i3: Box | None
    mp: SecretMap
    sl: SecretList
    value: str
    card1: Card
    card2: Box
    custom: Any = None
    _internal: list = field(default_factory=list)

    def __mask__(self) -> None:
        self.value = "MASKED"


def new_payload() -> Payload:
    return Payload(
        s1=TestString("test string"),
        s2=Box(TestString("test string 2")),
        i1=MaskedInt(1),
        i2=Box(MaskedInt(2)),
        i3=None,
        mp=SecretMap(testKey="testValue"),
        sl=SecretList(["sensitive"]),
        value="test value",
        card1=Card("n1"),
        card2=Box(Card("n2")),
        _internal=["not copied"],
    )


@pytest.mark.parametrize(
    "value",
    [
        '"Now cut that out!"',
        39,
        True,
        False,
        2.14,
        ["Phil Harris", "Rochester van Jones", "Mary Livingstone", "Dennis Day"],
        ("Jell-O", "Grape-Nuts"),
    ],
)
def test_must_copies_plain_values(value):
    assert must(value) == value


def test_map_of_references():
    """Scenario B: each key gets its own new object, contents preserved."""
    x = {"foo": Node(bar=1), "bar": Node(bar=2)}
    y = must(x)

    for k in ("foo", "bar"):
        assert y[k] is not x[k]
        assert y[k].bar == x[k].bar
        assert y[k].next is None


def test_self_reference():
    """Scenario A: a cycle in the source is a cycle in the copy."""
    x = Node(bar=4)
    x.next = x
    y = must(x)

    assert y is not x
    assert x.next is x
    assert y.next is y
    assert y.bar == 4


def test_longer_cycle_and_shared_target():
    a, b = Node(1), Node(2)
    a.next, b.next = b, a
    y = mask({"a": a, "b": b, "also_a": a})

    assert y["a"].next is y["b"]
    assert y["b"].next is y["a"]
    assert y["also_a"] is y["a"]
    assert y["a"] is not a


def test_list_containing_itself():
    x: list = [1]
    x.append(x)
    y = mask(x)

    assert y is not x
    assert y[1] is y
    assert y[0] == 1


def test_none_values():
    assert must([None]) == [None]
    assert must(None) is None


def test_unset_references_stay_none():
    @dataclass
    class Pairing:
        left: Node | None = None
        right: Box | None = None
        left2: Node | None = None
        right2: Box | None = None

    src = Pairing(left2=Node(1), right2=Box(2))
    dst = must(src)

    assert dst == src
    assert dst.left is None and dst.right is None
    assert dst.left2 is not src.left2


def test_sentinel_hook():
    """Scenario C: a transforming hook yields its sentinel whatever the content."""
    for content in ("", "hunter2", "x" * 1000):
        assert mask(Box(TestString(content))).value == "MASKED"


def test_mixed_hooks():
    val = new_payload()
    val2 = new_payload()
    masked = must(val)

    # The original stays untouched.
    assert val == val2
    assert masked != val

    assert masked.s1 == "MASKED"
    assert masked.s2.value == "MASKED"
    assert masked.i1 == 0
    assert masked.i2.value == 0
    assert masked.i3 is None
    assert len(masked.mp) == 0
    assert type(masked.mp) is SecretMap
    assert len(masked.sl) == 0
    assert masked.card1.number == "MASKED"
    assert masked.card2.value.number == "MASKED"
    assert masked.value == "MASKED"
    assert masked._internal == []


@pytest.mark.parametrize(
    "custom",
    ["123", 1, ["1"], Box("123"), Card("123")],
    ids=["str", "int", "list", "reference", "record"],
)
def test_untyped_field_values(custom):
    val = new_payload()
    val.custom = custom
    masked = must(val)

    assert type(masked.custom) is type(custom)
    if isinstance(custom, Card):
        assert masked.custom.number == "MASKED"
    else:
        assert masked.custom == custom
    if isinstance(custom, (list, Box)):
        assert masked.custom is not custom


@pytest.mark.parametrize(
    "value",
    [
        lambda: None,
        {True: lambda: None},
        [lambda: None],
        Box(Box([print])),
    ],
)
def test_unsupported_kind(value):
    snapshot = stdlib_copy.copy(value)
    with pytest.raises(MaskError):
        mask(value)
    if isinstance(value, (list, dict)):
        assert value == snapshot


def test_unsupported_kind_aborts_on_must():
    with pytest.raises(MaskAbort) as exc_info:
        must(lambda: None)
    assert isinstance(exc_info.value.__cause__, MaskError)


def test_error_path_points_at_offender():
    with pytest.raises(MaskError) as exc_info:
        mask({"jobs": [Box(1), Box(print)]})
    assert exc_info.value.path == "['jobs'][1].value"
