"""Payload types that opt into masking."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, PrivateAttr


class ApiKey(str):
    """Keys keep a short prefix for correlation; the rest is dropped."""

    def __masked__(self) -> ApiKey:
        return ApiKey(self[:4] + "…" if len(self) > 8 else "***")


@dataclass(frozen=True)
class Card:
    """Card details copied by value: only the last four digits survive."""

    number: str
    holder: str

    def __masked__(self) -> Card:
        return Card(number="**** " + self.number[-4:], holder=self.holder)


class User(BaseModel):
    """Mutable model: masked in place once per instance."""

    name: str
    email: str
    _password_hash: str = PrivateAttr(default="")

    def __mask__(self) -> None:
        local, _, domain = self.email.partition("@")
        self.email = f"{local[:1]}***@{domain}"


@dataclass
class Order:
    order_id: int
    buyer: User
    card: Card
    api_key: ApiKey = ApiKey("")
    items: list[str] = field(default_factory=list)
    related: list[Order] = field(default_factory=list)
