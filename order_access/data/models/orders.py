from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

_timestamp = TypeAdapter(datetime)


class NewOrder(BaseModel):
    """Order entered on the client and not yet persisted by the backend."""
    model_config = ConfigDict(extra="allow")

    id: None = Field(default=None, description="Always empty until the backend assigns one")
    date: Optional[datetime] = Field(default=None, description="Order timestamp")


class Order(BaseModel):
    """Persisted order. Line items and other domain fields are carried as extras."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Backend-assigned order identifier")
    date: Optional[datetime] = Field(default=None, description="Order timestamp")


class PartialUpdateOrder(BaseModel):
    """Identifier plus the subset of order fields to change."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Identifier of the order to patch")
    date: Optional[datetime] = Field(default=None, description="Order timestamp")


class RestOrder(BaseModel):
    """Order as exchanged with the backend: the date is a string."""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(default=None, description="Order identifier, absent for new orders")
    date: Optional[str] = Field(default=None, description="ISO-8601 order timestamp")


AnyOrder = Union[NewOrder, Order, PartialUpdateOrder]


def format_timestamp(value: datetime) -> str:
    """Render a timestamp in the backend's ISO-8601 form (UTC written as ``Z``).

    Fractional seconds are written only when non-zero, so a ``.000Z`` wire
    string comes back as the same instant without the zero milliseconds.
    """
    text = value.isoformat()
    if value.utcoffset() is not None and value.utcoffset().total_seconds() == 0:
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_timestamp(value: str) -> datetime:
    return _timestamp.validate_python(value)


def convert_date_from_client(order: AnyOrder) -> Dict[str, Any]:
    """Build the wire payload for an order.

    A partial update only carries the fields that were explicitly set; every
    other variant always carries ``date`` (``None`` when absent).
    """
    partial = isinstance(order, PartialUpdateOrder)
    payload = order.model_dump(mode="json", exclude_unset=partial)
    if not partial or "date" in payload:
        payload["date"] = format_timestamp(order.date) if order.date is not None else None
    return payload


def convert_date_from_server(payload: Union[RestOrder, Mapping[str, Any]]) -> Order:
    rest = payload if isinstance(payload, RestOrder) else RestOrder.model_validate(payload)
    data = rest.model_dump()
    # empty string and null both mean "no date"
    data["date"] = parse_timestamp(rest.date) if rest.date else None
    return Order(**data)
