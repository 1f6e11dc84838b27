from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Good(BaseModel):
    """Inventory item as returned by the goods endpoint."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Good identifier")
    name: Optional[str] = Field(default=None, description="Display name")
    amount: Optional[int] = Field(default=None, description="Units currently in stock")


class GoodInOrder(BaseModel):
    """Allocation of a good to one order line."""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(default=None, description="Order line identifier")
    good_id: Optional[str] = Field(default=None, description="Identifier of the referenced good")
    good_amount: Optional[int] = Field(default=None, description="Authoritative stock of the good")
    good_in_order_amount: Optional[int] = Field(default=None, description="Units allocated to this order")

    def remaining_amount(self) -> int:
        """Stock left once this line ships.

        Raises:
            ValueError: If the good reference or either amount is missing.
        """
        if self.good_id is None or self.good_amount is None or self.good_in_order_amount is None:
            raise ValueError(f"Order line {self.id!r} has no good reference or amounts to ship")
        return self.good_amount - self.good_in_order_amount
