from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, Sequence, TypeVar, Union

from .models import (
    # Order variants
    NewOrder,
    Order,
    PartialUpdateOrder,
    # Goods
    Good,
    GoodInOrder,
    # Query options
    RequestOptions,
    # Response envelope
    EntityResponse,
)

OrderT = TypeVar("OrderT")


# ---- Collaborator protocol ----

class GoodAccess(Protocol):
    """The one goods operation the order client depends on."""

    async def update_amount_by_good_id(self, good_id: str, amount: int) -> EntityResponse[Good]:
        """Set the stock of a good."""
        ...


# ---- Order access protocol ----

class OrderAccess(Protocol):
    """
    Client-side contract for the orders resource.

    Every call issues a fresh request; nothing is cached between calls.
    Transport and HTTP-status failures propagate to the caller unchanged.
    """

    predicate: str
    ascending: bool

    # CRUD calls

    async def create(self, order: NewOrder) -> EntityResponse[Order]:
        """Persist a new order."""
        ...

    async def update(self, order: Order) -> EntityResponse[Order]:
        """Replace an order."""
        ...

    async def partial_update(self, order: PartialUpdateOrder) -> EntityResponse[Order]:
        """Patch the fields set on ``order``."""
        ...

    async def find(self, id: str) -> EntityResponse[Order]:
        """Fetch one order."""
        ...

    async def query(
        self, req: Union[RequestOptions, Mapping[str, Any], None] = None
    ) -> EntityResponse[List[Order]]:
        """List orders."""
        ...

    async def delete(self, id: str) -> EntityResponse[Any]:
        """Remove an order."""
        ...

    # Collection helpers

    def get_order_identifier(self, order: Any) -> Optional[str]:
        """Identifier of any object carrying one."""
        ...

    def compare_order(self, o1: Any, o2: Any) -> bool:
        """Whether two orders, either possibly absent, are the same order."""
        ...

    def add_order_to_collection_if_missing(
        self, order_collection: List[OrderT], *orders_to_check: Optional[OrderT]
    ) -> List[OrderT]:
        """Prepend the candidates whose identifier is not yet in the collection."""
        ...

    def get_sort_query_param(self, predicate: Optional[str] = None, ascending: Optional[bool] = None) -> List[str]:
        """Sort directive for the predicate and direction, empty when there is no predicate."""
        ...

    # Inventory

    async def decrement_goods_count_on_ship(
        self, goods_in_order: Sequence[GoodInOrder]
    ) -> List[EntityResponse[Good]]:
        """Subtract each line's allocation from its good's stock."""
        ...
