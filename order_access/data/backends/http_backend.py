from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar, Union

import httpx

from order_access.logging import get_logger

from ..interface import GoodAccess, OrderAccess
from ..models import (
    ASC, DESC, EntityResponse, Good, GoodInOrder, NewOrder, Order, PartialUpdateOrder,
    RequestOptions, convert_date_from_client, convert_date_from_server,
    create_request_option, raw_body,
)

OrderT = TypeVar("OrderT")

EndpointResolver = Callable[[str], str]


class BaseHttpAccess:
    """
    Shared plumbing for the REST resources.
    - One resource URL, resolved once at construction.
    - Non-2xx responses raise httpx.HTTPStatusError; transport errors propagate as raised.
    """

    resource_path: str = ""

    def __init__(self, http: httpx.AsyncClient, resolve_endpoint: EndpointResolver) -> None:
        self.http = http
        self.resource_url = resolve_endpoint(self.resource_path)
        self.logger = get_logger(type(self).__name__)

    async def close(self) -> None:
        await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _url(self, id: Any = None) -> str:
        return self.resource_url if id is None else f"{self.resource_url}/{id}"

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        self.logger.debug(f"{method} {url}")
        response = await self.http.request(method, url, **kwargs)
        response.raise_for_status()
        return response


class HttpGoodAccess(BaseHttpAccess, GoodAccess):
    """Goods resource, limited to the stock update used when orders ship."""

    resource_path = "api/goods"

    async def update_amount_by_good_id(self, good_id: str, amount: int) -> EntityResponse[Good]:
        response = await self._send("PATCH", self._url(good_id), json={"id": good_id, "amount": amount})
        res = EntityResponse.from_httpx(response)
        return res.clone(body=Good.model_validate(res.body) if res.body is not None else None)


class HttpOrderAccess(BaseHttpAccess, OrderAccess):
    """
    Orders resource over HTTP.
    - Dates travel as ISO-8601 strings and are parsed into datetimes on the way back.
    - `predicate` / `ascending` are the caller's default sort, used by get_sort_query_param().
    """

    resource_path = "api/orders"

    def __init__(
        self,
        http: httpx.AsyncClient,
        resolve_endpoint: EndpointResolver,
        goods: GoodAccess,
        predicate: str = "id",
        ascending: bool = True,
    ) -> None:
        super().__init__(http, resolve_endpoint)
        self.goods = goods
        self.predicate = predicate
        self.ascending = ascending

    # ---------- CRUD ----------

    async def create(self, order: NewOrder) -> EntityResponse[Order]:
        copy = convert_date_from_client(order)
        response = await self._send("POST", self._url(), json=copy)
        return self._convert_response_from_server(response)

    async def update(self, order: Order) -> EntityResponse[Order]:
        copy = convert_date_from_client(order)
        response = await self._send("PUT", self._url(self.get_order_identifier(order)), json=copy)
        return self._convert_response_from_server(response)

    async def partial_update(self, order: PartialUpdateOrder) -> EntityResponse[Order]:
        copy = convert_date_from_client(order)
        response = await self._send("PATCH", self._url(self.get_order_identifier(order)), json=copy)
        return self._convert_response_from_server(response)

    async def find(self, id: str) -> EntityResponse[Order]:
        response = await self._send("GET", self._url(id))
        return self._convert_response_from_server(response)

    async def query(
        self, req: Union[RequestOptions, Mapping[str, Any], None] = None
    ) -> EntityResponse[List[Order]]:
        options = create_request_option(req)
        response = await self._send("GET", self._url(), params=options)
        return self._convert_response_array_from_server(response)

    async def delete(self, id: str) -> EntityResponse[Any]:
        response = await self._send("DELETE", self._url(id))
        return EntityResponse.from_httpx(response, body=raw_body(response))

    # ---------- collection helpers ----------

    def get_order_identifier(self, order: Any) -> Optional[str]:
        if isinstance(order, Mapping):
            return order.get("id")
        return getattr(order, "id", None)

    def compare_order(self, o1: Any, o2: Any) -> bool:
        if o1 is not None and o2 is not None:
            return self.get_order_identifier(o1) == self.get_order_identifier(o2)
        return o1 is None and o2 is None

    def add_order_to_collection_if_missing(
        self, order_collection: List[OrderT], *orders_to_check: Optional[OrderT]
    ) -> List[OrderT]:
        orders = [order for order in orders_to_check if order is not None]
        if not orders:
            return order_collection

        seen = [self.get_order_identifier(item) for item in order_collection]
        orders_to_add = []
        for order in orders:
            identifier = self.get_order_identifier(order)
            if identifier in seen:
                continue
            seen.append(identifier)
            orders_to_add.append(order)

        if not orders_to_add:
            return order_collection
        return [*orders_to_add, *order_collection]

    def get_sort_query_param(self, predicate: Optional[str] = None, ascending: Optional[bool] = None) -> List[str]:
        predicate = self.predicate if predicate is None else predicate
        ascending = self.ascending if ascending is None else ascending
        if predicate == "":
            return []
        return [f"{predicate},{ASC if ascending else DESC}"]

    # ---------- inventory ----------

    async def decrement_goods_count_on_ship(
        self, goods_in_order: Sequence[GoodInOrder]
    ) -> List[EntityResponse[Good]]:
        # All remainders are computed before any request is issued
        updates = [(line.good_id, line.remaining_amount()) for line in goods_in_order]
        self.logger.info(f"Decrementing stock for {len(updates)} good(s) on ship")
        # gather() propagates the first failure; sibling requests keep running and are not reported
        return list(await asyncio.gather(
            *(self.goods.update_amount_by_good_id(good_id, amount) for good_id, amount in updates)
        ))

    # ---------- response conversion ----------

    def _convert_response_from_server(self, response: httpx.Response) -> EntityResponse[Order]:
        res = EntityResponse.from_httpx(response)
        return res.clone(body=convert_date_from_server(res.body) if res.body else None)

    def _convert_response_array_from_server(self, response: httpx.Response) -> EntityResponse[List[Order]]:
        res = EntityResponse.from_httpx(response)
        if res.body is None:
            return res.clone(body=None)
        return res.clone(body=[convert_date_from_server(item) for item in res.body])
