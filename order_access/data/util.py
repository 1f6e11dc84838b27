from __future__ import annotations

from typing import Literal

import httpx

from .backends.http_backend import HttpGoodAccess, HttpOrderAccess
from .interface import OrderAccess
from ..config import get_config


def get_order_access(kind: Literal["http"] = "http") -> OrderAccess:
    if kind == "http":
        # Both resources share one connection pool against the configured server
        config = get_config()
        http = httpx.AsyncClient(timeout=config.http_timeout)
        goods = HttpGoodAccess(http, config.get_endpoint_for)
        return HttpOrderAccess(
            http,
            config.get_endpoint_for,
            goods,
            predicate=config.default_sort_predicate,
            ascending=config.default_sort_ascending,
        )
    raise ValueError(f"Unknown order access kind: {kind}")
