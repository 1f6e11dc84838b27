from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, Field

T = TypeVar("T")

_NO_BODY: Any = object()


class EntityResponse(BaseModel, Generic[T]):
    """HTTP response envelope: status, headers and the (converted) body."""
    status_code: int = Field(description="HTTP status code")
    headers: Dict[str, str] = Field(default_factory=dict, description="Response headers, lower-cased names")
    body: Optional[T] = Field(default=None, description="Response body")

    @classmethod
    def from_httpx(cls, response: httpx.Response, body: Any = _NO_BODY) -> "EntityResponse[T]":
        """Wrap an httpx response; the JSON body is used unless one is given."""
        if body is _NO_BODY:
            body = response.json() if response.content else None
        return cls(
            status_code=response.status_code,
            headers={key.lower(): value for key, value in response.headers.items()},
            body=body,
        )

    def clone(self, body: Any) -> "EntityResponse[Any]":
        """Same status and headers, different body."""
        return self.model_copy(update={"body": body})

    @property
    def total_count(self) -> Optional[int]:
        """Total number of matching entities reported by a paginated list call."""
        value = self.headers.get("x-total-count")
        return int(value) if value is not None else None


def raw_body(response: httpx.Response) -> Any:
    """Body as sent: decoded JSON for JSON responses, text otherwise, None when empty."""
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if content_type.split(";")[0].strip().endswith("json"):
        return response.json()
    return response.text
