from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field

from .orders import format_timestamp

ASC = "asc"
DESC = "desc"


class RequestOptions(BaseModel):
    """Query-string options for list requests."""
    page: Optional[int] = Field(default=None, description="Zero-based page index")
    size: Optional[int] = Field(default=None, description="Page size")
    sort: List[str] = Field(default_factory=list, description="Sort directives, e.g. 'id,asc'")
    filters: Dict[str, Any] = Field(default_factory=dict, description="Additional filter keys forwarded verbatim")

    @classmethod
    def from_mapping(cls, req: Mapping[str, Any]) -> "RequestOptions":
        """Split a loose option mapping into the recognized fields and filters."""
        known = {key: req[key] for key in ("page", "size", "sort") if key in req}
        sort = known.get("sort")
        if isinstance(sort, str):
            known["sort"] = [sort]
        elif sort is None:
            known.pop("sort", None)
        filters = {key: value for key, value in req.items() if key not in ("page", "size", "sort")}
        return cls(**known, filters=filters)

    def to_params(self) -> List[Tuple[str, str]]:
        """Query parameters as (key, value) pairs; list values repeat the key and sort goes last."""
        params: List[Tuple[str, str]] = []
        items = [("page", self.page), ("size", self.size), *self.filters.items()]
        for key, value in items:
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple)) else [value]
            for item in values:
                if item is None or item == "":
                    continue
                params.append((key, _param_value(item)))
        params.extend(("sort", directive) for directive in self.sort)
        return params


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_timestamp(value)
    return str(value)


def create_request_option(req: Union[RequestOptions, Mapping[str, Any], None] = None) -> List[Tuple[str, str]]:
    if req is None:
        return []
    if not isinstance(req, RequestOptions):
        req = RequestOptions.from_mapping(req)
    return req.to_params()
