from .request_options import (
    ASC,
    DESC,
    RequestOptions,
    create_request_option,
)

from .orders import (
    NewOrder,
    Order,
    PartialUpdateOrder,
    RestOrder,
    AnyOrder,
    convert_date_from_client,
    convert_date_from_server,
    format_timestamp,
    parse_timestamp,
)
from .goods import Good, GoodInOrder
from .response import EntityResponse, raw_body

__all__ = [
    # Query options
    "ASC",
    "DESC",
    "RequestOptions",
    "create_request_option",
    # Order variants
    "NewOrder",
    "Order",
    "PartialUpdateOrder",
    "RestOrder",
    "AnyOrder",
    # Date conversion
    "convert_date_from_client",
    "convert_date_from_server",
    "format_timestamp",
    "parse_timestamp",
    # Goods
    "Good",
    "GoodInOrder",
    # Response envelope
    "EntityResponse",
    "raw_body",
]
