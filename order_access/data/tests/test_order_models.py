from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from order_access.data.models import (
    GoodInOrder,
    NewOrder,
    Order,
    PartialUpdateOrder,
    RestOrder,
    convert_date_from_client,
    convert_date_from_server,
    format_timestamp,
    parse_timestamp,
)

WIRE_DATE = "2023-05-01T00:00:00Z"


def test_wire_date_round_trip():
    """Test a UTC wire date survives server -> client -> server unchanged."""
    order = convert_date_from_server({"id": "1", "date": WIRE_DATE})
    assert order.date == datetime(2023, 5, 1, tzinfo=timezone.utc)
    assert convert_date_from_client(order)["date"] == WIRE_DATE


def test_missing_date_round_trip():
    """Test an absent wire date stays absent, never a default value."""
    order = convert_date_from_server({"id": "1"})
    assert order.date is None
    assert convert_date_from_client(order)["date"] is None


@pytest.mark.parametrize("raw", [None, ""])
def test_empty_wire_date_is_none(raw):
    assert convert_date_from_server({"id": "1", "date": raw}).date is None


def test_format_timestamp_keeps_offset_and_fraction():
    """Test non-UTC offsets and sub-second precision are preserved."""
    value = parse_timestamp("2023-05-01T10:30:15.250000+02:00")
    assert format_timestamp(value) == "2023-05-01T10:30:15.250000+02:00"


def test_millisecond_wire_date_keeps_instant():
    """Test the zero-millisecond wire form reads as the same instant, written without the fraction."""
    order = convert_date_from_server({"id": "1", "date": "2023-05-01T00:00:00.000Z"})
    assert order.date == datetime(2023, 5, 1, tzinfo=timezone.utc)
    assert convert_date_from_client(order)["date"] == WIRE_DATE


def test_format_naive_timestamp():
    assert format_timestamp(datetime(2023, 5, 1, 8, 0)) == "2023-05-01T08:00:00"


def test_malformed_wire_date_raises():
    with pytest.raises(ValueError):
        convert_date_from_server({"id": "1", "date": "not a date"})


def test_extra_fields_copied_through():
    """Test domain fields outside the model are carried both ways."""
    payload = {"id": "7", "date": WIRE_DATE, "status": "NEW", "lines": [{"good_id": "g1", "qty": 2}]}
    order = convert_date_from_server(payload)
    assert order.model_extra["status"] == "NEW"
    assert order.model_extra["lines"] == [{"good_id": "g1", "qty": 2}]
    assert convert_date_from_client(order) == payload


def test_server_payload_accepts_rest_order():
    rest = RestOrder(id="3", date=WIRE_DATE)
    assert convert_date_from_server(rest) == Order(id="3", date=datetime(2023, 5, 1, tzinfo=timezone.utc))


def test_new_order_payload_has_no_identifier():
    payload = convert_date_from_client(NewOrder(status="NEW"))
    assert payload == {"id": None, "date": None, "status": "NEW"}


def test_new_order_rejects_identifier():
    with pytest.raises(ValidationError):
        NewOrder(id="1")


def test_order_requires_identifier():
    with pytest.raises(ValidationError):
        Order(date=None)


def test_partial_update_sends_only_set_fields():
    """Test a patch without a date does not null the date on the backend."""
    payload = convert_date_from_client(PartialUpdateOrder(id="5", status="PAID"))
    assert payload == {"id": "5", "status": "PAID"}


def test_partial_update_formats_date_when_set():
    order = PartialUpdateOrder(id="5", date=datetime(2023, 5, 1, tzinfo=timezone.utc))
    assert convert_date_from_client(order) == {"id": "5", "date": WIRE_DATE}


def test_partial_update_explicit_null_date():
    assert convert_date_from_client(PartialUpdateOrder(id="5", date=None)) == {"id": "5", "date": None}


def test_good_in_order_remaining_amount():
    line = GoodInOrder(good_id="g1", good_amount=10, good_in_order_amount=3)
    assert line.remaining_amount() == 7


def test_good_in_order_missing_amount_raises():
    with pytest.raises(ValueError):
        GoodInOrder(good_id="g1", good_amount=10).remaining_amount()
