"""Shared test fixtures."""

import pytest

END_TO_END_JSON = (
    b'{"b":"MDEwMTAxMDE=","bb":["MTExMQ==","MTEwMA==","MDAxMQ==","MDAwMA=="],'
    b'"l":[true,false,true],"m":{"n":"42","s":"test"},'
    b'"ns":["42","556","72.99","-14"],"ss":["a","b","c"]}'
)


@pytest.fixture
def all_types_attributes():
    return {
        "ss": {"SS": ["a", "b", "c"]},
        "l": {"L": [{"BOOL": True}, {"BOOL": False}, {"BOOL": True}]},
        "null": {"NULL": True},
        "ns": {"NS": ["42", "556", "72.99", "-14"]},
        "b": {"B": b"01010101"},
        "bb": {"BS": [b"1111", b"1100", b"0011", b"0000"]},
        "m": {"M": {"s": {"S": "test"}, "n": {"N": "42"}}},
    }


def make_record(event_name, new_image=None, old_image=None, event_id="1"):
    dynamodb = {"Keys": {"id": {"S": "k-" + event_id}}}
    if new_image is not None:
        dynamodb["NewImage"] = new_image
    if old_image is not None:
        dynamodb["OldImage"] = old_image
    return {
        "eventID": event_id,
        "eventName": event_name,
        "eventSource": "aws:dynamodb",
        "dynamodb": dynamodb,
    }


@pytest.fixture
def stream_event():
    return {
        "Records": [
            make_record("INSERT", new_image={"id": {"S": "k-1"}, "qty": {"N": "3"}}, event_id="1"),
            make_record(
                "MODIFY",
                new_image={"id": {"S": "k-2"}, "qty": {"N": "4"}},
                old_image={"id": {"S": "k-2"}, "qty": {"N": "2"}},
                event_id="2",
            ),
            make_record("REMOVE", old_image={"id": {"S": "k-3"}, "qty": {"N": "9"}}, event_id="3"),
        ]
    }
