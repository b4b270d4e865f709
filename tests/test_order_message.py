#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 2.0订单消息测试
"""

import dataclasses
import json
import logging
from datetime import datetime, timezone

import pytest

from vda5050_types import (
    Envelope,
    MissingField,
    SchemaMismatch,
    TextValue,
    TypeMismatch,
    UnknownVariant
)
from vda5050_types.v2_0 import (
    Action,
    ActionParameter,
    BlockingType,
    Edge,
    Node,
    OrderMessage,
    OrientationType
)


def test_round_trip(order_payload):
    order = OrderMessage.from_json(json.dumps(order_payload))

    assert order.order_id == "order-1"
    assert order.timestamp == datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    assert order.nodes[0].actions[0].blocking_type is BlockingType.HARD
    assert order.nodes[0].actions[0].get_parameter("stationType") == TextValue("floor")
    assert order.get_message_dict() == order_payload
    assert json.loads(order.to_json()) == order_payload


def test_envelope_fields(order_payload):
    order = OrderMessage.from_dict(order_payload)

    assert order.subtopic == "/order"
    assert order.envelope == Envelope(
        header_id=1,
        timestamp=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        version="2.0.0",
        manufacturer="SEER",
        serial_number="VWED-0010"
    )


def test_missing_order_id(order_payload):
    del order_payload["orderId"]

    with pytest.raises(MissingField) as exc_info:
        OrderMessage.from_dict(order_payload)
    assert exc_info.value.path == "orderId"


def test_null_in_required_field_is_type_mismatch(order_payload):
    order_payload["orderId"] = None

    with pytest.raises(TypeMismatch):
        OrderMessage.from_dict(order_payload)


def test_null_in_optional_field_is_absent(order_payload):
    order_payload["zoneSetId"] = None

    order = OrderMessage.from_dict(order_payload)

    assert order.zone_set_id is None
    assert "zoneSetId" not in order.get_message_dict()


def test_unknown_blocking_type(order_payload):
    order_payload["nodes"][0]["actions"][0]["blockingType"] = "MAYBE"

    with pytest.raises(UnknownVariant) as exc_info:
        OrderMessage.from_dict(order_payload)
    assert exc_info.value.path == "nodes[0].actions[0].blockingType"
    assert exc_info.value.enum_name == "BlockingType"
    assert exc_info.value.token == "MAYBE"


def test_nested_missing_field_path(order_payload):
    del order_payload["nodes"][0]["actions"][0]["actionId"]

    with pytest.raises(MissingField) as exc_info:
        OrderMessage.from_dict(order_payload)
    assert exc_info.value.path == "nodes[0].actions[0].actionId"


def test_action_parameters_are_required(order_payload):
    del order_payload["nodes"][0]["actions"][0]["actionParameters"]

    with pytest.raises(MissingField):
        OrderMessage.from_dict(order_payload)


def test_edge_to_unknown_node_still_decodes(order_payload):
    order_payload["edges"][0]["endNodeId"] = "B"

    order = OrderMessage.from_dict(order_payload)

    assert order.edges[0].end_node_id == "B"
    assert order.validate() is False


def test_nodes_are_not_resorted(order_payload):
    order_payload["nodes"].reverse()

    order = OrderMessage.from_dict(order_payload)

    assert [node.node_id for node in order.nodes] == ["C", "A"]


@pytest.mark.parametrize("field, value", [
    ("headerId", True),
    ("headerId", -1),
    ("headerId", 1.5),
    ("orderUpdateId", "0"),
    ("timestamp", "2024-05-01T12:30:00"),
    ("timestamp", "yesterday"),
    ("nodes", {"nodeId": "A"}),
])
def test_wrong_wire_type(order_payload, field, value):
    order_payload[field] = value

    with pytest.raises(TypeMismatch) as exc_info:
        OrderMessage.from_dict(order_payload)
    assert exc_info.value.path == field


def test_bool_in_number_field(order_payload):
    order_payload["edges"][0]["maxSpeed"] = True

    with pytest.raises(TypeMismatch) as exc_info:
        OrderMessage.from_dict(order_payload)
    assert exc_info.value.path == "edges[0].maxSpeed"


def test_integer_too_large_for_float(order_payload):
    order_payload["edges"][0]["maxSpeed"] = 10 ** 400

    with pytest.raises(TypeMismatch) as exc_info:
        OrderMessage.from_json(json.dumps(order_payload))
    assert exc_info.value.path == "edges[0].maxSpeed"
    assert exc_info.value.expected == "finite number"


def test_timestamp_with_offset_is_normalised_to_utc(order_payload):
    order_payload["timestamp"] = "2024-05-01T14:30:00.5+02:00"

    order = OrderMessage.from_dict(order_payload)

    assert order.get_message_dict()["timestamp"] == "2024-05-01T12:30:00.500000Z"


def test_malformed_json(caplog):
    caplog.set_level(logging.DEBUG, logger="vda5050_types.wire")

    with pytest.raises(SchemaMismatch) as exc_info:
        OrderMessage.from_json('{"headerId": 1,')
    assert exc_info.value.path == "$"
    assert caplog.records


def test_nan_literal_is_rejected(order_payload):
    payload = json.dumps(order_payload).replace('"orderUpdateId": ', '"orderUpdateId": NaN, "x": ')

    with pytest.raises(SchemaMismatch) as exc_info:
        OrderMessage.from_json(payload)
    assert exc_info.value.path == "$"


def test_payload_must_be_object():
    with pytest.raises(TypeMismatch) as exc_info:
        OrderMessage.from_json("[]")
    assert exc_info.value.path == "$"


def test_edge_optional_fields(order_payload):
    order_payload["edges"][0].update({
        "orientation": 1.57,
        "orientationType": "TANGENTIAL",
        "rotationAllowed": False,
        "trajectory": {
            "degree": 1,
            "knotVector": [0.0, 0.0, 1.0, 1.0],
            "controlPoints": [{"x": 1.0, "y": 2.0}, {"x": 3.0, "y": 2.0, "weight": 1.0}]
        }
    })

    edge = OrderMessage.from_dict(order_payload).edges[0]

    assert edge.orientation_type is OrientationType.TANGENTIAL
    assert edge.trajectory.knot_vector == (0.0, 0.0, 1.0, 1.0)
    assert edge.to_dict() == order_payload["edges"][0]


def test_build_in_code():
    order = OrderMessage(
        header_id=0,
        timestamp=datetime(2024, 5, 1, tzinfo=timezone.utc),
        version="2.0.0",
        manufacturer="SEER",
        serial_number="VWED-0010",
        order_id="order-2",
        order_update_id=0,
        nodes=[
            Node("A", 0, True, actions=[
                Action("drop", "d1", BlockingType.HARD, [ActionParameter("lhd", {"side": "left"})])
            ]),
            Node("B", 2, False)
        ],
        edges=[Edge("e1", 1, False, "A", "B")]
    )

    assert isinstance(order.nodes, tuple)
    assert order.validate() is True
    assert order.get_message_dict()["nodes"][0]["actions"][0] == {
        "actionType": "drop",
        "actionId": "d1",
        "blockingType": "HARD",
        "actionParameters": [{"key": "lhd", "value": {"side": "left"}}]
    }
    assert OrderMessage.from_json(order.to_json()) == order


def test_messages_are_immutable(order_payload):
    order = OrderMessage.from_dict(order_payload)

    with pytest.raises(dataclasses.FrozenInstanceError):
        order.order_id = "other"


def test_naive_timestamp_is_rejected():
    with pytest.raises(ValueError):
        OrderMessage(0, datetime(2024, 5, 1), "2.0.0", "SEER", "VWED-0010", "o", 0, (), ())


def test_action_field_order():
    action = Action("pick", "a1", BlockingType.NONE, action_description="装货")

    assert list(action.to_dict()) == [
        "actionType", "actionId", "actionDescription", "blockingType", "actionParameters"
    ]
