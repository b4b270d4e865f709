#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
即时动作消息和即时动作构建器测试
"""

import json
from datetime import datetime, timezone

import pytest

from vda5050_types import MapValue, NumberValue, SchemaMismatch, TextValue
from vda5050_types.v2_0 import (
    BlockingType,
    InstantActionBuilder,
    InstantActionsMessage,
    InstantActionType
)


def test_map_parameter_round_trip(header):
    payload = dict(header, instantActions=[
        {
            "actionType": "initPosition",
            "actionId": "ia-1",
            "blockingType": "NONE",
            "actionParameters": [{"key": "coords", "value": {"x": 1.5, "y": -2.0}}]
        }
    ])

    message = InstantActionsMessage.from_json(json.dumps(payload))
    value = message.instant_actions[0].get_parameter("coords")

    assert isinstance(value, MapValue)
    assert value["x"] == NumberValue(1.5)
    assert json.loads(message.to_json()) == payload
    assert InstantActionsMessage.from_json(message.to_json()) == message


def test_builder_generates_ids():
    first = InstantActionBuilder.create_cancel_order()
    second = InstantActionBuilder.create_cancel_order()

    assert first.action_type == "cancelOrder"
    assert first.blocking_type is BlockingType.NONE
    assert first.action_id and first.action_id != second.action_id
    assert InstantActionBuilder.create_state_request("req-1").action_id == "req-1"


@pytest.mark.parametrize("factory, action_type, blocking_type", [
    (InstantActionBuilder.create_start_pause, InstantActionType.START_PAUSE, BlockingType.HARD),
    (InstantActionBuilder.create_stop_pause, InstantActionType.STOP_PAUSE, BlockingType.HARD),
    (InstantActionBuilder.create_state_request, InstantActionType.STATE_REQUEST, BlockingType.NONE),
    (InstantActionBuilder.create_factsheet_request, InstantActionType.FACTSHEET_REQUEST, BlockingType.NONE),
    (InstantActionBuilder.create_start_charging, InstantActionType.START_CHARGING, BlockingType.HARD),
    (InstantActionBuilder.create_stop_charging, InstantActionType.STOP_CHARGING, BlockingType.HARD),
])
def test_builder_action_types(factory, action_type, blocking_type):
    action = factory("x")

    assert action.action_type == action_type.value
    assert action.blocking_type is blocking_type
    assert action.action_parameters == ()


def test_init_position_parameters():
    action = InstantActionBuilder.create_init_position(1.0, 2.0, 0.5, "map-1", "A", action_id="init-1")

    assert [param.key for param in action.action_parameters] == ["x", "y", "theta", "mapId", "lastNodeId"]
    assert action.get_parameter("mapId") == TextValue("map-1")
    assert action.blocking_type is BlockingType.HARD


def test_log_report_reason():
    action = InstantActionBuilder.create_log_report("battery drop")

    assert action.action_type == "logReport"
    assert action.get_parameter("reason") == TextValue("battery drop")


def _message(*actions):
    return InstantActionsMessage(
        header_id=7,
        timestamp=datetime(2024, 5, 1, tzinfo=timezone.utc),
        version="2.0.0",
        manufacturer="SEER",
        serial_number="VWED-0010",
        instant_actions=list(actions)
    )


def test_lookup_helpers():
    message = _message(
        InstantActionBuilder.create_start_pause("p1"),
        InstantActionBuilder.create_log_report("r", action_id="l1"),
        InstantActionBuilder.create_log_report("r", action_id="l2")
    )

    assert message.subtopic == "/instantActions"
    assert message.get_action_by_id("l1").action_type == "logReport"
    assert message.get_action_by_id("zzz") is None
    assert [a.action_id for a in message.get_actions_by_type("logReport")] == ["l1", "l2"]
    assert message.has_action_type("startPause") is True
    assert message.has_action_type("cancelOrder") is False
    assert message.validate() is True


def test_duplicate_action_ids_fail_validation():
    message = _message(
        InstantActionBuilder.create_start_pause("same"),
        InstantActionBuilder.create_stop_pause("same")
    )

    assert message.validate() is False


def test_empty_action_list_round_trip(header):
    payload = dict(header, instantActions=[])

    message = InstantActionsMessage.from_dict(payload)

    assert message.instant_actions == ()
    assert message.get_message_dict() == payload


def test_deeply_nested_parameter_value(header):
    depth = 700
    payload = json.dumps(dict(header, instantActions=[
        {
            "actionType": "initPosition",
            "actionId": "ia-deep",
            "blockingType": "NONE",
            "actionParameters": [{"key": "coords", "value": "DEEP"}]
        }
    ])).replace('"DEEP"', "[" * depth + "0" + "]" * depth)

    with pytest.raises(SchemaMismatch) as exc_info:
        InstantActionsMessage.from_json(payload)
    assert exc_info.value.path == "$"
