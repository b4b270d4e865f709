#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
订单和即时动作语义检查测试
"""

from vda5050_types import v1_1
from vda5050_types.v2_0 import InstantActionsMessage, OrderMessage
from vda5050_types.validation import instant_actions_violations, order_violations


def _action(action_id, *keys):
    return {
        "actionType": "pick",
        "actionId": action_id,
        "blockingType": "NONE",
        "actionParameters": [{"key": key, "value": 1} for key in keys]
    }


def test_valid_order(order_payload):
    assert order_violations(OrderMessage.from_dict(order_payload)) == []


def test_edge_endpoint_not_in_order(order_payload):
    order_payload["edges"][0]["endNodeId"] = "B"

    violations = order_violations(OrderMessage.from_dict(order_payload))

    assert any("B" in violation and "endNodeId" in violation for violation in violations)


def test_edge_start_must_be_previous_node(order_payload):
    order_payload["nodes"].insert(1, {"nodeId": "X", "sequenceId": 4, "released": True, "actions": []})
    order_payload["edges"].append({
        "edgeId": "e2", "sequenceId": 3, "released": True,
        "startNodeId": "A", "endNodeId": "X", "actions": []
    })

    violations = order_violations(OrderMessage.from_dict(order_payload))

    assert any("e2" in violation and "startNodeId" in violation for violation in violations)
    # nodes中X(4)排在C(2)之前
    assert any(violation.startswith("nodes未按sequenceId升序排列") for violation in violations)


def test_order_must_alternate_and_end_with_node(order_payload):
    order_payload["nodes"].pop()

    violations = order_violations(OrderMessage.from_dict(order_payload))

    assert "订单必须以节点结束" in violations


def test_duplicate_sequence_id(order_payload):
    order_payload["edges"][0]["sequenceId"] = 0

    assert order_violations(OrderMessage.from_dict(order_payload))


def test_empty_order(order_payload):
    order_payload["nodes"] = []
    order_payload["edges"] = []

    assert order_violations(OrderMessage.from_dict(order_payload)) == ["订单至少需要包含一个节点"]


def test_action_ids_unique_across_order(order_payload):
    order_payload["edges"][0]["actions"] = [_action("a1")]

    violations = order_violations(OrderMessage.from_dict(order_payload))

    assert violations == ["actionId a1 重复"]


def test_parameter_keys_unique(order_payload):
    order_payload["nodes"][1]["actions"] = [_action("a2", "height", "height")]

    violations = order_violations(OrderMessage.from_dict(order_payload))

    assert violations == ["动作 a2 的参数键 height 重复"]


def test_released_elements_form_prefix(order_payload):
    order_payload["edges"][0]["released"] = False

    violations = order_violations(OrderMessage.from_dict(order_payload))

    assert violations == ["sequenceId 2 已发布，但位于未发布元素之后"]


def test_single_node_order(order_payload):
    order_payload["nodes"] = order_payload["nodes"][:1]
    order_payload["edges"] = []

    assert OrderMessage.from_dict(order_payload).validate() is True


def test_works_on_v1_orders(order_payload):
    order_payload["edges"][0]["endNodeId"] = "B"

    assert v1_1.OrderMessage.from_dict(order_payload).validate() is False


def test_instant_actions(header):
    message = InstantActionsMessage.from_dict(dict(header, instantActions=[
        _action("i1", "a", "b"),
        _action("i2", "a", "a"),
        _action("i1")
    ]))

    assert instant_actions_violations(message) == [
        "动作 i2 的参数键 a 重复",
        "actionId i1 重复"
    ]
