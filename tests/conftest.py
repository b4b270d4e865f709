#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试共用的消息载荷
"""

import copy

import pytest

TIMESTAMP = "2024-05-01T12:30:00.000000Z"


def make_header(version: str = "2.0.0", header_id: int = 1):
    return {
        "headerId": header_id,
        "timestamp": TIMESTAMP,
        "version": version,
        "manufacturer": "SEER",
        "serialNumber": "VWED-0010"
    }


@pytest.fixture
def header():
    return make_header()


@pytest.fixture
def order_payload():
    """A(0) -e1-> C(2) 的简单订单，节点A带一个装货动作"""
    payload = make_header()
    payload.update({
        "orderId": "order-1",
        "orderUpdateId": 0,
        "nodes": [
            {
                "nodeId": "A",
                "sequenceId": 0,
                "released": True,
                "nodePosition": {"x": 1.0, "y": 2.0, "theta": 0.0, "mapId": "map-1"},
                "actions": [
                    {
                        "actionType": "pick",
                        "actionId": "a1",
                        "blockingType": "HARD",
                        "actionParameters": [
                            {"key": "stationType", "value": "floor"},
                            {"key": "height", "value": 0.5}
                        ]
                    }
                ]
            },
            {
                "nodeId": "C",
                "sequenceId": 2,
                "released": True,
                "actions": []
            }
        ],
        "edges": [
            {
                "edgeId": "e1",
                "sequenceId": 1,
                "released": True,
                "startNodeId": "A",
                "endNodeId": "C",
                "maxSpeed": 1.5,
                "actions": []
            }
        ]
    })
    return payload


def _state_body():
    return {
        "orderId": "order-1",
        "orderUpdateId": 3,
        "lastNodeId": "A",
        "lastNodeSequenceId": 0,
        "driving": True,
        "operatingMode": "AUTOMATIC",
        "nodeStates": [{"nodeId": "C", "sequenceId": 2, "released": True}],
        "edgeStates": [{"edgeId": "e1", "sequenceId": 1, "released": True}],
        "actionStates": [{"actionId": "a1", "actionType": "pick", "actionStatus": "RUNNING"}],
        "batteryState": {"batteryCharge": 80.5, "charging": False},
        "errors": [
            {
                "errorType": "noRouteFound",
                "errorReferences": [{"referenceKey": "nodeId", "referenceValue": "C"}],
                "errorLevel": "WARNING"
            }
        ],
        "safetyState": {"eStop": "NONE", "fieldViolation": False}
    }


@pytest.fixture
def state_payload():
    """2.0状态消息，信息列表字段名为information"""
    payload = make_header()
    payload.update(_state_body())
    payload["information"] = [
        {"infoType": "battery", "infoReferences": [], "infoLevel": "INFO"}
    ]
    return payload


@pytest.fixture
def state_payload_v1():
    """1.1状态消息，信息列表字段名为informations"""
    payload = make_header("1.1.0")
    payload.update(copy.deepcopy(_state_body()))
    payload["informations"] = [
        {"infoType": "battery", "infoReferences": [], "infoLevel": "DEBUG"}
    ]
    return payload
