#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 2.0规格说明书消息测试
"""

import json

import pytest

from vda5050_types import MapValue, TypeMismatch, UnknownVariant
from vda5050_types.v2_0 import (
    ActionScope,
    AgvKinematic,
    FactsheetMessage,
    NavigationType,
    ValueDataType,
    WheelType
)


@pytest.fixture
def factsheet_payload(header):
    return dict(header, **{
        "typeSpecification": {
            "seriesName": "VWED",
            "seriesDescription": "潜伏顶升AGV",
            "agvKinematic": "DIFF",
            "agvClass": "CARRIER",
            "maxLoadMass": 500.0,
            "localizationTypes": ["NATURAL", "REFLECTOR"],
            "navigationTypes": ["AUTONOMOUS", "VIRTUAL_LINE_GUIDED"]
        },
        "physicalParameters": {
            "speedMin": 0.01,
            "speedMax": 2.0,
            "accelerationMax": 1.0,
            "decelerationMax": 1.5,
            "heightMin": 0.3,
            "heightMax": 0.4,
            "width": 0.8,
            "length": 1.2
        },
        "protocolLimits": {
            "maxStringLens": {"msgLen": 10000, "idNumericalOnly": False},
            "maxArrayLens": {"order.nodes": 50, "state.information": 10},
            "timing": {"minOrderInterval": 1.0, "minStateInterval": 0.5, "defaultStateInterval": 30.0}
        },
        "protocolFeatures": {
            "optionalParameters": [
                {"parameter": "order.nodes.nodePosition.allowedDeviationTheta", "support": "SUPPORTED"}
            ],
            "agvActions": [
                {
                    "actionType": "pick",
                    "actionScopes": ["NODE", "INSTANT"],
                    "actionParameters": [
                        {"key": "stationType", "valueDataType": "STRING", "isOptional": True}
                    ],
                    "resultDescription": "loadId"
                }
            ]
        },
        "agvGeometry": {
            "wheelDefinitions": [
                {
                    "type": "DRIVE",
                    "isActiveDriven": True,
                    "isActiveSteered": False,
                    "position": {"x": 0.0, "y": 0.3},
                    "diameter": 0.2,
                    "width": 0.05
                }
            ],
            "envelopes2d": [
                {"set": "default", "polygonPoints": [{"x": 0.6, "y": 0.4}, {"x": -0.6, "y": 0.4}, {"x": 0.0, "y": -0.4}]}
            ],
            "envelopes3d": [
                {"set": "default", "format": "DXF", "url": "https://example.com/agv.dxf"}
            ]
        },
        "loadSpecification": {
            "loadPositions": ["front"],
            "loadSets": [
                {
                    "setName": "EPAL",
                    "loadType": "EPAL",
                    "loadDimensions": {"length": 1.2, "width": 0.8, "height": 1.0},
                    "maxWeight": 500.0,
                    "pickTime": 4.0
                }
            ]
        },
        "localizationParameters": {"reflectorCount": 12, "mode": "auto"}
    })


def test_round_trip(factsheet_payload):
    factsheet = FactsheetMessage.from_json(json.dumps(factsheet_payload, ensure_ascii=False))

    assert factsheet.subtopic == "/factsheet"
    assert factsheet.type_specification.agv_kinematic is AgvKinematic.DIFF
    assert factsheet.type_specification.navigation_types == (
        NavigationType.AUTONOMOUS, NavigationType.VIRTUAL_LINE_GUIDED
    )
    assert factsheet.protocol_limits.max_array_lens.order_nodes == 50
    assert factsheet.protocol_limits.max_array_lens.order_edges is None
    assert factsheet.protocol_features.agv_actions[0].action_scopes == (ActionScope.NODE, ActionScope.INSTANT)
    assert factsheet.protocol_features.agv_actions[0].action_parameters[0].value_data_type is ValueDataType.STRING
    assert factsheet.agv_geometry.wheel_definitions[0].wheel_type is WheelType.DRIVE
    assert isinstance(factsheet.localization_parameters, MapValue)
    assert factsheet.get_message_dict() == factsheet_payload


def test_header_only_factsheet(header):
    factsheet = FactsheetMessage.from_dict(header)

    assert factsheet.type_specification is None
    assert factsheet.get_message_dict() == header


def test_supports_action(factsheet_payload):
    features = FactsheetMessage.from_dict(factsheet_payload).protocol_features

    assert features.supports_action("pick") is True
    assert features.supports_action("drop") is False


def test_unknown_kinematic(factsheet_payload):
    factsheet_payload["typeSpecification"]["agvKinematic"] = "TRIKE"

    with pytest.raises(UnknownVariant) as exc_info:
        FactsheetMessage.from_dict(factsheet_payload)
    assert exc_info.value.path == "typeSpecification.agvKinematic"


def test_unknown_navigation_type_reports_index(factsheet_payload):
    factsheet_payload["typeSpecification"]["navigationTypes"].append("MAGNETIC")

    with pytest.raises(UnknownVariant) as exc_info:
        FactsheetMessage.from_dict(factsheet_payload)
    assert exc_info.value.path == "typeSpecification.navigationTypes[2]"


def test_localization_parameters_must_be_object(factsheet_payload):
    factsheet_payload["localizationParameters"] = [1, 2]

    with pytest.raises(TypeMismatch):
        FactsheetMessage.from_dict(factsheet_payload)
