#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 2.0协议状态消息类定义
包含AGV状态消息的完整结构和功能
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..wire import FieldReader, add_optional, freeze
from .base_message import (
    VDA5050BaseMessage,
    AgvPosition,
    BoundingBoxReference,
    LoadDimensions,
    NodePosition,
    Trajectory,
    Velocity
)
from .enums import ActionStatus, ErrorLevel, EStop, InfoLevel, OperatingMode


@dataclass(frozen=True)
class NodeState:
    """节点状态类"""
    node_id: str
    sequence_id: int
    released: bool
    node_description: Optional[str] = None
    node_position: Optional[NodePosition] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "nodeId": self.node_id,
            "sequenceId": self.sequence_id
        }
        add_optional(result, {
            "nodeDescription": self.node_description,
            "nodePosition": self.node_position.to_dict() if self.node_position else None
        })
        result["released"] = self.released
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            node_id=reader.text("nodeId"),
            sequence_id=reader.uint("sequenceId"),
            released=reader.boolean("released"),
            node_description=reader.opt_text("nodeDescription"),
            node_position=reader.opt_nested("nodePosition", NodePosition)
        )


@dataclass(frozen=True)
class EdgeState:
    """边状态类"""
    edge_id: str
    sequence_id: int
    released: bool
    edge_description: Optional[str] = None
    trajectory: Optional[Trajectory] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "edgeId": self.edge_id,
            "sequenceId": self.sequence_id
        }
        add_optional(result, {"edgeDescription": self.edge_description})
        result["released"] = self.released
        if self.trajectory is not None:
            result["trajectory"] = self.trajectory.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            edge_id=reader.text("edgeId"),
            sequence_id=reader.uint("sequenceId"),
            released=reader.boolean("released"),
            edge_description=reader.opt_text("edgeDescription"),
            trajectory=reader.opt_nested("trajectory", Trajectory)
        )


@dataclass(frozen=True)
class ActionState:
    """动作状态类"""
    action_id: str
    action_status: ActionStatus
    action_type: Optional[str] = None
    action_description: Optional[str] = None
    result_description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"actionId": self.action_id}
        add_optional(result, {
            "actionType": self.action_type,
            "actionDescription": self.action_description
        })
        result["actionStatus"] = self.action_status.value
        return add_optional(result, {"resultDescription": self.result_description})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            action_id=reader.text("actionId"),
            action_status=reader.enum("actionStatus", ActionStatus),
            action_type=reader.opt_text("actionType"),
            action_description=reader.opt_text("actionDescription"),
            result_description=reader.opt_text("resultDescription")
        )


@dataclass(frozen=True)
class BatteryState:
    """电池状态类"""
    battery_charge: float                     # 0.0 to 100.0
    charging: bool
    battery_voltage: Optional[float] = None
    battery_health: Optional[int] = None      # 0 to 100
    reach: Optional[float] = None             # 剩余可达距离（米）

    def to_dict(self) -> Dict[str, Any]:
        result = {"batteryCharge": self.battery_charge}
        add_optional(result, {
            "batteryVoltage": self.battery_voltage,
            "batteryHealth": self.battery_health
        })
        result["charging"] = self.charging
        return add_optional(result, {"reach": self.reach})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            battery_charge=reader.number("batteryCharge"),
            charging=reader.boolean("charging"),
            battery_voltage=reader.opt_number("batteryVoltage"),
            battery_health=reader.opt_uint("batteryHealth"),
            reach=reader.opt_number("reach")
        )


@dataclass(frozen=True)
class ErrorReference:
    """错误来源引用，例如 headerId、orderId、actionId"""
    reference_key: str
    reference_value: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "referenceKey": self.reference_key,
            "referenceValue": self.reference_value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(reader.text("referenceKey"), reader.text("referenceValue"))


@dataclass(frozen=True)
class Error:
    """错误类"""
    error_type: str
    error_level: ErrorLevel
    error_references: Tuple[ErrorReference, ...] = ()
    error_description: Optional[str] = None

    def __post_init__(self):
        freeze(self, "error_references")

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "errorType": self.error_type,
            "errorReferences": [ref.to_dict() for ref in self.error_references]
        }
        add_optional(result, {"errorDescription": self.error_description})
        result["errorLevel"] = self.error_level.value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            error_type=reader.text("errorType"),
            error_level=reader.enum("errorLevel", ErrorLevel),
            error_references=reader.sequence("errorReferences", ErrorReference),
            error_description=reader.opt_text("errorDescription")
        )


@dataclass(frozen=True)
class InfoReference:
    """信息来源引用"""
    reference_key: str
    reference_value: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "referenceKey": self.reference_key,
            "referenceValue": self.reference_value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(reader.text("referenceKey"), reader.text("referenceValue"))


@dataclass(frozen=True)
class Information:
    """信息类，只用于可视化和调试"""
    info_type: str
    info_level: InfoLevel
    info_references: Tuple[InfoReference, ...] = ()
    info_description: Optional[str] = None

    def __post_init__(self):
        freeze(self, "info_references")

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "infoType": self.info_type,
            "infoReferences": [ref.to_dict() for ref in self.info_references]
        }
        add_optional(result, {"infoDescription": self.info_description})
        result["infoLevel"] = self.info_level.value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            info_type=reader.text("infoType"),
            info_level=reader.enum("infoLevel", InfoLevel),
            info_references=reader.sequence("infoReferences", InfoReference),
            info_description=reader.opt_text("infoDescription")
        )


@dataclass(frozen=True)
class Load:
    """AGV当前承载的货物"""
    load_id: Optional[str] = None
    load_type: Optional[str] = None
    load_position: Optional[str] = None
    bounding_box_reference: Optional[BoundingBoxReference] = None
    load_dimensions: Optional[LoadDimensions] = None
    weight: Optional[float] = None  # kg

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({}, {
            "loadId": self.load_id,
            "loadType": self.load_type,
            "loadPosition": self.load_position,
            "boundingBoxReference": self.bounding_box_reference.to_dict() if self.bounding_box_reference else None,
            "loadDimensions": self.load_dimensions.to_dict() if self.load_dimensions else None,
            "weight": self.weight
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            load_id=reader.opt_text("loadId"),
            load_type=reader.opt_text("loadType"),
            load_position=reader.opt_text("loadPosition"),
            bounding_box_reference=reader.opt_nested("boundingBoxReference", BoundingBoxReference),
            load_dimensions=reader.opt_nested("loadDimensions", LoadDimensions),
            weight=reader.opt_number("weight")
        )


@dataclass(frozen=True)
class SafetyState:
    """安全状态类"""
    e_stop: EStop
    field_violation: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eStop": self.e_stop.value,
            "fieldViolation": self.field_violation
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            e_stop=reader.enum("eStop", EStop),
            field_violation=reader.boolean("fieldViolation")
        )


@dataclass(frozen=True)
class StateMessage(VDA5050BaseMessage):
    """VDA5050状态消息类

    loads为None表示AGV无法判断载荷状态（线上不发送该字段），
    空元组表示AGV可以判断且当前没有载荷
    """
    order_id: str
    order_update_id: int
    last_node_id: str
    last_node_sequence_id: int
    driving: bool
    operating_mode: OperatingMode
    node_states: Tuple[NodeState, ...]
    edge_states: Tuple[EdgeState, ...]
    action_states: Tuple[ActionState, ...]
    battery_state: BatteryState
    errors: Tuple[Error, ...]
    information: Tuple[Information, ...]
    safety_state: SafetyState
    zone_set_id: Optional[str] = None
    paused: Optional[bool] = None
    new_base_request: Optional[bool] = None
    distance_since_last_node: Optional[float] = None
    agv_position: Optional[AgvPosition] = None
    velocity: Optional[Velocity] = None
    loads: Optional[Tuple[Load, ...]] = None

    def __post_init__(self):
        super().__post_init__()
        freeze(self, "node_states", "edge_states", "action_states", "errors", "information", "loads")

    @property
    def subtopic(self) -> str:
        return "/state"

    def get_message_dict(self) -> Dict[str, Any]:
        result = self.get_base_dict()
        result.update({
            "orderId": self.order_id,
            "orderUpdateId": self.order_update_id
        })
        add_optional(result, {"zoneSetId": self.zone_set_id})
        result.update({
            "lastNodeId": self.last_node_id,
            "lastNodeSequenceId": self.last_node_sequence_id,
            "driving": self.driving
        })
        add_optional(result, {
            "paused": self.paused,
            "newBaseRequest": self.new_base_request,
            "distanceSinceLastNode": self.distance_since_last_node
        })
        result.update({
            "operatingMode": self.operating_mode.value,
            "nodeStates": [node_state.to_dict() for node_state in self.node_states],
            "edgeStates": [edge_state.to_dict() for edge_state in self.edge_states]
        })

        # 添加可选字段
        add_optional(result, {
            "agvPosition": self.agv_position.to_dict() if self.agv_position else None,
            "velocity": self.velocity.to_dict() if self.velocity else None,
            "loads": [load.to_dict() for load in self.loads] if self.loads is not None else None
        })

        result.update({
            "actionStates": [action_state.to_dict() for action_state in self.action_states],
            "batteryState": self.battery_state.to_dict(),
            "errors": [error.to_dict() for error in self.errors],
            "information": [info.to_dict() for info in self.information],
            "safetyState": self.safety_state.to_dict()
        })
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            **cls.read_envelope(reader),
            order_id=reader.text("orderId"),
            order_update_id=reader.uint("orderUpdateId"),
            last_node_id=reader.text("lastNodeId"),
            last_node_sequence_id=reader.uint("lastNodeSequenceId"),
            driving=reader.boolean("driving"),
            operating_mode=reader.enum("operatingMode", OperatingMode),
            node_states=reader.sequence("nodeStates", NodeState),
            edge_states=reader.sequence("edgeStates", EdgeState),
            action_states=reader.sequence("actionStates", ActionState),
            battery_state=reader.nested("batteryState", BatteryState),
            errors=reader.sequence("errors", Error),
            information=reader.sequence("information", Information),
            safety_state=reader.nested("safetyState", SafetyState),
            zone_set_id=reader.opt_text("zoneSetId"),
            paused=reader.opt_boolean("paused"),
            new_base_request=reader.opt_boolean("newBaseRequest"),
            distance_since_last_node=reader.opt_number("distanceSinceLastNode"),
            agv_position=reader.opt_nested("agvPosition", AgvPosition),
            velocity=reader.opt_nested("velocity", Velocity),
            loads=reader.opt_sequence("loads", Load)
        )

    def get_action_state(self, action_id: str) -> Optional[ActionState]:
        """根据动作ID获取动作状态"""
        for action_state in self.action_states:
            if action_state.action_id == action_id:
                return action_state
        return None

    def has_fatal_error(self) -> bool:
        """检查是否存在FATAL级别错误"""
        return any(error.error_level is ErrorLevel.FATAL for error in self.errors)
