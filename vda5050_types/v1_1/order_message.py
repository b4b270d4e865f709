#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 1.1协议订单消息类定义
1.1的边没有orientationType字段

解码时节点和边的顺序按收到的原样保留，不重新排序；
边的起止节点是否存在、sequenceId是否交替递增由使用方检查（见validation模块）
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..validation import order_violations
from ..wire import FieldReader, add_optional, freeze
from .base_message import VDA5050BaseMessage, Action, NodePosition, Trajectory


@dataclass(frozen=True)
class Node:
    """节点类"""
    node_id: str
    sequence_id: int
    released: bool
    actions: Tuple[Action, ...] = ()
    node_description: Optional[str] = None
    node_position: Optional[NodePosition] = None

    def __post_init__(self):
        freeze(self, "actions")

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "nodeId": self.node_id,
            "sequenceId": self.sequence_id
        }
        add_optional(result, {"nodeDescription": self.node_description})
        result["released"] = self.released
        if self.node_position is not None:
            result["nodePosition"] = self.node_position.to_dict()
        result["actions"] = [action.to_dict() for action in self.actions]
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            node_id=reader.text("nodeId"),
            sequence_id=reader.uint("sequenceId"),
            released=reader.boolean("released"),
            actions=reader.sequence("actions", Action),
            node_description=reader.opt_text("nodeDescription"),
            node_position=reader.opt_nested("nodePosition", NodePosition)
        )


@dataclass(frozen=True)
class Edge:
    """边类"""
    edge_id: str
    sequence_id: int
    released: bool
    start_node_id: str
    end_node_id: str
    actions: Tuple[Action, ...] = ()
    edge_description: Optional[str] = None
    max_speed: Optional[float] = None
    max_height: Optional[float] = None
    min_height: Optional[float] = None
    orientation: Optional[float] = None
    direction: Optional[str] = None
    rotation_allowed: Optional[bool] = None
    max_rotation_speed: Optional[float] = None
    length: Optional[float] = None
    trajectory: Optional[Trajectory] = None

    def __post_init__(self):
        freeze(self, "actions")

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "edgeId": self.edge_id,
            "sequenceId": self.sequence_id
        }
        add_optional(result, {"edgeDescription": self.edge_description})
        result.update({
            "released": self.released,
            "startNodeId": self.start_node_id,
            "endNodeId": self.end_node_id
        })

        # 添加可选字段
        add_optional(result, {
            "maxSpeed": self.max_speed,
            "maxHeight": self.max_height,
            "minHeight": self.min_height,
            "orientation": self.orientation,
            "direction": self.direction,
            "rotationAllowed": self.rotation_allowed,
            "maxRotationSpeed": self.max_rotation_speed,
            "length": self.length,
            "trajectory": self.trajectory.to_dict() if self.trajectory else None
        })

        result["actions"] = [action.to_dict() for action in self.actions]
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            edge_id=reader.text("edgeId"),
            sequence_id=reader.uint("sequenceId"),
            released=reader.boolean("released"),
            start_node_id=reader.text("startNodeId"),
            end_node_id=reader.text("endNodeId"),
            actions=reader.sequence("actions", Action),
            edge_description=reader.opt_text("edgeDescription"),
            max_speed=reader.opt_number("maxSpeed"),
            max_height=reader.opt_number("maxHeight"),
            min_height=reader.opt_number("minHeight"),
            orientation=reader.opt_number("orientation"),
            direction=reader.opt_text("direction"),
            rotation_allowed=reader.opt_boolean("rotationAllowed"),
            max_rotation_speed=reader.opt_number("maxRotationSpeed"),
            length=reader.opt_number("length"),
            trajectory=reader.opt_nested("trajectory", Trajectory)
        )


@dataclass(frozen=True)
class OrderMessage(VDA5050BaseMessage):
    """VDA5050订单消息类"""
    order_id: str
    order_update_id: int
    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]
    zone_set_id: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        freeze(self, "nodes", "edges")

    @property
    def subtopic(self) -> str:
        return "/order"

    def get_message_dict(self) -> Dict[str, Any]:
        result = self.get_base_dict()
        result.update({
            "orderId": self.order_id,
            "orderUpdateId": self.order_update_id
        })
        add_optional(result, {"zoneSetId": self.zone_set_id})
        result.update({
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges]
        })
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            **cls.read_envelope(reader),
            order_id=reader.text("orderId"),
            order_update_id=reader.uint("orderUpdateId"),
            nodes=reader.sequence("nodes", Node),
            edges=reader.sequence("edges", Edge),
            zone_set_id=reader.opt_text("zoneSetId")
        )

    def validate(self) -> bool:
        """验证订单图结构（sequenceId交替递增、边端点引用、actionId唯一等）"""
        return not order_violations(self)
