#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 1.1.0 协议消息类型

本版本包含五种主题消息：order、state、instantActions、visualization、connection。
1.1没有factsheet主题，边上也没有orientationType，状态消息使用informations字段
"""

from .base_message import (
    PROTOCOL_VERSION,
    VDA5050BaseMessage,
    Action,
    ActionParameter,
    AgvPosition,
    BoundingBoxReference,
    ControlPoint,
    LoadDimensions,
    NodePosition,
    Trajectory,
    Velocity
)
from .enums import (
    ActionStatus,
    BlockingType,
    ConnectionState,
    ErrorLevel,
    EStop,
    InfoLevel,
    OperatingMode
)
from .order_message import OrderMessage, Node, Edge
from .state_message import (
    StateMessage,
    NodeState,
    EdgeState,
    ActionState,
    BatteryState,
    Error,
    ErrorReference,
    Information,
    InfoReference,
    Load,
    SafetyState
)
from .instantActions_message import (
    InstantActionsMessage,
    InstantActionType,
    InstantActionBuilder
)
from .visualization_message import VisualizationMessage
from .connection_message import ConnectionMessage

__all__ = [
    "PROTOCOL_VERSION",
    "VDA5050BaseMessage",
    "Action",
    "ActionParameter",
    "AgvPosition",
    "BoundingBoxReference",
    "ControlPoint",
    "LoadDimensions",
    "NodePosition",
    "Trajectory",
    "Velocity",
    "ActionStatus",
    "BlockingType",
    "ConnectionState",
    "ErrorLevel",
    "EStop",
    "InfoLevel",
    "OperatingMode",
    "OrderMessage",
    "Node",
    "Edge",
    "StateMessage",
    "NodeState",
    "EdgeState",
    "ActionState",
    "BatteryState",
    "Error",
    "ErrorReference",
    "Information",
    "InfoReference",
    "Load",
    "SafetyState",
    "InstantActionsMessage",
    "InstantActionType",
    "InstantActionBuilder",
    "VisualizationMessage",
    "ConnectionMessage",
    "MESSAGE_TYPES",
    "get_message_class"
]

# 主题名 -> 消息类
MESSAGE_TYPES = {
    "order": OrderMessage,
    "state": StateMessage,
    "instantActions": InstantActionsMessage,
    "visualization": VisualizationMessage,
    "connection": ConnectionMessage
}


def get_message_class(message_type: str):
    """根据主题名获取对应的消息类，主题不存在（例如factsheet）时返回None"""
    return MESSAGE_TYPES.get(message_type.lstrip("/"))
