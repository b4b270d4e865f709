#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 2.0.0 协议消息类型

本版本包含六种主题消息：
- OrderMessage: 订单消息
- StateMessage: 状态消息
- InstantActionsMessage: 即时动作消息
- VisualizationMessage: 可视化消息
- ConnectionMessage: 连接消息
- FactsheetMessage: 规格说明书消息（2.0新增）

与1.1的差异：Edge新增orientationType，状态消息的informations改名为information，
新增factsheet主题和factsheetRequest即时动作
"""

# 基础消息类和共用结构
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

# 枚举
from .enums import (
    ActionScope,
    ActionStatus,
    AgvClass,
    AgvKinematic,
    BlockingType,
    ConnectionState,
    ErrorLevel,
    EStop,
    InfoLevel,
    LocalizationType,
    NavigationType,
    OperatingMode,
    OrientationType,
    Support,
    ValueDataType,
    WheelType
)

# 订单消息相关类
from .order_message import (
    OrderMessage,
    Node,
    Edge
)

# 状态消息相关类
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

# 即时动作消息类
from .instantActions_message import (
    InstantActionsMessage,
    InstantActionType,
    InstantActionBuilder
)

# 可视化消息类
from .visualization_message import VisualizationMessage

# 连接消息类
from .connection_message import ConnectionMessage

# 规格说明书消息相关类
from .factsheet_message import (
    FactsheetMessage,
    TypeSpecification,
    PhysicalParameters,
    ProtocolLimits,
    MaxStringLens,
    MaxArrayLens,
    Timing,
    ProtocolFeatures,
    OptionalParameter,
    AgvAction,
    FactsheetActionParameter,
    AgvGeometry,
    WheelDefinition,
    Position,
    Envelope2d,
    Envelope3d,
    PolygonPoint,
    LoadSpecification,
    LoadSet
)

__all__ = [
    "PROTOCOL_VERSION",

    # 基础类
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

    # 枚举
    "ActionScope",
    "ActionStatus",
    "AgvClass",
    "AgvKinematic",
    "BlockingType",
    "ConnectionState",
    "ErrorLevel",
    "EStop",
    "InfoLevel",
    "LocalizationType",
    "NavigationType",
    "OperatingMode",
    "OrientationType",
    "Support",
    "ValueDataType",
    "WheelType",

    # 订单消息
    "OrderMessage",
    "Node",
    "Edge",

    # 状态消息
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

    # 即时动作消息
    "InstantActionsMessage",
    "InstantActionType",
    "InstantActionBuilder",

    # 可视化和连接消息
    "VisualizationMessage",
    "ConnectionMessage",

    # 规格说明书消息
    "FactsheetMessage",
    "TypeSpecification",
    "PhysicalParameters",
    "ProtocolLimits",
    "MaxStringLens",
    "MaxArrayLens",
    "Timing",
    "ProtocolFeatures",
    "OptionalParameter",
    "AgvAction",
    "FactsheetActionParameter",
    "AgvGeometry",
    "WheelDefinition",
    "Position",
    "Envelope2d",
    "Envelope3d",
    "PolygonPoint",
    "LoadSpecification",
    "LoadSet",

    # 工具函数和变量
    "MESSAGE_TYPES",
    "get_message_class"
]

# 主题名 -> 消息类
MESSAGE_TYPES = {
    "order": OrderMessage,
    "state": StateMessage,
    "instantActions": InstantActionsMessage,
    "visualization": VisualizationMessage,
    "connection": ConnectionMessage,
    "factsheet": FactsheetMessage
}


def get_message_class(message_type: str):
    """
    根据主题名获取对应的消息类

    Args:
        message_type: 主题名，也可以带前导斜杠，例如 "/order"

    Returns:
        对应的消息类，如果主题不存在则返回None
    """
    return MESSAGE_TYPES.get(message_type.lstrip("/"))
