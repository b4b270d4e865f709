#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 2.0协议基础消息类定义
定义了所有消息类型的共同头字段，以及订单、状态、即时动作共用的动作和位置结构
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union

from ..action_value import ActionParameterValue, wrap_value
from ..envelope import Envelope, check_envelope_fields
from ..wire import FieldReader, add_optional, decode_payload, dump_json, encode_timestamp, freeze
from .enums import BlockingType

PROTOCOL_VERSION = "2.0.0"


@dataclass(frozen=True)
class VDA5050BaseMessage(ABC):
    """VDA5050协议基础消息类，五个头字段在线上与消息字段平铺在同一层"""
    header_id: int
    timestamp: datetime
    version: str
    manufacturer: str
    serial_number: str

    def __post_init__(self):
        check_envelope_fields(self.header_id, self.timestamp)

    @property
    @abstractmethod
    def subtopic(self) -> str:
        """返回消息的子主题"""

    @abstractmethod
    def get_message_dict(self) -> Dict[str, Any]:
        """返回消息的字典表示"""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        """从字典创建消息对象"""

    @property
    def envelope(self) -> Envelope:
        return Envelope(self.header_id, self.timestamp, self.version,
                        self.manufacturer, self.serial_number)

    def get_base_dict(self) -> Dict[str, Any]:
        """返回基础字段的字典表示"""
        return {
            "headerId": self.header_id,
            "timestamp": encode_timestamp(self.timestamp),
            "version": self.version,
            "manufacturer": self.manufacturer,
            "serialNumber": self.serial_number
        }

    def to_json(self) -> str:
        """转换为JSON字符串"""
        return dump_json(self.get_message_dict())

    @classmethod
    def from_json(cls, payload: Union[str, bytes]):
        """从JSON字符串创建消息对象"""
        return decode_payload(cls, payload)

    @staticmethod
    def read_envelope(reader: FieldReader) -> Dict[str, Any]:
        """读取头字段，返回构造函数关键字参数"""
        return {
            "header_id": reader.uint("headerId"),
            "timestamp": reader.timestamp("timestamp"),
            "version": reader.text("version"),
            "manufacturer": reader.text("manufacturer"),
            "serial_number": reader.text("serialNumber")
        }


@dataclass(frozen=True)
class ActionParameter:
    """动作参数类，value可以直接传入Python原生值"""
    key: str
    value: ActionParameterValue

    def __post_init__(self):
        object.__setattr__(self, "value", wrap_value(self.value))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "value": self.value.unwrap()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(reader.text("key"), reader.value("value"))


@dataclass(frozen=True)
class Action:
    """动作类，用于节点、边和即时动作"""
    action_type: str
    action_id: str
    blocking_type: BlockingType
    action_parameters: Tuple[ActionParameter, ...] = ()
    action_description: Optional[str] = None

    def __post_init__(self):
        freeze(self, "action_parameters")

    def get_parameter(self, key: str) -> Optional[ActionParameterValue]:
        """按键查找参数值，多个同名参数时返回第一个"""
        for parameter in self.action_parameters:
            if parameter.key == key:
                return parameter.value
        return None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "actionType": self.action_type,
            "actionId": self.action_id
        }
        add_optional(result, {"actionDescription": self.action_description})
        result["blockingType"] = self.blocking_type.value
        result["actionParameters"] = [param.to_dict() for param in self.action_parameters]
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            action_type=reader.text("actionType"),
            action_id=reader.text("actionId"),
            blocking_type=reader.enum("blockingType", BlockingType),
            action_parameters=reader.sequence("actionParameters", ActionParameter),
            action_description=reader.opt_text("actionDescription")
        )


@dataclass(frozen=True)
class NodePosition:
    """节点位置类"""
    x: float
    y: float
    map_id: str
    theta: Optional[float] = None
    allowed_deviation_xy: Optional[float] = None
    allowed_deviation_theta: Optional[float] = None
    map_description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "x": self.x,
            "y": self.y
        }
        add_optional(result, {
            "theta": self.theta,
            "allowedDeviationXY": self.allowed_deviation_xy,
            "allowedDeviationTheta": self.allowed_deviation_theta
        })
        result["mapId"] = self.map_id
        return add_optional(result, {"mapDescription": self.map_description})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            x=reader.number("x"),
            y=reader.number("y"),
            map_id=reader.text("mapId"),
            theta=reader.opt_number("theta"),
            allowed_deviation_xy=reader.opt_number("allowedDeviationXY"),
            allowed_deviation_theta=reader.opt_number("allowedDeviationTheta"),
            map_description=reader.opt_text("mapDescription")
        )


@dataclass(frozen=True)
class ControlPoint:
    """NURBS控制点"""
    x: float
    y: float
    weight: Optional[float] = None       # 未定义时默认为1.0
    orientation: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({"x": self.x, "y": self.y}, {
            "weight": self.weight,
            "orientation": self.orientation
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            x=reader.number("x"),
            y=reader.number("y"),
            weight=reader.opt_number("weight"),
            orientation=reader.opt_number("orientation")
        )


@dataclass(frozen=True)
class Trajectory:
    """以NURBS描述的边轨迹，knot_vector长度 = 控制点数 + degree + 1"""
    degree: int
    knot_vector: Tuple[float, ...]
    control_points: Tuple[ControlPoint, ...]

    def __post_init__(self):
        freeze(self, "knot_vector", "control_points")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "degree": self.degree,
            "knotVector": list(self.knot_vector),
            "controlPoints": [point.to_dict() for point in self.control_points]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            degree=reader.uint("degree"),
            knot_vector=reader.number_sequence("knotVector"),
            control_points=reader.sequence("controlPoints", ControlPoint)
        )


@dataclass(frozen=True)
class AgvPosition:
    """AGV在地图上的当前位置"""
    x: float
    y: float
    theta: float
    map_id: str
    position_initialized: bool
    map_description: Optional[str] = None
    localization_score: Optional[float] = None  # 0.0 to 1.0
    deviation_range: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "x": self.x,
            "y": self.y,
            "theta": self.theta,
            "mapId": self.map_id
        }
        add_optional(result, {"mapDescription": self.map_description})
        result["positionInitialized"] = self.position_initialized
        return add_optional(result, {
            "localizationScore": self.localization_score,
            "deviationRange": self.deviation_range
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            x=reader.number("x"),
            y=reader.number("y"),
            theta=reader.number("theta"),
            map_id=reader.text("mapId"),
            position_initialized=reader.boolean("positionInitialized"),
            map_description=reader.opt_text("mapDescription"),
            localization_score=reader.opt_number("localizationScore"),
            deviation_range=reader.opt_number("deviationRange")
        )


@dataclass(frozen=True)
class Velocity:
    """车辆坐标系中的速度"""
    vx: Optional[float] = None
    vy: Optional[float] = None
    omega: Optional[float] = None  # 角速度

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({}, {
            "vx": self.vx,
            "vy": self.vy,
            "omega": self.omega
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            vx=reader.opt_number("vx"),
            vy=reader.opt_number("vy"),
            omega=reader.opt_number("omega")
        )


@dataclass(frozen=True)
class BoundingBoxReference:
    """载荷包围盒参考点，位于载荷底面中心"""
    x: float
    y: float
    z: float
    theta: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({"x": self.x, "y": self.y, "z": self.z}, {"theta": self.theta})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            x=reader.number("x"),
            y=reader.number("y"),
            z=reader.number("z"),
            theta=reader.opt_number("theta")
        )


@dataclass(frozen=True)
class LoadDimensions:
    """载荷包围盒尺寸（米）"""
    length: float
    width: float
    height: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({"length": self.length, "width": self.width}, {"height": self.height})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            length=reader.number("length"),
            width=reader.number("width"),
            height=reader.opt_number("height")
        )
