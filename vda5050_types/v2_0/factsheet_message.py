#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 2.0协议规格说明书消息类定义
包含AGV型号系列的基本信息、物理参数、协议限制、支持的功能、几何和载荷能力
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..action_value import MapValue
from ..wire import FieldReader, add_optional, freeze
from .base_message import VDA5050BaseMessage, BoundingBoxReference, LoadDimensions
from .enums import (
    ActionScope,
    AgvClass,
    AgvKinematic,
    LocalizationType,
    NavigationType,
    Support,
    ValueDataType,
    WheelType
)


@dataclass(frozen=True)
class TypeSpecification:
    """类型规格类"""
    series_name: str
    agv_kinematic: AgvKinematic
    agv_class: AgvClass
    max_load_mass: float
    localization_types: Tuple[LocalizationType, ...]
    navigation_types: Tuple[NavigationType, ...]   # 按优先级排序
    series_description: Optional[str] = None

    def __post_init__(self):
        freeze(self, "localization_types", "navigation_types")

    def to_dict(self) -> Dict[str, Any]:
        result = {"seriesName": self.series_name}
        add_optional(result, {"seriesDescription": self.series_description})
        result.update({
            "agvKinematic": self.agv_kinematic.value,
            "agvClass": self.agv_class.value,
            "maxLoadMass": self.max_load_mass,
            "localizationTypes": [item.value for item in self.localization_types],
            "navigationTypes": [item.value for item in self.navigation_types]
        })
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            series_name=reader.text("seriesName"),
            agv_kinematic=reader.enum("agvKinematic", AgvKinematic),
            agv_class=reader.enum("agvClass", AgvClass),
            max_load_mass=reader.number("maxLoadMass"),
            localization_types=reader.enum_sequence("localizationTypes", LocalizationType),
            navigation_types=reader.enum_sequence("navigationTypes", NavigationType),
            series_description=reader.opt_text("seriesDescription")
        )


@dataclass(frozen=True)
class PhysicalParameters:
    """物理参数类"""
    speed_min: float
    speed_max: float
    acceleration_max: float
    deceleration_max: float
    height_max: float
    width: float
    length: float
    height_min: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "speedMin": self.speed_min,
            "speedMax": self.speed_max,
            "accelerationMax": self.acceleration_max,
            "decelerationMax": self.deceleration_max
        }
        add_optional(result, {"heightMin": self.height_min})
        result.update({
            "heightMax": self.height_max,
            "width": self.width,
            "length": self.length
        })
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            speed_min=reader.number("speedMin"),
            speed_max=reader.number("speedMax"),
            acceleration_max=reader.number("accelerationMax"),
            deceleration_max=reader.number("decelerationMax"),
            height_max=reader.number("heightMax"),
            width=reader.number("width"),
            length=reader.number("length"),
            height_min=reader.opt_number("heightMin")
        )


@dataclass(frozen=True)
class MaxStringLens:
    """字符串最大长度，未定义表示没有明确限制"""
    msg_len: Optional[int] = None
    topic_serial_len: Optional[int] = None
    topic_elem_len: Optional[int] = None
    id_len: Optional[int] = None
    id_numerical_only: Optional[bool] = None
    enum_len: Optional[int] = None
    load_id_len: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({}, {
            "msgLen": self.msg_len,
            "topicSerialLen": self.topic_serial_len,
            "topicElemLen": self.topic_elem_len,
            "idLen": self.id_len,
            "idNumericalOnly": self.id_numerical_only,
            "enumLen": self.enum_len,
            "loadIdLen": self.load_id_len
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            msg_len=reader.opt_uint("msgLen"),
            topic_serial_len=reader.opt_uint("topicSerialLen"),
            topic_elem_len=reader.opt_uint("topicElemLen"),
            id_len=reader.opt_uint("idLen"),
            id_numerical_only=reader.opt_boolean("idNumericalOnly"),
            enum_len=reader.opt_uint("enumLen"),
            load_id_len=reader.opt_uint("loadIdLen")
        )


# 属性名 -> 线上字段名，线上字段名带点号
_MAX_ARRAY_LENS_FIELDS = (
    ("order_nodes", "order.nodes"),
    ("order_edges", "order.edges"),
    ("node_actions", "node.actions"),
    ("edge_actions", "edge.actions"),
    ("actions_actions_parameters", "actions.actionsParameters"),
    ("instant_actions", "instantActions"),
    ("trajectory_knot_vector", "trajectory.knotVector"),
    ("trajectory_control_points", "trajectory.controlPoints"),
    ("state_node_states", "state.nodeStates"),
    ("state_edge_states", "state.edgeStates"),
    ("state_loads", "state.loads"),
    ("state_action_states", "state.actionStates"),
    ("state_errors", "state.errors"),
    ("state_information", "state.information"),
    ("error_error_references", "error.errorReferences"),
    ("information_info_references", "information.infoReferences"),
)


@dataclass(frozen=True)
class MaxArrayLens:
    """数组最大长度，未定义表示没有明确限制"""
    order_nodes: Optional[int] = None
    order_edges: Optional[int] = None
    node_actions: Optional[int] = None
    edge_actions: Optional[int] = None
    actions_actions_parameters: Optional[int] = None
    instant_actions: Optional[int] = None
    trajectory_knot_vector: Optional[int] = None
    trajectory_control_points: Optional[int] = None
    state_node_states: Optional[int] = None
    state_edge_states: Optional[int] = None
    state_loads: Optional[int] = None
    state_action_states: Optional[int] = None
    state_errors: Optional[int] = None
    state_information: Optional[int] = None
    error_error_references: Optional[int] = None
    information_info_references: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({}, {
            wire_name: getattr(self, attr) for attr, wire_name in _MAX_ARRAY_LENS_FIELDS
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(**{
            attr: reader.opt_uint(wire_name) for attr, wire_name in _MAX_ARRAY_LENS_FIELDS
        })


@dataclass(frozen=True)
class Timing:
    """时间间隔信息（秒）"""
    min_order_interval: float
    min_state_interval: float
    default_state_interval: Optional[float] = None
    visualization_interval: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "minOrderInterval": self.min_order_interval,
            "minStateInterval": self.min_state_interval
        }
        return add_optional(result, {
            "defaultStateInterval": self.default_state_interval,
            "visualizationInterval": self.visualization_interval
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            min_order_interval=reader.number("minOrderInterval"),
            min_state_interval=reader.number("minStateInterval"),
            default_state_interval=reader.opt_number("defaultStateInterval"),
            visualization_interval=reader.opt_number("visualizationInterval")
        )


@dataclass(frozen=True)
class ProtocolLimits:
    """协议限制类"""
    max_string_lens: MaxStringLens
    max_array_lens: MaxArrayLens
    timing: Timing

    def to_dict(self) -> Dict[str, Any]:
        return {
            "maxStringLens": self.max_string_lens.to_dict(),
            "maxArrayLens": self.max_array_lens.to_dict(),
            "timing": self.timing.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            max_string_lens=reader.nested("maxStringLens", MaxStringLens),
            max_array_lens=reader.nested("maxArrayLens", MaxArrayLens),
            timing=reader.nested("timing", Timing)
        )


@dataclass(frozen=True)
class OptionalParameter:
    """AGV支持或要求的可选参数，例如 order.nodes.nodePosition.allowedDeviationTheta"""
    parameter: str
    support: Support
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "parameter": self.parameter,
            "support": self.support.value
        }
        return add_optional(result, {"description": self.description})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            parameter=reader.text("parameter"),
            support=reader.enum("support", Support),
            description=reader.opt_text("description")
        )


@dataclass(frozen=True)
class FactsheetActionParameter:
    """动作参数声明（只有数据类型，没有取值）"""
    key: str
    value_data_type: ValueDataType
    description: Optional[str] = None
    is_optional: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "key": self.key,
            "valueDataType": self.value_data_type.value
        }
        return add_optional(result, {
            "description": self.description,
            "isOptional": self.is_optional
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            key=reader.text("key"),
            value_data_type=reader.enum("valueDataType", ValueDataType),
            description=reader.opt_text("description"),
            is_optional=reader.opt_boolean("isOptional")
        )


@dataclass(frozen=True)
class AgvAction:
    """AGV支持的动作，包括协议标准动作和厂商自定义动作"""
    action_type: str
    action_scopes: Tuple[ActionScope, ...]
    action_description: Optional[str] = None
    action_parameters: Optional[Tuple[FactsheetActionParameter, ...]] = None
    result_description: Optional[str] = None

    def __post_init__(self):
        freeze(self, "action_scopes", "action_parameters")

    def to_dict(self) -> Dict[str, Any]:
        result = {"actionType": self.action_type}
        add_optional(result, {"actionDescription": self.action_description})
        result["actionScopes"] = [scope.value for scope in self.action_scopes]
        if self.action_parameters is not None:
            result["actionParameters"] = [param.to_dict() for param in self.action_parameters]
        return add_optional(result, {"resultDescription": self.result_description})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            action_type=reader.text("actionType"),
            action_scopes=reader.enum_sequence("actionScopes", ActionScope),
            action_description=reader.opt_text("actionDescription"),
            action_parameters=reader.opt_sequence("actionParameters", FactsheetActionParameter),
            result_description=reader.opt_text("resultDescription")
        )


@dataclass(frozen=True)
class ProtocolFeatures:
    """AGV支持的协议功能"""
    optional_parameters: Tuple[OptionalParameter, ...]
    agv_actions: Tuple[AgvAction, ...]

    def __post_init__(self):
        freeze(self, "optional_parameters", "agv_actions")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "optionalParameters": [param.to_dict() for param in self.optional_parameters],
            "agvActions": [action.to_dict() for action in self.agv_actions]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            optional_parameters=reader.sequence("optionalParameters", OptionalParameter),
            agv_actions=reader.sequence("agvActions", AgvAction)
        )

    def supports_action(self, action_type: str) -> bool:
        return any(action.action_type == action_type for action in self.agv_actions)


@dataclass(frozen=True)
class Position:
    """AGV坐标系中的位置"""
    x: float
    y: float
    theta: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({"x": self.x, "y": self.y}, {"theta": self.theta})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(reader.number("x"), reader.number("y"), reader.opt_number("theta"))


@dataclass(frozen=True)
class WheelDefinition:
    """车轮定义"""
    wheel_type: WheelType
    is_active_driven: bool
    is_active_steered: bool
    position: Position
    diameter: float
    width: float
    center_displacement: Optional[float] = None
    constraints: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "type": self.wheel_type.value,
            "isActiveDriven": self.is_active_driven,
            "isActiveSteered": self.is_active_steered,
            "position": self.position.to_dict(),
            "diameter": self.diameter,
            "width": self.width
        }
        return add_optional(result, {
            "centerDisplacement": self.center_displacement,
            "constraints": self.constraints
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            wheel_type=reader.enum("type", WheelType),
            is_active_driven=reader.boolean("isActiveDriven"),
            is_active_steered=reader.boolean("isActiveSteered"),
            position=reader.nested("position", Position),
            diameter=reader.number("diameter"),
            width=reader.number("width"),
            center_displacement=reader.opt_number("centerDisplacement"),
            constraints=reader.opt_text("constraints")
        )


@dataclass(frozen=True)
class PolygonPoint:
    x: float
    y: float

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(reader.number("x"), reader.number("y"))


@dataclass(frozen=True)
class Envelope2d:
    """二维包络曲线，多边形视为闭合且不自相交"""
    set: str
    polygon_points: Tuple[PolygonPoint, ...]
    description: Optional[str] = None

    def __post_init__(self):
        freeze(self, "polygon_points")

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "set": self.set,
            "polygonPoints": [point.to_dict() for point in self.polygon_points]
        }
        return add_optional(result, {"description": self.description})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            set=reader.text("set"),
            polygon_points=reader.sequence("polygonPoints", PolygonPoint),
            description=reader.opt_text("description")
        )


@dataclass(frozen=True)
class Envelope3d:
    """三维包络曲线，数据格式由format指定，可内联在data中或通过url下载"""
    set: str
    format: str
    data: Optional[MapValue] = None
    url: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({"set": self.set, "format": self.format}, {
            "data": self.data.unwrap() if self.data is not None else None,
            "url": self.url,
            "description": self.description
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            set=reader.text("set"),
            format=reader.text("format"),
            data=reader.opt_object("data"),
            url=reader.opt_text("url"),
            description=reader.opt_text("description")
        )


@dataclass(frozen=True)
class AgvGeometry:
    """AGV几何定义"""
    wheel_definitions: Optional[Tuple[WheelDefinition, ...]] = None
    envelopes2d: Optional[Tuple[Envelope2d, ...]] = None
    envelopes3d: Optional[Tuple[Envelope3d, ...]] = None

    def __post_init__(self):
        freeze(self, "wheel_definitions", "envelopes2d", "envelopes3d")

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({}, {
            "wheelDefinitions": _to_list(self.wheel_definitions),
            "envelopes2d": _to_list(self.envelopes2d),
            "envelopes3d": _to_list(self.envelopes3d)
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            wheel_definitions=reader.opt_sequence("wheelDefinitions", WheelDefinition),
            envelopes2d=reader.opt_sequence("envelopes2d", Envelope2d),
            envelopes3d=reader.opt_sequence("envelopes3d", Envelope3d)
        )


@dataclass(frozen=True)
class LoadSet:
    """AGV可处理的载荷集合"""
    set_name: str
    load_type: str
    load_positions: Optional[Tuple[str, ...]] = None
    bounding_box_reference: Optional[BoundingBoxReference] = None
    load_dimensions: Optional[LoadDimensions] = None
    max_weight: Optional[float] = None
    min_loadhandling_height: Optional[float] = None
    max_loadhandling_height: Optional[float] = None
    min_loadhandling_depth: Optional[float] = None
    max_loadhandling_depth: Optional[float] = None
    min_loadhandling_tilt: Optional[float] = None
    max_loadhandling_tilt: Optional[float] = None
    agv_speed_limit: Optional[float] = None
    agv_acceleration_limit: Optional[float] = None
    agv_deceleration_limit: Optional[float] = None
    pick_time: Optional[float] = None
    drop_time: Optional[float] = None
    description: Optional[str] = None

    def __post_init__(self):
        freeze(self, "load_positions")

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "setName": self.set_name,
            "loadType": self.load_type
        }
        return add_optional(result, {
            "loadPositions": list(self.load_positions) if self.load_positions is not None else None,
            "boundingBoxReference": self.bounding_box_reference.to_dict() if self.bounding_box_reference else None,
            "loadDimensions": self.load_dimensions.to_dict() if self.load_dimensions else None,
            "maxWeight": self.max_weight,
            "minLoadhandlingHeight": self.min_loadhandling_height,
            "maxLoadhandlingHeight": self.max_loadhandling_height,
            "minLoadhandlingDepth": self.min_loadhandling_depth,
            "maxLoadhandlingDepth": self.max_loadhandling_depth,
            "minLoadhandlingTilt": self.min_loadhandling_tilt,
            "maxLoadhandlingTilt": self.max_loadhandling_tilt,
            "agvSpeedLimit": self.agv_speed_limit,
            "agvAccelerationLimit": self.agv_acceleration_limit,
            "agvDecelerationLimit": self.agv_deceleration_limit,
            "pickTime": self.pick_time,
            "dropTime": self.drop_time,
            "description": self.description
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            set_name=reader.text("setName"),
            load_type=reader.text("loadType"),
            load_positions=reader.opt_text_sequence("loadPositions"),
            bounding_box_reference=reader.opt_nested("boundingBoxReference", BoundingBoxReference),
            load_dimensions=reader.opt_nested("loadDimensions", LoadDimensions),
            max_weight=reader.opt_number("maxWeight"),
            min_loadhandling_height=reader.opt_number("minLoadhandlingHeight"),
            max_loadhandling_height=reader.opt_number("maxLoadhandlingHeight"),
            min_loadhandling_depth=reader.opt_number("minLoadhandlingDepth"),
            max_loadhandling_depth=reader.opt_number("maxLoadhandlingDepth"),
            min_loadhandling_tilt=reader.opt_number("minLoadhandlingTilt"),
            max_loadhandling_tilt=reader.opt_number("maxLoadhandlingTilt"),
            agv_speed_limit=reader.opt_number("agvSpeedLimit"),
            agv_acceleration_limit=reader.opt_number("agvAccelerationLimit"),
            agv_deceleration_limit=reader.opt_number("agvDecelerationLimit"),
            pick_time=reader.opt_number("pickTime"),
            drop_time=reader.opt_number("dropTime"),
            description=reader.opt_text("description")
        )


@dataclass(frozen=True)
class LoadSpecification:
    """载荷能力描述，load_positions为空表示AGV没有载荷处理装置"""
    load_positions: Optional[Tuple[str, ...]] = None
    load_sets: Optional[Tuple[LoadSet, ...]] = None

    def __post_init__(self):
        freeze(self, "load_positions", "load_sets")

    def to_dict(self) -> Dict[str, Any]:
        return add_optional({}, {
            "loadPositions": list(self.load_positions) if self.load_positions is not None else None,
            "loadSets": _to_list(self.load_sets)
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            load_positions=reader.opt_text_sequence("loadPositions"),
            load_sets=reader.opt_sequence("loadSets", LoadSet)
        )


@dataclass(frozen=True)
class FactsheetMessage(VDA5050BaseMessage):
    """VDA5050规格说明书消息类，AGV收到factsheetRequest即时动作后发布"""
    type_specification: Optional[TypeSpecification] = None
    physical_parameters: Optional[PhysicalParameters] = None
    protocol_limits: Optional[ProtocolLimits] = None
    protocol_features: Optional[ProtocolFeatures] = None
    agv_geometry: Optional[AgvGeometry] = None
    load_specification: Optional[LoadSpecification] = None
    localization_parameters: Optional[MapValue] = None

    @property
    def subtopic(self) -> str:
        return "/factsheet"

    def get_message_dict(self) -> Dict[str, Any]:
        result = self.get_base_dict()
        return add_optional(result, {
            "typeSpecification": _to_dict(self.type_specification),
            "physicalParameters": _to_dict(self.physical_parameters),
            "protocolLimits": _to_dict(self.protocol_limits),
            "protocolFeatures": _to_dict(self.protocol_features),
            "agvGeometry": _to_dict(self.agv_geometry),
            "loadSpecification": _to_dict(self.load_specification),
            "localizationParameters": self.localization_parameters.unwrap() if self.localization_parameters is not None else None
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            **cls.read_envelope(reader),
            type_specification=reader.opt_nested("typeSpecification", TypeSpecification),
            physical_parameters=reader.opt_nested("physicalParameters", PhysicalParameters),
            protocol_limits=reader.opt_nested("protocolLimits", ProtocolLimits),
            protocol_features=reader.opt_nested("protocolFeatures", ProtocolFeatures),
            agv_geometry=reader.opt_nested("agvGeometry", AgvGeometry),
            load_specification=reader.opt_nested("loadSpecification", LoadSpecification),
            localization_parameters=reader.opt_object("localizationParameters")
        )


def _to_dict(part: Any) -> Optional[Dict[str, Any]]:
    return part.to_dict() if part is not None else None


def _to_list(parts: Optional[Tuple[Any, ...]]) -> Optional[list]:
    return [part.to_dict() for part in parts] if parts is not None else None
