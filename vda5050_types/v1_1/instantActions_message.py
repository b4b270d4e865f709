#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 1.1协议即时动作消息类定义
包含即时动作消息的完整结构，以及协议预定义的即时动作类型和构建器
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..validation import instant_actions_violations
from ..wire import FieldReader, freeze
from .base_message import VDA5050BaseMessage, Action, ActionParameter
from .enums import BlockingType


class InstantActionType(Enum):
    """协议预定义的即时动作类型"""
    # 订单和任务控制
    CANCEL_ORDER = "cancelOrder"
    START_PAUSE = "startPause"
    STOP_PAUSE = "stopPause"

    # 信息请求
    STATE_REQUEST = "stateRequest"
    LOG_REPORT = "logReport"

    # 定位和充电
    INIT_POSITION = "initPosition"
    START_CHARGING = "startCharging"
    STOP_CHARGING = "stopCharging"


class InstantActionBuilder:
    """即时动作构建器，用于创建标准的即时动作"""

    @staticmethod
    def _create(action_type: InstantActionType,
                blocking_type: BlockingType,
                action_id: Optional[str],
                parameters: Optional[List[ActionParameter]] = None) -> Action:
        return Action(
            action_type=action_type.value,
            action_id=action_id or str(uuid.uuid4()),
            blocking_type=blocking_type,
            action_parameters=tuple(parameters or ())
        )

    @staticmethod
    def create_cancel_order(action_id: Optional[str] = None) -> Action:
        """创建取消订单动作"""
        return InstantActionBuilder._create(InstantActionType.CANCEL_ORDER, BlockingType.NONE, action_id)

    @staticmethod
    def create_start_pause(action_id: Optional[str] = None) -> Action:
        """创建暂停任务动作"""
        return InstantActionBuilder._create(InstantActionType.START_PAUSE, BlockingType.HARD, action_id)

    @staticmethod
    def create_stop_pause(action_id: Optional[str] = None) -> Action:
        """创建继续任务动作"""
        return InstantActionBuilder._create(InstantActionType.STOP_PAUSE, BlockingType.HARD, action_id)

    @staticmethod
    def create_state_request(action_id: Optional[str] = None) -> Action:
        """创建请求状态信息动作"""
        return InstantActionBuilder._create(InstantActionType.STATE_REQUEST, BlockingType.NONE, action_id)

    @staticmethod
    def create_log_report(reason: str, action_id: Optional[str] = None) -> Action:
        """创建生成日志报告动作

        Args:
            reason: 生成报告的原因
            action_id: 动作ID，若不指定则自动生成
        """
        return InstantActionBuilder._create(
            InstantActionType.LOG_REPORT, BlockingType.NONE, action_id,
            [ActionParameter("reason", reason)]
        )

    @staticmethod
    def create_init_position(x: float,
                             y: float,
                             theta: float,
                             map_id: str,
                             last_node_id: str,
                             action_id: Optional[str] = None) -> Action:
        """创建初始化位置动作

        Args:
            x: 地图坐标系中的x坐标，单位m
            y: 地图坐标系中的y坐标，单位m
            theta: 地图坐标系中的角度，单位rad
            map_id: 地图ID
            last_node_id: 初始化后作为lastNodeId上报的节点
            action_id: 动作ID，若不指定则自动生成
        """
        return InstantActionBuilder._create(
            InstantActionType.INIT_POSITION, BlockingType.HARD, action_id,
            [
                ActionParameter("x", x),
                ActionParameter("y", y),
                ActionParameter("theta", theta),
                ActionParameter("mapId", map_id),
                ActionParameter("lastNodeId", last_node_id)
            ]
        )

    @staticmethod
    def create_start_charging(action_id: Optional[str] = None) -> Action:
        """创建开始充电动作"""
        return InstantActionBuilder._create(InstantActionType.START_CHARGING, BlockingType.HARD, action_id)

    @staticmethod
    def create_stop_charging(action_id: Optional[str] = None) -> Action:
        """创建停止充电动作"""
        return InstantActionBuilder._create(InstantActionType.STOP_CHARGING, BlockingType.HARD, action_id)


@dataclass(frozen=True)
class InstantActionsMessage(VDA5050BaseMessage):
    """VDA5050即时动作消息类"""
    instant_actions: Tuple[Action, ...]

    def __post_init__(self):
        super().__post_init__()
        freeze(self, "instant_actions")

    @property
    def subtopic(self) -> str:
        return "/instantActions"

    def get_message_dict(self) -> Dict[str, Any]:
        result = self.get_base_dict()
        result["instantActions"] = [action.to_dict() for action in self.instant_actions]
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            **cls.read_envelope(reader),
            instant_actions=reader.sequence("instantActions", Action)
        )

    def validate(self) -> bool:
        """验证actionId唯一以及每个动作内参数键唯一"""
        return not instant_actions_violations(self)

    def get_action_by_id(self, action_id: str) -> Optional[Action]:
        """根据动作ID获取动作"""
        for action in self.instant_actions:
            if action.action_id == action_id:
                return action
        return None

    def get_actions_by_type(self, action_type: str) -> List[Action]:
        """根据动作类型获取所有匹配的动作"""
        return [action for action in self.instant_actions if action.action_type == action_type]

    def has_action_type(self, action_type: str) -> bool:
        """检查是否包含指定类型的动作"""
        return any(action.action_type == action_type for action in self.instant_actions)
