#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 1.1协议可视化消息类定义
包含AGV位置和速度信息用于可视化目的，可以比状态消息更高的频率发布
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..wire import FieldReader
from .base_message import VDA5050BaseMessage, AgvPosition, Velocity


@dataclass(frozen=True)
class VisualizationMessage(VDA5050BaseMessage):
    """VDA5050可视化消息类，除头字段外所有字段都是可选的"""
    agv_position: Optional[AgvPosition] = None
    velocity: Optional[Velocity] = None

    @property
    def subtopic(self) -> str:
        return "/visualization"

    def get_message_dict(self) -> Dict[str, Any]:
        result = self.get_base_dict()
        if self.agv_position is not None:
            result["agvPosition"] = self.agv_position.to_dict()
        if self.velocity is not None:
            result["velocity"] = self.velocity.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            **cls.read_envelope(reader),
            agv_position=reader.opt_nested("agvPosition", AgvPosition),
            velocity=reader.opt_nested("velocity", Velocity)
        )
