#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 1.1协议连接消息类定义
包含AGV连接状态信息，CONNECTIONBROKEN通常作为MQTT遗嘱消息发送
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..wire import FieldReader
from .base_message import VDA5050BaseMessage
from .enums import ConnectionState


@dataclass(frozen=True)
class ConnectionMessage(VDA5050BaseMessage):
    """VDA5050连接消息类"""
    connection_state: ConnectionState

    @property
    def subtopic(self) -> str:
        return "/connection"

    def get_message_dict(self) -> Dict[str, Any]:
        result = self.get_base_dict()
        result.update({
            "connectionState": self.connection_state.value
        })
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str = ""):
        reader = FieldReader(data, path)
        return cls(
            **cls.read_envelope(reader),
            connection_state=reader.enum("connectionState", ConnectionState)
        )

    def is_online(self) -> bool:
        """检查是否在线"""
        return self.connection_state is ConnectionState.ONLINE

    def is_offline(self) -> bool:
        """检查是否离线"""
        return self.connection_state is ConnectionState.OFFLINE

    def is_connection_broken(self) -> bool:
        """检查连接是否中断"""
        return self.connection_state is ConnectionState.CONNECTIONBROKEN
