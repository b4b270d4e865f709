#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050消息头定义
所有主题的消息都带有相同的五个头字段，线上是扁平展开的
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class Envelope:
    """消息头

    Args:
        header_id: 消息头ID，按主题由发送方递增
        timestamp: 带时区的时间戳
        version: 协议版本，例如 2.0.0
        manufacturer: 制造商
        serial_number: 序列号
    """
    header_id: int
    timestamp: datetime
    version: str
    manufacturer: str
    serial_number: str

    def __post_init__(self):
        check_envelope_fields(self.header_id, self.timestamp)

    def as_kwargs(self) -> Dict[str, Any]:
        """返回可直接传给消息构造函数的关键字参数"""
        return {
            "header_id": self.header_id,
            "timestamp": self.timestamp,
            "version": self.version,
            "manufacturer": self.manufacturer,
            "serial_number": self.serial_number
        }


def check_envelope_fields(header_id: int, timestamp: datetime):
    if isinstance(header_id, bool) or not isinstance(header_id, int) or header_id < 0:
        raise ValueError(f"headerId必须是非负整数，实际为 {header_id!r}")
    if not isinstance(timestamp, datetime) or timestamp.tzinfo is None or timestamp.utcoffset() is None:
        raise ValueError(f"timestamp必须是带时区的datetime，实际为 {timestamp!r}")
