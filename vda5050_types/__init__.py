#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050协议消息类型定义

每个协议版本是一个独立的子包，使用方按需导入：

    from vda5050_types.v2_0 import OrderMessage
    from vda5050_types.v1_1 import StateMessage

本模块只导出各版本共用的部分：动作参数值、消息头和解码错误
"""

from .action_value import (
    ActionParameterValue,
    BooleanValue,
    NumberValue,
    TextValue,
    ListValue,
    MapValue,
    wrap_value
)
from .envelope import Envelope
from .errors import (
    DecodeError,
    MissingField,
    TypeMismatch,
    UnknownVariant,
    SchemaMismatch,
    ConfigError
)

# 版本信息
__version__ = "1.0.0"

# 支持的协议版本 -> 子包名
SUPPORTED_VERSIONS = {
    "1.1.0": "vda5050_types.v1_1",
    "2.0.0": "vda5050_types.v2_0"
}

__all__ = [
    "ActionParameterValue",
    "BooleanValue",
    "NumberValue",
    "TextValue",
    "ListValue",
    "MapValue",
    "wrap_value",
    "Envelope",
    "DecodeError",
    "MissingField",
    "TypeMismatch",
    "UnknownVariant",
    "SchemaMismatch",
    "ConfigError",
    "SUPPORTED_VERSIONS"
]
