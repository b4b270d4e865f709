#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050消息解码错误定义
所有解码失败都以DecodeError的子类同步抛出给调用者，不做任何默认值填充
"""

from typing import Any


class DecodeError(ValueError):
    """解码错误基类

    Args:
        path: 出错字段在消息中的位置，例如 nodes[0].actions[1].blockingType
        message: 错误描述
    """

    def __init__(self, path: str, message: str):
        self.path = path or "$"
        super().__init__(f"{self.path}: {message}")


class MissingField(DecodeError):
    """必需字段缺失"""

    def __init__(self, path: str):
        super().__init__(path, "缺少必需字段")


class TypeMismatch(DecodeError):
    """字段存在但线上类型与声明类型不符"""

    def __init__(self, path: str, expected: str, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(path, f"期望 {expected}，实际为 {_describe(actual)}")


class UnknownVariant(DecodeError):
    """枚举字段的取值不在协议版本定义的集合内"""

    def __init__(self, path: str, enum_name: str, token: Any):
        self.enum_name = enum_name
        self.token = token
        super().__init__(path, f"未知的{enum_name}取值 {token!r}")


class SchemaMismatch(DecodeError):
    """载荷结构不属于任何支持的形态，或JSON本身无法解析"""

    def __init__(self, path: str, detail: str):
        self.detail = detail
        super().__init__(path, detail)


class ConfigError(Exception):
    """生产者配置文件错误"""


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
