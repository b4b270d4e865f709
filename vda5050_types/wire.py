#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050消息与JSON线上格式之间的适配层
解码时按字段读取并检查线上形态，出错时带上字段路径；编码时处理时间戳和可选字段
"""

import json
import logging
import math
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union

from .action_value import ActionParameterValue, MapValue, reject_constant
from .errors import DecodeError, MissingField, SchemaMismatch, TypeMismatch, UnknownVariant

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

# ISO8601，必须带时区；小数秒位数不限
_TIMESTAMP_PATTERN = re.compile(
    r"^(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)


class FieldReader:
    """从线上字典读取字段的辅助类

    required系列方法在字段缺失时抛出MissingField，opt_系列方法在字段缺失或为null时返回None
    """

    def __init__(self, data: Any, path: str = ""):
        if not isinstance(data, dict):
            raise TypeMismatch(path, "object", data)
        self.data = data
        self.path = path

    def child(self, key: str) -> str:
        return f"{self.path}.{key}" if self.path else key

    def _required(self, key: str, expected: str) -> Any:
        if key not in self.data:
            raise MissingField(self.child(key))
        raw = self.data[key]
        if raw is None:
            raise TypeMismatch(self.child(key), expected, raw)
        return raw

    def _optional(self, key: str) -> Any:
        return self.data.get(key)

    # 字符串
    def text(self, key: str) -> str:
        return _check_text(self._required(key, "string"), self.child(key))

    def opt_text(self, key: str) -> Optional[str]:
        raw = self._optional(key)
        return None if raw is None else _check_text(raw, self.child(key))

    # 非负整数
    def uint(self, key: str) -> int:
        return _check_uint(self._required(key, "non-negative integer"), self.child(key))

    def opt_uint(self, key: str) -> Optional[int]:
        raw = self._optional(key)
        return None if raw is None else _check_uint(raw, self.child(key))

    # 浮点数
    def number(self, key: str) -> float:
        return _check_number(self._required(key, "number"), self.child(key))

    def opt_number(self, key: str) -> Optional[float]:
        raw = self._optional(key)
        return None if raw is None else _check_number(raw, self.child(key))

    # 布尔
    def boolean(self, key: str) -> bool:
        return _check_bool(self._required(key, "boolean"), self.child(key))

    def opt_boolean(self, key: str) -> Optional[bool]:
        raw = self._optional(key)
        return None if raw is None else _check_bool(raw, self.child(key))

    # 枚举
    def enum(self, key: str, enum_cls: Type[E]) -> E:
        return decode_enum(self._required(key, "string"), enum_cls, self.child(key))

    def opt_enum(self, key: str, enum_cls: Type[E]) -> Optional[E]:
        raw = self._optional(key)
        return None if raw is None else decode_enum(raw, enum_cls, self.child(key))

    def timestamp(self, key: str) -> datetime:
        return decode_timestamp(self._required(key, "ISO8601 timestamp"), self.child(key))

    # 嵌套对象，cls需要提供from_dict(data, path)
    def nested(self, key: str, cls: Type[T]) -> T:
        return cls.from_dict(self._required(key, "object"), path=self.child(key))

    def opt_nested(self, key: str, cls: Type[T]) -> Optional[T]:
        raw = self._optional(key)
        return None if raw is None else cls.from_dict(raw, path=self.child(key))

    # 对象数组
    def sequence(self, key: str, cls: Type[T]) -> Tuple[T, ...]:
        return self._sequence(self._required(key, "array"), key, cls)

    def opt_sequence(self, key: str, cls: Type[T]) -> Optional[Tuple[T, ...]]:
        raw = self._optional(key)
        return None if raw is None else self._sequence(raw, key, cls)

    def _sequence(self, raw: Any, key: str, cls: Type[T]) -> Tuple[T, ...]:
        items = _check_list(raw, self.child(key))
        return tuple(
            cls.from_dict(item, path=f"{self.child(key)}[{index}]")
            for index, item in enumerate(items)
        )

    # 标量数组
    def text_sequence(self, key: str) -> Tuple[str, ...]:
        items = _check_list(self._required(key, "array"), self.child(key))
        return tuple(_check_text(item, f"{self.child(key)}[{i}]") for i, item in enumerate(items))

    def opt_text_sequence(self, key: str) -> Optional[Tuple[str, ...]]:
        if self._optional(key) is None:
            return None
        return self.text_sequence(key)

    def number_sequence(self, key: str) -> Tuple[float, ...]:
        items = _check_list(self._required(key, "array"), self.child(key))
        return tuple(_check_number(item, f"{self.child(key)}[{i}]") for i, item in enumerate(items))

    def enum_sequence(self, key: str, enum_cls: Type[E]) -> Tuple[E, ...]:
        items = _check_list(self._required(key, "array"), self.child(key))
        return tuple(decode_enum(item, enum_cls, f"{self.child(key)}[{i}]") for i, item in enumerate(items))

    # 动作参数值
    def value(self, key: str) -> ActionParameterValue:
        if key not in self.data:
            raise MissingField(self.child(key))
        return ActionParameterValue.from_json_value(self.data[key], self.child(key))

    def opt_object(self, key: str) -> Optional[MapValue]:
        """读取自由格式的JSON对象"""
        raw = self._optional(key)
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise TypeMismatch(self.child(key), "object", raw)
        return ActionParameterValue.from_json_value(raw, self.child(key))


def _check_text(raw: Any, path: str) -> str:
    if not isinstance(raw, str):
        raise TypeMismatch(path, "string", raw)
    return raw


def _check_uint(raw: Any, path: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise TypeMismatch(path, "non-negative integer", raw)
    return raw


def _check_number(raw: Any, path: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise TypeMismatch(path, "number", raw)
    try:
        value = float(raw)
    except OverflowError:
        # 超出双精度范围的JSON整数
        raise TypeMismatch(path, "finite number", raw) from None
    if not math.isfinite(value):
        raise TypeMismatch(path, "finite number", raw)
    return value


def _check_bool(raw: Any, path: str) -> bool:
    if not isinstance(raw, bool):
        raise TypeMismatch(path, "boolean", raw)
    return raw


def _check_list(raw: Any, path: str) -> list:
    if not isinstance(raw, list):
        raise TypeMismatch(path, "array", raw)
    return raw


def decode_enum(raw: Any, enum_cls: Type[E], path: str) -> E:
    """把线上字符串解析为枚举成员，大小写敏感，不存在的取值抛出UnknownVariant"""
    if not isinstance(raw, str):
        raise TypeMismatch(path, "string", raw)
    try:
        return enum_cls(raw)
    except ValueError:
        raise UnknownVariant(path, enum_cls.__name__, raw) from None


def decode_timestamp(raw: Any, path: str) -> datetime:
    """解析带时区的ISO8601时间戳，例如 2017-04-15T11:40:03.12Z"""
    if not isinstance(raw, str):
        raise TypeMismatch(path, "ISO8601 timestamp", raw)
    match = _TIMESTAMP_PATTERN.match(raw)
    if not match:
        raise TypeMismatch(path, "ISO8601 timestamp", raw)
    date_part, time_part, fraction, zone = match.groups()
    # fromisoformat在旧版本只接受3或6位小数，统一成6位
    fraction = (fraction or "0")[:6].ljust(6, "0")
    zone = "+00:00" if zone == "Z" else zone
    try:
        return datetime.fromisoformat(f"{date_part}T{time_part}.{fraction}{zone}")
    except ValueError:
        raise TypeMismatch(path, "ISO8601 timestamp", raw) from None


def encode_timestamp(value: datetime) -> str:
    """编码为UTC时间戳，格式 YYYY-MM-DDTHH:mm:ss.ffffffZ"""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def add_optional(result: Dict[str, Any], optional_fields: Dict[str, Any]) -> Dict[str, Any]:
    """只添加不为None的可选字段，空字符串和空数组照常输出"""
    for key, value in optional_fields.items():
        if value is not None:
            result[key] = value
    return result


def freeze(obj: Any, *field_names: str):
    """把冻结dataclass中的列表字段换成元组，None保持不变"""
    for name in field_names:
        value = getattr(obj, name)
        if value is not None and not isinstance(value, tuple):
            object.__setattr__(obj, name, tuple(value))


def dump_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, allow_nan=False)


def load_json(payload: Union[str, bytes, bytearray], type_name: str) -> Any:
    """解析JSON载荷，语法错误和过深的嵌套统一为SchemaMismatch"""
    try:
        return json.loads(payload, parse_constant=reject_constant)
    except (ValueError, UnicodeDecodeError) as e:
        logger.debug(f"解析{type_name} JSON失败: {e}")
        raise SchemaMismatch("$", f"无法解析JSON: {e}") from e
    except RecursionError:
        logger.debug(f"解析{type_name} JSON失败: 嵌套层级过深")
        raise SchemaMismatch("$", "JSON嵌套层级过深") from None


def decode_payload(cls: Type[T], payload: Union[str, bytes, bytearray]) -> T:
    """JSON载荷 -> 消息对象，失败时记录调试日志后原样抛出"""
    data = load_json(payload, cls.__name__)
    try:
        return cls.from_dict(data)
    except DecodeError as e:
        logger.debug(f"解码{cls.__name__}失败: {e}")
        raise
    except RecursionError:
        logger.debug(f"解码{cls.__name__}失败: 嵌套层级过深")
        raise SchemaMismatch("$", "消息嵌套层级过深") from None
