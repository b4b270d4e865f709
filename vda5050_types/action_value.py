#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050动作参数值定义
actionParameter.value在线上可以是字符串、布尔、数字、数组或对象，
这里用五个互斥的不可变值类型表示，解码和编码都保持原始JSON形态
"""

import json
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Tuple, Union

from .errors import SchemaMismatch


class ActionParameterValue(ABC):
    """动作参数值基类，只有五个子类：BooleanValue、NumberValue、TextValue、ListValue、MapValue"""

    @abstractmethod
    def unwrap(self) -> Any:
        """返回对应的Python原生数据（同时也是JSON编码所用的结构）"""
        pass

    def to_json(self) -> str:
        """转换为JSON字符串"""
        return json.dumps(self.unwrap(), ensure_ascii=False, allow_nan=False)

    @classmethod
    def from_json(cls, payload: Union[str, bytes]) -> "ActionParameterValue":
        """从JSON字符串创建参数值"""
        try:
            raw = json.loads(payload, parse_constant=reject_constant)
        except (ValueError, UnicodeDecodeError) as e:
            raise SchemaMismatch("value", f"无法解析JSON: {e}") from e
        except RecursionError:
            raise SchemaMismatch("value", "JSON嵌套层级过深") from None
        try:
            return cls.from_json_value(raw)
        except RecursionError:
            raise SchemaMismatch("value", "参数值嵌套层级过深") from None

    @staticmethod
    def from_json_value(raw: Any, path: str = "value") -> "ActionParameterValue":
        """从已解析的JSON结构创建参数值，不支持的形态抛出SchemaMismatch"""
        if isinstance(raw, bool):
            return BooleanValue(raw)
        if isinstance(raw, (int, float)):
            if isinstance(raw, float) and not math.isfinite(raw):
                raise SchemaMismatch(path, f"数字必须是有限值，实际为 {raw!r}")
            return NumberValue(raw)
        if isinstance(raw, str):
            return TextValue(raw)
        if isinstance(raw, list):
            return ListValue(tuple(
                ActionParameterValue.from_json_value(item, f"{path}[{index}]")
                for index, item in enumerate(raw)
            ))
        if isinstance(raw, dict):
            entries = {}
            for key, item in raw.items():
                if not isinstance(key, str):
                    raise SchemaMismatch(path, f"对象键必须是字符串，实际为 {key!r}")
                entries[key] = ActionParameterValue.from_json_value(item, f"{path}.{key}")
            return MapValue(entries)
        if raw is None:
            raise SchemaMismatch(path, "不支持null作为参数值")
        raise SchemaMismatch(path, f"不支持的参数值类型 {type(raw).__name__}")


@dataclass(frozen=True)
class BooleanValue(ActionParameterValue):
    """布尔参数值"""
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"BooleanValue需要bool，实际为 {type(self.value).__name__}")

    def unwrap(self) -> bool:
        return self.value


@dataclass(frozen=True)
class NumberValue(ActionParameterValue):
    """数字参数值，int保持为int，float保持双精度"""
    value: Union[int, float]

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"NumberValue需要int或float，实际为 {type(self.value).__name__}")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError(f"NumberValue必须是有限值，实际为 {self.value!r}")

    def unwrap(self) -> Union[int, float]:
        return self.value


@dataclass(frozen=True)
class TextValue(ActionParameterValue):
    """字符串参数值"""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"TextValue需要str，实际为 {type(self.value).__name__}")

    def unwrap(self) -> str:
        return self.value


@dataclass(frozen=True)
class ListValue(ActionParameterValue):
    """有序数组参数值"""
    items: Tuple[ActionParameterValue, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(wrap_value(item) for item in self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> ActionParameterValue:
        return self.items[index]

    def unwrap(self) -> list:
        return [item.unwrap() for item in self.items]


@dataclass(frozen=True)
class MapValue(ActionParameterValue):
    """键值对象参数值，保留插入顺序，比较时与顺序无关"""
    entries: Mapping[str, ActionParameterValue]

    def __post_init__(self):
        entries = {}
        for key, item in dict(self.entries).items():
            if not isinstance(key, str):
                raise TypeError(f"MapValue的键必须是str，实际为 {type(key).__name__}")
            entries[key] = wrap_value(item)
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __eq__(self, other: Any) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: str) -> ActionParameterValue:
        return self.entries[key]

    def keys(self) -> Iterable[str]:
        return self.entries.keys()

    def unwrap(self) -> dict:
        return {key: item.unwrap() for key, item in self.entries.items()}


def wrap_value(obj: Any) -> ActionParameterValue:
    """把Python原生数据包装成参数值，已是参数值的原样返回

    tuple和list都视为数组，dict视为对象；None和其他类型抛出TypeError
    """
    if isinstance(obj, ActionParameterValue):
        return obj
    if isinstance(obj, bool):
        return BooleanValue(obj)
    if isinstance(obj, (int, float)):
        return NumberValue(obj)
    if isinstance(obj, str):
        return TextValue(obj)
    if isinstance(obj, (list, tuple)):
        return ListValue(tuple(obj))
    if isinstance(obj, Mapping):
        return MapValue(obj)
    raise TypeError(f"无法作为动作参数值: {type(obj).__name__}")


def reject_constant(token: str):
    """json.loads的parse_constant回调，拒绝NaN和Infinity"""
    raise ValueError(f"不允许的JSON常量 {token}")
