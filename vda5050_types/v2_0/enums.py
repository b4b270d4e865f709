#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050 2.0协议枚举定义
每个枚举成员的值就是线上使用的字符串，大小写敏感
"""

from enum import Enum


class BlockingType(Enum):
    """动作阻塞类型"""
    NONE = "NONE"    # 可与其他动作及行驶并行
    SOFT = "SOFT"    # 可与其他动作并行，但不能行驶
    HARD = "HARD"    # 执行期间不能有其他动作


class OrientationType(Enum):
    """边上的朝向类型"""
    GLOBAL = "GLOBAL"
    TANGENTIAL = "TANGENTIAL"


class ActionStatus(Enum):
    """动作状态"""
    WAITING = "WAITING"
    INITIALIZING = "INITIALIZING"
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    FINISHED = "FINISHED"
    FAILED = "FAILED"


class OperatingMode(Enum):
    """AGV运行模式"""
    AUTOMATIC = "AUTOMATIC"
    SEMIAUTOMATIC = "SEMIAUTOMATIC"
    MANUAL = "MANUAL"
    SERVICE = "SERVICE"
    TEACHIN = "TEACHIN"


class ErrorLevel(Enum):
    """错误级别"""
    WARNING = "WARNING"
    FATAL = "FATAL"


class InfoLevel(Enum):
    """信息级别"""
    INFO = "INFO"
    DEBUG = "DEBUG"


class EStop(Enum):
    """急停确认类型"""
    AUTOACK = "AUTOACK"
    MANUAL = "MANUAL"
    REMOTE = "REMOTE"
    NONE = "NONE"


class ConnectionState(Enum):
    """连接状态"""
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    CONNECTIONBROKEN = "CONNECTIONBROKEN"


# 以下为factsheet使用的枚举

class AgvKinematic(Enum):
    DIFF = "DIFF"
    OMNI = "OMNI"
    THREEWHEEL = "THREEWHEEL"


class AgvClass(Enum):
    FORKLIFT = "FORKLIFT"
    CONVEYOR = "CONVEYOR"
    TUGGER = "TUGGER"
    CARRIER = "CARRIER"


class LocalizationType(Enum):
    NATURAL = "NATURAL"
    REFLECTOR = "REFLECTOR"
    RFID = "RFID"
    DMC = "DMC"
    SPOT = "SPOT"
    GRID = "GRID"


class NavigationType(Enum):
    PHYSICAL_LINE_GUIDED = "PHYSICAL_LINE_GUIDED"
    VIRTUAL_LINE_GUIDED = "VIRTUAL_LINE_GUIDED"
    AUTONOMOUS = "AUTONOMOUS"


class Support(Enum):
    """可选参数的支持类型"""
    SUPPORTED = "SUPPORTED"
    REQUIRED = "REQUIRED"


class ActionScope(Enum):
    """动作可用范围"""
    INSTANT = "INSTANT"
    NODE = "NODE"
    EDGE = "EDGE"


class ValueDataType(Enum):
    """动作参数值的数据类型"""
    BOOL = "BOOL"
    NUMBER = "NUMBER"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    STRING = "STRING"
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"


class WheelType(Enum):
    DRIVE = "DRIVE"
    CASTER = "CASTER"
    FIXED = "FIXED"
    MECANUM = "MECANUM"
