#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
枚举词汇测试：线上字符串与枚举成员一一对应，大小写敏感
"""

import pytest

from vda5050_types import UnknownVariant
from vda5050_types.v1_1 import enums as enums_v1
from vda5050_types.v2_0 import enums as enums_v2
from vda5050_types.wire import decode_enum

ENUM_CLASSES = [
    enums_v1.BlockingType,
    enums_v1.ActionStatus,
    enums_v1.OperatingMode,
    enums_v1.ErrorLevel,
    enums_v1.InfoLevel,
    enums_v1.EStop,
    enums_v1.ConnectionState,
    enums_v2.BlockingType,
    enums_v2.OrientationType,
    enums_v2.ActionStatus,
    enums_v2.OperatingMode,
    enums_v2.ErrorLevel,
    enums_v2.InfoLevel,
    enums_v2.EStop,
    enums_v2.ConnectionState,
    enums_v2.AgvKinematic,
    enums_v2.AgvClass,
    enums_v2.LocalizationType,
    enums_v2.NavigationType,
    enums_v2.Support,
    enums_v2.ActionScope,
    enums_v2.ValueDataType,
    enums_v2.WheelType,
]

ALL_MEMBERS = [(enum_cls, member) for enum_cls in ENUM_CLASSES for member in enum_cls]


@pytest.mark.parametrize("enum_cls, member", ALL_MEMBERS,
                         ids=[f"{cls.__module__.split('.')[1]}-{cls.__name__}-{m.value}" for cls, m in ALL_MEMBERS])
def test_token_round_trip(enum_cls, member):
    assert decode_enum(member.value, enum_cls, "field") is member
    assert member.value == member.name


@pytest.mark.parametrize("enum_cls", ENUM_CLASSES, ids=lambda cls: cls.__name__)
def test_lowercase_token_is_unknown(enum_cls):
    token = next(iter(enum_cls)).value.lower()
    with pytest.raises(UnknownVariant) as exc_info:
        decode_enum(token, enum_cls, "field")
    assert exc_info.value.enum_name == enum_cls.__name__
    assert exc_info.value.token == token


def test_version_vocabularies_are_separate():
    assert not hasattr(enums_v1, "OrientationType")
    assert not hasattr(enums_v1, "AgvKinematic")
    assert enums_v1.BlockingType is not enums_v2.BlockingType
    assert [m.value for m in enums_v1.BlockingType] == [m.value for m in enums_v2.BlockingType]
