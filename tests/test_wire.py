#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
线上格式适配层测试：时间戳、字段读取和错误路径
"""

from datetime import datetime, timedelta, timezone

import pytest

from vda5050_types import DecodeError, MissingField, TypeMismatch
from vda5050_types.wire import FieldReader, add_optional, decode_timestamp, encode_timestamp


@pytest.mark.parametrize("raw, expected", [
    ("2017-04-15T11:40:03.12Z", datetime(2017, 4, 15, 11, 40, 3, 120000, tzinfo=timezone.utc)),
    ("2017-04-15T11:40:03Z", datetime(2017, 4, 15, 11, 40, 3, tzinfo=timezone.utc)),
    ("2017-04-15T11:40:03.123456789Z", datetime(2017, 4, 15, 11, 40, 3, 123456, tzinfo=timezone.utc)),
    ("2017-04-15T13:40:03+02:00", datetime(2017, 4, 15, 11, 40, 3, tzinfo=timezone.utc)),
])
def test_decode_timestamp(raw, expected):
    assert decode_timestamp(raw, "timestamp") == expected


@pytest.mark.parametrize("raw", [
    "2017-04-15T11:40:03",
    "2017-04-15 11:40:03Z",
    "2017-13-15T11:40:03Z",
    1492256403,
])
def test_invalid_timestamp(raw):
    with pytest.raises(TypeMismatch):
        decode_timestamp(raw, "timestamp")


def test_encode_timestamp_converts_to_utc():
    local = datetime(2024, 1, 1, 8, 0, tzinfo=timezone(timedelta(hours=8)))

    assert encode_timestamp(local) == "2024-01-01T00:00:00.000000Z"


def test_reader_paths():
    reader = FieldReader({"a": {"b": [{"c": "x"}, {}]}})
    inner = FieldReader(reader.data["a"], reader.child("a"))

    assert inner.child("b") == "a.b"
    with pytest.raises(MissingField) as exc_info:
        inner.text_sequence("missing")
    assert exc_info.value.path == "a.missing"
    assert isinstance(exc_info.value, DecodeError)
    assert isinstance(exc_info.value, ValueError)


def test_reader_scalars():
    reader = FieldReader({"n": 3, "f": 2.5, "s": "x", "flag": False, "neg": -1, "nan": float("nan")})

    assert reader.number("n") == 3.0
    assert reader.uint("n") == 3
    assert reader.opt_text("absent") is None
    assert reader.boolean("flag") is False
    with pytest.raises(TypeMismatch):
        reader.uint("neg")
    with pytest.raises(TypeMismatch):
        reader.uint("f")
    with pytest.raises(TypeMismatch):
        reader.number("nan")
    with pytest.raises(TypeMismatch):
        FieldReader({"big": 10 ** 400}).number("big")
    with pytest.raises(TypeMismatch):
        reader.text("n")
    with pytest.raises(TypeMismatch):
        reader.boolean("s")


def test_type_mismatch_details():
    with pytest.raises(TypeMismatch) as exc_info:
        FieldReader({"x": "1"}).number("x")

    assert exc_info.value.expected == "number"
    assert exc_info.value.actual == "1"
    assert str(exc_info.value).startswith("x: ")


def test_add_optional_keeps_falsy_values():
    result = add_optional({}, {"a": None, "b": 0, "c": "", "d": [], "e": False})

    assert result == {"b": 0, "c": "", "d": [], "e": False}
