#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
生产者配置、主题生成和消息头工厂测试
"""

import threading
from datetime import datetime, timezone
from pathlib import Path

import pytest

from vda5050_types import ConfigError
from vda5050_types.config import EnvelopeFactory, ProducerConfig, build_topic, load_producer_config
from vda5050_types.v2_0 import ConnectionMessage, ConnectionState

ROBOT_CONFIG = """
robot_info:
  manufacturer: SEER
  serial_number: VWED-0010
vda5050:
  protocol_version: 2.0.0
  interface_name: uagv
network:
  ip_address: 192.168.1.10
"""


def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "VWED-0010.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_config(tmp_path):
    config = load_producer_config(_write(tmp_path, ROBOT_CONFIG))

    assert config == ProducerConfig("SEER", "VWED-0010", "2.0.0", "uagv")
    assert config.major_version == "v2"


def test_defaults_without_vda5050_section(tmp_path):
    config = load_producer_config(_write(tmp_path, "robot_info:\n  manufacturer: SEER\n  serial_number: '0010'\n"))

    assert config.serial_number == "0010"
    assert config.version == "2.0.0"
    assert config.interface_name == "uagv"


@pytest.mark.parametrize("text", [
    "robot_info:\n  manufacturer: SEER\n",
    "network:\n  ip_address: 1.2.3.4\n",
    "",
    "robot_info: [unclosed\n",
    "robot_info: [a, b]\n",
    "robot_info: SEER\n",
    "robot_info:\n  manufacturer: SEER\n  serial_number: X\nvda5050: 2\n",
])
def test_invalid_config(tmp_path, text):
    with pytest.raises(ConfigError):
        load_producer_config(_write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_producer_config(str(tmp_path / "missing.yaml"))


def test_build_topic():
    config = ProducerConfig("SEER", "VWED-0010")

    assert build_topic(config, "/order") == "uagv/v2/SEER/VWED-0010/order"
    assert build_topic(ProducerConfig("SEER", "X", version="1.1.0"), "state") == "uagv/v1/SEER/X/state"


def test_envelope_factory_counts_per_topic():
    stamp = datetime(2024, 5, 1, tzinfo=timezone.utc)
    factory = EnvelopeFactory(ProducerConfig("SEER", "VWED-0010"), clock=lambda: stamp)

    ids = [factory.next_envelope("/state").header_id for _ in range(3)]
    order_envelope = factory.next_envelope("order")

    assert ids == [0, 1, 2]
    assert order_envelope.header_id == 0
    assert order_envelope.timestamp == stamp
    assert factory.next_envelope("state").header_id == 3


def test_envelope_builds_message():
    factory = EnvelopeFactory(ProducerConfig("SEER", "VWED-0010"))

    message = ConnectionMessage(**factory.next_envelope("/connection").as_kwargs(),
                                connection_state=ConnectionState.ONLINE)

    assert message.get_message_dict()["headerId"] == 0
    assert message.get_message_dict()["serialNumber"] == "VWED-0010"
    assert message.timestamp.tzinfo is not None


def test_envelope_factory_is_thread_safe():
    factory = EnvelopeFactory(ProducerConfig("SEER", "VWED-0010"))
    issued = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            header_id = factory.next_envelope("state").header_id
            with lock:
                issued.append(header_id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(issued) == list(range(200))
