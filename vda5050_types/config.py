#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
消息生产者配置
从机器人配置文件（如robot_config/VWED-0010.yaml）读取制造商、序列号和协议版本，
并按主题生成递增的消息头

配置文件格式:
    robot_info:
      manufacturer: SEER
      serial_number: VWED-0010
    vda5050:
      protocol_version: 2.0.0
      interface_name: uagv
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

import yaml

from .envelope import Envelope
from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProducerConfig:
    """消息生产者（AGV或主控）的身份信息"""
    manufacturer: str
    serial_number: str
    version: str = "2.0.0"
    interface_name: str = "uagv"

    @property
    def major_version(self) -> str:
        """主题中使用的主版本号，例如 2.0.0 -> v2"""
        return f"v{self.version.split('.')[0]}"


def load_producer_config(config_path: str) -> ProducerConfig:
    """从YAML配置文件加载生产者配置

    Args:
        config_path: 配置文件路径

    Raises:
        ConfigError: 文件无法读取、YAML语法错误或缺少robot_info中的必需字段
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"YAML解析错误 {config_path}: {e}")
        raise ConfigError(f"YAML解析错误 {config_path}: {e}") from e
    except OSError as e:
        logger.error(f"加载配置文件失败 {config_path}: {e}")
        raise ConfigError(f"加载配置文件失败 {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigError(f"配置文件内容为空或格式不正确: {config_path}")

    robot_info = config_data.get('robot_info') or {}
    vda5050_config = config_data.get('vda5050') or {}
    for section, value in (('robot_info', robot_info), ('vda5050', vda5050_config)):
        if not isinstance(value, dict):
            raise ConfigError(f"配置文件 {config_path} 的{section}必须是映射，实际为 {type(value).__name__}")

    missing = [key for key in ('manufacturer', 'serial_number') if not robot_info.get(key)]
    if missing:
        raise ConfigError(f"配置文件 {config_path} 的robot_info缺少字段: {', '.join(missing)}")

    config = ProducerConfig(
        manufacturer=str(robot_info['manufacturer']),
        serial_number=str(robot_info['serial_number']),
        version=str(vda5050_config.get('protocol_version', '2.0.0')),
        interface_name=str(vda5050_config.get('interface_name', 'uagv'))
    )
    logger.info(f"加载生产者配置: {config.manufacturer}/{config.serial_number} (协议版本 {config.version})")
    return config


def build_topic(config: ProducerConfig, subtopic: str) -> str:
    """生成MQTT主题，例如 uagv/v2/SEER/VWED-0010/order"""
    return (f"{config.interface_name}/{config.major_version}/"
            f"{config.manufacturer}/{config.serial_number}/{subtopic.lstrip('/')}")


class EnvelopeFactory:
    """按主题生成消息头，每个主题的headerId从0开始各自递增"""

    def __init__(self, config: ProducerConfig,
                 clock: Optional[Callable[[], datetime]] = None):
        self.config = config
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._header_ids: Dict[str, int] = {}
        self._lock = threading.Lock()

    def next_envelope(self, subtopic: str) -> Envelope:
        """返回该主题的下一个消息头"""
        topic = subtopic.lstrip('/')
        with self._lock:
            header_id = self._header_ids.get(topic, 0)
            self._header_ids[topic] = header_id + 1

        envelope = Envelope(
            header_id=header_id,
            timestamp=self._clock(),
            version=self.config.version,
            manufacturer=self.config.manufacturer,
            serial_number=self.config.serial_number
        )
        logger.debug(f"生成消息头 {topic} headerId={header_id}")
        return envelope
