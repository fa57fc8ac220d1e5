"""配置加载模块

加载流程：
1. 读取 yaml 配置文件
2. 解析为通用文档树并转换为 json 文本
3. 将 json 文本解码为指定的模型
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from ticketbot.models.config import Config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("./config/config.yaml")


class ConfigError(Exception):
    """配置错误基类"""


class ConfigFileAccessError(ConfigError):
    """配置文件无法读取"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"配置文件读取失败: {self.path} ({reason})")


def load_config(config_path: Union[str, Path], model: Any) -> Optional[Any]:
    """
    加载配置文件

    Args:
        config_path: yaml 配置文件路径
        model: 目标类型，任何 pydantic 可校验的类型

    Returns:
        解码后的配置；yaml 语法错误时返回 None

    Raises:
        ConfigFileAccessError: 文件不存在、无权限或编码错误
        SystemExit: 文档结构与目标类型不符
    """
    config_path = Path(config_path)

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileAccessError(config_path, str(e)) from e

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.error(f"配置文件解析失败 {config_path}: {e}")
        return None

    try:
        data = json.dumps(document, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        logger.error(f"配置文件包含无法转换的值 {config_path}: {e}")
        raise SystemExit(f"配置转换失败: {config_path} ({e})") from e

    try:
        return TypeAdapter(model).validate_json(data)
    except ValidationError as e:
        logger.error(f"配置解码失败 {config_path}: {e}")
        raise SystemExit(f"配置解码失败:\n{data}") from e


def load_global_config() -> Optional[Config]:
    """加载默认位置 ./config/config.yaml 的配置"""
    return load_config(DEFAULT_CONFIG_PATH, Config)
