"""账号配置模型

本模块定义配置文件的结构：
- Ticket: 抢票目标
- Sessions: 监控场次及可接受票档
- Monitor: 回流监控配置
- Account: 单个账号配置
- Config: 根配置

加载后的配置不可修改，序列字段均为 tuple。
"""
from typing import Annotated, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ticketbot.utils.field_parsers import parse_comma_separated_ints

# 整数取值范围
UInt = Annotated[int, Field(ge=0, le=2**64 - 1)]
SInt = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]
SmallInt = Annotated[int, Field(ge=0, le=255)]


class Ticket(BaseModel):
    """抢票目标"""

    model_config = ConfigDict(frozen=True, strict=True)

    id: str  # 商品 ID
    num: UInt  # 购买数量
    sessions: UInt  # 场次
    grade: UInt  # 票档


class Sessions(BaseModel):
    """监控场次

    grades 在配置文件中写作逗号分隔的字符串，如 "1,2,3"。
    """

    model_config = ConfigDict(frozen=True, strict=True)

    index: UInt
    grades: Tuple[UInt, ...]

    @field_validator("grades", mode="before")
    @classmethod
    def _parse_grades(cls, value):
        return parse_comma_separated_ints(value)


class Monitor(BaseModel):
    """回流监控配置"""

    model_config = ConfigDict(frozen=True, strict=True)

    enable: bool
    interval: UInt  # 轮询间隔
    sessions: Tuple[Sessions, ...]


class Account(BaseModel):
    """账号配置

    可选字段为 None 时由调用方使用默认值。
    """

    model_config = ConfigDict(frozen=True, strict=True)

    cookie: str
    remark: str
    ticket: Ticket
    interval: Optional[UInt] = None
    earliest_submit_time: Optional[SInt] = None
    request_time: Optional[SInt] = None
    retry_times: Optional[SmallInt] = None
    retry_interval: Optional[UInt] = None
    monitor: Optional[Monitor] = None
    # 钉钉通知，开启时需配置 token（此处不校验）
    dingtalk_notify: Optional[bool] = None
    dingtalk_token: Optional[str] = None


class Config(BaseModel):
    """根配置"""

    model_config = ConfigDict(frozen=True, strict=True)

    accounts: Tuple[Account, ...]
