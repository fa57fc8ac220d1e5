"""数据模型模块

- config: 账号配置模型 (Config, Account, Ticket, Monitor, Sessions)
"""
from ticketbot.models.config import (
    Ticket,
    Sessions,
    Monitor,
    Account,
    Config,
)

__all__ = [
    "Ticket",
    "Sessions",
    "Monitor",
    "Account",
    "Config",
]
