"""字段解析模块

配置文件中部分字段以文本形式存储，加载时转换为结构化值。
"""
import re
from typing import Any, Tuple

# 仅允许 ASCII 数字，可带一个前导 +
_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")


class FieldFormatError(ValueError):
    """字段格式错误"""


def parse_comma_separated_ints(value: Any) -> Tuple[int, ...]:
    """
    解析逗号分隔的非负整数列表

    Args:
        value: 形如 "1, 2 ,3" 的字符串

    Returns:
        Tuple[int, ...]: 按原顺序排列的整数

    Raises:
        FieldFormatError: 非字符串输入，或任一片段为空、非数字、负数
    """
    if not isinstance(value, str):
        raise FieldFormatError(
            f"期望逗号分隔的字符串，实际为 {type(value).__name__}: {value!r}"
        )

    result = []
    for piece in value.split(","):
        piece = piece.strip()
        if not piece:
            raise FieldFormatError(f"存在空片段: {value!r}")
        if not _UNSIGNED_INT_RE.fullmatch(piece):
            raise FieldFormatError(f"非法数字: {piece!r}")
        result.append(int(piece))
    return tuple(result)
