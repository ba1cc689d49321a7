# solana_agent/tools/solana/tool_input.py
"""
工具输入解析
agent 传入的字符串 -> 结构化参数；宽松 JSON 允许键名不加引号
"""

import json
import re
from typing import Any, Dict, Optional

from solana_agent.tools.solana.solana_config import NATIVE_SYMBOL, get_token_by_symbol
from solana_agent.tools.solana.solana_types import (
    InvalidPublicKeyError, PublicKey, ToolInputError
)

# 只匹配对象开头或逗号后的裸键，避免改写值里的 "https://..."
_BARE_KEY = re.compile(r'(^|[{,])(\s*)([A-Za-z0-9_]+)(\s*):')


def normalize_json(text: str) -> str:
    """给裸键加引号：{decimals: 6} -> {"decimals": 6}"""
    return _BARE_KEY.sub(r'\1\2"\3"\4:', text.strip())


def to_json(text: Optional[str], lenient: bool = True) -> Any:
    """
    解析工具输入

    空输入返回 {}；先按严格 JSON 解析，失败且 lenient 时规范化后再解析一次。
    """
    text = (text or "").strip()
    if not text:
        return {}

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        if not lenient:
            raise ToolInputError(f"Invalid JSON input: {e}")
        strict_error = e

    try:
        return json.loads(normalize_json(text))
    except json.JSONDecodeError:
        raise ToolInputError(f"Invalid JSON input: {strict_error}")


def parse_object(text: Optional[str], lenient: bool = False) -> Dict[str, Any]:
    """解析为 JSON 对象"""
    data = to_json(text, lenient=lenient)
    if not isinstance(data, dict):
        raise ToolInputError("Input must be a JSON object")
    return data


def require(args: Dict[str, Any], field: str) -> Any:
    value = args.get(field)
    if value is None:
        raise ToolInputError(f"{field} is required")
    return value


def parse_address(value: Any, field: str) -> PublicKey:
    """账户地址（收款人、创作者等），不接受代币符号和空值"""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidPublicKeyError(f"{field} must be a valid Solana address")
    return PublicKey(value)


def optional_address(value: Any, field: str) -> Optional[PublicKey]:
    if value is None or value == "":
        return None
    return parse_address(value, field)


def resolve_mint(value: Any, field: str) -> PublicKey:
    """必填的代币 mint，可用符号；"SOL" 解析为 wrapped SOL"""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidPublicKeyError(f"{field} must be a valid token address or symbol")
    return resolve_address(value)


def resolve_address(value: Any, native_as_none: bool = False) -> Optional[PublicKey]:
    """
    可选的代币地址或符号 -> PublicKey，空值返回 None

    native_as_none 为 True 时 "SOL" 表示原生 SOL，返回 None；
    否则 "SOL" 解析为 wrapped SOL 的 mint。
    """
    if value is None or value == "":
        return None

    if isinstance(value, str):
        if native_as_none and value.strip().upper() == NATIVE_SYMBOL:
            return None
        token = get_token_by_symbol(value)
        if token:
            return PublicKey(token.mint)

    return PublicKey(value)
