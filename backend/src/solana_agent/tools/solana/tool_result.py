# solana_agent/tools/solana/tool_result.py
"""
工具结果
所有工具先产出 ToolResult，再统一渲染为文本或 JSON
"""

import functools
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

from solana_agent.tools.solana.solana_config import DEFAULT_ERROR_CODE, ERROR_CONFIG

logger = logging.getLogger(__name__)

TEXT = "text"
JSON = "json"


@dataclass
class ToolResult:
    """成功/失败二选一的工具结果"""

    ok: bool
    message: str
    action: Optional[str] = None
    code: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, message: str, **data) -> "ToolResult":
        return cls(ok=True, message=message, data=data)

    @classmethod
    def failure(cls, action: str, error: BaseException) -> "ToolResult":
        return cls(
            ok=False,
            message=str(error),
            action=action,
            code=str(getattr(error, "code", None) or DEFAULT_ERROR_CODE),
        )

    def to_text(self) -> str:
        if self.ok:
            return self.message
        return f"Error {self.action}: {self.message}"

    def to_json(self) -> str:
        if self.ok:
            return json.dumps({"status": "success", "message": self.message, **self.data})
        return json.dumps({"status": "error", "message": self.message, "code": self.code})

    def render(self, fmt: str = TEXT) -> str:
        if fmt == JSON:
            return self.to_json()
        return self.to_text()


def tool_call(action: str, render: str = TEXT):
    """
    工具函数装饰器

    被装饰函数返回 ToolResult；任何异常都转为失败结果，不会抛给 agent。
    """
    def decorator(func: Callable[..., Awaitable[ToolResult]]):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> str:
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} 失败: {str(e)}", exc_info=ERROR_CONFIG["log_errors"])
                result = ToolResult.failure(action, e)
            return result.render(render)
        return wrapper
    return decorator
