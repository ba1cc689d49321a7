# solana_agent/tools/solana/solana_client.py
"""
Solana RPC 客户端
支持多个 RPC 端点，自动故障转移
"""

import requests
import logging
import time
from typing import Dict, Any, List, Optional
from solana_agent.tools.solana.solana_config import (
    RPC_PROVIDERS, REQUEST_CONFIG, DEBUG_CONFIG, TOKEN_PROGRAM_ID
)
from solana_agent.tools.solana.solana_types import SolanaRPCError

logger = logging.getLogger(__name__)

# 端点失败计数的权重，计数越高越靠后尝试
ERROR_PENALTY = 1
TIMEOUT_PENALTY = 2
AUTH_PENALTY = 10

def _error_penalty(error: Any) -> int:
    """需要认证的错误说明端点不可用，严重惩罚"""
    text = str(error).lower()
    if any(word in text for word in ("unauthorized", "forbidden", "api key")):
        return AUTH_PENALTY
    return ERROR_PENALTY

class SolanaRPCClient:
    """Solana RPC 客户端"""

    def __init__(self, rpc_urls: Optional[List[str]] = None, config=REQUEST_CONFIG):
        self.rpc_urls = list(rpc_urls) if rpc_urls is not None else list(RPC_PROVIDERS)
        self.config = config
        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
        })
        self.failure_counts = {}

    def call_rpc(self, method: str, params: List[Any] = None) -> Any:
        """
        调用 Solana RPC 方法，按失败次数从少到多尝试端点

        Args:
            method: RPC 方法名
            params: 方法参数

        Returns:
            RPC 响应结果
        """
        if not self.rpc_urls:
            raise SolanaRPCError("没有配置 RPC 端点")

        payload = {"jsonrpc": "2.0", "method": method, "params": params or [], "id": 1}
        if DEBUG_CONFIG["log_requests"]:
            logger.debug(f"RPC 请求: {payload}")

        last_error = None
        for attempt, url in enumerate(self._ordered_urls()[:self.config.max_retries]):
            if attempt > 0:
                time.sleep(self.config.rate_limit_delay)
            logger.debug(f"尝试 Solana RPC: {url} (方法: {method})")

            try:
                data = self._post(url, payload)
            except requests.exceptions.Timeout:
                logger.warning(f"Solana RPC {url} 超时")
                self._penalise(url, TIMEOUT_PENALTY)
                last_error = "请求超时"
                continue
            except (requests.exceptions.RequestException, ValueError) as e:
                logger.warning(f"Solana RPC {url} 错误: {str(e)}")
                self._penalise(url, ERROR_PENALTY)
                last_error = str(e)
                continue

            if "error" in data:
                logger.warning(f"RPC 错误: {data['error']}")
                self._penalise(url, _error_penalty(data["error"]))
                last_error = f"RPC 错误: {data['error']}"
                continue

            self._penalise(url, -1)
            return data.get("result")

        raise SolanaRPCError(f"所有 Solana RPC 端点都失败了。最后的错误: {last_error}")

    def _post(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = self.session.post(url, json=payload, timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    def _ordered_urls(self) -> List[str]:
        return sorted(self.rpc_urls, key=lambda url: self.failure_counts.get(url, 0))

    def _penalise(self, url: str, weight: int):
        count = max(0, self.failure_counts.get(url, 0) + weight)
        if count or url in self.failure_counts:
            self.failure_counts[url] = count

    def get_balance(self, pubkey: str) -> int:
        """获取账户余额（lamports）"""
        result = self.call_rpc("getBalance", [pubkey, {"commitment": self.config.commitment}])
        return result.get("value", 0)

    def get_token_accounts_by_owner(self, owner: str, mint: Optional[str] = None) -> List[Dict]:
        """获取账户的代币账户，指定 mint 时只返回该代币"""
        params = [
            owner,
            {"mint": mint} if mint else {"programId": TOKEN_PROGRAM_ID},
            {"encoding": "jsonParsed", "commitment": self.config.commitment}
        ]

        result = self.call_rpc("getTokenAccountsByOwner", params)
        return result.get("value", [])

    def request_airdrop(self, pubkey: str, lamports: int) -> str:
        """申请水龙头空投，返回交易签名"""
        return self.call_rpc("requestAirdrop", [
            pubkey,
            lamports,
            {"commitment": self.config.commitment}
        ])
