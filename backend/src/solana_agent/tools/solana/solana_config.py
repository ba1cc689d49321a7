# solana_agent/tools/solana/solana_config.py
"""
Solana 配置文件
RPC 端点、网络、钱包和工具默认值，全部可通过环境变量覆盖
"""

import os
import logging
from typing import Dict, List, Optional
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

# ===== 基础配置类 =====

@dataclass
class TokenInfo:
    """代币信息"""
    symbol: str
    mint: str
    decimals: int
    name: str

@dataclass
class RPCConfig:
    """RPC 配置"""
    timeout: int = 30
    max_retries: int = 3
    rate_limit_delay: float = 0.1
    commitment: str = "confirmed"

# ===== 网络 =====

MAINNET = "mainnet-beta"
DEVNET = "devnet"
TESTNET = "testnet"

SUPPORTED_NETWORKS = [MAINNET, DEVNET, TESTNET]

SOLANA_NETWORK = os.getenv("SOLANA_NETWORK", MAINNET).lower()

LAMPORTS_PER_SOL = 1_000_000_000

# 水龙头每次申请 5 SOL
AIRDROP_LAMPORTS = int(os.getenv("SOLANA_AIRDROP_LAMPORTS", str(5 * LAMPORTS_PER_SOL)))

# ===== 钱包 =====

# 只需要公钥；签名由外部 agent kit 负责
WALLET_ADDRESS = os.getenv("SOLANA_WALLET_ADDRESS", "")

# ===== 工具默认值 =====

DEFAULT_TOKEN_DECIMALS = 9
DEFAULT_DOMAIN_SPACE_KB = 1
DEFAULT_ERROR_CODE = "UNKNOWN_ERROR"

# ===== 程序 ID =====

TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

# ===== 常用 SPL 代币（符号 -> mint，供 agent 直接传符号） =====

NATIVE_SYMBOL = "SOL"

COMMON_TOKENS: Dict[str, TokenInfo] = {
    # 稳定币
    "USDC": TokenInfo(
        symbol="USDC",
        mint="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
        decimals=6,
        name="USD Coin"
    ),
    "USDT": TokenInfo(
        symbol="USDT",
        mint="Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB",
        decimals=6,
        name="Tether USD"
    ),

    # 主要代币
    "SOL": TokenInfo(
        symbol="SOL",
        mint="So11111111111111111111111111111111111111112",
        decimals=9,
        name="Wrapped SOL"
    ),
    "JUP": TokenInfo(
        symbol="JUP",
        mint="JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN",
        decimals=6,
        name="Jupiter"
    ),
    "RAY": TokenInfo(
        symbol="RAY",
        mint="4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R",
        decimals=6,
        name="Raydium"
    ),

    # Meme 币
    "BONK": TokenInfo(
        symbol="BONK",
        mint="DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
        decimals=5,
        name="Bonk"
    ),
    "WIF": TokenInfo(
        symbol="WIF",
        mint="EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm",
        decimals=6,
        name="dogwifhat"
    ),
}

# ===== Solana RPC 提供商配置 =====

def get_rpc_providers(network: str = SOLANA_NETWORK) -> List[str]:
    """按优先级返回指定网络的 RPC 端点"""
    if network == MAINNET:
        providers = [
            # 自定义端点优先
            os.getenv("SOLANA_RPC_URL"),

            # Helius (如果有 API key)
            f"https://mainnet.helius-rpc.com/?api-key={os.getenv('HELIUS_API_KEY')}" if os.getenv('HELIUS_API_KEY') else None,

            # 免费公共 RPC
            os.getenv("SOLANA_RPC_1", "https://api.mainnet-beta.solana.com"),
            os.getenv("SOLANA_RPC_2", "https://rpc.ankr.com/solana"),
            os.getenv("SOLANA_RPC_3", "https://solana.public-rpc.com"),
        ]
    elif network == DEVNET:
        providers = [
            os.getenv("SOLANA_RPC_URL"),
            f"https://devnet.helius-rpc.com/?api-key={os.getenv('HELIUS_API_KEY')}" if os.getenv('HELIUS_API_KEY') else None,
            "https://api.devnet.solana.com",
        ]
    elif network == TESTNET:
        providers = [
            os.getenv("SOLANA_RPC_URL"),
            "https://api.testnet.solana.com",
        ]
    else:
        providers = [os.getenv("SOLANA_RPC_URL")]

    # 过滤掉 None 值
    return [rpc for rpc in providers if rpc]

RPC_PROVIDERS = get_rpc_providers()

# ===== Solana 浏览器 =====

EXPLORERS = {
    "solscan": os.getenv("SOLSCAN_URL", "https://solscan.io"),
}

# ===== RPC 配置参数 =====

REQUEST_CONFIG = RPCConfig(
    timeout=int(os.getenv("SOLANA_TIMEOUT", "30")),
    max_retries=int(os.getenv("SOLANA_MAX_RETRIES", "3")),
    rate_limit_delay=float(os.getenv("SOLANA_RATE_LIMIT", "0.1")),
    commitment=os.getenv("SOLANA_COMMITMENT", "confirmed")
)

# ===== 错误处理配置 =====

ERROR_CONFIG = {
    "log_errors": os.getenv("SOLANA_LOG_ERRORS", "true").lower() == "true",
}

# ===== 调试配置 =====

DEBUG_CONFIG = {
    "enabled": os.getenv("SOLANA_DEBUG", "false").lower() == "true",
    "log_requests": os.getenv("SOLANA_LOG_REQUESTS", "false").lower() == "true",
}

# ===== 工具函数 =====

def format_lamports(lamports: int) -> float:
    """lamports 转换为 SOL"""
    return lamports / LAMPORTS_PER_SOL

def explorer_tx_url(signature: str, network: str = SOLANA_NETWORK) -> str:
    """交易的浏览器链接，非主网附带 cluster 参数"""
    url = f"{EXPLORERS['solscan']}/tx/{signature}"
    if network != MAINNET:
        url += f"?cluster={network}"
    return url

def get_token_by_symbol(symbol: str) -> Optional[TokenInfo]:
    """根据符号获取代币信息"""
    return COMMON_TOKENS.get(symbol.strip().upper())

def validate_config() -> List[str]:
    """验证配置的完整性"""
    errors = []

    if SOLANA_NETWORK not in SUPPORTED_NETWORKS:
        errors.append(f"未知的网络: {SOLANA_NETWORK}")

    # 检查 RPC 端点
    if not RPC_PROVIDERS:
        errors.append("没有配置任何 RPC 端点")

    # 检查请求配置
    if REQUEST_CONFIG.timeout <= 0:
        errors.append("timeout 必须大于0")

    if REQUEST_CONFIG.max_retries <= 0:
        errors.append("max_retries 必须大于0")

    if not WALLET_ADDRESS:
        errors.append("SOLANA_WALLET_ADDRESS 未配置")

    return errors

# 配置验证（如果启用调试模式）
if DEBUG_CONFIG["enabled"]:
    logger = logging.getLogger(__name__)
    for error in validate_config():
        logger.warning(f"Solana配置警告: {error}")
