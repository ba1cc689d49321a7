# solana_agent/tools/solana/__init__.py

from solana_agent.tools.solana.solana_kit import SolanaAgentKit, SolanaRPCKit
from solana_agent.tools.solana.solana_tools import create_solana_tools
from solana_agent.tools.solana.solana_types import PublicKey, SolanaKitError

# Solana 工具分类
SOLANA_TOOL_CATEGORIES = {
    "账户": [
        "solana_balance",             # 余额
        "solana_transfer",            # 转账
        "solana_get_wallet_address",  # 钱包地址
        "solana_request_funds",       # 水龙头
    ],
    "代币与 NFT": [
        "solana_deploy_token",          # 部署 SPL 代币
        "solana_deploy_collection",     # 部署 NFT 合集
        "solana_mint_nft",              # 铸造 NFT
        "solana_launch_pumpfun_token",  # Pump.fun 发币
    ],
    "交易与域名": [
        "solana_trade",            # Jupiter 兑换
        "solana_register_domain",  # .sol 域名
    ],
}

__all__ = [
    'create_solana_tools',
    'SolanaAgentKit',
    'SolanaRPCKit',
    'PublicKey',
    'SolanaKitError',
    'SOLANA_TOOL_CATEGORIES',
]
