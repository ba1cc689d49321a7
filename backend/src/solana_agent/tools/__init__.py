# solana_agent/tools/__init__.py
"""
区块链工具集合
"""

from solana_agent.tools.solana import (
    SOLANA_TOOL_CATEGORIES, SolanaAgentKit, SolanaRPCKit, create_solana_tools
)

__all__ = [
    'create_solana_tools',
    'SolanaAgentKit',
    'SolanaRPCKit',
    'SOLANA_TOOL_CATEGORIES',
]
