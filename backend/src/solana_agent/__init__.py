# solana_agent/__init__.py
"""
Solana agent kit 的 LangChain 工具
"""

__version__ = "0.1.0"
