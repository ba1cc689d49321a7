"""Pytest fixtures: fake agent kit and sample addresses."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from solana_agent.tools.solana.solana_types import (
    DeployedCollection, DeployedToken, MintedNFT, PublicKey
)

WALLET = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
RECIPIENT = "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"
COLLECTION = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
WSOL_MINT = "So11111111111111111111111111111111111111112"
NEW_MINT = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SIGNATURE = "5VERv8NMvzbJMEkV8xnrLkEaWRtSz9CosKDYjCJjBRnbJLgp8uirBgmQpjKhoR4tjF3ZpRzrFmBV6UjKdiSZkQUW"


@pytest.fixture
def solana_kit():
    """Kit double whose async methods succeed with canned results."""
    kit = MagicMock()
    kit.wallet_address = PublicKey(WALLET)
    kit.get_balance = AsyncMock(return_value=1.5)
    kit.transfer = AsyncMock(return_value=None)
    kit.deploy_token = AsyncMock(return_value=DeployedToken(mint=PublicKey(NEW_MINT)))
    kit.deploy_collection = AsyncMock(
        return_value=DeployedCollection(collection_address=PublicKey(COLLECTION))
    )
    kit.mint_nft = AsyncMock(return_value=MintedNFT(mint=PublicKey(NEW_MINT)))
    kit.trade = AsyncMock(return_value=SIGNATURE)
    kit.request_faucet_funds = AsyncMock(return_value=SIGNATURE)
    kit.register_domain = AsyncMock(return_value=SIGNATURE)
    kit.launch_pump_fun_token = AsyncMock(return_value=None)
    return kit


@pytest.fixture
def tools_by_name(solana_kit):
    from solana_agent.tools.solana.solana_tools import create_solana_tools
    return {tool.name: tool for tool in create_solana_tools(solana_kit)}
