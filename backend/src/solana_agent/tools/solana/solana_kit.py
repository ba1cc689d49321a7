# solana_agent/tools/solana/solana_kit.py
"""
Solana agent kit 接口
工具层只做参数转换，链上操作全部交给实现该接口的 kit
"""

import asyncio
import logging
from typing import Optional, Protocol

from solana_agent.tools.solana.solana_client import SolanaRPCClient
from solana_agent.tools.solana.solana_config import (
    AIRDROP_LAMPORTS, MAINNET, SOLANA_NETWORK, WALLET_ADDRESS, format_lamports
)
from solana_agent.tools.solana.solana_types import (
    CollectionOptions, DeployedCollection, DeployedToken, MintedNFT,
    NFTMetadata, PublicKey, PumpFunTokenOptions, SolanaKitError
)

logger = logging.getLogger(__name__)


class SolanaAgentKit(Protocol):
    """工具调用的 kit 接口，所有链上操作均为异步"""

    wallet_address: PublicKey

    async def get_balance(self, token_address: Optional[PublicKey] = None) -> float: ...

    async def transfer(self, to: PublicKey, amount: float, mint: Optional[PublicKey] = None): ...

    async def deploy_token(self, decimals: int = 9) -> DeployedToken: ...

    async def deploy_collection(self, options: CollectionOptions) -> DeployedCollection: ...

    async def mint_nft(
        self,
        collection_mint: PublicKey,
        metadata: NFTMetadata,
        recipient: Optional[PublicKey] = None,
    ) -> MintedNFT: ...

    async def trade(
        self,
        output_mint: PublicKey,
        input_amount: float,
        input_mint: Optional[PublicKey] = None,
        slippage_bps: Optional[int] = None,
    ) -> str: ...

    async def request_faucet_funds(self): ...

    async def register_domain(self, name: str, space_kb: int = 1) -> str: ...

    async def launch_pump_fun_token(
        self,
        token_name: str,
        token_ticker: str,
        options: PumpFunTokenOptions,
    ): ...


class SolanaRPCKit:
    """
    只读 kit：通过 RPC 完成无需签名的操作

    余额查询、钱包地址和水龙头可用；转账、部署、交易等需要签名的操作
    抛出 UNSUPPORTED_OPERATION，请换用带签名能力的 kit。
    """

    def __init__(
        self,
        wallet_address: Optional[str] = None,
        client: Optional[SolanaRPCClient] = None,
        network: str = SOLANA_NETWORK,
    ):
        self._wallet_address = wallet_address if wallet_address is not None else WALLET_ADDRESS
        self.client = client or SolanaRPCClient()
        self.network = network

    @property
    def wallet_address(self) -> PublicKey:
        if not self._wallet_address:
            raise SolanaKitError("SOLANA_WALLET_ADDRESS is not configured", code="WALLET_NOT_CONFIGURED")
        return PublicKey(self._wallet_address)

    async def get_balance(self, token_address: Optional[PublicKey] = None) -> float:
        owner = str(self.wallet_address)

        if token_address is None:
            lamports = await asyncio.to_thread(self.client.get_balance, owner)
            return format_lamports(lamports)

        accounts = await asyncio.to_thread(
            self.client.get_token_accounts_by_owner, owner, str(token_address)
        )
        total = 0.0
        for account in accounts:
            info = account.get("account", {}).get("data", {}).get("parsed", {}).get("info", {})
            total += info.get("tokenAmount", {}).get("uiAmount") or 0.0
        return total

    async def request_faucet_funds(self) -> str:
        if self.network == MAINNET:
            raise SolanaKitError(
                "Faucet funds are only available on devnet or testnet",
                code="FAUCET_UNAVAILABLE",
            )
        signature = await asyncio.to_thread(
            self.client.request_airdrop, str(self.wallet_address), AIRDROP_LAMPORTS
        )
        logger.info(f"水龙头空投已提交: {signature}")
        return signature

    def _unsupported(self, operation: str):
        raise SolanaKitError(
            f"{operation} requires a signing agent kit; SolanaRPCKit is read-only",
            code="UNSUPPORTED_OPERATION",
        )

    async def transfer(self, to, amount, mint=None):
        self._unsupported("transfer")

    async def deploy_token(self, decimals=9):
        self._unsupported("deploy_token")

    async def deploy_collection(self, options):
        self._unsupported("deploy_collection")

    async def mint_nft(self, collection_mint, metadata, recipient=None):
        self._unsupported("mint_nft")

    async def trade(self, output_mint, input_amount, input_mint=None, slippage_bps=None):
        self._unsupported("trade")

    async def register_domain(self, name, space_kb=1):
        self._unsupported("register_domain")

    async def launch_pump_fun_token(self, token_name, token_ticker, options):
        self._unsupported("launch_pump_fun_token")
