# solana_agent/tools/solana/solana_tools.py
"""
Solana 工具集 - agent kit 适配层
每个工具：解析字符串输入 -> 调用 kit 的一个方法 -> 结果转字符串
"""

from langchain_core.tools import Tool
from typing import Any, Dict, List
import logging

from solana_agent.tools.solana.solana_config import (
    DEFAULT_DOMAIN_SPACE_KB, DEFAULT_TOKEN_DECIMALS, SOLANA_NETWORK, explorer_tx_url
)
from solana_agent.tools.solana.solana_kit import SolanaAgentKit
from solana_agent.tools.solana.solana_types import (
    CollectionOptions, Creator, NFTMetadata, PumpFunTokenOptions, ToolInputError
)
from solana_agent.tools.solana.tool_input import (
    optional_address, parse_address, parse_object, require, resolve_address,
    resolve_mint
)
from solana_agent.tools.solana.tool_result import JSON, ToolResult, tool_call

logger = logging.getLogger(__name__)

# ===== 账户相关工具 =====

@tool_call("getting balance")
async def get_balance(solana_kit: SolanaAgentKit, tool_input: str = "") -> ToolResult:
    """
    获取余额
    输入：代币地址/符号，为空时查询 SOL
    """
    address = (tool_input or "").strip().strip("'\"")
    logger.info(f"开始查询余额: {address or 'SOL'}")

    token_address = resolve_address(address, native_as_none=True)
    balance = await solana_kit.get_balance(token_address)
    return ToolResult.success(f"Balance: {balance}")

@tool_call("making transfer")
async def transfer(solana_kit: SolanaAgentKit, tool_input: str) -> ToolResult:
    """
    转账 SOL 或 SPL 代币
    输入：{"to": 地址, "amount": 数量, "mint": 可选代币地址}
    """
    args = parse_object(tool_input)
    to = require(args, "to")
    amount = require(args, "amount")

    recipient = parse_address(to, "to")
    mint = resolve_address(args.get("mint"), native_as_none=True)

    logger.info(f"开始转账: {amount} -> {recipient}")
    await solana_kit.transfer(recipient, amount, mint)
    return ToolResult.success(f"Successfully transferred {amount} to {to}")

@tool_call("requesting funds")
async def request_funds(solana_kit: SolanaAgentKit, tool_input: str = "") -> ToolResult:
    """申请测试网水龙头，输入忽略"""
    await solana_kit.request_faucet_funds()
    return ToolResult.success("Successfully requested faucet funds")

async def get_wallet_address(solana_kit: SolanaAgentKit, tool_input: str = "") -> str:
    # 不捕获异常，kit 的错误直接抛给调用方
    return str(solana_kit.wallet_address)

# ===== 代币与 NFT 工具 =====

@tool_call("deploying token")
async def deploy_token(solana_kit: SolanaAgentKit, tool_input: str = "") -> ToolResult:
    """
    部署 SPL 代币
    输入：{decimals?: number}，允许键名不加引号
    """
    args = parse_object(tool_input, lenient=True)
    decimals = args.get("decimals")
    if decimals is None:
        decimals = DEFAULT_TOKEN_DECIMALS

    result = await solana_kit.deploy_token(decimals)
    return ToolResult.success(f"Token deployed successfully. Mint address: {result.mint}")

@tool_call("deploying collection")
async def deploy_collection(solana_kit: SolanaAgentKit, tool_input: str) -> ToolResult:
    """
    部署 NFT 合集
    创作者分成比例之和不在这里校验，由 kit 负责
    """
    args = parse_object(tool_input)
    creators = [
        Creator(
            address=parse_address(creator.get("address"), "address"),
            percentage=require(creator, "percentage"),
        )
        for creator in args.get("creators") or []
    ]
    options = CollectionOptions(
        name=require(args, "name"),
        uri=require(args, "uri"),
        royalty_basis_points=args.get("royaltyBasisPoints"),
        creators=creators,
    )

    result = await solana_kit.deploy_collection(options)
    return ToolResult.success(
        f"Collection deployed successfully. Address: {result.collection_address}"
    )

@tool_call("minting NFT")
async def mint_nft(solana_kit: SolanaAgentKit, tool_input: str) -> ToolResult:
    """
    在合集中铸造 NFT
    recipient 为空时由 kit 决定（默认自己的钱包）
    """
    args = parse_object(tool_input)
    collection_mint = parse_address(args.get("collectionMint"), "collectionMint")
    metadata = require(args, "metadata")
    if not isinstance(metadata, dict):
        raise ToolInputError("metadata must be an object")

    result = await solana_kit.mint_nft(
        collection_mint,
        NFTMetadata(
            name=require(metadata, "name"),
            symbol=require(metadata, "symbol"),
            uri=require(metadata, "uri"),
        ),
        optional_address(args.get("recipient"), "recipient"),
    )
    return ToolResult.success(f"NFT minted successfully. Mint address: {result.mint}")

# ===== 交易与域名工具 =====

def _kit_network(solana_kit: SolanaAgentKit) -> str:
    """kit 自带 network 时以它为准，否则用环境配置"""
    network = getattr(solana_kit, "network", None)
    return network if isinstance(network, str) else SOLANA_NETWORK

@tool_call("executing trade")
async def trade(solana_kit: SolanaAgentKit, tool_input: str) -> ToolResult:
    """
    通过 Jupiter 兑换代币
    输入：{outputMint, inputAmount, inputMint?, slippageBps?}，mint 可用符号
    """
    args = parse_object(tool_input)
    output_mint = resolve_mint(args.get("outputMint"), "outputMint")
    input_amount = require(args, "inputAmount")
    input_mint = resolve_address(args.get("inputMint"))

    logger.info(f"开始兑换: {input_amount} {input_mint or 'SOL'} -> {output_mint}")
    tx = await solana_kit.trade(
        output_mint,
        input_amount,
        input_mint,
        args.get("slippageBps"),
    )
    return ToolResult.success(
        f"Trade executed successfully. Transaction: {tx}\nExplorer: {explorer_tx_url(tx, _kit_network(solana_kit))}"
    )

@tool_call("registering domain")
async def register_domain(solana_kit: SolanaAgentKit, tool_input: str) -> ToolResult:
    args = parse_object(tool_input)
    name = require(args, "name")
    space_kb = args.get("spaceKB")
    if space_kb is None:
        space_kb = DEFAULT_DOMAIN_SPACE_KB

    tx = await solana_kit.register_domain(name, space_kb)
    return ToolResult.success(
        f"Domain registered successfully. Transaction: {tx}\nExplorer: {explorer_tx_url(tx, _kit_network(solana_kit))}"
    )

# ===== Pump.fun 发币 =====

def validate_launch_input(args: Dict[str, Any]) -> None:
    """发币前的字段校验"""
    for field in ("tokenName", "tokenTicker"):
        value = args.get(field)
        if not value or not isinstance(value, str):
            raise ToolInputError(f"{field} is required and must be a string")

    # 显式传入 null 也算类型错误
    liquidity = args.get("initialLiquiditySOL")
    if "initialLiquiditySOL" in args and (
        isinstance(liquidity, bool) or not isinstance(liquidity, (int, float))
    ):
        raise ToolInputError("initialLiquiditySOL must be a number when provided")

@tool_call("launching token", render=JSON)
async def launch_pumpfun_token(solana_kit: SolanaAgentKit, tool_input: str) -> ToolResult:
    """
    在 Pump.fun 发行代币
    成功和失败都返回 JSON，失败带 code
    """
    args = parse_object(tool_input, lenient=True)
    validate_launch_input(args)

    token_name = args["tokenName"]
    token_ticker = args["tokenTicker"]
    options = PumpFunTokenOptions(
        description=args.get("description"),
        twitter=args.get("twitter"),
        telegram=args.get("telegram"),
        website=args.get("website"),
        image_url=args.get("imageUrl"),
        initial_liquidity_sol=args.get("initialLiquiditySOL"),
        mint_address=optional_address(args.get("mintAddress"), "mintAddress"),
    )

    logger.info(f"开始发币: {token_name} ({token_ticker})")
    await solana_kit.launch_pump_fun_token(token_name, token_ticker, options)
    return ToolResult.success(
        "Token launched successfully on Pump.fun",
        tokenName=token_name,
        tokenTicker=token_ticker,
    )

# ===== 创建工具对象 =====

TOOL_SPECS = [
    (
        "solana_balance",
        "Get the balance of a Solana wallet or token account. Input can be a token address or empty for SOL balance.",
        get_balance,
    ),
    (
        "solana_transfer",
        "Transfer tokens or SOL to another address. Input should be JSON string with: {to: string, amount: number, mint?: string}",
        transfer,
    ),
    (
        "solana_deploy_token",
        "Deploy a new SPL token. Input should be JSON string with: {decimals?: number, initialSupply?: number}",
        deploy_token,
    ),
    (
        "solana_deploy_collection",
        "Deploy a new NFT collection. Input should be JSON with: {name: string, uri: string, royaltyBasisPoints?: number, creators?: Array<{address: string, percentage: number}>}",
        deploy_collection,
    ),
    (
        "solana_mint_nft",
        "Mint a new NFT in a collection. Input should be JSON with: {collectionMint: string, metadata: {name: string, symbol: string, uri: string}, recipient?: string}",
        mint_nft,
    ),
    (
        "solana_trade",
        "Swap tokens using Jupiter Exchange. Input should be JSON with: {outputMint: string, inputAmount: number, inputMint?: string, slippageBps?: number}",
        trade,
    ),
    (
        "solana_request_funds",
        "Request SOL from Solana faucet (devnet/testnet only)",
        request_funds,
    ),
    (
        "solana_register_domain",
        "Register a .sol domain name. Input should be JSON with: {name: string, spaceKB?: number}",
        register_domain,
    ),
    (
        "solana_get_wallet_address",
        "Get the wallet address of the agent",
        get_wallet_address,
    ),
    (
        "solana_launch_pumpfun_token",
        "Launch a new token on Pump.fun via Solana Agent Kit. Requires a JSON input with tokenName and tokenTicker, with optional fields for description, twitter, telegram, website, imageUrl, initialLiquiditySOL, and mintAddress.",
        launch_pumpfun_token,
    ),
]

def _bind(func, solana_kit: SolanaAgentKit):
    """把 kit 绑定到工具函数上，得到单参数协程"""
    async def coroutine(tool_input: str = "") -> str:
        return await func(solana_kit, tool_input)
    coroutine.__name__ = func.__name__
    return coroutine

def create_solana_tools(solana_kit: SolanaAgentKit) -> List[Tool]:
    """为一个 kit 创建全部 Solana 工具，所有工具共享同一个 kit"""
    return [
        Tool(
            name=name,
            func=None,
            description=description,
            coroutine=_bind(func, solana_kit),
        )
        for name, description, func in TOOL_SPECS
    ]

__all__ = [
    'create_solana_tools',
    'TOOL_SPECS',
    'get_balance',
    'transfer',
    'deploy_token',
    'deploy_collection',
    'mint_nft',
    'trade',
    'request_funds',
    'register_domain',
    'get_wallet_address',
    'launch_pumpfun_token',
    'validate_launch_input',
]
