# solana_agent/tools/solana/solana_types.py
"""
Solana 数据类型
公钥、工具参数记录、kit 返回值和异常
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union
import base58


# ===== 异常 =====

class ToolInputError(ValueError):
    """工具输入格式错误（JSON、字段、类型）"""


class InvalidPublicKeyError(ToolInputError):
    """无效的 Solana 地址"""


class SolanaKitError(Exception):
    """agent kit 执行失败，可带错误码"""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class SolanaRPCError(SolanaKitError):
    """所有 RPC 端点都失败"""

    def __init__(self, message: str):
        super().__init__(message, code="RPC_ERROR")


# ===== 公钥 =====

class PublicKey:
    """Solana 公钥：base58 编码的 32 字节"""

    LENGTH = 32

    def __init__(self, value: Union[str, bytes, "PublicKey"]):
        if isinstance(value, PublicKey):
            self._bytes = value._bytes
            return

        if isinstance(value, str):
            try:
                decoded = base58.b58decode(value.strip())
            except ValueError:
                raise InvalidPublicKeyError(f"Invalid public key input: {value}")
        elif isinstance(value, bytes):
            decoded = value
        else:
            raise InvalidPublicKeyError(f"Invalid public key input: {value!r}")

        if len(decoded) != self.LENGTH:
            raise InvalidPublicKeyError(f"Invalid public key input: {value}")
        self._bytes = decoded

    def to_base58(self) -> str:
        return base58.b58encode(self._bytes).decode("ascii")

    def __bytes__(self) -> bytes:
        return self._bytes

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return f"PublicKey({self.to_base58()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)


# ===== 工具参数 =====

@dataclass
class Creator:
    """NFT 合集创作者分成"""
    address: PublicKey
    percentage: float


@dataclass
class CollectionOptions:
    """NFT 合集部署参数"""
    name: str
    uri: str
    royalty_basis_points: Optional[int] = None
    creators: List[Creator] = field(default_factory=list)


@dataclass
class NFTMetadata:
    """NFT 元数据"""
    name: str
    symbol: str
    uri: str


@dataclass
class PumpFunTokenOptions:
    """Pump.fun 发币可选参数"""
    description: Optional[str] = None
    twitter: Optional[str] = None
    telegram: Optional[str] = None
    website: Optional[str] = None
    image_url: Optional[str] = None
    initial_liquidity_sol: Optional[float] = None
    mint_address: Optional[PublicKey] = None


# ===== kit 返回值 =====

@dataclass
class DeployedToken:
    mint: PublicKey


@dataclass
class DeployedCollection:
    collection_address: PublicKey


@dataclass
class MintedNFT:
    mint: PublicKey
