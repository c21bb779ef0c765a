"""
链数据模型定义
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from router_aggregator.models.branded import Address, ChainId, TxHash


class ChainType(str, Enum):
    """支持的链类型"""

    EVM = "evm"
    SOL = "sol"
    SUI = "sui"
    BTC = "btc"


# Relay 协议内部使用的 Solana 链编号
SOLANA_AS_RELAY_NUM = 792703809

CHAIN_IDS: dict[str, str] = {
    # EVM
    "ETHEREUM_MAINNET": "1",
    "POLYGON": "137",
    "BSC": "56",
    "AVALANCHE": "43114",
    "ARBITRUM": "42161",
    "OPTIMISM": "10",
    "BASE": "8453",
    # 其他链
    "SOLANA": "solana",
    "SUI": "sui",
    "BITCOIN": "btc",
}

# 未提供自定义 RPC 时的兜底地址
DEFAULT_RPC_URLS: dict[str, str] = {
    "1": "https://eth.public-rpc.com",
    "137": "https://polygon-rpc.com",
    "56": "https://bsc-dataseed.binance.org",
    "43114": "https://api.avax.network/ext/bc/C/rpc",
    "42161": "https://arb1.arbitrum.io/rpc",
    "10": "https://mainnet.optimism.io",
    "8453": "https://mainnet.base.org",
}


class NativeCurrency(BaseModel):
    name: str
    symbol: str
    decimals: int


class ChainIcon(BaseModel):
    light: str | None = None
    dark: str | None = None


class ChainMetadata(BaseModel):
    color: str | None = None
    website: str | None = None
    documentation: str | None = None


class Chain(BaseModel):
    """区块链网络"""

    model_config = ConfigDict(populate_by_name=True)

    chain_id: ChainId = Field(alias="chainId")
    type: ChainType
    name: str  # 内部名称，如 "ethereum_mainnet"
    display_name: str = Field(alias="displayName")
    icon: str | ChainIcon
    explorer_url: str = Field(alias="explorerUrl")
    native_currency: NativeCurrency = Field(alias="nativeCurrency")


class ChainConfig(Chain):
    """带网络配置的链"""

    http_rpc_url: str | None = Field(default=None, alias="httpRpcUrl")
    is_supported: bool = Field(alias="isSupported")


class ChainWithMetadata(Chain):
    metadata: ChainMetadata | None = None


_CHAIN_FIELDS = ("chainId", "type", "name", "displayName", "icon", "explorerUrl", "nativeCurrency")


# ============================================================================
# 类型判断
# ============================================================================


def is_chain(value: Any) -> bool:
    """判断对象是否为 Chain（支持模型实例或原始字典）"""
    if isinstance(value, Chain):
        return True
    return isinstance(value, dict) and all(key in value for key in _CHAIN_FIELDS)


def is_chain_type(value: Any) -> bool:
    return isinstance(value, str) and value in {t.value for t in ChainType}


def is_evm_chain(chain: Chain) -> bool:
    return chain.type == ChainType.EVM


def is_solana_chain(chain: Chain) -> bool:
    return chain.type == ChainType.SOL


def is_sui_chain(chain: Chain) -> bool:
    return chain.type == ChainType.SUI


def is_bitcoin_chain(chain: Chain) -> bool:
    return chain.type == ChainType.BTC


# ============================================================================
# 工具函数
# ============================================================================


def get_chain_by_id(chains: Iterable[Chain], chain_id: str) -> Chain | None:
    return next((chain for chain in chains if chain.chain_id == chain_id), None)


def get_chains_by_type(chains: Iterable[Chain], chain_type: ChainType) -> list[Chain]:
    return [chain for chain in chains if chain.type == chain_type]


def get_explorer_tx_url(chain: Chain, tx_hash: TxHash | str) -> str:
    """交易在区块浏览器中的地址（Sui 使用 /txblock/）"""
    base_url = chain.explorer_url.rstrip("/")
    if chain.type == ChainType.SUI:
        return f"{base_url}/txblock/{tx_hash}"
    return f"{base_url}/tx/{tx_hash}"


def get_explorer_address_url(chain: Chain, address: Address | str) -> str:
    """地址在区块浏览器中的地址（Sui 使用 /account/）"""
    base_url = chain.explorer_url.rstrip("/")
    if chain.type == ChainType.SUI:
        return f"{base_url}/account/{address}"
    return f"{base_url}/address/{address}"


def get_chain_icon(chain: Chain, prefer_dark: bool = False) -> str:
    """获取链图标，区分亮/暗色模式"""
    if isinstance(chain.icon, str):
        return chain.icon
    if prefer_dark and chain.icon.dark:
        return chain.icon.dark
    return chain.icon.light or ""


def chains_equal(chain1: Chain, chain2: Chain) -> bool:
    return chain1.chain_id == chain2.chain_id


def sort_by_display_name(chains: Iterable[Chain]) -> list[Chain]:
    return sorted(chains, key=lambda chain: chain.display_name.casefold())


def group_by_type(chains: Iterable[Chain]) -> dict[ChainType, list[Chain]]:
    grouped: dict[ChainType, list[Chain]] = {chain_type: [] for chain_type in ChainType}
    for chain in chains:
        grouped[chain.type].append(chain)
    return grouped


__all__ = [
    "CHAIN_IDS",
    "DEFAULT_RPC_URLS",
    "SOLANA_AS_RELAY_NUM",
    "Chain",
    "ChainConfig",
    "ChainIcon",
    "ChainMetadata",
    "ChainType",
    "ChainWithMetadata",
    "NativeCurrency",
    "chains_equal",
    "get_chain_by_id",
    "get_chain_icon",
    "get_chains_by_type",
    "get_explorer_address_url",
    "get_explorer_tx_url",
    "group_by_type",
    "is_bitcoin_chain",
    "is_chain",
    "is_chain_type",
    "is_evm_chain",
    "is_solana_chain",
    "is_sui_chain",
    "sort_by_display_name",
]
