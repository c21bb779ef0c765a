"""
代币数据模型定义

包含内部 Token 模型、API 传输格式（snake_case）以及两者之间的转换。
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from router_aggregator.models.branded import Address, ChainId, TokenSymbol

# 原生代币的特殊地址
NATIVE_TOKEN_ADDRESSES = (
    "0x0000000000000000000000000000000000000000",
    "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee",
)


class Token(BaseModel):
    """跨链通用的代币模型"""

    model_config = ConfigDict(populate_by_name=True)

    address: Address
    symbol: TokenSymbol
    decimals: int
    name: str
    chain_id: ChainId = Field(alias="chainId")

    label: str | None = None  # 展示名（可能与 name 不同）
    icon: str | None = None
    is_native: bool | None = Field(default=None, alias="isNative")
    tags: list[str] | None = None  # 如 "stable", "governance"
    chain_name: str | None = Field(default=None, alias="chainName")


class TokenWithBalance(Token):
    """带余额信息的代币"""

    amount: str  # 最小单位的原始数量
    value_usd: float | None = Field(alias="valueUsd")
    price_usd: float | None = Field(alias="priceUsd")
    low_liquidity: bool | None = Field(default=None, alias="lowLiquidity")


# ============================================================================
# API 传输格式
# ============================================================================


class ProtoToken(BaseModel):
    """gRPC 接口使用的代币格式"""

    chain_id: str
    address: str
    decimals: int
    symbol: str | None = None
    name: str | None = None
    logo_url: str | None = None
    price_usd: str | None = None


class ApiTokenData(BaseModel):
    """搜索等外部接口返回的代币数据（decimals 为字符串）"""

    address: str
    chain_id: str
    name: str
    symbol: str
    decimals: str
    icon: str | None = None


def from_proto_token(proto: ProtoToken) -> dict[str, Any]:
    """ProtoToken -> 内部字段（仅包含 proto 中存在的可选字段）"""
    result: dict[str, Any] = {
        "chain_id": ChainId(proto.chain_id),
        "address": Address(proto.address),
        "decimals": proto.decimals,
    }
    if proto.symbol is not None:
        result["symbol"] = proto.symbol
    if proto.name is not None:
        result["name"] = proto.name
    if proto.logo_url is not None:
        result["icon"] = proto.logo_url
    if proto.price_usd is not None:
        result["price_usd"] = float(proto.price_usd)
    return result


def to_proto_token(token: Token) -> ProtoToken:
    return ProtoToken(
        chain_id=token.chain_id,
        address=token.address,
        decimals=token.decimals,
        symbol=token.symbol,
        name=token.name,
        logo_url=token.icon,
    )


def from_api_token_data(data: ApiTokenData) -> Token:
    return Token(
        address=Address(data.address),
        chain_id=ChainId(data.chain_id),
        name=data.name,
        symbol=TokenSymbol(data.symbol),
        decimals=int(data.decimals),
        icon=data.icon,
    )


# ============================================================================
# 类型判断
# ============================================================================

_TOKEN_FIELDS = ("address", "symbol", "decimals", "name", "chainId")
_BALANCE_FIELDS = ("amount", "valueUsd", "priceUsd")


def is_token(value: Any) -> bool:
    if isinstance(value, Token):
        return True
    return isinstance(value, dict) and all(key in value for key in _TOKEN_FIELDS)


def is_token_with_balance(value: Any) -> bool:
    if isinstance(value, TokenWithBalance):
        return True
    return is_token(value) and isinstance(value, dict) and all(k in value for k in _BALANCE_FIELDS)


def is_proto_token(value: Any) -> bool:
    if isinstance(value, ProtoToken):
        return True
    return isinstance(value, dict) and all(k in value for k in ("chain_id", "address", "decimals"))


# ============================================================================
# 工具函数
# ============================================================================


def is_native_token(token: Token) -> bool:
    return token.is_native is True or token.address.lower() in NATIVE_TOKEN_ADDRESSES


def get_display_name(token: Token) -> str:
    return token.label or token.name or token.symbol


def tokens_equal(token1: Token, token2: Token) -> bool:
    """地址（忽略大小写）与链 ID 均相同视为同一代币"""
    return (
        token1.address.lower() == token2.address.lower() and token1.chain_id == token2.chain_id
    )


def get_unique_id(chain_id: str, address: str) -> str:
    """代币唯一标识：{chain_id}-{小写地址}"""
    return f"{chain_id}-{address.lower()}"


def format_amount(amount: str | int, decimals: int) -> str:
    """
    将最小单位的原始数量格式化为十进制字符串

    例如 format_amount("1500000", 6) -> "1.5"
    """
    value = int(amount)
    divisor = 10**decimals
    quotient, remainder = divmod(abs(value), divisor)
    sign = "-" if value < 0 else ""

    if remainder == 0:
        return f"{sign}{quotient}"

    fraction = str(remainder).rjust(decimals, "0").rstrip("0")
    return f"{sign}{quotient}.{fraction}"


def parse_amount(formatted: str, decimals: int) -> int:
    """format_amount 的逆操作，超出精度的小数位被截断"""
    whole, _, fraction = formatted.partition(".")
    padded = fraction.ljust(decimals, "0")[:decimals]
    return int(f"{whole}{padded}")


_V = TypeVar("_V")


def sort_by_value(tokens: Iterable[_V]) -> list[_V]:
    """按 USD 价值降序排序（缺失价值视为 0）"""
    return sorted(tokens, key=lambda t: getattr(t, "value_usd", None) or 0, reverse=True)


__all__ = [
    "NATIVE_TOKEN_ADDRESSES",
    "ApiTokenData",
    "ProtoToken",
    "Token",
    "TokenWithBalance",
    "format_amount",
    "from_api_token_data",
    "from_proto_token",
    "get_display_name",
    "get_unique_id",
    "is_native_token",
    "is_proto_token",
    "is_token",
    "is_token_with_balance",
    "parse_amount",
    "sort_by_value",
    "to_proto_token",
    "tokens_equal",
]
