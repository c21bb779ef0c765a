"""
区分语义的字符串类型

用 NewType 区分地址、链 ID、代币符号、交易哈希，避免误用普通字符串。
"""

from __future__ import annotations

import re
from typing import NewType

Address = NewType("Address", str)
ChainId = NewType("ChainId", str)
TokenSymbol = NewType("TokenSymbol", str)
TxHash = NewType("TxHash", str)

_ETH_ADDRESS_PATTERN = re.compile(r"^0x[a-f0-9]{40}$", re.IGNORECASE)


def is_eth_address(value: str) -> bool:
    """检查是否为合法的以太坊地址（0x + 40 位十六进制）"""
    return bool(_ETH_ADDRESS_PATTERN.match(value))


def eth_address(value: str) -> Address:
    """
    校验并规范化以太坊地址

    Raises:
        ValueError: 地址格式不合法
    """
    cleaned = value.lower()
    if not is_eth_address(cleaned):
        raise ValueError(f"Invalid Ethereum address: {value}")
    return Address(cleaned)


__all__ = ["Address", "ChainId", "TokenSymbol", "TxHash", "eth_address", "is_eth_address"]
