"""
路由节点（Router）标识定义

节点分为两类：
- 跨链桥（bridge）：在不同链之间转移代币
- 交易聚合器（exchange）：在链内/跨链寻找最优交易路径
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class NodeCategory(str, Enum):
    """节点类别"""

    BRIDGE = "bridge"
    EXCHANGE = "exchange"


class BridgeNode(str, Enum):
    """跨链桥节点"""

    RELAY = "relay"  # 支持 EVM / Solana / Sui / Bitcoin
    DEBRIDGE = "debridge"
    ACROSS = "across"
    THORCHAIN = "thorchain"  # 原生支持 Bitcoin
    STARGATE_TAXI = "stargate_taxi"  # 基于 LayerZero
    MAYAN_FMCTP = "mayan_fmctp"  # 基于 Circle CCTP
    MAYAN_SWIFT = "mayan_swift"
    GASZIP_NATIVE = "gaszip_native"


class ExchangeNode(str, Enum):
    """交易聚合器节点"""

    OPENOCEAN = "openocean"


AvailableNode = Union[BridgeNode, ExchangeNode]

NODE_DISPLAY_NAMES: dict[AvailableNode, str] = {
    BridgeNode.RELAY: "Relay",
    BridgeNode.DEBRIDGE: "deBridge",
    BridgeNode.ACROSS: "Across",
    BridgeNode.THORCHAIN: "THORChain",
    BridgeNode.STARGATE_TAXI: "Stargate Taxi",
    BridgeNode.MAYAN_FMCTP: "Mayan Using CCTP",
    BridgeNode.MAYAN_SWIFT: "Mayan Swift",
    BridgeNode.GASZIP_NATIVE: "GasZip",
    ExchangeNode.OPENOCEAN: "OpenOcean",
}

NODE_CATEGORIES: dict[AvailableNode, NodeCategory] = {
    **{node: NodeCategory.BRIDGE for node in BridgeNode},
    **{node: NodeCategory.EXCHANGE for node in ExchangeNode},
}

# 链类型 -> 可用节点；未列出的链类型使用 default
CHAIN_NODE_COMPATIBILITY: dict[str, list[AvailableNode]] = {
    "sol": [BridgeNode.RELAY, BridgeNode.DEBRIDGE, BridgeNode.ACROSS],
    "sui": [BridgeNode.RELAY],
    "btc": [BridgeNode.THORCHAIN, BridgeNode.RELAY],
    "default": [*BridgeNode, *ExchangeNode],
}


def get_node_display_name(node: AvailableNode) -> str:
    """节点展示名，未登记时回退为首字母大写的节点值"""
    display_name = NODE_DISPLAY_NAMES.get(node)
    if display_name:
        return display_name
    value = node.value
    return value[:1].upper() + value[1:]


def get_node_category(node: AvailableNode) -> NodeCategory:
    return NODE_CATEGORIES[node]


def is_bridge_node(node: AvailableNode) -> bool:
    return NODE_CATEGORIES.get(node) == NodeCategory.BRIDGE


def is_exchange_node(node: AvailableNode) -> bool:
    return NODE_CATEGORIES.get(node) == NodeCategory.EXCHANGE


def get_bridge_nodes() -> list[BridgeNode]:
    return list(BridgeNode)


def get_exchange_nodes() -> list[ExchangeNode]:
    return list(ExchangeNode)


def get_all_nodes() -> list[AvailableNode]:
    return [*get_bridge_nodes(), *get_exchange_nodes()]


def is_valid_node(value: str) -> bool:
    return value in {node.value for node in get_all_nodes()}


def parse_node(value: str) -> AvailableNode:
    """
    字符串 -> 节点枚举

    Raises:
        ValueError: 未知节点
    """
    for node_type in (BridgeNode, ExchangeNode):
        try:
            return node_type(value)
        except ValueError:
            continue
    raise ValueError(f"Unknown routing node: {value}")


def get_compatible_nodes(chain_type: str) -> list[AvailableNode]:
    return list(CHAIN_NODE_COMPATIBILITY.get(chain_type, CHAIN_NODE_COMPATIBILITY["default"]))


__all__ = [
    "CHAIN_NODE_COMPATIBILITY",
    "NODE_CATEGORIES",
    "NODE_DISPLAY_NAMES",
    "AvailableNode",
    "BridgeNode",
    "ExchangeNode",
    "NodeCategory",
    "get_all_nodes",
    "get_bridge_nodes",
    "get_compatible_nodes",
    "get_exchange_nodes",
    "get_node_category",
    "get_node_display_name",
    "is_bridge_node",
    "is_exchange_node",
    "is_valid_node",
    "parse_node",
]
