"""
全局配置

所有配置项均从环境变量读取，模块导入时加载一次：

- AGGREGATOR_DEFAULT_TIMEOUT_MS: 单个 Router 的默认超时（毫秒）
- AGGREGATOR_MAX_RETRIES: 重试预算（当前仅保存，不参与请求逻辑）
- HTTP_*: 共享 httpx.AsyncClient 的连接池参数
- LOG_*: 日志输出配置

使用方式:
    from router_aggregator.config.settings import config

    config.default_timeout_ms
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


class Config:
    """运行时配置（环境变量驱动）"""

    def __init__(self) -> None:
        # === 聚合器默认策略 ===
        self.default_timeout_ms = _env_int("AGGREGATOR_DEFAULT_TIMEOUT_MS", 5000)
        self.max_retries = _env_int("AGGREGATOR_MAX_RETRIES", 4)

        # === HTTP 连接池 ===
        # 请求级超时由聚合器的 deadline 控制，这里只约束建连与连接池等待
        self.http_connect_timeout = _env_float("HTTP_CONNECT_TIMEOUT", 10.0)
        self.http_pool_timeout = _env_float("HTTP_POOL_TIMEOUT", 10.0)
        self.http_max_connections = _env_int("HTTP_MAX_CONNECTIONS", 100)
        self.http_keepalive_connections = _env_int("HTTP_KEEPALIVE_CONNECTIONS", 20)
        self.http_keepalive_expiry = _env_float("HTTP_KEEPALIVE_EXPIRY", 30.0)

        # === 日志 ===
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "dev").lower()
        self.log_dir = os.getenv("LOG_DIR") or None

    def to_dict(self) -> dict[str, object]:
        """导出为字典（用于调试输出）"""
        return dict(vars(self))


config = Config()

__all__ = ["Config", "config"]
