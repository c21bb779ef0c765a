"""
全局HTTP客户端池管理
避免每次聚合请求都创建新的AsyncClient,提高性能

性能优化说明：
1. 默认客户端：全局复用单一客户端，所有 Router 共享连接池
2. 连接池复用：Keep-alive 连接减少 TCP 握手开销
3. 请求级超时交给聚合器的 deadline 控制，客户端只限制建连与连接池等待
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any

import httpx

from router_aggregator.config.settings import config
from router_aggregator.core.logger import logger


def _default_timeout() -> httpx.Timeout:
    return httpx.Timeout(
        None,
        connect=config.http_connect_timeout,
        pool=config.http_pool_timeout,
    )


def _default_limits() -> httpx.Limits:
    return httpx.Limits(
        max_connections=config.http_max_connections,
        max_keepalive_connections=config.http_keepalive_connections,
        keepalive_expiry=config.http_keepalive_expiry,
    )


class HTTPClientPool:
    """
    全局HTTP客户端池单例

    管理可重用的httpx.AsyncClient实例,避免频繁创建/销毁连接。
    客户端与创建它的事件循环绑定，在其他事件循环中使用时会重新创建。
    """

    _instance: HTTPClientPool | None = None
    _default_client: httpx.AsyncClient | None = None
    _default_client_loop: asyncio.AbstractEventLoop | None = None
    _lock: asyncio.Lock | None = None
    _lock_loop: asyncio.AbstractEventLoop | None = None

    def __new__(cls) -> "HTTPClientPool":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def _get_lock(cls, loop: asyncio.AbstractEventLoop) -> asyncio.Lock:
        """获取当前事件循环的初始化锁（锁不能跨事件循环复用）"""
        if cls._lock is None or cls._lock_loop is not loop:
            cls._lock = asyncio.Lock()
            cls._lock_loop = loop
        return cls._lock

    @classmethod
    def _is_usable(cls, loop: asyncio.AbstractEventLoop) -> bool:
        return (
            cls._default_client is not None
            and not cls._default_client.is_closed
            and cls._default_client_loop is loop
        )

    @classmethod
    async def get_default_client_async(cls) -> httpx.AsyncClient:
        """
        获取默认的HTTP客户端（异步安全版本）

        客户端被关闭，或当前事件循环与创建时不同，都会重新创建
        """
        loop = asyncio.get_running_loop()
        if cls._is_usable(loop):
            return cls._default_client  # type: ignore[return-value]

        async with cls._get_lock(loop):
            # 双重检查，避免重复创建
            if not cls._is_usable(loop):
                if cls._default_client is not None and cls._default_client_loop is not loop:
                    # 旧事件循环已不可用，连接随旧循环一起释放，只丢弃引用
                    logger.debug("事件循环已切换，重新创建默认HTTP客户端")
                cls._default_client = httpx.AsyncClient(
                    timeout=_default_timeout(),
                    limits=_default_limits(),
                    follow_redirects=True,
                )
                cls._default_client_loop = loop
                logger.info(
                    f"全局HTTP客户端池已初始化: "
                    f"max_connections={config.http_max_connections}, "
                    f"keepalive={config.http_keepalive_connections}, "
                    f"keepalive_expiry={config.http_keepalive_expiry}s"
                )
        return cls._default_client  # type: ignore[return-value]

    @classmethod
    async def close_all(cls) -> None:
        """关闭所有HTTP客户端"""
        if cls._default_client is not None:
            if cls._default_client_loop is asyncio.get_running_loop():
                await cls._default_client.aclose()
            cls._default_client = None
            cls._default_client_loop = None
            logger.info("默认HTTP客户端已关闭")

    @classmethod
    @asynccontextmanager
    async def get_temp_client(cls, **kwargs: Any) -> Any:
        """
        获取临时HTTP客户端(上下文管理器)

        用于一次性聚合,使用后自动关闭

        用法:
            async with HTTPClientPool.get_temp_client() as client:
                aggregator = RouterAggregator(options, client=client)
                result = await aggregator.aggregate("/quote")
        """
        default_config: dict[str, Any] = {
            "timeout": _default_timeout(),
            "follow_redirects": True,
        }
        default_config.update(kwargs)

        client = httpx.AsyncClient(**default_config)
        try:
            yield client
        finally:
            await client.aclose()

    @classmethod
    def get_pool_stats(cls) -> dict[str, Any]:
        """获取连接池统计信息"""
        return {
            "default_client_active": cls._default_client is not None
            and not cls._default_client.is_closed,
            "max_connections": config.http_max_connections,
            "max_keepalive_connections": config.http_keepalive_connections,
        }


async def close_http_clients() -> None:
    """关闭所有HTTP客户端的便捷函数"""
    await HTTPClientPool.close_all()
