"""
Router 聚合客户端

对一组固定的 Router 并发发起同一个逻辑请求，等待所有请求结束（成功、失败或超时），
再把结果折叠为一个 AggregateResult。

使用方式:
    from router_aggregator import AggregatorConfig, RouterAggregator

    aggregator = RouterAggregator(
        AggregatorConfig.model_validate(
            {"routers": [{"id": "relay", "name": "Relay", "endpoint": "https://api.relay.link"}]}
        )
    )
    result = await aggregator.aggregate("/quote")
    for outcome in result.succeeded:
        print(outcome.endpoint_id, outcome.data)
"""

from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx

from router_aggregator.clients.http_client import HTTPClientPool
from router_aggregator.core.error_utils import extract_error_message
from router_aggregator.core.logger import logger
from router_aggregator.services.aggregator.executor import Decoder, EndpointExecutor
from router_aggregator.services.aggregator.models import (
    AggregateResult,
    AggregatorConfig,
    EndpointDescriptor,
    EndpointFailure,
    EndpointOutcome,
    RequestOptions,
)

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class RouterAggregator:
    """
    Router 聚合客户端

    Router 列表在构造后只读，可在并发调用之间安全共享；
    每次 aggregate 调用都返回全新的结果对象，不保留跨调用的可变状态。
    """

    def __init__(
        self,
        options: AggregatorConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoints: tuple[EndpointDescriptor, ...] = tuple(options.endpoints)
        self.default_timeout_ms = options.default_timeout_ms
        # 仅保存：当前每轮对每个 Router 只请求一次
        self.max_retries = options.max_retries
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await HTTPClientPool.get_default_client_async()

    async def aggregate(
        self,
        path: str,
        request_options: RequestOptions | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> AggregateResult[Any]:
        """
        向所有 Router 并发发起请求并汇总结果

        单个 Router 的失败或延迟不会阻塞、取消其他 Router，
        所有传输/协议层失败都会被记录为失败结果，不会以异常抛出。

        Args:
            path: 请求路径，原样追加到每个 Router 的 base_url 之后
            request_options: 请求参数，默认 GET
            decoder: 可选的响应体解码/校验函数，解码失败记为该 Router 失败

        Returns:
            AggregateResult，all 与 Router 配置顺序一致
        """
        start_time = time.monotonic()
        options = request_options or RequestOptions()
        client = await self._get_client()
        executor: EndpointExecutor[Any] = EndpointExecutor(client, self.default_timeout_ms)

        settled = await asyncio.gather(
            *(executor.execute(endpoint, path, options, decoder) for endpoint in self.endpoints),
            return_exceptions=True,
        )

        outcomes = [
            self._settle(endpoint, result) for endpoint, result in zip(self.endpoints, settled)
        ]
        result = AggregateResult.from_outcomes(
            outcomes, elapsed_ms=int((time.monotonic() - start_time) * 1000)
        )

        logger.debug(
            "聚合完成: path={}, 成功 {}/{}, 耗时 {}ms",
            path,
            len(result.succeeded),
            len(result.all),
            result.elapsed_ms,
        )
        return result

    @staticmethod
    def _settle(endpoint: EndpointDescriptor, result: Any) -> EndpointOutcome[Any]:
        """将 gather 的结算结果转换为结果对象（执行器本身抛出的异常也记为失败）"""
        if isinstance(result, BaseException):
            logger.error(
                "Router {} 执行器异常: {}: {}", endpoint.id, type(result).__name__, result
            )
            return EndpointFailure(
                error_message=extract_error_message(result, UNKNOWN_ERROR_MESSAGE),
                endpoint_id=endpoint.id,
                observed_at_ms=int(time.time() * 1000),
            )
        return result


__all__ = ["RouterAggregator"]
