"""
单个 Router 的请求执行器

负责:
- 拼接 Router 的 base_url 与请求路径（原样拼接，不规范化斜杠）
- 以 deadline 约束单次请求，到期即取消该请求
- 将所有可能的结果（成功、非 2xx、网络错误、超时、解码失败）转换为结果对象

执行器不重试，每轮聚合对每个 Router 只发起一次请求。
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Generic, TypeVar

import httpx

from router_aggregator.core.error_utils import extract_error_message, format_http_error
from router_aggregator.core.exceptions import RequestTimeoutError, ResponseDecodeError
from router_aggregator.core.logger import logger
from router_aggregator.services.aggregator.models import (
    EndpointDescriptor,
    EndpointFailure,
    EndpointOutcome,
    EndpointSuccess,
    RequestOptions,
)

T = TypeVar("T")

Decoder = Callable[[Any], T]


def _now_ms() -> int:
    return int(time.time() * 1000)


class EndpointExecutor(Generic[T]):
    """单个 Router 的请求执行器（聚合器内部使用）"""

    def __init__(self, client: httpx.AsyncClient, default_timeout_ms: int) -> None:
        self.client = client
        self.default_timeout_ms = default_timeout_ms

    def effective_timeout_ms(self, endpoint: EndpointDescriptor) -> int:
        if endpoint.timeout_override_ms is not None:
            return endpoint.timeout_override_ms
        return self.default_timeout_ms

    async def execute(
        self,
        endpoint: EndpointDescriptor,
        path: str,
        options: RequestOptions,
        decoder: Decoder[T] | None = None,
    ) -> EndpointOutcome[T]:
        """
        对单个 Router 执行一次请求

        Args:
            endpoint: Router 描述
            path: 请求路径，原样追加到 base_url 之后
            options: 请求参数
            decoder: 可选的响应体解码/校验函数

        Returns:
            成功或失败结果，不会抛出传输或协议层异常
        """
        url = f"{endpoint.base_url}{path}"
        timeout_ms = self.effective_timeout_ms(endpoint)

        try:
            # wait_for 在超时时取消内部请求，deadline 随 await 结束而释放
            response = await asyncio.wait_for(
                self.client.request(options.method, url, **options.to_request_kwargs()),
                timeout=max(timeout_ms, 0) / 1000,
            )
        except asyncio.TimeoutError:
            error = RequestTimeoutError(timeout_ms, endpoint_id=endpoint.id)
            logger.warning("Router {} 请求超时（{}ms），已取消", endpoint.id, timeout_ms)
            return self._failure(endpoint, error.message)
        except Exception as e:
            message = extract_error_message(e)
            logger.warning("Router {} 请求失败: {}: {}", endpoint.id, type(e).__name__, message)
            return self._failure(endpoint, message)

        if not response.is_success:
            message = format_http_error(response.status_code, response.reason_phrase)
            logger.warning("Router {} 返回非成功状态: {}", endpoint.id, message)
            return self._failure(endpoint, message)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Router {} 响应不是有效的 JSON: {}", endpoint.id, e)
            return self._failure(endpoint, extract_error_message(e, "Invalid JSON response"))

        if decoder is not None:
            try:
                data = decoder(data)
            except (ValueError, TypeError) as e:
                error = ResponseDecodeError(extract_error_message(e), endpoint_id=endpoint.id)
                logger.warning("Router {} 响应体解码失败: {}", endpoint.id, error.detail)
                return self._failure(endpoint, error.message)

        logger.debug("Router {} 请求成功: HTTP {}", endpoint.id, response.status_code)
        return EndpointSuccess(data=data, endpoint_id=endpoint.id, observed_at_ms=_now_ms())

    @staticmethod
    def _failure(endpoint: EndpointDescriptor, message: str) -> EndpointFailure:
        return EndpointFailure(
            error_message=message,
            endpoint_id=endpoint.id,
            observed_at_ms=_now_ms(),
        )


__all__ = ["Decoder", "EndpointExecutor"]
