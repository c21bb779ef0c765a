import asyncio

import httpx
import pytest

from router_aggregator.clients.http_client import HTTPClientPool, close_http_clients


@pytest.mark.asyncio
async def test_default_client_is_reused_and_recreated_after_close() -> None:
    first = await HTTPClientPool.get_default_client_async()
    again = await HTTPClientPool.get_default_client_async()

    assert first is again
    assert HTTPClientPool.get_pool_stats()["default_client_active"] is True

    await close_http_clients()

    assert first.is_closed
    assert HTTPClientPool.get_pool_stats()["default_client_active"] is False

    recreated = await HTTPClientPool.get_default_client_async()
    assert recreated is not first
    await close_http_clients()


def test_default_client_is_recreated_for_new_event_loop() -> None:
    try:
        first = asyncio.run(HTTPClientPool.get_default_client_async())
        second = asyncio.run(HTTPClientPool.get_default_client_async())

        assert second is not first
        assert not second.is_closed
    finally:
        # 客户端属于已结束的事件循环，只丢弃引用
        asyncio.run(close_http_clients())

    assert HTTPClientPool.get_pool_stats()["default_client_active"] is False


@pytest.mark.asyncio
async def test_temp_client_is_closed_on_exit() -> None:
    async with HTTPClientPool.get_temp_client(
        transport=httpx.MockTransport(lambda request: httpx.Response(204))
    ) as client:
        response = await client.get("http://example.com/ping")
        assert response.status_code == 204

    assert client.is_closed
