"""
Router 聚合模块

对一组固定的 HTTP Router 并发发起同一请求，按 Router 独立超时，
并将每个 Router 的结果分类为成功或失败。

使用方式:
    from router_aggregator.services.aggregator import AggregatorConfig, RouterAggregator

    aggregator = RouterAggregator(AggregatorConfig(endpoints=[...]))
    result = await aggregator.aggregate("/v1/quote")

    print(result.elapsed_ms)
    print([o.endpoint_id for o in result.failed])
"""

from router_aggregator.services.aggregator.aggregator import RouterAggregator
from router_aggregator.services.aggregator.analysis import (
    calculate_success_rate,
    get_fastest_response,
    get_latest_response,
    group_by_endpoint,
)
from router_aggregator.services.aggregator.executor import Decoder, EndpointExecutor
from router_aggregator.services.aggregator.models import (
    AggregateResult,
    AggregatorConfig,
    EndpointDescriptor,
    EndpointFailure,
    EndpointOutcome,
    EndpointSuccess,
    RequestOptions,
)

__all__ = [
    "AggregateResult",
    "AggregatorConfig",
    "Decoder",
    "EndpointDescriptor",
    "EndpointExecutor",
    "EndpointFailure",
    "EndpointOutcome",
    "EndpointSuccess",
    "RequestOptions",
    "RouterAggregator",
    "calculate_success_rate",
    "get_fastest_response",
    "get_latest_response",
    "group_by_endpoint",
]
