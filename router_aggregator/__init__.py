"""
router-aggregator: 多 Router 并发请求聚合客户端
"""

from router_aggregator.services.aggregator import (
    AggregateResult,
    AggregatorConfig,
    EndpointDescriptor,
    EndpointFailure,
    EndpointOutcome,
    EndpointSuccess,
    RequestOptions,
    RouterAggregator,
    calculate_success_rate,
    get_fastest_response,
    get_latest_response,
    group_by_endpoint,
)

__version__ = "0.1.0"

__all__ = [
    "AggregateResult",
    "AggregatorConfig",
    "EndpointDescriptor",
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
