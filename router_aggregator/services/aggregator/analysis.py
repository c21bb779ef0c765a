"""
聚合结果分析工具
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from router_aggregator.services.aggregator.models import EndpointOutcome, EndpointSuccess


def get_fastest_response(outcomes: Sequence[EndpointOutcome[Any]]) -> EndpointSuccess[Any] | None:
    """获取最早返回的成功结果，没有成功结果时返回 None"""
    successful = [o for o in outcomes if isinstance(o, EndpointSuccess)]
    if not successful:
        return None
    # min 在时间戳相同时保留先出现的结果
    return min(successful, key=lambda o: o.observed_at_ms)


def get_latest_response(outcomes: Sequence[EndpointOutcome[Any]]) -> EndpointOutcome[Any] | None:
    """获取最晚观测到的结果（不区分成功/失败）"""
    if not outcomes:
        return None
    latest = outcomes[0]
    for outcome in outcomes[1:]:
        if outcome.observed_at_ms > latest.observed_at_ms:
            latest = outcome
    return latest


def calculate_success_rate(outcomes: Sequence[EndpointOutcome[Any]]) -> float:
    """
    计算成功率

    Returns:
        百分比（0-100），空列表返回 0
    """
    if not outcomes:
        return 0.0
    success_count = sum(1 for o in outcomes if o.ok)
    return success_count / len(outcomes) * 100


def group_by_endpoint(
    outcomes: Sequence[EndpointOutcome[Any]],
) -> dict[str, list[EndpointOutcome[Any]]]:
    """按 Router id 分组（重复 id 的结果归入同一组，组内保持原顺序）"""
    groups: dict[str, list[EndpointOutcome[Any]]] = {}
    for outcome in outcomes:
        groups.setdefault(outcome.endpoint_id, []).append(outcome)
    return groups


__all__ = [
    "calculate_success_rate",
    "get_fastest_response",
    "get_latest_response",
    "group_by_endpoint",
]
