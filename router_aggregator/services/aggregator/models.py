"""
聚合器数据模型

定义 fan-out 请求相关的核心数据结构：
- EndpointDescriptor: 单个 Router 的描述（构造后不可变）
- AggregatorConfig: 聚合器配置（Router 列表 + 默认策略）
- RequestOptions: 对所有 Router 一致生效的请求参数
- EndpointSuccess / EndpointFailure: 单个 Router 的结果（二选一）
- AggregateResult: 一轮 fan-out 的汇总结果
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from router_aggregator.config.settings import config

T = TypeVar("T")


class EndpointDescriptor(BaseModel):
    """
    单个 Router 的描述

    同时接受原始配置中的字段名（name / endpoint / timeout）。
    id 不做唯一性校验，重复 id 视为不同的条目。
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    display_name: str = Field(alias="name")
    base_url: str = Field(alias="endpoint")
    timeout_override_ms: int | None = Field(default=None, alias="timeout")


class AggregatorConfig(BaseModel):
    """
    聚合器配置

    构造时不做语义校验（空列表、非正超时、重复 id 均原样接受），
    调用方负责保证配置合理。
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    endpoints: tuple[EndpointDescriptor, ...] = Field(alias="routers")
    default_timeout_ms: int = Field(
        default_factory=lambda: config.default_timeout_ms, alias="defaultTimeout"
    )
    # 仅保存，不参与请求逻辑
    max_retries: int = Field(default_factory=lambda: config.max_retries, alias="maxRetries")


@dataclass(frozen=True)
class RequestOptions:
    """传输层请求参数（对所有 Router 一致生效）"""

    method: str = "GET"
    headers: dict[str, str] | None = None
    params: dict[str, Any] | None = None
    json: Any = None
    content: bytes | str | None = None

    def to_request_kwargs(self) -> dict[str, Any]:
        """转换为 httpx.AsyncClient.request 的关键字参数"""
        kwargs: dict[str, Any] = {}
        if self.headers:
            kwargs["headers"] = self.headers
        if self.params:
            kwargs["params"] = self.params
        if self.json is not None:
            kwargs["json"] = self.json
        elif self.content is not None:
            kwargs["content"] = self.content
        return kwargs


@dataclass(frozen=True)
class EndpointSuccess(Generic[T]):
    """Router 成功结果"""

    data: T
    endpoint_id: str
    observed_at_ms: int
    ok: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class EndpointFailure:
    """Router 失败结果"""

    error_message: str
    endpoint_id: str
    observed_at_ms: int
    ok: Literal[False] = field(default=False, init=False)


EndpointOutcome = Union[EndpointSuccess[T], EndpointFailure]


@dataclass
class AggregateResult(Generic[T]):
    """
    一轮 fan-out 的汇总结果

    all 与输入 Router 顺序一致；succeeded / failed 是 all 的稳定顺序过滤。
    """

    all: list[EndpointOutcome[T]]
    succeeded: list[EndpointSuccess[T]]
    failed: list[EndpointFailure]
    elapsed_ms: int

    @classmethod
    def from_outcomes(cls, outcomes: list[EndpointOutcome[T]], elapsed_ms: int) -> AggregateResult[T]:
        succeeded = [o for o in outcomes if isinstance(o, EndpointSuccess)]
        failed = [o for o in outcomes if isinstance(o, EndpointFailure)]
        return cls(all=outcomes, succeeded=succeeded, failed=failed, elapsed_ms=elapsed_ms)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（字段名与原始 SDK 保持一致，用于序列化）"""

        def _outcome(o: EndpointOutcome[T]) -> dict[str, Any]:
            item: dict[str, Any] = {
                "success": o.ok,
                "routerId": o.endpoint_id,
                "timestamp": o.observed_at_ms,
            }
            if isinstance(o, EndpointSuccess):
                item["data"] = o.data
            else:
                item["error"] = o.error_message
            return item

        return {
            "results": [_outcome(o) for o in self.all],
            "successful": [_outcome(o) for o in self.succeeded],
            "failed": [_outcome(o) for o in self.failed],
            "totalTime": self.elapsed_ms,
        }


__all__ = [
    "AggregateResult",
    "AggregatorConfig",
    "EndpointDescriptor",
    "EndpointFailure",
    "EndpointOutcome",
    "EndpointSuccess",
    "RequestOptions",
]
