"""
聚合器异常定义

Router 级别的传输/协议失败不会以异常形式抛给调用方，
这里的异常仅用于内部传递，最终都会被转换为失败结果。
"""

from __future__ import annotations


class AggregatorError(Exception):
    """聚合器基础异常"""

    def __init__(self, message: str, *, endpoint_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.endpoint_id = endpoint_id


class RequestTimeoutError(AggregatorError):
    """请求在 deadline 到期前未完成，已被取消"""

    def __init__(self, timeout_ms: int, *, endpoint_id: str | None = None):
        super().__init__(
            f"Request aborted: timed out after {timeout_ms}ms", endpoint_id=endpoint_id
        )
        self.timeout_ms = timeout_ms


class ResponseDecodeError(AggregatorError):
    """响应体无法被调用方提供的 decoder 接受"""

    def __init__(self, detail: str, *, endpoint_id: str | None = None):
        super().__init__(f"Response decode failed: {detail}", endpoint_id=endpoint_id)
        self.detail = detail


__all__ = ["AggregatorError", "RequestTimeoutError", "ResponseDecodeError"]
