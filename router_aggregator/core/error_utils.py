"""
错误消息处理工具函数
"""

DEFAULT_FAILURE_MESSAGE = "Request failed"


def extract_error_message(error: BaseException, fallback: str = DEFAULT_FAILURE_MESSAGE) -> str:
    """
    从异常中提取错误消息，用于 Router 失败结果的 error_message 字段

    Args:
        error: 异常对象
        fallback: 异常本身不携带消息时使用的兜底文本

    Returns:
        非空的错误消息字符串
    """
    # 优先使用 message 属性（自定义异常已处理过的消息）
    message = getattr(error, "message", None)
    if message and isinstance(message, str) and message.strip():
        return message

    # str 可能为空，如 httpx 超时异常
    error_str = str(error)
    if error_str.strip():
        return error_str
    return fallback


def format_http_error(status_code: int, reason_phrase: str | None = None) -> str:
    """
    构建非成功状态码的错误消息

    Args:
        status_code: HTTP 状态码
        reason_phrase: 状态描述（如 "Not Found"）

    Returns:
        形如 "HTTP 404: Not Found" 的消息
    """
    reason = (reason_phrase or "").strip()
    if reason:
        return f"HTTP {status_code}: {reason}"
    return f"HTTP {status_code}"
