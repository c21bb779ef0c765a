"""
统一日志系统 - 基于 loguru

日志级别策略:
- DEBUG: 每个 Router 的请求结果、聚合轮次摘要
- INFO:  客户端池创建/关闭等状态变更
- WARNING: Router 失败（超时、网络错误、非 2xx 状态）
- ERROR: 需要关注的故障

输出策略:
- 控制台: 级别由 LOG_LEVEL 控制（默认 INFO），LOG_FORMAT=prod 时使用无颜色格式
- 文件: 仅在设置 LOG_DIR 时启用，按大小轮转

使用方式:
    from router_aggregator.core.logger import logger

    logger.info("消息")
    logger.debug("调试信息")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from loguru import logger

from router_aggregator.config.settings import config

# ============================================================================
# 日志格式定义
# ============================================================================

CONSOLE_FORMAT_DEV = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{message}</cyan>"
)

CONSOLE_FORMAT_PROD = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"

IS_PROD = config.log_format == "prod"

# ============================================================================
# 日志配置
# ============================================================================

logger.remove()

if IS_PROD:
    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT_PROD,
        level=config.log_level,
        colorize=False,
        backtrace=False,
        diagnose=False,
    )
else:
    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT_DEV,
        level=config.log_level,
        colorize=True,
    )

if config.log_dir:
    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # enqueue=False 使用同步模式，避免 multiprocessing 信号量泄漏
    logger.add(
        log_dir / "router_aggregator.log",
        format=FILE_FORMAT,
        level="DEBUG",
        rotation="50 MB",
        retention="7 days",
        enqueue=False,
        encoding="utf-8",
        catch=True,
    )

# ============================================================================
# 禁用第三方库噪音日志
# ============================================================================

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

__all__ = ["logger"]
