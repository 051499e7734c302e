from __future__ import annotations
import sys
from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """stdout 단일 sink. json_logs 면 레코드를 한 줄 JSON 으로 출력"""
    logger.remove()
    logger.add(sys.stdout, level=level.upper(), format=LOG_FORMAT, serialize=json_logs, diagnose=False)
