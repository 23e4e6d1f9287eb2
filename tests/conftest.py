import sys

import pytest
from loguru import logger


@pytest.fixture
def restore_logger():
    """SetupLogger 会替换全局 sink，测试结束后恢复默认输出"""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def log_messages():
    """收集 loguru 输出的消息文本"""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
