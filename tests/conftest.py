import pytest

from core.client import Client
from logger import logger
from models.pipeline import PipelineConfig

from .support import (
    CTOKEN_ADDRESS,
    FACTORY_ADDRESS,
    PRIVATE_KEY,
    ROUTER_ADDRESS,
    TEST_CHAIN,
    TOKEN_IN,
    TOKEN_OUT,
)


@pytest.fixture
def client() -> Client:
    return Client(private_key=PRIVATE_KEY, chain=TEST_CHAIN)


@pytest.fixture
def config() -> PipelineConfig:
    return PipelineConfig(
        chain=TEST_CHAIN,
        token_in=TOKEN_IN,
        token_out=TOKEN_OUT,
        factory_address=FACTORY_ADDRESS,
        router_address=ROUTER_ADDRESS,
        lending_address=CTOKEN_ADDRESS,
        fee_tier=3000,
        deadline_seconds=600,
        post_approve_delay_range=(0, 0),
    )


@pytest.fixture
def log_messages():
    messages = []
    sink_id = logger.loguru_logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.loguru_logger.remove(sink_id)
