import pytest

from postfeed.config import FeedConfig
from tests.helpers import FakeService


@pytest.fixture
def config():
    return FeedConfig(feed_url="https://feed.test/posts.json", timeout=3)


@pytest.fixture
def fake_service():
    return FakeService()
