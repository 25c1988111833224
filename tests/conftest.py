import asyncio

import pytest

from services.errors import FetchFailure
from services.telegram import NotifyResult


class FakeNotifier:
    """Guarda as mensagens em vez de enviar ao Telegram"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []
        self.configured = True

    async def send_message(self, text):
        self.sent.append(text)
        if self.fail:
            return NotifyResult(ok=False, error="offline")
        return NotifyResult(ok=True, message_id=len(self.sent))


class FakeFeed:
    def __init__(self, history=None):
        self.history = history or []
        self.error = None
        self.calls = 0
        self.closed = False
        self.gate = None

    async def fetch_latest_outcomes(self):
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error:
            raise FetchFailure(self.error)
        return list(self.history)

    async def close(self):
        self.closed = True


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def failing_notifier():
    return FakeNotifier(fail=True)


@pytest.fixture
def feed():
    return FakeFeed()


@pytest.fixture
def run():
    return asyncio.run
