import pytest

from nicehash import configuration


class RecordingResponse:
    def __init__(self, payload):
        self.payload = payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def raise_for_status(self):
        pass

    async def json(self, content_type=None):
        return self.payload


class RecordingSession:
    """Stand-in for aiohttp.ClientSession that records each GET and answers with a fixed payload."""

    def __init__(self, payload=None):
        self.payload = payload if payload is not None else {'result': {}}
        self.calls = []

    def get(self, url, headers=None):
        self.calls.append({'url': url, 'headers': headers})
        return RecordingResponse(self.payload)

    @property
    def query_strings(self):
        return [call['url'].raw_query_string for call in self.calls]


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture(autouse=True)
def reset_config():
    yield
    configuration.reset()
