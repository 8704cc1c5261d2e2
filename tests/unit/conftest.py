import httpx
import pytest
import requests

from topgg import client as topgg_client


class SyncClientStub:
    def __init__(self, response, calls):
        self.response = response
        self.calls = calls
        self.closed = 0

    def close(self):
        self.closed += 1

    def request(self, method, url, content=None, headers=None):
        self.calls.append({"method": method, "url": url, "content": content, "headers": headers})
        return self.response


class AsyncClientStub:
    def __init__(self, response, calls):
        self.response = response
        self.calls = calls
        self.closed = 0

    async def aclose(self):
        self.closed += 1

    async def request(self, method, url, content=None, headers=None):
        self.calls.append({"method": method, "url": url, "content": content, "headers": headers})
        return self.response


class RequestsSessionStub(requests.Session):
    def __init__(self, response, calls):
        super().__init__()
        self.response = response
        self.calls = calls

    def request(self, method, url, data=None, headers=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "content": data,
                "headers": headers,
                "timeout": timeout,
            }
        )
        return self.response


class UnusableTransport:
    """Transport that fails the test when any exchange is attempted."""

    def close(self):
        pass

    async def aclose(self):
        pass

    def request(self, *args, **kwargs):
        raise AssertionError("transport must not be used")


@pytest.fixture
def response_factory():
    def _factory(status_code, text="", headers=None, url="https://top.gg/api/"):
        return httpx.Response(
            status_code,
            text=text,
            headers=headers,
            request=httpx.Request("GET", url),
        )

    return _factory


@pytest.fixture
def mock_sync_client(monkeypatch):
    def _install(response):
        calls = []

        def client_factory(*_args, **_kwargs):
            return SyncClientStub(response, calls)

        monkeypatch.setattr(topgg_client.httpx, "Client", client_factory)
        return calls

    return _install


@pytest.fixture
def mock_async_client(monkeypatch):
    def _install(response):
        calls = []

        def async_client_factory(*_args, **_kwargs):
            return AsyncClientStub(response, calls)

        monkeypatch.setattr(topgg_client.httpx, "AsyncClient", async_client_factory)
        return calls

    return _install


@pytest.fixture
def mock_requests_session():
    def _install(response):
        calls = []
        return RequestsSessionStub(response, calls), calls

    return _install


@pytest.fixture
def unusable_transport():
    return UnusableTransport()
