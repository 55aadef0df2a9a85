import httpx
import pytest


class ClientFactory:
    """Stands in for httpx.AsyncClient, routing every client through a MockTransport."""

    def __init__(self, real_client):
        self._real_client = real_client
        self.handler = lambda request: httpx.Response(200, json={})
        self.clients: list[httpx.AsyncClient] = []
        self.kwargs: list[dict] = []

    def __call__(self, **kwargs):
        self.kwargs.append(dict(kwargs))
        kwargs["transport"] = httpx.MockTransport(self.handler)
        client = self._real_client(**kwargs)
        self.clients.append(client)
        return client


@pytest.fixture
def async_clients(monkeypatch) -> ClientFactory:
    factory = ClientFactory(httpx.AsyncClient)
    monkeypatch.setattr(httpx, "AsyncClient", factory)
    return factory
