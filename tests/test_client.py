"""AsyncGraph / Graph convenience clients."""

import httpx
import pytest

from fuss import App, AsyncGraph, AuthenticationError, Graph, IncompatibleMethodError
from fuss.transport.http import HttpClient

APP_ID = "1234567890"
APP_SECRET = "s3cr3t"


class Recorder:
    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    def http(self) -> HttpClient:
        return HttpClient(client=httpx.AsyncClient(transport=httpx.MockTransport(self)))


@pytest.fixture
def app() -> App:
    return App(APP_ID, APP_SECRET, {"version": "v2.0"})


class TestAsyncGraph:

    @pytest.mark.asyncio
    async def test_get(self, app):
        recorder = Recorder(httpx.Response(200, json={"id": APP_ID}))
        async with AsyncGraph(app, http=recorder.http()) as graph:
            assert await graph.get("app", {"fields": "id"}) == {"id": APP_ID}
        sent = recorder.requests[0]
        assert sent.method == "GET"
        assert sent.url.path == "/v2.0/app"
        assert sent.url.params["fields"] == "id"

    @pytest.mark.asyncio
    async def test_post_and_delete(self, app):
        recorder = Recorder(httpx.Response(200, text="true"))
        graph = AsyncGraph(app, http=recorder.http())
        assert await graph.post("app", {"restrictions": {"age": "17+"}}) is True
        assert await graph.delete("v2.1/123_456") is True
        assert [r.method for r in recorder.requests] == ["POST", "DELETE"]
        assert recorder.requests[1].url.path == "/v2.1/123_456"

    @pytest.mark.asyncio
    async def test_each_call_builds_fresh_request(self, app):
        recorder = Recorder(httpx.Response(200, json={}))
        graph = AsyncGraph(app, http=recorder.http())
        await graph.get("app")
        await graph.get("app")
        assert len(recorder.requests) == 2

    def test_build_validates(self, app):
        graph = AsyncGraph(app, http=Recorder(httpx.Response(200)).http())
        with pytest.raises(IncompatibleMethodError):
            graph.build("GET", "me", body={"foo": "bar"})

    @pytest.mark.asyncio
    async def test_client_created_on_first_call(self, async_clients):
        app = App(APP_ID, APP_SECRET, {"timeout": 7.0})
        graph = AsyncGraph(app)
        assert async_clients.clients == []

        await graph.get("app")
        await graph.get("app")
        assert len(async_clients.clients) == 1
        assert async_clients.kwargs[0]["timeout"] == 7.0

        await graph.close()
        assert async_clients.clients[0].is_closed

    @pytest.mark.asyncio
    async def test_token_fetched_on_first_call(self):
        graph = AsyncGraph(App(APP_ID, ""))
        with pytest.raises(AuthenticationError):
            await graph.get("app")
        await graph.close()


class TestGraph:

    def test_sync_get(self, app):
        recorder = Recorder(httpx.Response(200, json={"id": APP_ID}))
        with Graph(app, http=recorder.http()) as graph:
            assert graph.get("app")["id"] == APP_ID
            assert graph.request("POST", "app", body={"name": "x"}) == {"id": APP_ID}
        assert [r.method for r in recorder.requests] == ["GET", "POST"]
