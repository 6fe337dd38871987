# tests/test_bootstrap.py
import asyncio

import pytest

from blog_api.app import bootstrap
from blog_api.app.core.context import ApiContext


def test_serve_reports_bind_failure(monkeypatch):
    """uvicorn exits the process when it cannot bind; serve turns that into an error."""
    async def failing_serve(self, sockets=None):
        raise SystemExit(1)

    monkeypatch.setattr(bootstrap.Server, "serve", failing_serve)

    with pytest.raises(bootstrap.ServerStartupError):
        asyncio.run(bootstrap.serve(8080, host="127.0.0.1"))


def test_serve_reports_server_that_never_started(monkeypatch):
    async def idle_serve(self, sockets=None):
        return None

    monkeypatch.setattr(bootstrap.Server, "serve", idle_serve)

    with pytest.raises(bootstrap.ServerStartupError):
        asyncio.run(bootstrap.serve(8080, context=ApiContext()))


def test_serve_passes_port_and_context(monkeypatch):
    seen = {}
    context = ApiContext()

    async def fake_serve(self, sockets=None):
        seen["port"] = self.config.port
        seen["context"] = self.config.app.state.context
        self.started = True

    monkeypatch.setattr(bootstrap.Server, "serve", fake_serve)

    asyncio.run(bootstrap.serve(9090, host="127.0.0.1", context=context))

    assert seen == {"port": 9090, "context": context}


def test_start_serves_given_port(monkeypatch):
    ports = []

    async def fake_serve(port, host=None, context=None):
        ports.append(port)

    monkeypatch.setattr(bootstrap, "serve", fake_serve)

    bootstrap.start(8080)

    assert ports == [8080]


def test_main_exits_non_zero_on_startup_error(monkeypatch):
    def failing_start(port):
        raise bootstrap.ServerStartupError("could not serve on port 8080")

    monkeypatch.setattr(bootstrap, "start", failing_start)

    with pytest.raises(SystemExit) as excinfo:
        bootstrap.main()
    assert excinfo.value.code == 1
