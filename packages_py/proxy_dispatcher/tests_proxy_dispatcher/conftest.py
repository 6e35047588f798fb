"""
Shared fixtures for proxy_dispatcher tests.
"""
import httpx
import pytest

from proxy_agent import AgentConstructors, ProxyDescriptor

class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

class FakeAgents:
    """Forward/tunnel transports injected in place of real proxy agents."""

    def __init__(self):
        self.forward_handler = lambda request: httpx.Response(200, json={"via": "forward"})
        self.tunnel_handler = lambda request: httpx.Response(200, json={"via": "tunnel"})
        self.forward = RecordingTransport(lambda request: self.forward_handler(request))
        self.tunnel = RecordingTransport(lambda request: self.tunnel_handler(request))

    @property
    def constructors(self) -> AgentConstructors:
        return AgentConstructors(
            http_proxy=lambda url, **kw: self.forward,
            https_proxy=lambda url, **kw: self.tunnel,
            socks_proxy=lambda url, **kw: self.tunnel,
        )

    @property
    def calls(self) -> int:
        return len(self.forward.requests) + len(self.tunnel.requests)

@pytest.fixture
def fake_agents():
    return FakeAgents()

@pytest.fixture
def proxy_descriptor():
    return ProxyDescriptor(url="http://proxy.test:8080", username="acct", password="s3cret")

@pytest.fixture(autouse=True)
def clear_ssl_env(monkeypatch):
    monkeypatch.delenv("NODE_TLS_REJECT_UNAUTHORIZED", raising=False)
    monkeypatch.delenv("SSL_CERT_VERIFY", raising=False)
