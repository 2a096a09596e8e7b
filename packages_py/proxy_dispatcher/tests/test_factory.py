"""
Tests for ProxyAgentFactory.
"""
import asyncio
import logging
import pytest
from proxy_config import UNAVAILABLE_ENVIRONMENT
from proxy_dispatcher import (
    AgentConfig,
    BaseAdapter,
    CapabilityUnavailableError,
    HttpxAdapter,
    ProxyAgentFactory,
    create_proxy_agent,
    get_proxy_dispatcher,
)

class FakeAgent:
    def __init__(self, config):
        self.config = config

class FakeAdapter(BaseAdapter):
    """Adapter that builds FakeAgent objects without importing anything."""

    def __init__(self):
        self.loads = 0

    @property
    def name(self) -> str:
        return "fake"

    def supports_sync(self) -> bool:
        return False

    def supports_async(self) -> bool:
        return True

    async def load(self):
        self.loads += 1
        return object()

    def build_agent(self, module, config):
        return FakeAgent(config)

class MissingAdapter(FakeAdapter):
    """Adapter whose transport library is not installed."""

    async def load(self):
        self.loads += 1
        raise CapabilityUnavailableError("fake_transport", ImportError("No module named 'fake_transport'"))

class MissingHttpxAdapter(HttpxAdapter):
    module_name = "proxy_dispatcher_missing_transport"

class TestProxyAgentFactory:

    @pytest.mark.asyncio
    async def test_create_agent(self):
        """Should build an agent bound to the proxy URL."""
        adapter = FakeAdapter()
        factory = ProxyAgentFactory(adapter=adapter, env={})
        agent = await factory.create_agent("http://proxy:3128")
        assert isinstance(agent, FakeAgent)
        assert agent.config.proxy_url == "http://proxy:3128"
        assert agent.config.verify_ssl is True
        assert adapter.loads == 1

    @pytest.mark.asyncio
    async def test_capability_unavailable(self, caplog):
        """Should return None and log a warning when the library is missing."""
        caplog.set_level(logging.WARNING, logger="proxy_dispatcher.factory")
        factory = ProxyAgentFactory(adapter=MissingAdapter(), env={})
        assert await factory.create_agent("http://proxy:3128") is None
        assert "fake_transport not available" in caplog.text

    @pytest.mark.asyncio
    async def test_unavailable_environment(self):
        """Should return None without loading anything."""
        adapter = FakeAdapter()
        factory = ProxyAgentFactory(adapter=adapter)
        assert await factory.create_agent("http://proxy:3128", env=UNAVAILABLE_ENVIRONMENT) is None
        assert adapter.loads == 0

    @pytest.mark.asyncio
    async def test_no_caching(self):
        """Concurrent calls should produce independent agents."""
        adapter = FakeAdapter()
        factory = ProxyAgentFactory(adapter=adapter, env={})
        agents = await asyncio.gather(*[factory.create_agent("http://proxy:3128") for _ in range(3)])
        assert len({id(agent) for agent in agents}) == 3
        assert adapter.loads == 3

    @pytest.mark.asyncio
    async def test_ssl_disabled_by_env(self):
        """SSL_CERT_VERIFY=0 should disable verification by default."""
        factory = ProxyAgentFactory(adapter=FakeAdapter(), env={"SSL_CERT_VERIFY": "0"})
        agent = await factory.create_agent("http://proxy:3128")
        assert agent.config.verify_ssl is False

    @pytest.mark.asyncio
    async def test_ssl_config_overrides_env(self):
        """Explicit verify_ssl should win over environment."""
        factory = ProxyAgentFactory(
            config=AgentConfig(verify_ssl=True),
            adapter=FakeAdapter(),
            env={"NODE_TLS_REJECT_UNAUTHORIZED": "0"}
        )
        agent = await factory.create_agent("http://proxy:3128")
        assert agent.config.verify_ssl is True

    @pytest.mark.asyncio
    async def test_sync_not_supported(self):
        """Should refuse sync agents from an async-only adapter."""
        factory = ProxyAgentFactory(config=AgentConfig(async_transport=False), adapter=FakeAdapter(), env={})
        with pytest.raises(NotImplementedError):
            await factory.create_agent("http://proxy:3128")

    def test_unknown_adapter(self):
        """Should fail for unregistered adapter names."""
        with pytest.raises(KeyError):
            ProxyAgentFactory(adapter="missing")

class TestGetProxyDispatcher:

    @pytest.mark.asyncio
    async def test_env_proxy(self):
        """Should build an agent for the proxy found in the environment."""
        factory = ProxyAgentFactory(adapter=FakeAdapter())
        result = await factory.get_proxy_dispatcher(
            "https://api.example.com",
            env={"HTTPS_PROXY": "http://proxy:3128"}
        )
        assert result.proxy_url == "http://proxy:3128"
        assert result.resolution.source == "environment"
        assert result.agent.config.proxy_url == "http://proxy:3128"

    @pytest.mark.asyncio
    async def test_bypassed(self):
        """Should not load the capability when NO_PROXY matches."""
        adapter = FakeAdapter()
        factory = ProxyAgentFactory(adapter=adapter)
        result = await factory.get_proxy_dispatcher(
            "https://api.example.com",
            env={"HTTPS_PROXY": "http://proxy:3128", "NO_PROXY": ".example.com"}
        )
        assert result.proxy_url is None
        assert result.agent is None
        assert result.resolution.source == "bypassed"
        assert adapter.loads == 0

    @pytest.mark.asyncio
    async def test_disabled(self):
        """proxy=False should produce no agent."""
        factory = ProxyAgentFactory(adapter=FakeAdapter(), env={"HTTPS_PROXY": "http://proxy:3128"})
        result = await factory.get_proxy_dispatcher("https://api.example.com", proxy=False)
        assert result.agent is None
        assert result.resolution.source == "disabled"

    @pytest.mark.asyncio
    async def test_explicit_proxy_with_missing_capability(self):
        """A missing capability should degrade to a direct connection."""
        factory = ProxyAgentFactory(adapter=MissingAdapter(), env={})
        result = await factory.get_proxy_dispatcher("https://api.example.com", proxy="http://p:1")
        assert result.proxy_url == "http://p:1"
        assert result.agent is None

    @pytest.mark.asyncio
    async def test_default_factory(self, monkeypatch):
        """Module-level helper should use the process environment."""
        for name in ("NO_PROXY", "no_proxy", "HTTPS_PROXY", "https_proxy", "HTTP_PROXY", "http_proxy"):
            monkeypatch.delenv(name, raising=False)
        result = await get_proxy_dispatcher("https://api.example.com")
        assert result.proxy_url is None
        assert result.agent is None

class TestCreateProxyAgent:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("proxy_url", ["http://proxy:3128", "https://u:x@proxy:8443"])
    async def test_missing_module_returns_none(self, proxy_url):
        """Should return None instead of raising when httpx cannot be imported."""
        assert await create_proxy_agent(proxy_url, adapter=MissingHttpxAdapter(), env={}) is None

    @pytest.mark.asyncio
    async def test_fake_adapter(self):
        """Should accept an injected adapter."""
        agent = await create_proxy_agent("http://proxy:3128", adapter=FakeAdapter(), env={})
        assert isinstance(agent, FakeAgent)
