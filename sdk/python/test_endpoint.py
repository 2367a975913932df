"""
Unit tests for node endpoint resolution.

Tests:
- Port table lookup and fallback
- Loopback vs. service-name addressing
- Port normalization
- Context strategies
"""

import pytest

from blocknet_sdk.endpoint import (
    Endpoint,
    EndpointResolver,
    EnvironmentContext,
    StaticContext,
    node_identity,
    normalize_port,
)


class TestNodeIdentity:
    """Tests for the port to node table."""

    @pytest.mark.parametrize("port,node", [(5000, "node-1"), (5001, "node-2"), (5002, "node-3")])
    def test_known_ports(self, port, node):
        assert node_identity(port) == node

    @pytest.mark.parametrize("port", [0, 80, 4999, 5003, 8080, 65535])
    def test_unknown_port_keeps_number_and_uses_node_1(self, port):
        """Out-of-table ports only change the hostname, never the port."""
        resolver = EndpointResolver(port, StaticContext(False))
        endpoint = resolver.resolve()
        assert endpoint.hostname == "node-1"
        assert endpoint.port == port
        assert resolver.base_url() == f"http://node-1:{port}"


class TestResolver:
    """Tests for context-dependent resolution."""

    def test_loopback_context(self):
        assert EndpointResolver(5001, StaticContext(True)).base_url() == "http://localhost:5001"

    def test_network_context(self):
        assert EndpointResolver(5001, StaticContext(False)).base_url() == "http://node-2:5001"

    def test_string_port(self):
        assert EndpointResolver("5002", StaticContext(False)).base_url() == "http://node-3:5002"

    def test_context_evaluated_per_call(self):
        """A context change between calls must show up immediately."""
        answers = iter([True, False])
        resolver = EndpointResolver(5000, lambda: next(answers))
        assert resolver.base_url() == "http://localhost:5000"
        assert resolver.base_url() == "http://node-1:5000"

    def test_endpoint_url(self):
        assert Endpoint("node-3", 5002).url == "http://node-3:5002"


class TestNormalizePort:
    """Tests for port normalization."""

    @pytest.mark.parametrize("value", [None, "", "abc", "50.5", True])
    def test_fallback_to_default(self, value):
        assert normalize_port(value) == 5000

    def test_whitespace_is_ignored(self):
        assert normalize_port(" 5001 ") == 5001


class TestEnvironmentContext:
    """Tests for the default environment probe."""

    def test_override_true(self, monkeypatch, tmp_path):
        marker = tmp_path / ".dockerenv"
        marker.touch()
        monkeypatch.setenv("BLOCKNET_LOOPBACK", "yes")
        assert EnvironmentContext(markers=(str(marker),))() is True

    def test_override_false(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BLOCKNET_LOOPBACK", "0")
        assert EnvironmentContext(markers=(str(tmp_path / "missing"),))() is False

    def test_container_marker_means_network(self, monkeypatch, tmp_path):
        marker = tmp_path / ".dockerenv"
        marker.touch()
        monkeypatch.delenv("BLOCKNET_LOOPBACK", raising=False)
        assert EnvironmentContext(markers=(str(marker),))() is False

    def test_no_marker_means_loopback(self, monkeypatch, tmp_path):
        monkeypatch.delenv("BLOCKNET_LOOPBACK", raising=False)
        assert EnvironmentContext(markers=(str(tmp_path / "missing"),))() is True
