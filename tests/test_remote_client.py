"""Tests for the remote tool provider client."""

import json
from unittest.mock import MagicMock

import httpx
import pytest
import respx
from pydantic import ValidationError

from supervisor_agent.clients.base import BaseLLMClient
from supervisor_agent.config import RemoteServerConfig
from supervisor_agent.exceptions import RemoteConnectionError, RemoteResponseError
from supervisor_agent.multi_agent.workers import create_remote_assistants
from supervisor_agent.remote import MultiServerRemoteClient, RemoteTool, RemoteToolClient
from supervisor_agent.remote.client import (
    first_content_text,
    iter_sse_data,
    parse_tool_announcement,
)

URL = "https://maps.example.com/sse"

SEARCH_ANNOUNCEMENT = {
    "tools": [
        {
            "name": "search",
            "description": "Search places",
            "inputSchema": {"type": "object", "properties": {"q": {"type": "string"}}},
        }
    ]
}


def sse_body(*payloads) -> bytes:
    return "".join(f"data: {payload}\n\n" for payload in payloads).encode()


def sse_response(*payloads) -> httpx.Response:
    return httpx.Response(
        200,
        content=sse_body(*payloads),
        headers={"content-type": "text/event-stream"},
    )


def make_client(headers=None) -> RemoteToolClient:
    return RemoteToolClient("maps", RemoteServerConfig(url=URL, headers=headers or {}))


class IdleStream(httpx.SyncByteStream):
    """Stream that yields some bytes then times out instead of closing."""

    def __init__(self, chunk: bytes):
        self.chunk = chunk

    def __iter__(self):
        yield self.chunk
        raise httpx.ReadTimeout("stream idle")


def idle_client(chunk: bytes) -> RemoteToolClient:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, stream=IdleStream(chunk)))
    return RemoteToolClient(
        "maps",
        RemoteServerConfig(url=URL),
        http_client=httpx.Client(transport=transport),
    )


class TestEventParsing:
    """Tests for the event stream helpers."""

    def test_iter_sse_data(self):
        lines = [
            ": keep-alive",
            "event: endpoint",
            "data: /messages",
            "",
            "data: {\"a\":",
            "data: 1}",
            "",
            "data: trailing",
        ]
        assert list(iter_sse_data(lines)) == ["/messages", "{\"a\":\n1}", "trailing"]

    def test_parse_tool_announcement(self):
        entries = parse_tool_announcement(json.dumps(SEARCH_ANNOUNCEMENT))
        assert [entry["name"] for entry in entries] == ["search"]

    def test_non_announcements(self):
        assert parse_tool_announcement("/messages?session=1") is None
        assert parse_tool_announcement("[1, 2]") is None
        assert parse_tool_announcement('{"tools": "nope"}') is None
        assert parse_tool_announcement('{"other": 1}') == []

    def test_entries_without_name_dropped(self):
        payload = json.dumps({"tools": [{"description": "anonymous"}, {"name": "ok"}]})
        assert [entry["name"] for entry in parse_tool_announcement(payload)] == ["ok"]

    def test_first_content_text(self):
        assert first_content_text({"content": [{"text": "OK"}, {"text": "more"}]}) == "OK"
        assert first_content_text({"content": []}) == ""
        assert first_content_text({"content": [{"type": "image"}]}) == ""
        assert first_content_text({"result": "x"}) == ""
        assert first_content_text(["x"]) == ""


class TestDiscovery:
    """Tests for tool discovery over the event stream."""

    def test_collects_announced_tools(self):
        with respx.mock:
            route = respx.get(URL).mock(
                return_value=sse_response("/messages?session=1", json.dumps(SEARCH_ANNOUNCEMENT))
            )
            tools = make_client(headers={"X-Api-Key": "secret"}).get_tools()

        request = route.calls.last.request
        assert request.headers["accept"] == "text/event-stream"
        assert request.headers["x-api-key"] == "secret"
        assert len(tools) == 1
        tool = tools[0]
        assert isinstance(tool, RemoteTool)
        assert tool.name == "search"
        assert tool.description == "Search places"
        assert tool.parameters["properties"]["q"]["type"] == "string"
        assert tool.server == "maps"

    def test_multiple_announcements_accumulate(self):
        second = {"tools": [{"name": "route", "description": "Plan a route"}]}
        with respx.mock:
            respx.get(URL).mock(
                return_value=sse_response(json.dumps(SEARCH_ANNOUNCEMENT), json.dumps(second))
            )
            tools = make_client().get_tools()

        assert [tool.name for tool in tools] == ["search", "route"]
        assert tools[1].parameters == {"type": "object", "properties": {}}

    def test_idle_stream_keeps_discovered_tools(self):
        tools = idle_client(sse_body(json.dumps(SEARCH_ANNOUNCEMENT))).get_tools()
        assert [tool.name for tool in tools] == ["search"]

    def test_idle_stream_without_tools_fails(self):
        with pytest.raises(RemoteConnectionError):
            idle_client(sse_body("/messages")).get_tools()

    def test_error_status(self):
        with respx.mock:
            respx.get(URL).mock(return_value=httpx.Response(503))
            with pytest.raises(RemoteResponseError) as exc_info:
                make_client().get_tools()
        assert exc_info.value.status_code == 503

    def test_connection_failure(self):
        with respx.mock:
            respx.get(URL).mock(side_effect=httpx.ConnectError("connection refused"))
            with pytest.raises(RemoteConnectionError):
                make_client().get_tools()


class TestExecution:
    """Tests for tool execution."""

    def test_posts_call_and_returns_first_text(self):
        with respx.mock:
            route = respx.post(URL).mock(
                return_value=httpx.Response(200, json={"content": [{"type": "text", "text": "OK"}]})
            )
            result = make_client(headers={"X-Api-Key": "secret"}).execute_tool("search", {"q": "coffee"})

        assert result == "OK"
        request = route.calls.last.request
        assert json.loads(request.content) == {
            "method": "tools/call",
            "params": {"name": "search", "arguments": {"q": "coffee"}},
        }
        assert request.headers["x-api-key"] == "secret"

    def test_missing_content_is_empty_text(self):
        with respx.mock:
            respx.post(URL).mock(return_value=httpx.Response(200, json={"content": []}))
            assert make_client().execute_tool("search", {}) == ""

    def test_error_status(self):
        with respx.mock:
            respx.post(URL).mock(return_value=httpx.Response(500, json={"error": "boom"}))
            with pytest.raises(RemoteResponseError) as exc_info:
                make_client().execute_tool("search", {})
        assert exc_info.value.status_code == 500

    def test_non_json_body(self):
        with respx.mock:
            respx.post(URL).mock(return_value=httpx.Response(200, content=b"not json"))
            with pytest.raises(RemoteResponseError):
                make_client().execute_tool("search", {})

    def test_remote_tool_execute(self):
        with respx.mock:
            respx.get(URL).mock(return_value=sse_response(json.dumps(SEARCH_ANNOUNCEMENT)))
            respx.post(URL).mock(
                return_value=httpx.Response(200, json={"content": [{"text": "3 cafes found"}]})
            )
            tool = make_client().get_tools()[0]
            assert tool.execute(q="coffee") == "3 cafes found"

    def test_remote_tool_turns_failure_into_text(self):
        with respx.mock:
            respx.get(URL).mock(return_value=sse_response(json.dumps(SEARCH_ANNOUNCEMENT)))
            respx.post(URL).mock(side_effect=httpx.ConnectError("connection reset"))
            tool = make_client().get_tools()[0]
            result = tool.execute(q="coffee")

        assert result.startswith("Tool execution failed:")
        assert "connection reset" in result


class TestMultiServer:
    """Tests for discovery across several providers."""

    CONFIGS = {
        "broken": {"url": "https://broken.example.com/sse"},
        "maps": {"url": URL, "transport": "sse"},
    }

    def test_failing_provider_contributes_no_tools(self):
        with respx.mock:
            respx.get("https://broken.example.com/sse").mock(
                side_effect=httpx.ConnectError("unreachable")
            )
            respx.get(URL).mock(return_value=sse_response(json.dumps(SEARCH_ANNOUNCEMENT)))

            with MultiServerRemoteClient(self.CONFIGS) as client:
                by_server = client.get_tools_by_server()
                flattened = client.get_tools()

        assert by_server["broken"] == []
        assert [tool.name for tool in by_server["maps"]] == ["search"]
        assert [tool.name for tool in flattened] == ["search"]

    def test_one_worker_per_provider_with_tools(self):
        with respx.mock:
            respx.get("https://broken.example.com/sse").mock(
                side_effect=httpx.ConnectError("unreachable")
            )
            respx.get(URL).mock(return_value=sse_response(json.dumps(SEARCH_ANNOUNCEMENT)))

            agents = create_remote_assistants(
                MultiServerRemoteClient(self.CONFIGS),
                MagicMock(spec=BaseLLMClient),
                prompts={"maps": "You are a map assistant."},
                max_iterations=4,
            )

        assert [agent.name for agent in agents] == ["maps_assistant"]
        assert agents[0].system_prompt == "You are a map assistant."
        assert [tool.name for tool in agents[0].tools] == ["search"]
        assert agents[0].max_iterations == 4

    def test_repeated_announcement_does_not_break_other_workers(self):
        first = {"tools": [{"name": "search", "description": "first"}]}
        repeat = {"tools": [{"name": "search", "description": "repeat"}]}
        configs = {
            "a": {"url": "https://a.example.com/sse"},
            "b": {"url": "https://b.example.com/sse"},
        }
        with respx.mock:
            respx.get("https://a.example.com/sse").mock(
                return_value=sse_response(json.dumps(first), json.dumps(repeat))
            )
            respx.get("https://b.example.com/sse").mock(return_value=sse_response(json.dumps(first)))

            remote_client = MultiServerRemoteClient(configs)
            by_server = remote_client.get_tools_by_server()
            agents = create_remote_assistants(remote_client, MagicMock(spec=BaseLLMClient))

        assert [tool.name for tool in by_server["a"]] == ["search"]
        assert by_server["a"][0].description == "first"
        assert [agent.name for agent in agents] == ["a_assistant", "b_assistant"]

    def test_unsupported_transport_rejected(self):
        with pytest.raises(ValidationError):
            MultiServerRemoteClient({"ws": {"url": "wss://example.com", "transport": "websocket"}})

    def test_accepts_config_models(self):
        config = RemoteServerConfig(url=URL)
        with MultiServerRemoteClient({"maps": config}) as client:
            assert client.servers["maps"].url == URL
