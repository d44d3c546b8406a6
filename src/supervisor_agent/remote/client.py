"""Client for remote tool providers.

A provider exposes one endpoint for two phases:

- discovery: ``GET`` opens a server-sent event stream; every ``data:`` payload
  shaped like ``{"tools": [{"name", "description", "inputSchema"}, ...]}``
  announces tools, any other payload is ignored
- execution: ``POST`` a ``{"method": "tools/call", "params": {...}}`` body and
  read the text of the first ``content`` entry of the JSON reply
"""

import json
from typing import Any, Iterable, Iterator, Mapping

import httpx

from ..config import RemoteServerConfig
from ..exceptions import RemoteConnectionError, RemoteResponseError, RemoteToolError
from ..logging import get_logger
from .tool import RemoteTool

logger = get_logger(__name__)

CALL_TOOL_METHOD = "tools/call"
DEFAULT_TIMEOUT = 30.0


def iter_sse_data(lines: Iterable[str]) -> Iterator[str]:
    """Yield the data payload of every event in a server-sent event stream.

    Multi-line data fields are joined with newlines, comment lines and
    non-data fields are dropped.
    """
    buffer: list[str] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            if buffer:
                yield "\n".join(buffer)
                buffer = []
            continue
        if line.startswith(":"):
            continue
        field, _, value = line.partition(":")
        if field != "data":
            continue
        buffer.append(value[1:] if value.startswith(" ") else value)
    if buffer:
        yield "\n".join(buffer)


def parse_tool_announcement(payload: str) -> list[dict[str, Any]] | None:
    """Decode an event payload as a tool-list announcement.

    Returns:
        The announced tool entries, or None if the payload is not an
        announcement.
    """
    try:
        decoded = json.loads(payload)
    except json.JSONDecodeError:
        return None
    if not isinstance(decoded, dict):
        return None
    tools = decoded.get("tools")
    if tools is None:
        return []
    if not isinstance(tools, list):
        return None
    return [entry for entry in tools if isinstance(entry, dict) and entry.get("name")]


def first_content_text(data: Any) -> str:
    """Return the text of the first content entry of a tool-call reply, or ''."""
    if not isinstance(data, dict):
        return ""
    content = data.get("content")
    if not isinstance(content, list) or not content:
        return ""
    first = content[0]
    if not isinstance(first, dict):
        return ""
    text = first.get("text")
    return text if isinstance(text, str) else ""


class RemoteToolClient:
    """Discovers and executes the tools of a single remote provider."""

    def __init__(
        self,
        name: str,
        config: RemoteServerConfig,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the client.

        Args:
            name: Provider name, used in logs and errors.
            config: Endpoint, headers and transport of the provider.
            http_client: Optional shared httpx client. One is created (and
                owned) when omitted.
            timeout: Connect/read timeout in seconds for an owned client.
        """
        self.name = name
        self.config = config
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    @property
    def url(self) -> str:
        return self.config.url

    def get_tools(self) -> list[RemoteTool]:
        """Read the provider's event stream and collect announced tools.

        The stream is read until the server closes it. If it stays idle past
        the read timeout after at least one announcement, the tools collected
        so far are returned. A name announced more than once keeps its first
        announcement.

        Raises:
            RemoteConnectionError: If the provider cannot be reached.
            RemoteResponseError: If the provider answers with an error status.
        """
        headers = {"Accept": "text/event-stream", **self.config.headers}
        tools: dict[str, RemoteTool] = {}

        try:
            with self._http.stream("GET", self.url, headers=headers) as response:
                if not response.is_success:
                    raise RemoteResponseError(
                        self.name,
                        f"server '{self.name}' returned status {response.status_code}",
                        status_code=response.status_code,
                    )
                try:
                    for payload in iter_sse_data(response.iter_lines()):
                        for tool in self._tools_from_payload(payload):
                            if tool.name in tools:
                                logger.warning(
                                    f"server '{self.name}' announced tool '{tool.name}' again, "
                                    "keeping the first announcement"
                                )
                                continue
                            tools[tool.name] = tool
                except httpx.ReadTimeout:
                    if not tools:
                        raise
                    logger.info(
                        f"event stream of '{self.name}' went idle, "
                        f"keeping {len(tools)} discovered tool(s)"
                    )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteConnectionError(
                self.name, f"request to server '{self.name}' failed: {e}"
            ) from e

        logger.debug(f"discovered {len(tools)} tool(s) on '{self.name}'")
        return list(tools.values())

    def _tools_from_payload(self, payload: str) -> list[RemoteTool]:
        entries = parse_tool_announcement(payload)
        if entries is None:
            logger.debug(f"ignoring non-announcement event from '{self.name}'")
            return []
        return [
            RemoteTool(
                name=entry["name"],
                description=entry.get("description") or "",
                input_schema=entry.get("inputSchema"),
                client=self,
            )
            for entry in entries
        ]

    def execute_tool(self, tool_name: str, arguments: Mapping[str, Any]) -> str:
        """Call a tool on the provider.

        Returns:
            The text of the first content entry of the reply; empty text if
            the reply carries no usable content.

        Raises:
            RemoteConnectionError: If the provider cannot be reached.
            RemoteResponseError: On an error status or a non-JSON reply.
        """
        body = {
            "method": CALL_TOOL_METHOD,
            "params": {"name": tool_name, "arguments": dict(arguments)},
        }
        headers = {"Content-Type": "application/json", **self.config.headers}

        try:
            response = self._http.post(self.url, json=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteConnectionError(
                self.name, f"call to '{tool_name}' on '{self.name}' failed: {e}"
            ) from e

        if not response.is_success:
            raise RemoteResponseError(
                self.name,
                f"call to '{tool_name}' on '{self.name}' returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteResponseError(
                self.name, f"invalid response from '{self.name}': {e}"
            ) from e

        return first_content_text(data)

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "RemoteToolClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RemoteToolClient(name='{self.name}', url='{self.url}')"


class MultiServerRemoteClient:
    """Discovers tools across several independently configured providers.

    Example:
        client = MultiServerRemoteClient({
            "map_search": {"url": "https://example.com/sse?key=...", "transport": "sse"},
        })
        tools = client.get_tools()
    """

    def __init__(
        self,
        configs: Mapping[str, RemoteServerConfig | Mapping[str, Any]],
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize one client per provider.

        Args:
            configs: Provider name to configuration (model or plain mapping).
            http_client: Optional httpx client shared by every provider.
            timeout: Timeout in seconds for clients created here.

        Raises:
            pydantic.ValidationError: If a configuration is invalid, for
                example an unsupported transport.
        """
        self.servers: dict[str, RemoteToolClient] = {}
        for name, config in configs.items():
            if not isinstance(config, RemoteServerConfig):
                config = RemoteServerConfig.model_validate(config)
            self.servers[name] = RemoteToolClient(
                name, config, http_client=http_client, timeout=timeout
            )

    def get_tools_by_server(self) -> dict[str, list[RemoteTool]]:
        """Discover tools on every provider.

        A provider that fails contributes no tools; the failure is logged and
        discovery continues with the next provider.
        """
        discovered: dict[str, list[RemoteTool]] = {}
        for name, server in self.servers.items():
            try:
                discovered[name] = server.get_tools()
            except RemoteToolError as e:
                logger.error(f"failed to get tools from server '{name}': {e}")
                discovered[name] = []
        return discovered

    def get_tools(self) -> list[RemoteTool]:
        """Discover tools on every provider, flattened in configuration order."""
        return [
            tool
            for tools in self.get_tools_by_server().values()
            for tool in tools
        ]

    def close(self) -> None:
        for server in self.servers.values():
            server.close()

    def __enter__(self) -> "MultiServerRemoteClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
