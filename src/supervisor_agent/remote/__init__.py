"""Remote tool providers: discovery over server-sent events, execution over HTTP."""

from .client import (
    MultiServerRemoteClient,
    RemoteToolClient,
    first_content_text,
    iter_sse_data,
    parse_tool_announcement,
)
from .tool import RemoteTool

__all__ = [
    "MultiServerRemoteClient",
    "RemoteTool",
    "RemoteToolClient",
    "first_content_text",
    "iter_sse_data",
    "parse_tool_announcement",
]
