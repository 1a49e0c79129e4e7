"""HTTP side of the relay: the docs backend client and SSE response recovery."""

from docs_proxy.http.client import DocsApiClient
from docs_proxy.http.sse import is_terminal_response, iter_events, recover_response

__all__ = ["DocsApiClient", "is_terminal_response", "iter_events", "recover_response"]
