"""LinkBuilder bound to the current HTTP request."""

from typing import Any

from fastapi import Request


class RequestLinkBuilder:
    """Resolves route names against the incoming request's base URL.

    Satisfies the LinkBuilder protocol, so links carry the scheme, host
    and root path the client actually used.
    """

    def __init__(self, request: Request) -> None:
        self._request = request

    def build(
        self,
        route_name: str,
        path_params: dict[str, Any] | None = None,
        query_params: dict[str, Any] | None = None,
    ) -> str:
        url = self._request.url_for(route_name, **(path_params or {}))
        if query_params:
            url = url.include_query_params(**query_params)
        return str(url)
