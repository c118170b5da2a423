"""Link builder protocol.

Builds absolute URIs for named routes so handlers never assemble
URLs by hand.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LinkBuilder(Protocol):
    """Protocol for resolving route names to absolute URIs."""

    def build(
        self,
        route_name: str,
        path_params: dict[str, Any] | None = None,
        query_params: dict[str, Any] | None = None,
    ) -> str:
        """Build an absolute URI.

        Args:
            route_name: Name the route was registered under
            path_params: Values for the route's path parameters
            query_params: Query string parameters to append

        Returns:
            The absolute URI
        """
        ...
