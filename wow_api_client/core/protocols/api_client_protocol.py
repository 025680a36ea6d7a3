"""
API Client Protocol Definition

Defines the interface the generated resource accessors rely on.
"""

from typing import Protocol, Any, Optional, Sequence, Mapping, runtime_checkable


@runtime_checkable
class APIClientProtocol(Protocol):
    """Protocol for resource fetching clients."""

    async def fetch_resource(
        self,
        path: str,
        fields: Optional[Sequence[str]] = None,
        params: Optional[Mapping[str, Any]] = None
    ) -> Optional[Any]:
        """
        Fetch one resource.

        Args:
            path: Resource path relative to /wow/
            fields: Optional field selectors
            params: Optional extra query parameters

        Returns:
            Parsed body, or None when the service reports the resource absent
        """
        ...

    async def fetch_sub_resource(
        self,
        entity_path: str,
        field_name: str
    ) -> Optional[Any]:
        """
        Fetch a single field of a profile resource.

        Args:
            entity_path: Profile path (character or guild)
            field_name: Field selector to include and unwrap

        Returns:
            The unwrapped field, or None
        """
        ...
