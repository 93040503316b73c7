"""Protocol for the Notion calls the weight and profile adapters rely on."""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class NotionAPI(Protocol):
    """Page-level Notion operations.

    Payloads and responses are raw Notion JSON. Failed calls raise
    ``HTTPException`` carrying Notion's status code.
    """

    async def query(self, database_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Run a filtered database query and return one page of results."""

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a page under the database named in ``payload["parent"]``."""

    async def update(self, page_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Patch page properties."""

    async def archive(self, page_id: str) -> Dict[str, Any]:
        """Move a page to the Notion trash."""

    async def retrieve(self, page_id: str) -> Dict[str, Any]:
        """Fetch a single page."""
