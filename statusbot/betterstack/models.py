"""
Better Stack Uptime API models.

The API answers list endpoints with a JSON:API-style envelope:

    {"data": [{"id": "1", "type": "monitor", "attributes": {...}}],
     "pagination": {"first": ..., "last": ..., "prev": ..., "next": ...}}

Only the attributes the bot renders are kept.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from ..core.exceptions import BetterStackResponseError


T = TypeVar("T")


def _split_resource(item: Any) -> tuple[str, Dict[str, Any]]:
    """Return (id, attributes) for one resource object."""
    if not isinstance(item, dict) or "id" not in item:
        raise BetterStackResponseError(f"Resource object without id: {item!r}")

    attributes = item.get("attributes")
    if not isinstance(attributes, dict):
        raise BetterStackResponseError(f"Resource {item['id']} has no attributes object")

    return str(item["id"]), attributes


@dataclass
class Monitor:
    """A monitored endpoint and its current up/down status."""

    id: str
    name: Optional[str]
    status: Optional[str]
    last_checked_at: Optional[str]

    @property
    def is_up(self) -> bool:
        # Anything other than "up" (down, paused, pending, maintenance...) counts as down
        return self.status == "up"

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Monitor":
        monitor_id, attributes = _split_resource(item)
        return cls(
            id=monitor_id,
            name=attributes.get("pronounceable_name"),
            status=attributes.get("status"),
            last_checked_at=attributes.get("last_checked_at"),
        )


@dataclass
class Incident:
    """A recorded outage with start time and optional resolution time."""

    id: str
    name: Optional[str]
    status: Optional[str]
    started_at: Optional[str]
    resolved_at: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return bool(self.resolved_at)

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Incident":
        incident_id, attributes = _split_resource(item)
        return cls(
            id=incident_id,
            name=attributes.get("name"),
            status=attributes.get("status"),
            started_at=attributes.get("started_at"),
            resolved_at=attributes.get("resolved_at"),
        )


@dataclass
class Heartbeat:
    """A scheduled check-in expected from an external job every `period` seconds."""

    id: str
    name: Optional[str]
    period: Any
    status: Optional[str]

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Heartbeat":
        heartbeat_id, attributes = _split_resource(item)
        return cls(
            id=heartbeat_id,
            name=attributes.get("name"),
            period=attributes.get("period"),
            status=attributes.get("status"),
        )


@dataclass
class Page(Generic[T]):
    """
    One page of a list endpoint.

    Attributes:
        items: Parsed resources in the order the API returned them
        next_url: Opaque cursor for the next page (None on the last page)
    """

    items: List[T] = field(default_factory=list)
    next_url: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.next_url is not None

    def first(self, limit: Optional[int] = None) -> List[T]:
        """Return up to `limit` items in fetch order (all items if limit is None)."""
        if limit is None:
            return list(self.items)
        return self.items[:limit]

    @classmethod
    def from_api(cls, payload: Any, parse_item: Callable[[Dict[str, Any]], T]) -> "Page[T]":
        """
        Parse a list response envelope.

        Args:
            payload: Decoded JSON body
            parse_item: Model constructor for one resource (e.g. Monitor.from_api)

        Raises:
            BetterStackResponseError: If the envelope is malformed
        """
        if not isinstance(payload, dict):
            raise BetterStackResponseError(f"Expected JSON object, got {type(payload).__name__}")

        data = payload.get("data")
        if not isinstance(data, list):
            raise BetterStackResponseError("Response has no 'data' list")

        pagination = payload.get("pagination") or {}
        next_url = pagination.get("next") if isinstance(pagination, dict) else None

        return cls(items=[parse_item(item) for item in data], next_url=next_url)
