"""
Pydantic models for inbound Square webhook notifications.

These payloads are delivered out-of-band by Square; the client never
produces them, it only parses them.
"""

from datetime import datetime
from enum import Enum

from .common import SquareModel


class LocationWebhookEventType(str, Enum):
    """Tipos de evento de webhook de ubicaciones."""

    LOCATION_CREATED = "location.created"
    LOCATION_UPDATED = "location.updated"


class LocationCreatedEventData(SquareModel):
    """Data associated with a location.created event."""

    type: str
    id: str


class LocationUpdatedEventData(SquareModel):
    """Data associated with a location.updated event."""

    type: str
    id: str


class LocationCreatedWebhookResponse(SquareModel):
    """
    Payload of the location.created webhook.

    Attributes:
        merchant_id: ID of the target seller associated with the event
        location_id: The location id
        type: Always "location.created"
        event_id: Unique ID for the event
        created_at: When the event was created (RFC 3339)
        data: Data associated with the event
    """

    merchant_id: str
    location_id: str
    type: LocationWebhookEventType
    event_id: str
    created_at: datetime
    data: LocationCreatedEventData


class LocationUpdatedWebhookResponse(SquareModel):
    """
    Payload of the location.updated webhook.

    Attributes:
        merchant_id: ID of the target seller associated with the event
        location_id: The location id
        type: Always "location.updated"
        event_id: Unique ID for the event
        created_at: When the event was created, in RFC 3339 format, e.g.
            2020-01-26T02:25:34Z or 2020-01-25T18:25:34-08:00
        data: Data associated with the event
    """

    merchant_id: str
    location_id: str
    type: LocationWebhookEventType
    event_id: str
    created_at: datetime
    data: LocationUpdatedEventData
