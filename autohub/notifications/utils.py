import logging
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

from .consumers import MARKETPLACE_GROUP

logger = logging.getLogger(__name__)

NEW_VEHICLE = "newVehicle"
NEW_BID = "newBid"
BOOKING_CONFIRMED = "bookingConfirmed"


def broadcast(event, data):
    """Send an event to every marketplace listener. Never raises."""
    channel_layer = get_channel_layer()
    if channel_layer is None:
        logger.warning(f"Channel layer not configured, dropping {event} event")
        return False

    try:
        async_to_sync(channel_layer.group_send)(
            MARKETPLACE_GROUP,
            {"type": "marketplace.event", "event": event, "data": data},
        )
    except Exception:
        logger.exception(f"Failed to broadcast {event} event")
        return False

    return True
