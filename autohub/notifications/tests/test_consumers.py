import pytest
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator

from autohub.notifications.consumers import MARKETPLACE_GROUP, MarketplaceConsumer


@pytest.mark.asyncio
async def test_listener_receives_marketplace_events():
    communicator = WebsocketCommunicator(MarketplaceConsumer.as_asgi(), "/ws/marketplace/")
    connected, _ = await communicator.connect()
    assert connected

    await get_channel_layer().group_send(
        MARKETPLACE_GROUP,
        {"type": "marketplace.event", "event": "newBid", "data": {"vehicleId": 7, "amount": "1200.00"}},
    )

    assert await communicator.receive_json_from() == {
        "event": "newBid",
        "data": {"vehicleId": 7, "amount": "1200.00"},
    }
    await communicator.disconnect()


@pytest.mark.asyncio
async def test_client_messages_are_ignored():
    communicator = WebsocketCommunicator(MarketplaceConsumer.as_asgi(), "/ws/marketplace/")
    await communicator.connect()

    await communicator.send_json_to({"event": "newBid", "data": {}})

    assert await communicator.receive_nothing()
    await communicator.disconnect()
