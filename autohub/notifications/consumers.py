from channels.generic.websocket import AsyncJsonWebsocketConsumer

MARKETPLACE_GROUP = "marketplace"


class MarketplaceConsumer(AsyncJsonWebsocketConsumer):
    """Pushes marketplace events to every connected client. Listening is anonymous."""

    async def connect(self):
        await self.channel_layer.group_add(MARKETPLACE_GROUP, self.channel_name)
        await self.accept()

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(MARKETPLACE_GROUP, self.channel_name)

    async def receive_json(self, content, **kwargs):
        # clients only listen on this socket
        pass

    # called when group_send uses "type": "marketplace.event"
    async def marketplace_event(self, event):
        await self.send_json({"event": event["event"], "data": event.get("data", {})})
