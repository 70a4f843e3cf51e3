from django.urls import re_path
from .consumers import MarketplaceConsumer

websocket_urlpatterns = [
    re_path(r"ws/marketplace/$", MarketplaceConsumer.as_asgi()),
]
