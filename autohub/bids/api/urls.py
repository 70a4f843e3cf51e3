from django.urls import path
from .views import PlaceBidView, UserBidsView

urlpatterns = [
    path('bids', PlaceBidView.as_view(), name='place-bid'),
    path('user/bids', UserBidsView.as_view(), name='user-bids'),
]
