from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import VehicleViewSet, UserVehiclesView

router = DefaultRouter(trailing_slash=False)
router.register(r'vehicles', VehicleViewSet, basename='vehicles')

urlpatterns = [
    path('user/vehicles', UserVehiclesView.as_view(), name='user-vehicles'),
    path('', include(router.urls)),
]
