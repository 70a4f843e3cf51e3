from django.urls import path
from .views import RegisterView, LoginView, ProfileView

urlpatterns = [
    path('register', RegisterView.as_view(), name='register'),
    path('login', LoginView.as_view(), name='login'),
    path('user/profile', ProfileView.as_view(), name='user-profile'),
]
