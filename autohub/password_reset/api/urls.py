from django.urls import path
from .views import ForgotPasswordView, VerifyResetTokenView, ResetPasswordView

urlpatterns = [
    path('forgot-password', ForgotPasswordView.as_view(), name='forgot-password'),
    path('verify-reset-token', VerifyResetTokenView.as_view(), name='verify-reset-token'),
    path('reset-password', ResetPasswordView.as_view(), name='reset-password'),
]
