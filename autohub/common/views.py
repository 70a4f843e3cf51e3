import logging
from django.db import connection, DatabaseError
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Health check",
        description="Reports whether the API can reach its database.",
        responses={200: dict, 503: dict},
    )
    def get(self, request):
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        except DatabaseError as e:
            logger.error(f"Health check failed: {e}")
            return Response(
                {"status": "Error", "database": "Disconnected", "message": str(e)},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response({
            "status": "OK",
            "database": "Connected",
            "timestamp": timezone.now().isoformat(),
        })
