from rest_framework import status, views
from rest_framework.response import Response

from referrals.apps import get_referral_service


class HealthView(views.APIView):
    """Service status. Always answers 200; database state is reported as a field"""

    def get(self, request):
        return Response(get_referral_service().health_check(), status=status.HTTP_200_OK)
