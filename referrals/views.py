from logging import getLogger

from rest_framework import status, views
from rest_framework.response import Response

from .apps import get_referral_service
from .errors import ValidationError
from .serializers import ReferralSerializer

logger = getLogger('api_errors')


class ReferralListCreateView(views.APIView):
    """List every referral (newest first) or submit a new one"""

    def get_service(self):
        return get_referral_service()

    def get(self, request):
        result = self.get_service().list_referrals()
        if not result.ok:
            logger.error('Error fetching referrals: %s', result.error.detail, exc_info=result.error)
            return Response({'error': 'Failed to fetch referrals'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(ReferralSerializer(result.value, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        result = self.get_service().submit_referral(request.data)
        if result.ok:
            return Response({'message': 'Referral created successfully',
                             'referral': ReferralSerializer(result.value).data},
                            status=status.HTTP_201_CREATED)
        if isinstance(result.error, ValidationError):
            return Response({'error': 'All fields are required'}, status=status.HTTP_400_BAD_REQUEST)
        logger.error('Error processing referral: %s', result.error.detail, exc_info=result.error)
        return Response({'error': 'Failed to process referral'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
