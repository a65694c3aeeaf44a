from rest_framework import serializers

from .models import Referral


class ReferralSubmissionSerializer(serializers.Serializer):
    """Incoming referral. Values are stored as sent: no trimming, no email format check."""
    referrerName = serializers.CharField(source='referrer_name', max_length=255, trim_whitespace=False)
    referrerEmail = serializers.CharField(source='referrer_email', max_length=255, trim_whitespace=False)
    refereeName = serializers.CharField(source='referee_name', max_length=255, trim_whitespace=False)
    refereeEmail = serializers.CharField(source='referee_email', max_length=255, trim_whitespace=False)
    course = serializers.CharField(max_length=255, trim_whitespace=False)


class ReferralSerializer(serializers.ModelSerializer):
    referrerName = serializers.CharField(source='referrer_name')
    referrerEmail = serializers.CharField(source='referrer_email')
    refereeName = serializers.CharField(source='referee_name')
    refereeEmail = serializers.CharField(source='referee_email')
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')

    class Meta:
        model = Referral
        fields = ['id', 'referrerName', 'referrerEmail', 'refereeName', 'refereeEmail', 'course', 'status',
                  'createdAt', 'updatedAt']
