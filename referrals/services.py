from logging import getLogger

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from .errors import NotificationError, StoreError, StoreUnavailableError, ValidationError
from .models import ReferralStatus
from .notifications import ReferralNotification
from .serializers import ReferralSubmissionSerializer

logger = getLogger('referrals')

DB_CONNECTED = 'Connected'
DB_NOT_CONNECTED = 'Not Connected'


class Result:
    """Outcome of a service operation: either a value or a classified error."""

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    def __repr__(self):
        if self.ok:
            return '<Result ok: {!r}>'.format(self.value)
        return '<Result error: {!r}>'.format(self.error)


class ReferralService:
    """Validate referral submissions, store them, then notify the referee.

    The store write always completes before the email is attempted. A failed
    email does not remove the stored referral.
    """

    def __init__(self, store, sender, service_name=None):
        self.store = store
        self.sender = sender
        self.service_name = service_name or settings.SERVICE_NAME

    def validate(self, data):
        """Return validated fields (model attribute names) or raise ValidationError"""
        serializer = ReferralSubmissionSerializer(data=data)
        if not serializer.is_valid():
            raise ValidationError('All fields are required', fields=serializer.errors)
        return dict(serializer.validated_data)

    def submit_referral(self, data):
        logger.info('Received referral request: %s', data)
        try:
            fields = self.validate(data)
        except ValidationError as e:
            logger.info('Validation failed: %s', e.fields)
            return Result.failure(e)

        try:
            referral = self.store.create(status=ReferralStatus.pending, **fields)
        except StoreError as e:
            return Result.failure(e)
        logger.info('Referral created: %s (id %s)', referral, referral.pk)

        try:
            self.sender.send(ReferralNotification(referral))
        except NotificationError as e:
            return Result.failure(e)
        logger.info('Email sent successfully to: %s', referral.referee_email)
        return Result.success(referral)

    def list_referrals(self):
        try:
            return Result.success(self.store.list())
        except StoreError as e:
            if not isinstance(e, StoreUnavailableError):
                e = StoreUnavailableError(e.detail)
            return Result.failure(e)

    def health_check(self):
        try:
            connected = self.store.is_connected()
        except DatabaseError:
            connected = False
        return {
            'status': 'OK',
            'timestamp': timezone.now(),
            'service': self.service_name,
            'databaseConnection': DB_CONNECTED if connected else DB_NOT_CONNECTED,
        }
