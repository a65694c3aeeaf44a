from django.db import DatabaseError, connections

from .errors import StoreError, StoreUnavailableError
from .models import Referral


class DjangoReferralStore:
    """Referral persistence over the Django ORM."""

    def __init__(self, using='default'):
        self.using = using

    def create(self, **fields):
        try:
            return Referral.objects.using(self.using).create(**fields)
        except DatabaseError as e:
            raise StoreError('Could not save referral: {}'.format(e)) from e

    def list(self):
        try:
            return list(Referral.objects.using(self.using).order_by('-created_at', '-id'))
        except DatabaseError as e:
            raise StoreUnavailableError('Could not read referrals: {}'.format(e)) from e

    def is_connected(self):
        try:
            connections[self.using].ensure_connection()
        except DatabaseError:
            return False
        return True
