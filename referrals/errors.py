"""Failures a referral operation can end with.

Collaborators raise these; ReferralService catches them and hands them back
inside a Result, so views only map error types to responses.
"""


class SubmitError(Exception):
    """Base class for every classified referral failure."""

    def __init__(self, detail=''):
        super().__init__(detail)
        self.detail = detail


class ValidationError(SubmitError):
    """One or more required fields are missing or empty."""

    def __init__(self, detail='', fields=None):
        super().__init__(detail)
        self.fields = fields or {}


class StoreError(SubmitError):
    """The referral store rejected a write or could not be reached."""


class StoreUnavailableError(StoreError):
    """The referral store could not be read."""


class NotificationError(SubmitError):
    """The referee email could not be sent. The referral is already stored."""
