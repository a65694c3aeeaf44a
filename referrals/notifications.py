import smtplib

from django.conf import settings
from django.core.mail import BadHeaderError, EmailMultiAlternatives
from django.template import loader

from .errors import NotificationError


class ReferralNotification:
    """Email telling a referee about the course they were referred to."""

    template = 'referrals/referral_email.html'
    template_plain = 'referrals/referral_email_plain.html'

    def __init__(self, referral, base_url=None):
        self.referral = referral
        self.base_url = (base_url or settings.COURSES_BASE_URL).rstrip('/')

    @property
    def to(self):
        return self.referral.referee_email

    @property
    def subject(self):
        return '{} has referred you to a course!'.format(self.referral.referrer_name)

    @property
    def course_url(self):
        return '{}/courses/{}'.format(self.base_url, self.referral.course)

    def get_template_params(self):
        return {'referee_name': self.referral.referee_name,
                'referrer_name': self.referral.referrer_name,
                'course': self.referral.course,
                'course_url': self.course_url}

    def render(self):
        """Return (text_content, html_content)"""
        params = self.get_template_params()
        return loader.render_to_string(self.template_plain, params), loader.render_to_string(self.template, params)


class EmailNotificationSender:
    """Send notifications through Django's configured email backend."""

    def __init__(self, from_email=None, connection=None):
        self.from_email = from_email
        self.connection = connection

    def send(self, notification):
        text_content, html_content = notification.render()
        email_message = EmailMultiAlternatives(notification.subject, text_content,
                                               self.from_email or settings.DEFAULT_FROM_EMAIL,
                                               [notification.to], connection=self.connection)
        email_message.attach_alternative(html_content, 'text/html')
        try:
            email_message.send()
        except (smtplib.SMTPException, OSError, BadHeaderError) as e:
            raise NotificationError('Could not send email to {}: {}'.format(notification.to, e)) from e
