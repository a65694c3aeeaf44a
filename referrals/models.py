from django.db import models
from djchoices import ChoiceItem, DjangoChoices


class ReferralStatus(DjangoChoices):
    pending = ChoiceItem('PENDING', 'Pending')


class Referral(models.Model):
    referrer_name = models.CharField(max_length=255)
    referrer_email = models.CharField(max_length=255)
    referee_name = models.CharField(max_length=255)
    referee_email = models.CharField(max_length=255)
    course = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=ReferralStatus.choices, default=ReferralStatus.pending)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return '{} -> {} ({})'.format(self.referrer_email, self.referee_email, self.course)
