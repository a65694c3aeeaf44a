from django.apps import AppConfig


class ReferralsConfig(AppConfig):
    name = 'referrals'

    def ready(self):
        from .notifications import EmailNotificationSender
        from .services import ReferralService
        from .store import DjangoReferralStore

        self.service = ReferralService(DjangoReferralStore(), EmailNotificationSender())


def get_referral_service():
    from django.apps import apps
    return apps.get_app_config('referrals').service
