from django.contrib import admin

from .models import Referral


class ReferralAdmin(admin.ModelAdmin):
    list_display = ('pk', 'referrer_email', 'referee_email', 'course', 'status', 'created_at')
    list_filter = ('status', 'course')
    search_fields = ('referrer_email', 'referee_email', 'course')
    readonly_fields = ('referrer_name', 'referrer_email', 'referee_name', 'referee_email', 'course', 'status',
                       'created_at', 'updated_at')

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


admin.site.register(Referral, ReferralAdmin)
