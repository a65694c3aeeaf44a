from django.urls import path

from . import views

app_name = 'referrals'

urlpatterns = [
    path('referrals', views.ReferralListCreateView.as_view(), name='referrals'),
    path('referrals/', views.ReferralListCreateView.as_view()),
]
