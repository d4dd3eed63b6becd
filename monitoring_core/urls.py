"""
Monitoring URLs
"""
from django.urls import path

from .views import FlushProviderCacheView, MonitoringOverviewView

app_name = 'monitoring'

urlpatterns = [
    path('overview/', MonitoringOverviewView.as_view(), name='overview'),
    path('providers/<str:identity>/flush/', FlushProviderCacheView.as_view(), name='flush-provider'),
]
