"""
enrollment_manager URL Configuration.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path, re_path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

from enrollment_manager.apps.api import urls as api_urls

admin.autodiscover()

spec_swagger_view = SpectacularSwaggerView()

spec_redoc_view = SpectacularRedocView(
    title='Redoc view for the enrollment-manager API.',
    url_name='schema',
)

urlpatterns = [
    re_path(r'^admin/', admin.site.urls),
    path('api/', include(api_urls)),
    re_path(r'^api-docs/', spec_swagger_view.as_view(), name='swagger-ui'),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/redoc/', spec_redoc_view.as_view(url_name='schema'), name='redoc'),
]
