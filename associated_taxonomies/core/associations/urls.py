"""
Associations API URLs.
"""

from django.urls import include, path

from .rest_api import urls

app_name = "at_associations"
urlpatterns = [path("rest_api/", include(urls))]
