"""
Public term and post URLs.
"""

from django.urls import path

from . import views

app_name = "at_terms"
urlpatterns = [
    path("terms/<str:taxonomy>/<str:slug>/", views.TermDetailView.as_view(), name="term-detail"),
    path("posts/<str:slug>/", views.PostDetailView.as_view(), name="post-detail"),
]
