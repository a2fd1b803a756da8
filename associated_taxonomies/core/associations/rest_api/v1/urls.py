"""
Term associations API v1 URLs.
"""

from django.urls.conf import path

from . import views

urlpatterns = [
    path(
        "terms/<str:term_id>/associations/",
        views.TermAssociationsView.as_view(),
        name="term-associations",
    ),
    path(
        "render/related_terms/",
        views.RelatedTermsFragmentView.as_view(),
        name="render-related-terms",
    ),
    path(
        "render/posts_by_related_terms/",
        views.PostsByRelatedTermsFragmentView.as_view(),
        name="render-posts-by-related-terms",
    ),
]
