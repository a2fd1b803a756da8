"""
Public pages for terms and posts.

These give terms and posts their canonical URLs (see ``api.get_term_link`` and
``api.get_permalink``).
"""
from __future__ import annotations

from django.http import Http404
from django.shortcuts import get_object_or_404
from django.views.generic import DetailView, ListView

from .models import Post, Term


class TermDetailView(ListView):
    """
    Lists the published posts carrying a single term of a public taxonomy.
    """
    template_name = "terms/term_detail.html"
    context_object_name = "posts"

    def get_term(self) -> Term:
        """
        Look up the term from the URL, hiding terms of non-public taxonomies.
        """
        term = get_object_or_404(
            Term.objects.select_related("taxonomy"),
            taxonomy__name=self.kwargs["taxonomy"],
            slug=self.kwargs["slug"],
        )
        if not term.taxonomy.public:
            raise Http404
        return term

    def get_queryset(self):
        self.term = self.get_term()
        return self.term.posts.filter(status=Post.STATUS_PUBLISH)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["term"] = self.term
        return context


class PostDetailView(DetailView):
    """
    Shows a single published post.
    """
    template_name = "terms/post_detail.html"
    context_object_name = "post"

    def get_queryset(self):
        return Post.objects.filter(status=Post.STATUS_PUBLISH).prefetch_related("terms__taxonomy")
