"""
Template tags for embedding term associations in pages.

    {% load associated_taxonomies %}
    {% associated_taxonomies_css %}
    {% related_terms id=123 taxonomy="category" %}
    {% posts_by_related_terms parent=12 child="34,56" taxonomy="category" %}
    {{ page.body|expand_shortcodes }}
"""
from django import template
from django.templatetags.static import static
from django.utils.html import format_html

from ..rendering import render_associated_terms, render_posts_by_related_terms
from ..shortcodes import expand_shortcodes as _expand_shortcodes

register = template.Library()


@register.simple_tag
def related_terms(id=0, taxonomy=""):  # pylint: disable=redefined-builtin
    """
    A term followed by links to its associated terms.
    """
    return render_associated_terms(id, taxonomy)


@register.simple_tag
def posts_by_related_terms(parent="", child="", taxonomy=""):
    """
    Links to the posts carrying ``parent`` and at least one of ``child``.
    """
    return render_posts_by_related_terms(parent, child, taxonomy)


@register.simple_tag
def associated_taxonomies_css():
    """
    Stylesheet link for the fragments above.
    """
    return format_html(
        '<link rel="stylesheet" href="{}">',
        static("associated_taxonomies/css/associated-taxonomies.css"),
    )


@register.filter(is_safe=True)
def expand_shortcodes(value):
    """
    Replace ``[related_terms ...]`` and ``[posts_by_related_terms ...]`` in ``value``.
    """
    return _expand_shortcodes(value)
