"""
Bracket shortcodes for embedding association fragments in page content.

Authors write, anywhere in the body of a page::

    [related_terms id="123" taxonomy="category"]
    [posts_by_related_terms parent="12" child="34,56" taxonomy="category"]

and ``expand_shortcodes`` replaces each one with the rendered fragment.
Attribute values may be double-quoted, single-quoted or bare. Missing
attributes get their defaults; unknown attributes are ignored. Any bracketed
text that isn't one of our shortcodes is left alone.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Dict

from django.utils.html import escape
from django.utils.safestring import SafeData, SafeString, mark_safe

from .rendering import render_associated_terms, render_posts_by_related_terms

log = logging.getLogger(__name__)

SHORTCODE_RE = re.compile(r"\[(?P<name>[\w-]+)(?P<attrs>(?:\s+[^\]]*)?)\s*/?\]")
ATTR_RE = re.compile(
    r"""(?P<key>[\w-]+)\s*=\s*(?:"(?P<double>[^"]*)"|'(?P<single>[^']*)'|(?P<bare>[^\s"']+))"""
)

SHORTCODE_DEFAULTS: Dict[str, Dict[str, str]] = {
    "related_terms": {"id": "0", "taxonomy": ""},
    "posts_by_related_terms": {"parent": "", "child": "", "taxonomy": ""},
}

SHORTCODE_RENDERERS: Dict[str, Callable[[Dict[str, str]], SafeString]] = {
    "related_terms": lambda atts: render_associated_terms(atts["id"], atts["taxonomy"]),
    "posts_by_related_terms": lambda atts: render_posts_by_related_terms(
        atts["parent"], atts["child"], atts["taxonomy"],
    ),
}


def parse_attributes(text: str) -> Dict[str, str]:
    """
    Parse ``key="value"`` style shortcode attributes. Keys are lowercased.
    """
    attrs = {}
    for match in ATTR_RE.finditer(text or ""):
        value = next(
            group for group in (match.group("double"), match.group("single"), match.group("bare"))
            if group is not None
        )
        attrs[match.group("key").lower()] = value
    return attrs


def shortcode_atts(name: str, attrs: Dict[str, str]) -> Dict[str, str]:
    """
    Combine the given attributes with the shortcode's defaults, dropping unknown ones.
    """
    defaults = SHORTCODE_DEFAULTS[name]
    return {key: attrs.get(key, default) for key, default in defaults.items()}


def expand_shortcodes(text: str) -> SafeString:
    """
    Replace our shortcodes in ``text`` with their rendered fragments.

    Text outside the shortcodes is escaped unless it is already marked safe.
    """
    text = text or ""
    keep = (lambda chunk: chunk) if isinstance(text, SafeData) else escape
    output = []
    position = 0
    for match in SHORTCODE_RE.finditer(text):
        name = match.group("name").lower()
        if name not in SHORTCODE_RENDERERS:
            continue
        output.append(keep(text[position:match.start()]))
        atts = shortcode_atts(name, parse_attributes(match.group("attrs")))
        log.debug("Expanding shortcode %s with %s", name, atts)
        output.append(SHORTCODE_RENDERERS[name](atts))
        position = match.end()
    output.append(keep(text[position:]))
    return mark_safe("".join(output))
