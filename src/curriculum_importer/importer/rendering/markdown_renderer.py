"""
Module: importer.rendering.markdown_renderer

Purpose:
    Convert description markdown to HTML, passing every link and image
    reference through a caller-supplied rewrite callback.

Key Functions:
    - render_markdown(): Render text, optionally rewriting references

Key Types:
    - LinkRewriter: ``Callable[[str], Optional[str]]``; returning a string
      replaces the reference, returning None keeps it

Dependencies:
    - markdown (Python-Markdown): Rendering and tree processors

Used By:
    - importer.tracks: track.md
    - importer.missions: mission.md
"""

from __future__ import annotations

import logging
from typing import Callable, Optional
from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

logger = logging.getLogger(__name__)

LinkRewriter = Callable[[str], Optional[str]]

# (tag, attribute) pairs holding references
_REFERENCE_ATTRIBUTES = (("a", "href"), ("img", "src"))

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


class _LinkRewriteProcessor(Treeprocessor):
    """Applies a LinkRewriter to every link and image in the element tree."""

    def __init__(self, md: markdown.Markdown, rewrite_link: LinkRewriter):
        super().__init__(md)
        self.rewrite_link = rewrite_link

    def run(self, root: Element) -> None:
        # Backslash escapes are still placeholders until "unescape" (priority 0) runs
        unescape = self.md.treeprocessors["unescape"].unescape
        for tag, attribute in _REFERENCE_ATTRIBUTES:
            for element in root.iter(tag):
                reference = element.get(attribute)
                if reference is None:
                    continue
                reference = unescape(reference)
                replacement = self.rewrite_link(reference)
                if replacement is not None:
                    logger.debug(f"Rewrote <{tag}> {reference!r} -> {replacement!r}")
                    element.set(attribute, replacement)


class LinkRewriteExtension(Extension):
    """Registers the rewrite processor for a single Markdown instance."""

    def __init__(self, rewrite_link: LinkRewriter, **kwargs):
        self.rewrite_link = rewrite_link
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # Priority below "inline" (20) so links and images exist as elements.
        md.treeprocessors.register(
            _LinkRewriteProcessor(md, self.rewrite_link),
            "link_rewrite",
            5,
        )


def render_markdown(text: str, rewrite_link: Optional[LinkRewriter] = None) -> str:
    """
    Render markdown to HTML.

    Args:
        text: Markdown source.
        rewrite_link: Called once per ``<a href>`` and ``<img src>``.

    Returns:
        HTML fragment.

    Example:
        >>> html = render_markdown("![x](a.png)", lambda ref: "/static/" + ref)
        >>> 'src="/static/a.png"' in html
        True
    """
    extensions = list(MARKDOWN_EXTENSIONS)
    if rewrite_link is not None:
        extensions.append(LinkRewriteExtension(rewrite_link))
    return markdown.markdown(text, extensions=extensions)
