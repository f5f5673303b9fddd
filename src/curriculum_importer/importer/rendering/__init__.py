"""Markdown rendering with explicit link/image rewriting."""

from .markdown_renderer import render_markdown, LinkRewriter, LinkRewriteExtension

__all__ = ["render_markdown", "LinkRewriter", "LinkRewriteExtension"]
