from __future__ import annotations


class SiteError(Exception):
    """Base class for errors raised while turning markdown into pages."""

    kind = "site"


class FrontMatterError(SiteError):
    kind = "front matter"


class TemplateRenderError(SiteError):
    kind = "template"
