"""Utilities for rendering notes and writing the site to disk."""

from .renderer import HtmlContentRenderer
from .site_builder import SiteBuilder
from .templates import TemplateRenderer

__all__ = ["HtmlContentRenderer", "SiteBuilder", "TemplateRenderer"]
