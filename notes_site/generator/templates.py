"""Two-pass rendering of notes into page and index HTML.

A page goes through three steps in order: :meth:`TemplateRenderer.render_note`
expands directives in the Markdown source, :meth:`TemplateRenderer.convert`
turns the result into HTML, and :meth:`TemplateRenderer.render_page` wraps
that HTML in the ``page.html`` shell. :meth:`TemplateRenderer.render_index`
renders ``index.html`` from the config alone.

Shell templates are Jinja2 files. Besides the config collections they get an
``expand`` filter that runs the first two steps over a string, so a template
can write ``{{ "@page(recursion)" | expand }}``.
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from notes_site._constants import INDEX_TEMPLATE, PAGE_TEMPLATE
from notes_site.directives import DirectiveContext, expand

from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from notes_site.config import Page, SiteConfig


class TemplateRenderer:
    """Render note bodies and shell templates for one site config."""

    def __init__(
        self,
        config: SiteConfig,
        context: DirectiveContext,
        *,
        pygments_style: str | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        config : SiteConfig
            Loaded config; supplies the template directory and the variables
            exposed to shell templates.
        context : DirectiveContext
            Directive context shared by every page of the build.
        pygments_style : str, optional
            Code highlighting style; defaults to ``site.pygments_style`` or
            ``"monokai"``.
        """
        self.config = config
        self.context = context
        style = pygments_style or config.site.get("pygments_style") or "monokai"
        self.markdown_renderer = HtmlContentRenderer(str(style))
        self.env = Environment(
            loader=FileSystemLoader(str(config.paths.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["expand"] = self._expand_filter

    def render_note(self, source: str, *, origin: str | None = None) -> str:
        """Return ``source`` with every directive expanded.

        Parameters
        ----------
        source : str
            Markdown with embedded directives.
        origin : str, optional
            Label added to the notes of any raised error, usually the note's
            source path.
        """
        try:
            return expand(source, self.context)
        except Exception as exc:
            if origin:
                exc.add_note(f"while rendering {origin}")
            raise

    def convert(self, markdown: str) -> str:
        """Convert expanded Markdown into HTML."""
        return self.markdown_renderer.markdown(markdown)

    def render_page(self, page: Page) -> str:
        """Render the ``page.html`` shell around ``page.body``."""
        shell_page = dc.replace(page, body=Markup(page.body))
        template = self.env.get_template(PAGE_TEMPLATE)
        return template.render(
            page=shell_page, root=_relative_root(page.url), **self._shared_context()
        )

    def render_index(self) -> str:
        """Render the ``index.html`` shell listing the configured pages."""
        template = self.env.get_template(INDEX_TEMPLATE)
        return template.render(
            root=".",
            visible_pages=self.config.visible_pages,
            **self._shared_context(),
        )

    def _shared_context(self) -> dict[str, typ.Any]:
        return {
            **self.config.variables(),
            "pygments_css": Markup(self.markdown_renderer.stylesheet),
        }

    def _expand_filter(self, text: str) -> Markup:
        html = self.convert(self.render_note(str(text))).strip()
        if html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
            html = html[3:-4]
        return Markup(html)


def _relative_root(url: str) -> str:
    """Return the relative path from ``<url>/index.html`` back to the root."""
    segments = posixpath.normpath(url).split("/")
    depth = len([segment for segment in segments if segment not in ("", ".")])
    return "/".join([".."] * depth) or "."


__all__ = ["TemplateRenderer"]
