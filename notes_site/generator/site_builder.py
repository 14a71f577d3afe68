"""High-level orchestration for building the notes site.

:class:`SiteBuilder` consumes a :class:`~notes_site.config.SiteConfig` and
writes ``<output>/<page.url>/index.html`` for every page in config order,
then ``<output>/index.html``, then the site-wide static files. A page's
directory of assets beside its note (``notes/<page.url>/``) is copied next
to its HTML.

The first failure aborts the build. The exception propagates unchanged with
a note naming the page. Pages are written through a temporary file so a
failed build never leaves a truncated ``index.html`` behind. Output carries
no timestamps, so rebuilding unchanged input reproduces the same bytes.

Example
-------
>>> from pathlib import Path
>>> from notes_site.config import load_site_config
>>> from notes_site.generator import SiteBuilder
>>> config = load_site_config(Path("config.yml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('build/recursion/index.html'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import os
import shutil
import tempfile
import typing as typ

from notes_site._constants import PAGE_FILENAME
from notes_site.directives import DirectiveContext

from .templates import TemplateRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from notes_site.config import Page, SiteConfig
    from notes_site.directives import MathRenderer


class SiteBuilder:
    """Render every configured page, the index, and static assets to disk."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        output_dir: Path | None = None,
        math: MathRenderer | None = None,
    ) -> None:
        """Initialize the builder with configuration and output location.

        Parameters
        ----------
        config : SiteConfig
            Loaded site configuration.
        output_dir : Path, optional
            Override for the output directory; defaults to ``paths.output``.
        math : MathRenderer, optional
            Replacement LaTeX renderer, mainly for tests.
        """
        self.config = config
        self.output_dir = output_dir or config.paths.output_dir
        self.context = DirectiveContext.from_config(config, math=math)
        self.renderer = TemplateRenderer(config, self.context)

    def run(self) -> list[Path]:
        """Build the whole site.

        Returns
        -------
        list[Path]
            Written page files, the index, then copied static paths, in the
            order they were produced.

        Raises
        ------
        SymbolLookupError
            A directive referenced an unknown page, term, or reference.
        DirectiveParseError
            A directive invocation or argument was malformed.
        OSError
            A note, include, template, or static file could not be read or
            written.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for page in self.config.pages:
            try:
                written.extend(self.build_page(page))
            except Exception as exc:
                exc.add_note(f"while building page '{page.src_path}'")
                raise
        index_path = self.output_dir / PAGE_FILENAME
        _write_atomic(index_path, self.renderer.render_index())
        written.append(index_path)
        written.extend(self._copy_static())
        return written

    def build_page(self, page: Page) -> list[Path]:
        """Render ``page`` and write its HTML and per-page assets."""
        source_path = self.config.paths.notes_dir / page.src_path
        source = source_path.read_text(encoding="utf-8")
        markdown = self.renderer.render_note(source, origin=page.src_path)
        rendered = dc.replace(page, body=self.renderer.convert(markdown))
        html = self.renderer.render_page(rendered)

        page_dir = self.output_dir / page.url
        page_dir.mkdir(parents=True, exist_ok=True)
        output_path = page_dir / PAGE_FILENAME
        _write_atomic(output_path, html)
        written = [output_path]
        assets_dir = self.config.paths.notes_dir / page.url
        if assets_dir.is_dir():
            shutil.copytree(assets_dir, page_dir, dirs_exist_ok=True)
            written.append(page_dir)
        return written

    def _copy_static(self) -> list[Path]:
        """Copy each entry of the static directory into the output root."""
        static_dir = self.config.paths.static_dir
        if not static_dir.is_dir():
            return []
        copied: list[Path] = []
        for entry in sorted(static_dir.iterdir()):
            target = self.output_dir / entry.name
            if entry.is_dir():
                shutil.copytree(entry, target, dirs_exist_ok=True)
            else:
                shutil.copyfile(entry, target)
            copied.append(target)
        return copied


def _write_atomic(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` via a sibling temporary file."""
    if not text.endswith("\n"):
        text += "\n"
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.chmod(temp_name, 0o644)
        os.replace(temp_name, path)
    except BaseException:
        os.unlink(temp_name)
        raise


__all__ = ["SiteBuilder"]
