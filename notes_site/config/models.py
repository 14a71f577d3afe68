"""Typed dataclasses describing notes site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import posixpath
import types
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from notes_site._constants import MARKDOWN_SUFFIXES


def _empty_mapping() -> typ.Mapping[str, typ.Any]:
    return types.MappingProxyType({})


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class Term:
    """Glossary entry rendered by the ``dfn`` and ``dl`` directives."""

    id: str
    title: str
    definition: str
    see: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Reference:
    """Bibliographic entry rendered by the ``ref`` directive."""

    id: str
    title: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A note page sourced from YAML config.

    Attributes
    ----------
    src_path : str
        POSIX path of the Markdown source, relative to the notes directory.
    title : str
        Display title used by the shell templates and ``page`` links.
    id : str or None
        Identifier used by the ``page`` directive; pages without one cannot be
        linked.
    hidden : bool
        Hidden pages are still built but render as plain text when linked.
    body : str
        Rendered HTML. Empty on configured pages; populated on the copy handed
        to the page shell template.
    extra : Mapping[str, Any]
        Remaining page keys, exposed to templates untouched.
    """

    src_path: str
    title: str
    id: str | None = None
    hidden: bool = False
    body: str = ""
    extra: typ.Mapping[str, typ.Any] = dc.field(default_factory=_empty_mapping)

    @property
    def url(self) -> str:
        """Return the output URL derived from ``src_path``."""
        return _derive_url(self.src_path)


@dc.dataclass(frozen=True, slots=True)
class SitePaths:
    """Absolute directories used by a build."""

    root: Path
    notes_dir: Path
    templates_dir: Path
    static_dir: Path
    output_dir: Path


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Collections, paths, and aliases loaded from ``config.yml``."""

    paths: SitePaths
    pages: tuple[Page, ...] = ()
    terms: tuple[Term, ...] = ()
    references: tuple[Reference, ...] = ()
    aliases: typ.Mapping[str, str] = dc.field(default_factory=_empty_mapping)
    site: typ.Mapping[str, typ.Any] = dc.field(default_factory=_empty_mapping)

    @property
    def visible_pages(self) -> tuple[Page, ...]:
        """Return pages that are not marked hidden, in config order."""
        return tuple(page for page in self.pages if not page.hidden)

    def variables(self) -> dict[str, typ.Any]:
        """Return the context exposed to note interpolation and templates."""
        return {
            "site": self.site,
            "pages": self.pages,
            "terms": self.terms,
            "references": self.references,
        }


def _derive_url(src_path: str) -> str:
    """Strip the Markdown suffix from ``src_path`` to produce a page URL."""
    normalized = posixpath.normpath(src_path.strip().replace("\\", "/")).lstrip("/")
    root, suffix = posixpath.splitext(normalized)
    if suffix.lower() in MARKDOWN_SUFFIXES:
        return root
    return normalized


__all__ = [
    "Page",
    "Reference",
    "SiteConfig",
    "SiteConfigError",
    "SitePaths",
    "Term",
]
